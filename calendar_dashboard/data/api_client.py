from typing import Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from calendar_dashboard.settings import get_settings

_USER_GETTER = None


def _build_session():
    session = requests.Session()
    retry = Retry(
        total=2,
        backoff_factor=0.5,
        status_forcelist=(502, 503, 504),
        allowed_methods=("GET", "POST"),
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=retry, pool_connections=10, pool_maxsize=10)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session


_SESSION = _build_session()


def configure(user_getter):
    global _USER_GETTER
    _USER_GETTER = user_getter


def api_base_url():
    return (get_settings().api_base_url or "").strip()


def backend_token():
    return (get_settings().backend_session_secret or "").strip()


def request(
    method: str,
    path: str,
    params: dict | None = None,
    json: dict | None = None,
    user_id: str | None = None,
    timeout: int | None = None,
) -> Any:
    base = api_base_url().rstrip("/")
    if not base:
        raise RuntimeError("API_BASE_URL not configured")
    token = backend_token()
    if not token:
        raise RuntimeError("BACKEND_SESSION_SECRET not configured")
    headers = {"X-Backend-Token": token}
    resolved_user = user_id or (_USER_GETTER() if _USER_GETTER else None)
    if resolved_user:
        headers["X-User-Id"] = str(resolved_user)
    url = f"{base}{path}"
    try:
        response = _SESSION.request(
            method,
            url,
            params=params,
            json=json,
            headers=headers,
            timeout=timeout or get_settings().api_timeout_seconds,
        )
    except requests.RequestException as exc:
        raise RuntimeError(f"API request failed: {method} {path}: {exc}") from exc
    if not response.ok:
        try:
            detail = response.json()
        except ValueError:
            detail = response.text
        raise RuntimeError(f"API error {response.status_code} {response.reason}: {detail}")
    if response.status_code == 204:
        return None
    return response.json()
