"""Backend calls behind the calendar screens.

The backend owns OAuth, token storage and the Google Calendar API. These
helpers only forward requests and unwrap the JSON payloads; they raise
RuntimeError on failure and leave the fallback to the caller.
"""

from __future__ import annotations

from calendar_dashboard.data import api_client

CONNECT_PATH = "/v1/oauth/google/connect"
SIGNED_IN_PATH = "/v1/calendar/signed-in"
EVENTS_PATH = "/v1/calendar/events"


def fetch_oauth_redirect_url() -> str:
    payload = api_client.request("GET", CONNECT_PATH)
    if isinstance(payload, dict):
        return str(payload.get("url") or "")
    return str(payload or "")


def check_signed_in(user_id: str) -> bool:
    payload = api_client.request("GET", SIGNED_IN_PATH, user_id=user_id)
    if isinstance(payload, dict):
        return bool(payload.get("signed_in"))
    return bool(payload)


def fetch_monthly_events(user_id: str, year_month: str) -> list:
    payload = api_client.request("GET", EVENTS_PATH, params={"month": year_month}, user_id=user_id)
    if isinstance(payload, dict):
        items = payload.get("items")
        return items if isinstance(items, list) else []
    if isinstance(payload, list):
        return payload
    return []
