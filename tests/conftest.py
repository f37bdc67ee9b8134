"""Shared fixtures for the calendar dashboard tests."""

from __future__ import annotations

import pytest

from calendar_dashboard.settings import reset_settings

BACKEND_ENV = {
    "API_BASE_URL": "https://crm.example.test/api",
    "BACKEND_SESSION_SECRET": "shared-secret",
}


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch):
    """Drop cached settings and ambient backend env between tests."""
    for name in (
        "API_BASE_URL",
        "BACKEND_SESSION_SECRET",
        "API_TIMEOUT_SECONDS",
        "CALENDAR_USER_ID",
        "CALENDAR_TIMEZONE",
        "CALENDAR_LOCALE",
        "CALENDAR_PROVIDER_NAME",
        "CALENDAR_THEME",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def backend_env(monkeypatch: pytest.MonkeyPatch) -> dict:
    for name, value in BACKEND_ENV.items():
        monkeypatch.setenv(name, value)
    reset_settings()
    return dict(BACKEND_ENV)


@pytest.fixture
def timed_event() -> dict:
    return {
        "eventId": "evt-1",
        "eventStartTime": "2025-02-03T14:30:00",
        "label": "Sync",
    }


@pytest.fixture
def all_day_event() -> dict:
    return {
        "eventId": "evt-2",
        "isAllDay": True,
        "label": "Holiday",
        "eventStartTime": "2025-02-17T00:00:00",
    }
