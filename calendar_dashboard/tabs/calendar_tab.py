import logging

import streamlit as st

from calendar_dashboard.services import google_calendar
from calendar_dashboard.tabs.login_screen import render_login_screen
from calendar_dashboard.tabs.month_calendar import render_month_calendar

logger = logging.getLogger(__name__)


def resolve_sign_in_state(user_id, check=None):
    """True only when the backend confirms a Google sign-in for ``user_id``."""
    if not user_id:
        logger.warning("Skipping Google sign-in check: no user id")
        return False
    check = check or google_calendar.check_signed_in
    try:
        return bool(check(user_id))
    except Exception as exc:
        logger.error("Failed to check Google sign-in status: %s", exc)
        return False


def render_calendar_tab(ctx):
    with st.spinner("Checking Google sign-in..."):
        signed_in = resolve_sign_in_state(ctx["current_user_id"])

    if signed_in:
        render_month_calendar(ctx)
    else:
        render_login_screen(ctx)
