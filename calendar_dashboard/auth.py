from __future__ import annotations

import logging

import streamlit as st

from calendar_dashboard.settings import get_settings

logger = logging.getLogger(__name__)

USER_QUERY_PARAM = "user_id"
USER_STATE_KEY = "auth.user_id"


def resolve_user_id(query_value=None, configured=None):
    for candidate in (query_value, configured):
        if candidate is None:
            continue
        value = str(candidate).strip()
        if value:
            return value
    return None


def get_current_user_id():
    """CRM user id for this session: ``?user_id=`` first, then CALENDAR_USER_ID."""
    cached = st.session_state.get(USER_STATE_KEY)
    if cached:
        return cached
    user_id = resolve_user_id(st.query_params.get(USER_QUERY_PARAM), get_settings().user_id)
    if user_id:
        st.session_state[USER_STATE_KEY] = user_id
    else:
        logger.warning("No CRM user id in query params or CALENDAR_USER_ID")
    return user_id
