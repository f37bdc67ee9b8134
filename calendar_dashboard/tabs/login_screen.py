import logging

import streamlit as st

from calendar_dashboard.services import google_calendar

logger = logging.getLogger(__name__)

OAUTH_URL_KEY = "login.oauth_url"


def load_oauth_url(fetch_url=None):
    fetch_url = fetch_url or google_calendar.fetch_oauth_redirect_url
    try:
        return str(fetch_url() or "").strip()
    except Exception as exc:
        logger.error("Failed to load Google OAuth URL: %s", exc)
        return ""


def handle_google_login(oauth_url):
    if oauth_url:
        return oauth_url
    logger.error("OAuth URL not configured")
    return None


def render_login_screen(ctx):
    # Only a successful lookup is kept; an empty URL is retried on the next rerun.
    oauth_url = st.session_state.get(OAUTH_URL_KEY) or load_oauth_url()
    if oauth_url:
        st.session_state[OAUTH_URL_KEY] = oauth_url

    st.markdown("<div class='section-title'>Connect Google Calendar</div>", unsafe_allow_html=True)
    st.caption("Sign in with Google to see your calendar events inside the CRM.")

    if oauth_url:
        st.link_button("Sign in with Google", oauth_url, type="primary")
        return
    if st.button("Sign in with Google", key="login.google", type="primary"):
        if handle_google_login(oauth_url) is None:
            st.caption("Google sign-in is not configured yet.")
