import streamlit as st

from calendar_dashboard.auth import get_current_user_id
from calendar_dashboard.data import api_client
from calendar_dashboard.logging_config import configure_logging
from calendar_dashboard.router import render_router
from calendar_dashboard.settings import get_settings
from calendar_dashboard.theme import THEME_STATE_KEY, inject_theme_css

configure_logging()

st.set_page_config(page_title="CRM Calendar", page_icon="📅", layout="wide")

settings = get_settings()
theme = inject_theme_css(settings.theme)

title_cols = st.columns([0.92, 0.08])
with title_cols[0]:
    st.markdown("<div class='page-title'>Calendar</div>", unsafe_allow_html=True)
with title_cols[1]:
    if st.button(theme["toggle_icon"], key="toggle_theme_mode", help=theme["toggle_help"]):
        st.session_state[THEME_STATE_KEY] = "light" if theme["name"] == "dark" else "dark"
        st.rerun()

api_client.configure(get_current_user_id)
current_user_id = get_current_user_id()

if not settings.api_enabled:
    st.warning("Calendar backend is not configured. Set API_BASE_URL and BACKEND_SESSION_SECRET.")

# --- TAB ROUTER APP ---
context = {
    "current_user_id": current_user_id,
    "settings": settings,
}

render_router(context)
