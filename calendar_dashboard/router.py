import streamlit as st

from calendar_dashboard.tabs.calendar_tab import render_calendar_tab
from calendar_dashboard.tabs.login_screen import render_login_screen


TAB_OPTIONS = [
    "Calendar",
    "Google account",
]


def render_router(ctx):
    active = st.session_state.get("ui.active_tab") or TAB_OPTIONS[0]
    active = st.segmented_control(
        "Workspace",
        TAB_OPTIONS,
        key="ui.active_tab",
        default=active,
    )

    if active == "Google account":
        return _render_login(ctx)

    return _render_calendar(ctx)


@st.fragment
def _render_calendar(ctx):
    render_calendar_tab(ctx)


@st.fragment
def _render_login(ctx):
    render_login_screen(ctx)
