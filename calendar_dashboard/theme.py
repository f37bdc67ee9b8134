import streamlit as st

THEME_PRESETS = {
    "dark": {
        "bg_main": "#121017",
        "bg_panel": "#2a2335",
        "bg_out_month": "rgba(36, 30, 48, 0.45)",
        "border": "#5b4f70",
        "text_main": "#f3edf9",
        "text_soft": "#c8bbd8",
        "event_bg": "rgba(95, 79, 121, 0.85)",
        "event_all_day_bg": "rgba(143, 182, 217, 0.35)",
        "event_text": "#f3edf9",
        "today_border": "#d9c979",
        "today_bg": "rgba(217, 201, 121, 0.12)",
    },
    "light": {
        "bg_main": "#f7f3ed",
        "bg_panel": "#fff9f1",
        "bg_out_month": "#efe8de",
        "border": "#c4b59f",
        "text_main": "#1b1b1b",
        "text_soft": "#5d5d5d",
        "event_bg": "#e3f2fd",
        "event_all_day_bg": "#d9ccbb",
        "event_text": "#1b1b1b",
        "today_border": "#9b845f",
        "today_bg": "rgba(203, 184, 154, 0.32)",
    },
}

THEME_STATE_KEY = "ui_theme"


def ensure_theme_state(default="light"):
    if default not in THEME_PRESETS:
        default = "light"
    if st.session_state.get(THEME_STATE_KEY) not in THEME_PRESETS:
        st.session_state[THEME_STATE_KEY] = default
    return st.session_state[THEME_STATE_KEY]


def build_theme_css(name):
    theme = THEME_PRESETS.get(name) or THEME_PRESETS["light"]
    variables = "\n".join([f"    --{key.replace('_', '-')}: {value};" for key, value in theme.items()])
    return (
        ":root {\n" + variables + "\n}\n"
        + """
.stApp {
    background: var(--bg-main);
    color: var(--text-main);
}

.page-title {
    font-size: 28px;
    font-weight: 600;
}

.section-title {
    font-size: 18px;
    font-weight: 600;
    margin: 6px 0 8px 0;
}

.gc-table {
    width: 100%;
    table-layout: fixed;
    border-collapse: separate;
    border-spacing: 4px;
}

.gc-table th {
    text-align: center;
    color: var(--text-soft);
    font-size: 12px;
    font-weight: 600;
}

.gc-cell {
    height: 96px;
    vertical-align: top;
    border: 1px solid var(--border);
    border-radius: 8px;
    background: var(--bg-panel);
    padding: 4px 6px;
    overflow: hidden;
}

.gc-cell.gc-out-month {
    background: var(--bg-out-month);
    color: var(--text-soft);
}

.gc-cell.gc-today {
    border-color: var(--today-border);
    box-shadow: inset 0 0 0 1px var(--today-border);
    background: var(--today-bg);
}

.gc-day {
    font-size: 12px;
    font-weight: 600;
}

.gc-event {
    display: block;
    margin-top: 2px;
    padding: 1px 4px;
    border-radius: 4px;
    background: var(--event-bg);
    color: var(--event-text) !important;
    font-size: 11px;
    white-space: nowrap;
    overflow: hidden;
    text-overflow: ellipsis;
    text-decoration: none;
}

.gc-event.gc-all-day {
    background: var(--event-all-day-bg);
}

.gc-empty {
    text-align: center;
    color: var(--text-soft);
    padding: 24px 0;
}
"""
    )


def inject_theme_css(default="light") -> dict:
    active_name = ensure_theme_state(default)
    st.markdown(f"<style>\n{build_theme_css(active_name)}</style>", unsafe_allow_html=True)
    return {
        "name": active_name,
        "toggle_icon": "☀️" if active_name == "dark" else "🌙",
        "toggle_help": "Switch to light mode" if active_name == "dark" else "Switch to dark mode",
    }
