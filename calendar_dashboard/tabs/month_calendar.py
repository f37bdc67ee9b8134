from __future__ import annotations

import html
import logging
from dataclasses import dataclass, field
from datetime import datetime

import pandas as pd
import streamlit as st

from calendar_dashboard.constants import CALENDAR_SLICE, DEFAULT_LOCALE, DEFAULT_PROVIDER, WEEKDAYS
from calendar_dashboard.month_grid import (
    build_month_grid,
    format_month_label,
    format_month_param,
    group_events_by_day,
    month_reference,
    normalize_month,
    shift_month,
)
from calendar_dashboard.services import google_calendar
from calendar_dashboard.state import session_slices

logger = logging.getLogger(__name__)


@dataclass
class MonthView:
    year: int
    month_index: int
    month_label: str
    weeks: list = field(default_factory=list)
    events_by_day: dict = field(default_factory=dict)
    error: str | None = None


def load_month(
    user_id,
    year,
    month_index,
    fetch_events,
    tz=None,
    locale=DEFAULT_LOCALE,
    provider=DEFAULT_PROVIDER,
) -> MonthView:
    """Fetch one month of events and turn them into a renderable grid.

    A failing fetch (or transform) never propagates: the view comes back with
    no weeks and ``error`` set, and the failure is logged.
    """
    year, month_index = normalize_month(year, month_index)
    month_label = format_month_label(year, month_index, locale)
    month_param = format_month_param(year, month_index)
    try:
        events = fetch_events(user_id, month_param)
        events_by_day = group_events_by_day(events, tz=tz, locale=locale, provider=provider)
        weeks = build_month_grid(year, month_index, events_by_day)
    except Exception as exc:
        logger.error("Failed to load calendar for %s: %s", month_param, exc)
        return MonthView(year, month_index, month_label, error=str(exc) or type(exc).__name__)
    return MonthView(year, month_index, month_label, weeks=weeks, events_by_day=events_by_day)


def _safe_link(link):
    if not link:
        return None
    value = str(link).strip()
    if value.lower().startswith(("https://", "http://")):
        return value
    return None


def _event_html(event):
    classes = "gc-event gc-all-day" if event.is_all_day else "gc-event"
    label = html.escape(event.label)
    tooltip = html.escape(event.tooltip, quote=True)
    link = _safe_link(event.html_link)
    if link:
        return (
            f"<a class='{classes}' href='{html.escape(link, quote=True)}' target='_blank' "
            f"rel='noopener noreferrer' title='{tooltip}'>{label}</a>"
        )
    return f"<span class='{classes}' title='{tooltip}'>{label}</span>"


def build_month_calendar_html(view, weekdays=None, today=None):
    weekdays = weekdays or WEEKDAYS
    today_iso = today.isoformat() if today else None
    header_cells = "".join([f"<th>{html.escape(label)}</th>" for label in weekdays])

    rows = []
    for week in view.weeks:
        cells = []
        for cell in week:
            classes = ["gc-cell", "gc-in-month" if cell.is_current_month else "gc-out-month"]
            if cell.iso == today_iso:
                classes.append("gc-today")
            events_html = "".join([_event_html(event) for event in cell.events])
            cells.append(
                f"<td class='{' '.join(classes)}' data-date='{cell.iso}'>"
                f"<div class='gc-day'>{cell.day_number}</div>"
                f"<div class='gc-events'>{events_html}</div>"
                "</td>"
            )
        rows.append(f"<tr>{''.join(cells)}</tr>")

    if not rows:
        body = f"<tr><td class='gc-empty' colspan='{len(weekdays)}'>No calendar data to show.</td></tr>"
    else:
        body = "".join(rows)
    return (
        "<div class='gc-month'>"
        "<table class='gc-table'>"
        f"<thead><tr>{header_cells}</tr></thead>"
        f"<tbody>{body}</tbody>"
        "</table>"
        "</div>"
    )


def build_agenda_rows(view):
    rows = []
    for week in view.weeks:
        for cell in week:
            if not cell.is_current_month:
                continue
            for event in cell.events:
                rows.append(
                    {
                        "Date": cell.iso,
                        "Event": event.label,
                        "Details": event.tooltip,
                        "Link": event.html_link or "",
                    }
                )
    return rows


def _current_reference(today):
    slice_obj = session_slices.get_slice(CALENDAR_SLICE)
    if "year" not in slice_obj or "month_index" not in slice_obj:
        year, month_index = month_reference(today)
        session_slices.update_slice(CALENDAR_SLICE, {"year": year, "month_index": month_index})
    return (
        session_slices.get_int(CALENDAR_SLICE, "year", today.year),
        session_slices.get_int(CALENDAR_SLICE, "month_index", today.month - 1),
    )


def _navigate(reference):
    year, month_index = reference
    session_slices.update_slice(CALENDAR_SLICE, {"year": year, "month_index": month_index})
    return year, month_index


def render_month_calendar(ctx):
    settings = ctx["settings"]
    user_id = ctx["current_user_id"]
    tz = settings.timezone
    today = datetime.now(tz).date()

    year, month_index = _current_reference(today)

    nav = st.columns([0.7, 0.7, 0.9, 3.7])
    with nav[0]:
        if st.button("‹", key="calendar.prev", help="Previous month", width="stretch"):
            year, month_index = _navigate(shift_month(year, month_index, -1))
    with nav[1]:
        if st.button("›", key="calendar.next", help="Next month", width="stretch"):
            year, month_index = _navigate(shift_month(year, month_index, 1))
    with nav[2]:
        if st.button("Today", key="calendar.today", width="stretch"):
            year, month_index = _navigate(month_reference(today))

    with st.spinner("Loading calendar..."):
        view = load_month(
            user_id,
            year,
            month_index,
            google_calendar.fetch_monthly_events,
            tz=tz,
            locale=settings.calendar_locale,
            provider=settings.provider_name,
        )

    with nav[3]:
        st.markdown(f"<div class='section-title'>{html.escape(view.month_label)}</div>", unsafe_allow_html=True)

    st.markdown(build_month_calendar_html(view, today=today), unsafe_allow_html=True)
    if view.error:
        st.caption("Calendar events are unavailable right now.")

    rows = build_agenda_rows(view)
    with st.expander("Month agenda", expanded=False):
        if rows:
            st.dataframe(pd.DataFrame(rows), width="stretch", hide_index=True, height=300)
        else:
            st.caption("No events this month.")
