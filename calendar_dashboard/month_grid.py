"""Month grid arithmetic, event grouping and label formatting.

Everything here is a pure function of its arguments. The viewer timezone and
locale are passed in explicitly so the grid can be rebuilt identically in tests
and in the running dashboard.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import date, datetime, timedelta, tzinfo
from zoneinfo import ZoneInfo

from pydantic import ValidationError

from calendar_dashboard.constants import (
    DAYS_PER_WEEK,
    DEFAULT_EVENT_LABEL,
    DEFAULT_LOCALE,
    DEFAULT_PROVIDER,
    DEFAULT_TIMEZONE,
    GRID_CELLS,
    HOUR_CYCLES,
    MIN_GRID_WEEKS,
    MONTH_LABEL_FORMATS,
    MONTH_NAMES,
)
from calendar_dashboard.schemas import DayCell, DisplayEvent, RawEvent

logger = logging.getLogger(__name__)


def normalize_month(year: int, month_index: int) -> tuple[int, int]:
    """Carry an out-of-range zero-based month index into the year."""
    carry, month_index = divmod(int(month_index), 12)
    return int(year) + carry, month_index


def shift_month(year: int, month_index: int, delta: int) -> tuple[int, int]:
    return normalize_month(year, month_index + delta)


def month_reference(today: date) -> tuple[int, int]:
    return today.year, today.month - 1


def format_month_param(year: int, month_index: int) -> str:
    year, month_index = normalize_month(year, month_index)
    return f"{year}-{month_index + 1:02d}"


def to_iso_date(value: date | datetime) -> str:
    if isinstance(value, datetime):
        value = value.date()
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def _resolve_tz(tz: tzinfo | str | None) -> tzinfo:
    if tz is None:
        return ZoneInfo(DEFAULT_TIMEZONE)
    if isinstance(tz, str):
        return ZoneInfo(tz)
    return tz


def parse_timestamp(value, tz: tzinfo | str | None = None) -> datetime | None:
    """Parse an ISO timestamp into the viewer timezone.

    Naive values are wall-clock time in ``tz``; aware values are converted.
    Returns None for empty or unparseable input.
    """
    if not value or not isinstance(value, str):
        return None
    zone = _resolve_tz(tz)
    try:
        parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        if parsed.tzinfo is None:
            return parsed.replace(tzinfo=zone)
        # Offsets at the edges of the supported year range can overflow here.
        return parsed.astimezone(zone)
    except (ValueError, OverflowError):
        return None


def _format_clock(value: datetime, locale: str) -> str:
    cycle = HOUR_CYCLES.get(locale, HOUR_CYCLES[DEFAULT_LOCALE])
    if cycle == 24:
        return f"{value.hour:02d}:{value.minute:02d}"
    hour = value.hour % 12 or 12
    suffix = "AM" if value.hour < 12 else "PM"
    return f"{hour:02d}:{value.minute:02d} {suffix}"


def format_time_range(start: datetime | None, end: datetime | None, locale: str = DEFAULT_LOCALE) -> str:
    # Only the start time is displayed even when an end time exists.
    start_str = _format_clock(start, locale) if start else ""
    end_str = _format_clock(end, locale) if end else ""
    if start_str and end_str:
        return start_str
    if start_str:
        return start_str
    return DEFAULT_EVENT_LABEL


def format_tooltip(
    start: datetime | None,
    end: datetime | None,
    link: str | None,
    locale: str = DEFAULT_LOCALE,
    provider: str = DEFAULT_PROVIDER,
) -> str:
    time_range = format_time_range(start, end, locale)
    return f"{time_range} • Open in {provider}" if link else time_range


def format_month_label(year: int, month_index: int, locale: str = DEFAULT_LOCALE) -> str:
    year, month_index = normalize_month(year, month_index)
    first = date(year, month_index + 1, 1)
    names = MONTH_NAMES.get(locale, MONTH_NAMES[DEFAULT_LOCALE])
    pattern = MONTH_LABEL_FORMATS.get(locale, MONTH_LABEL_FORMATS[DEFAULT_LOCALE])
    return pattern.format(month=names[first.month - 1], year=first.year)


def _coerce_raw_event(item) -> RawEvent | None:
    if isinstance(item, RawEvent):
        return item
    if not isinstance(item, Mapping):
        logger.debug("Skipping non-mapping event payload: %r", item)
        return None
    try:
        return RawEvent.model_validate(dict(item))
    except ValidationError as exc:
        logger.debug("Skipping malformed event payload: %s", exc)
        return None


def _display_label(raw: RawEvent, start: datetime, end: datetime | None, locale: str) -> str:
    if raw.is_all_day:
        return raw.label or DEFAULT_EVENT_LABEL
    parts = []
    time_label = format_time_range(start, end, locale)
    if time_label:
        parts.append(time_label)
    if raw.label:
        parts.append(raw.label)
    return " ".join(parts).strip() or DEFAULT_EVENT_LABEL


def group_events_by_day(
    events,
    tz: tzinfo | str | None = None,
    locale: str = DEFAULT_LOCALE,
    provider: str = DEFAULT_PROVIDER,
) -> dict[str, list[DisplayEvent]]:
    """Bucket raw events by the local date of their start time.

    Events keep their input order inside a bucket; nothing is sorted. Events
    without a usable start time are dropped.
    """
    by_day: dict[str, list[DisplayEvent]] = {}
    if not isinstance(events, (list, tuple)):
        return by_day

    zone = _resolve_tz(tz)
    for item in events:
        raw = _coerce_raw_event(item)
        if raw is None:
            continue
        start = parse_timestamp(raw.event_start_time, zone)
        if start is None:
            continue
        end = parse_timestamp(raw.event_end_time, zone)
        key = to_iso_date(start)
        by_day.setdefault(key, []).append(
            DisplayEvent(
                event_id=raw.event_id or key,
                html_link=raw.html_link,
                label=_display_label(raw, start, end, locale),
                tooltip=format_tooltip(start, end, raw.html_link, locale, provider),
                is_all_day=raw.is_all_day,
            )
        )
    return by_day


def build_month_grid(year: int, month_index: int, events_by_day: Mapping | None = None) -> list[list[DayCell]]:
    """Lay out a Sunday-first grid of 5 or 6 weeks around the given month.

    Any month from February of year 1 through November of year 9999 is
    supported. January of year 1 and December of 9999 need days outside the range
    of ``datetime.date`` and raise ``OverflowError``.
    """
    year, month_index = normalize_month(year, month_index)
    events_by_day = events_by_day or {}

    first_of_month = date(year, month_index + 1, 1)
    # date.weekday() is Monday=0; shift so Sunday=0.
    start_offset = (first_of_month.weekday() + 1) % DAYS_PER_WEEK
    grid_start = first_of_month - timedelta(days=start_offset)

    weeks: list[list[DayCell]] = []
    for index in range(GRID_CELLS):
        cell_date = grid_start + timedelta(days=index)
        key = to_iso_date(cell_date)
        cell = DayCell(
            iso=key,
            day_number=cell_date.day,
            is_current_month=(cell_date.year, cell_date.month) == (year, month_index + 1),
            events=list(events_by_day.get(key) or []),
        )
        if index % DAYS_PER_WEEK == 0:
            weeks.append([])
        weeks[-1].append(cell)

    # Hide trailing weeks that fall entirely outside the month.
    while len(weeks) > MIN_GRID_WEEKS and not any(cell.is_current_month for cell in weeks[-1]):
        weeks.pop()
    return weeks
