"""Tests for grouping raw backend events into day buckets."""

from __future__ import annotations

import logging
from zoneinfo import ZoneInfo

import pytest

from calendar_dashboard.month_grid import group_events_by_day
from calendar_dashboard.schemas import RawEvent


class TestSkipping:
    def test_event_without_start_is_dropped(self, timed_event: dict) -> None:
        result = group_events_by_day([{"label": "No start"}, timed_event])
        assert list(result) == ["2025-02-03"]
        assert len(result["2025-02-03"]) == 1

    @pytest.mark.parametrize(
        "start",
        [
            None,
            "",
            "not-a-date",
            "2025-13-45T10:00:00",
            "0001-01-01T00:00:00+05:00",
            "9999-12-31T23:00:00-05:00",
        ],
    )
    def test_unusable_start_is_dropped(self, start) -> None:
        assert group_events_by_day([{"eventStartTime": start, "label": "x"}], tz="UTC") == {}

    def test_out_of_range_offset_does_not_drop_neighbours(self) -> None:
        events = [
            {"eventStartTime": "0001-01-01T00:00:00+05:00", "label": "ancient"},
            {"eventStartTime": "2025-02-03T10:00:00", "label": "good"},
        ]
        result = group_events_by_day(events, tz="UTC")
        assert list(result) == ["2025-02-03"]
        assert result["2025-02-03"][0].label == "10:00 AM good"

    @pytest.mark.parametrize("payload", [None, "events", 42, {"eventStartTime": "2025-02-03T10:00:00"}])
    def test_non_sequence_input_gives_empty_mapping(self, payload) -> None:
        assert group_events_by_day(payload) == {}

    def test_malformed_items_are_skipped(self, timed_event: dict, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="calendar_dashboard.month_grid")
        events = [None, 7, "x", {"eventStartTime": {"nested": True}}, timed_event]
        result = group_events_by_day(events)
        assert list(result) == ["2025-02-03"]
        assert "Skipping" in caplog.text

    def test_accepts_tuple_and_model_instances(self, timed_event: dict) -> None:
        result = group_events_by_day((RawEvent.model_validate(timed_event),))
        assert result["2025-02-03"][0].event_id == "evt-1"


class TestLabels:
    def test_all_day_uses_title_only(self, all_day_event: dict) -> None:
        result = group_events_by_day([all_day_event])
        event = result["2025-02-17"][0]
        assert event.label == "Holiday"
        assert event.is_all_day is True

    def test_all_day_without_title_defaults(self) -> None:
        result = group_events_by_day([{"isAllDay": True, "eventStartTime": "2025-02-17T00:00:00"}])
        assert result["2025-02-17"][0].label == "Event"

    def test_timed_event_prefixes_start_time(self, timed_event: dict) -> None:
        result = group_events_by_day([timed_event])
        assert result["2025-02-03"][0].label == "02:30 PM Sync"

    def test_timed_event_without_title_shows_time(self) -> None:
        result = group_events_by_day([{"eventStartTime": "2025-02-03T09:05:00"}])
        assert result["2025-02-03"][0].label == "09:05 AM"

    def test_timed_label_ignores_end_time(self) -> None:
        result = group_events_by_day(
            [{"eventStartTime": "2025-02-03T14:30:00", "eventEndTime": "2025-02-03T15:30:00", "label": "Sync"}]
        )
        assert result["2025-02-03"][0].label == "02:30 PM Sync"

    def test_truthy_is_all_day_values(self) -> None:
        result = group_events_by_day([{"isAllDay": 1, "label": "Offsite", "eventStartTime": "2025-02-10T00:00:00"}])
        assert result["2025-02-10"][0].is_all_day is True
        assert result["2025-02-10"][0].label == "Offsite"

    def test_numeric_title_is_kept_as_text(self) -> None:
        result = group_events_by_day([{"isAllDay": True, "label": 2025, "eventStartTime": "2025-02-10T00:00:00"}])
        assert result["2025-02-10"][0].label == "2025"

    @pytest.mark.parametrize("label", [["a", "b"], {"text": "Sync"}, True])
    def test_unusable_title_defaults_and_keeps_event(self, label) -> None:
        result = group_events_by_day([{"isAllDay": True, "label": label, "eventStartTime": "2025-02-10T00:00:00"}])
        assert result["2025-02-10"][0].label == "Event"

    def test_pt_br_locale_uses_24_hour_clock(self, timed_event: dict) -> None:
        result = group_events_by_day([timed_event], locale="pt-BR")
        assert result["2025-02-03"][0].label == "14:30 Sync"


class TestTooltipsAndIds:
    def test_tooltip_without_link_is_time_range(self, timed_event: dict) -> None:
        assert group_events_by_day([timed_event])["2025-02-03"][0].tooltip == "02:30 PM"

    def test_tooltip_with_link_adds_open_hint(self, timed_event: dict) -> None:
        timed_event["htmlLink"] = "https://calendar.google.com/event?eid=abc"
        event = group_events_by_day([timed_event])["2025-02-03"][0]
        assert event.tooltip == "02:30 PM • Open in Google"
        assert event.html_link == "https://calendar.google.com/event?eid=abc"

    def test_provider_name_is_configurable(self, timed_event: dict) -> None:
        timed_event["htmlLink"] = "https://outlook.example/e/1"
        event = group_events_by_day([timed_event], provider="Outlook")["2025-02-03"][0]
        assert event.tooltip.endswith("Open in Outlook")

    @pytest.mark.parametrize("event_id", [None, ""])
    def test_missing_event_id_falls_back_to_day_key(self, event_id) -> None:
        result = group_events_by_day([{"eventId": event_id, "eventStartTime": "2025-02-03T10:00:00"}])
        assert result["2025-02-03"][0].event_id == "2025-02-03"


class TestOrderingAndTimezone:
    def test_bucket_preserves_input_order(self) -> None:
        """Later events listed first stay first; nothing is re-sorted."""
        events = [
            {"eventId": "late", "eventStartTime": "2025-02-03T18:00:00", "label": "Late"},
            {"eventId": "other-day", "eventStartTime": "2025-02-04T08:00:00", "label": "Other"},
            {"eventId": "early", "eventStartTime": "2025-02-03T08:00:00", "label": "Early"},
            {"eventId": "all-day", "isAllDay": True, "eventStartTime": "2025-02-03T00:00:00", "label": "Day"},
        ]
        result = group_events_by_day(events)
        assert [event.event_id for event in result["2025-02-03"]] == ["late", "early", "all-day"]
        assert [event.event_id for event in result["2025-02-04"]] == ["other-day"]

    def test_utc_timestamp_is_bucketed_in_viewer_timezone(self) -> None:
        events = [{"eventStartTime": "2025-02-03T01:30:00Z", "label": "Late call"}]
        result = group_events_by_day(events, tz=ZoneInfo("America/Sao_Paulo"))
        assert list(result) == ["2025-02-02"]
        assert result["2025-02-02"][0].label == "10:30 PM Late call"

    def test_naive_timestamp_is_wall_clock_time(self) -> None:
        events = [{"eventStartTime": "2025-02-03T01:30:00", "label": "Early call"}]
        result = group_events_by_day(events, tz="Asia/Tokyo")
        assert list(result) == ["2025-02-03"]
        assert result["2025-02-03"][0].label == "01:30 AM Early call"

    def test_offset_timestamp_is_converted(self) -> None:
        events = [{"eventStartTime": "2025-02-03T23:30:00-05:00", "label": "Evening"}]
        assert list(group_events_by_day(events, tz="UTC")) == ["2025-02-04"]
