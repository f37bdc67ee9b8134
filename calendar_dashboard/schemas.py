from __future__ import annotations

from typing import Any, Optional, List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RawEvent(BaseModel):
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True, extra="ignore")

    event_id: Optional[str] = Field(None, alias="eventId")
    event_start_time: Optional[str] = Field(None, alias="eventStartTime")
    event_end_time: Optional[str] = Field(None, alias="eventEndTime")
    is_all_day: bool = Field(False, alias="isAllDay")
    label: Optional[str] = None
    html_link: Optional[str] = Field(None, alias="htmlLink")

    @field_validator("is_all_day", mode="before")
    @classmethod
    def _truthy(cls, value: Any) -> bool:
        return bool(value)

    @field_validator("label", mode="before")
    @classmethod
    def _usable_label(cls, value: Any) -> Any:
        # Titles that are not text or a number fall back to the default label.
        if isinstance(value, bool) or not isinstance(value, (str, int, float)):
            return None
        return value


class DisplayEvent(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    event_id: str = Field(..., alias="eventId")
    html_link: Optional[str] = Field(None, alias="htmlLink")
    label: str
    tooltip: str
    is_all_day: bool = Field(False, alias="isAllDay")


class DayCell(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    iso: str
    day_number: int = Field(..., alias="dayNumber")
    is_current_month: bool = Field(..., alias="isCurrentMonth")
    events: List[DisplayEvent] = Field(default_factory=list)
