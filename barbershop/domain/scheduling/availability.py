"""
Daily slot schedule and availability calculation.

A slot is a half-hour wall-clock time ("HH:MM") inside business hours. The
schedule runs from the opening time to the closing time inclusive, minus the
slots that fall inside the lunch break (start inclusive, end exclusive).
Nothing here touches the database so the offline client can reuse it.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

SLOT_MINUTES = 30


def parse_hhmm(value: str) -> int:
    """Convert "HH:MM" to minutes after midnight"""
    hour_str, minute_str = value.strip().split(":")
    hour, minute = int(hour_str), int(minute_str)
    if not (0 <= hour <= 23 and 0 <= minute <= 59):
        raise ValueError(f"Time out of range: {value}")
    return hour * 60 + minute


def format_hhmm(minutes: int) -> str:
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


@dataclass(frozen=True)
class DailySchedule:
    opens_at: str = "09:00"
    closes_at: str = "18:00"
    lunch_start: str = "12:00"
    lunch_end: str = "14:00"
    slot_minutes: int = SLOT_MINUTES

    def validate(self) -> None:
        opens, closes = parse_hhmm(self.opens_at), parse_hhmm(self.closes_at)
        lunch_start, lunch_end = parse_hhmm(self.lunch_start), parse_hhmm(self.lunch_end)
        if opens > closes:
            raise ValueError("Opening time is after closing time")
        if lunch_start > lunch_end:
            raise ValueError("Lunch break starts after it ends")
        if self.slot_minutes <= 0:
            raise ValueError("Slot length must be positive")

    def slots(self) -> list[str]:
        self.validate()
        opens, closes = parse_hhmm(self.opens_at), parse_hhmm(self.closes_at)
        lunch_start, lunch_end = parse_hhmm(self.lunch_start), parse_hhmm(self.lunch_end)

        out = []
        current = opens
        while current <= closes:
            if not (lunch_start <= current < lunch_end):
                out.append(format_hhmm(current))
            current += self.slot_minutes
        return out


DEFAULT_SCHEDULE = DailySchedule()


def schedule_from_settings(settings: Mapping[str, str]) -> DailySchedule:
    """
    Build the schedule from stored settings.
    Unparseable or inverted values fall back to the default schedule.
    """
    schedule = DailySchedule(
        opens_at=settings.get("working_hours_start", DEFAULT_SCHEDULE.opens_at),
        closes_at=settings.get("working_hours_end", DEFAULT_SCHEDULE.closes_at),
        lunch_start=settings.get("lunch_break_start", DEFAULT_SCHEDULE.lunch_start),
        lunch_end=settings.get("lunch_break_end", DEFAULT_SCHEDULE.lunch_end),
    )
    try:
        schedule.validate()
    except ValueError as e:
        logger.warning(f"⚠️ Invalid schedule settings ({e}), using default hours")
        return DEFAULT_SCHEDULE
    return schedule


def available_slots(
    slots: Iterable[str],
    booked: Iterable[str],
    blocked: Iterable[str],
) -> list[str]:
    """Schedule slots minus booked and blocked times, in schedule order"""
    unavailable = set(booked) | set(blocked)
    return [slot for slot in slots if slot not in unavailable]


def is_bookable_slot(time_value: str, schedule: Optional[DailySchedule] = None) -> bool:
    return time_value in (schedule or DEFAULT_SCHEDULE).slots()
