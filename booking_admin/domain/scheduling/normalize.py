"""Read-time defaulting of stored employee schedules"""

import logging
from datetime import timedelta
from typing import Any, Optional

from dateutil import parser as date_parser

from .schemas import (
    DEFAULT_SLOT_END,
    DEFAULT_SLOT_START,
    WEEKDAYS,
    DaySchedule,
    EmployeeSchedule,
    ScheduleException,
    TimeSlot,
)

logger = logging.getLogger(__name__)

WORKWEEK = WEEKDAYS[:5]

# Longest legacy date range that is expanded into single-day exceptions
MAX_RANGE_DAYS = 366


def default_schedule() -> EmployeeSchedule:
    """Monday to Friday 09:00-17:00, weekend off"""
    return EmployeeSchedule(
        weeklySchedule={
            day: DaySchedule(isWorking=day in WORKWEEK, timeSlots=[TimeSlot()] if day in WORKWEEK else [])
            for day in WEEKDAYS
        },
        exceptions=[],
    )


def _slot(raw: dict) -> TimeSlot:
    return TimeSlot(
        start=str(raw.get("start") or DEFAULT_SLOT_START),
        end=str(raw.get("end") or DEFAULT_SLOT_END),
    )


def _slots(raw: Any) -> list[TimeSlot]:
    if not isinstance(raw, list):
        return []
    return [_slot(item) for item in raw if isinstance(item, dict)]


def _day(raw: Any) -> DaySchedule:
    if not isinstance(raw, dict):
        return DaySchedule()
    return DaySchedule(isWorking=bool(raw.get("isWorking", False)), timeSlots=_slots(raw.get("timeSlots")))


def schedule_from_working_hours(working_hours: dict) -> EmployeeSchedule:
    """Convert the legacy ``workingHours`` map (day -> {start, end} or null)"""
    weekly = {}
    for day in WEEKDAYS:
        hours = working_hours.get(day)
        if isinstance(hours, dict) and hours.get("start") and hours.get("end"):
            weekly[day] = DaySchedule(isWorking=True, timeSlots=[_slot(hours)])
        else:
            weekly[day] = DaySchedule()
    return EmployeeSchedule(weeklySchedule=weekly, exceptions=[])


def _stored_id(raw: dict, position: int) -> str:
    """Stored id, else one derived from the date and list position so every read agrees"""
    if raw.get("id"):
        return str(raw["id"])
    day = str(raw.get("date") or raw.get("startDate") or "undated")
    return f"{day}-{position}"


def _expand_exception(raw: Any, position: int = 0) -> list[ScheduleException]:
    """
    Canonical exceptions carry a single ``date``. Legacy ones carry a
    ``startDate``/``endDate`` range and become one exception per day; the
    first keeps the stored id, the following ones get ``<id>-<n>``.
    """
    if not isinstance(raw, dict):
        return []

    exception_type = raw.get("type") if raw.get("type") in ("holiday", "modified") else "holiday"
    slots = _slots(raw.get("timeSlots")) if exception_type == "modified" else []
    fields = {"type": exception_type, "note": raw.get("note") or None}
    exception_id = _stored_id(raw, position)

    if raw.get("date"):
        return [ScheduleException(id=exception_id, date=str(raw["date"]), timeSlots=slots, **fields)]

    start_raw = raw.get("startDate")
    if not start_raw:
        logger.warning(f"⚠️ Dropping schedule exception {exception_id} without a date")
        return []

    try:
        start = date_parser.isoparse(str(start_raw)).date()
        end = date_parser.isoparse(str(raw.get("endDate") or start_raw)).date()
    except (ValueError, OverflowError):
        logger.warning(f"⚠️ Dropping schedule exception {exception_id} with unreadable dates")
        return []

    span = min(max((end - start).days, 0), MAX_RANGE_DAYS - 1)
    expanded = []
    for offset in range(span + 1):
        day_id = exception_id if offset == 0 else f"{exception_id}-{offset}"
        day = (start + timedelta(days=offset)).isoformat()
        expanded.append(
            ScheduleException(
                id=day_id, date=day, timeSlots=[s.model_copy() for s in slots], **fields
            )
        )
    return expanded


def normalize_schedule(raw: Any, legacy_working_hours: Optional[dict] = None) -> EmployeeSchedule:
    """
    Build a complete EmployeeSchedule from whatever is stored.

    * no schedule: converted ``workingHours`` when present, else the default
    * every weekday present; a missing day is non-working with no slots
    * unknown weekday keys are dropped
    """
    if not isinstance(raw, dict):
        if isinstance(legacy_working_hours, dict):
            return schedule_from_working_hours(legacy_working_hours)
        return default_schedule()

    weekly_raw = raw.get("weeklySchedule") if isinstance(raw.get("weeklySchedule"), dict) else {}
    exceptions_raw = raw.get("exceptions") if isinstance(raw.get("exceptions"), list) else []

    return EmployeeSchedule(
        weeklySchedule={day: _day(weekly_raw.get(day)) for day in WEEKDAYS},
        exceptions=[
            exception
            for position, item in enumerate(exceptions_raw)
            for exception in _expand_exception(item, position)
        ],
    )


def working_days_count(schedule: Optional[EmployeeSchedule]) -> int:
    if not schedule:
        return 0
    return sum(1 for day in schedule.weeklySchedule.values() if day.isWorking)


def exceptions_count(schedule: Optional[EmployeeSchedule]) -> int:
    if not schedule:
        return 0
    return len(schedule.exceptions)
