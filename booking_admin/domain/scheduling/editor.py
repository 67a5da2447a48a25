"""
In-memory schedule editor.

The editor owns a deep copy of an EmployeeSchedule, applies edits to it and
hands the result to an asynchronous ``on_save`` callback. It never talks to
the document store itself.
"""

import logging
import random
import string
from datetime import datetime, timezone
from typing import Awaitable, Callable, Iterable, Optional

from dateutil import parser as date_parser

from .schemas import (
    DEFAULT_SLOT_END,
    DEFAULT_SLOT_START,
    WEEKDAYS,
    AddException,
    AddExceptionSlot,
    AddTimeSlot,
    CopyDay,
    DaySchedule,
    EmployeeSchedule,
    ExceptionType,
    RemoveException,
    RemoveExceptionSlot,
    RemoveTimeSlot,
    ScheduleException,
    TimeSlot,
    ToggleWorkingDay,
    UpdateTimeSlot,
)

logger = logging.getLogger(__name__)

SaveCallback = Callable[[EmployeeSchedule], Awaitable[None]]


class ScheduleEditError(ValueError):
    """An edit addressed a day, slot or exception that does not exist"""


def generate_exception_id() -> str:
    """9 random base-36 characters; collisions are possible and accepted"""
    return "".join(random.choices(string.ascii_lowercase + string.digits, k=9))


def exception_sort_key(exception: ScheduleException):
    """Chronological key; unparseable dates sort last"""
    try:
        moment = date_parser.isoparse(exception.date)
    except (ValueError, OverflowError):
        return (1, datetime.max)
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc).replace(tzinfo=None)
    return (0, moment)


def sort_exceptions(exceptions: Iterable[ScheduleException]) -> list[ScheduleException]:
    return sorted(exceptions, key=exception_sort_key)


class ScheduleEditor:
    def __init__(
        self,
        schedule: EmployeeSchedule,
        on_save: SaveCallback,
        id_factory: Callable[[], str] = generate_exception_id,
    ):
        self.schedule = schedule.model_copy(deep=True)
        self.selected_days: list[str] = []
        self._on_save = on_save
        self._new_id = id_factory

    # Weekly schedule

    def _day(self, day: str) -> DaySchedule:
        if day not in WEEKDAYS:
            raise ScheduleEditError(f"Unknown weekday: {day}")
        return self.schedule.weeklySchedule.setdefault(day, DaySchedule())

    @staticmethod
    def _check_index(slots: list[TimeSlot], index: int, owner: str) -> None:
        if not 0 <= index < len(slots):
            raise ScheduleEditError(f"{owner} has no time slot at index {index}")

    def toggle_working_day(self, day: str) -> DaySchedule:
        """Flip a day on or off; a day switched on with no slots gets 09:00-17:00"""
        schedule = self._day(day)
        schedule.isWorking = not schedule.isWorking
        if schedule.isWorking and not schedule.timeSlots:
            schedule.timeSlots.append(TimeSlot())
        return schedule

    def add_time_slot(self, day: str) -> TimeSlot:
        slot = TimeSlot()
        self._day(day).timeSlots.append(slot)
        return slot

    def remove_time_slot(self, day: str, index: int) -> TimeSlot:
        slots = self._day(day).timeSlots
        self._check_index(slots, index, day)
        return slots.pop(index)

    def update_time_slot(self, day: str, index: int, field: str, value: str) -> TimeSlot:
        if field not in ("start", "end"):
            raise ScheduleEditError(f"Unknown time slot field: {field}")
        slots = self._day(day).timeSlots
        self._check_index(slots, index, day)
        slots[index] = slots[index].model_copy(update={field: value})
        return slots[index]

    def toggle_day_selection(self, day: str) -> list[str]:
        self._day(day)
        if day in self.selected_days:
            self.selected_days.remove(day)
        else:
            self.selected_days.append(day)
        return list(self.selected_days)

    def select_days(self, days: Iterable[str]) -> list[str]:
        days = list(dict.fromkeys(days))
        for day in days:
            self._day(day)
        self.selected_days = days
        return list(self.selected_days)

    def copy_day(self, source: str, targets: Optional[Iterable[str]] = None) -> list[str]:
        """
        Overwrite every selected day (except ``source``) with the source day.

        Slots are copied, never shared, so later edits to one day leave the
        others alone. Returns the days written; empty when nothing other than
        the source is selected.
        """
        origin = self._day(source)
        chosen = self.selected_days if targets is None else list(targets)
        destinations = [day for day in dict.fromkeys(chosen) if day != source]
        for day in destinations:
            self._day(day)

        for day in destinations:
            self.schedule.weeklySchedule[day] = DaySchedule(
                isWorking=origin.isWorking,
                timeSlots=[slot.model_copy() for slot in origin.timeSlots],
            )
        return destinations

    # Exceptions

    def _exception(self, exception_id: str) -> ScheduleException:
        for exception in self.schedule.exceptions:
            if exception.id == exception_id:
                return exception
        raise ScheduleEditError(f"Unknown exception: {exception_id}")

    def add_exception(
        self,
        date: str,
        type: ExceptionType = "holiday",
        note: Optional[str] = None,
        time_slots: Optional[Iterable[TimeSlot]] = None,
    ) -> ScheduleException:
        exception = ScheduleException(
            id=self._new_id(),
            date=date,
            type=type,
            note=note or None,
            timeSlots=[slot.model_copy() for slot in time_slots or []] if type == "modified" else [],
        )
        self.schedule.exceptions.append(exception)
        return exception

    def add_exception_slot(
        self, exception_id: str, start: str = DEFAULT_SLOT_START, end: str = DEFAULT_SLOT_END
    ) -> TimeSlot:
        exception = self._exception(exception_id)
        if exception.type != "modified":
            raise ScheduleEditError("Only modified exceptions carry time slots")
        slot = TimeSlot(start=start, end=end)
        exception.timeSlots.append(slot)
        return slot

    def remove_exception_slot(self, exception_id: str, index: int) -> TimeSlot:
        exception = self._exception(exception_id)
        self._check_index(exception.timeSlots, index, f"Exception {exception_id}")
        return exception.timeSlots.pop(index)

    def remove_exception(self, exception_id: str) -> bool:
        before = len(self.schedule.exceptions)
        self.schedule.exceptions = [e for e in self.schedule.exceptions if e.id != exception_id]
        return len(self.schedule.exceptions) < before

    def sorted_exceptions(self) -> list[ScheduleException]:
        return sort_exceptions(self.schedule.exceptions)

    def apply(self, operation) -> None:
        """Dispatch one typed editor operation"""
        if isinstance(operation, ToggleWorkingDay):
            self.toggle_working_day(operation.day)
        elif isinstance(operation, AddTimeSlot):
            self.add_time_slot(operation.day)
        elif isinstance(operation, RemoveTimeSlot):
            self.remove_time_slot(operation.day, operation.index)
        elif isinstance(operation, UpdateTimeSlot):
            self.update_time_slot(operation.day, operation.index, operation.field, operation.value)
        elif isinstance(operation, CopyDay):
            self.select_days(operation.targets)
            self.copy_day(operation.source)
        elif isinstance(operation, AddException):
            self.add_exception(operation.date, operation.type, operation.note, operation.timeSlots)
        elif isinstance(operation, RemoveException):
            self.remove_exception(operation.id)
        elif isinstance(operation, AddExceptionSlot):
            self.add_exception_slot(operation.id, operation.start, operation.end)
        elif isinstance(operation, RemoveExceptionSlot):
            self.remove_exception_slot(operation.id, operation.index)
        else:
            raise ScheduleEditError(f"Unsupported operation: {operation!r}")

    async def save(self) -> EmployeeSchedule:
        result = self.schedule.model_copy(deep=True)
        await self._on_save(result)
        logger.info(
            f"Schedule saved ({sum(d.isWorking for d in result.weeklySchedule.values())} working days, "
            f"{len(result.exceptions)} exceptions)"
        )
        return result
