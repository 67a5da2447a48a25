"""
Scheduling Domain

Weekly availability and date exceptions of each employee.

- schemas.py    TimeSlot, DaySchedule, ScheduleException, EmployeeSchedule and
                the editor operations accepted over HTTP
- normalize.py  read-time defaulting of stored schedules (missing weekdays,
                legacy ``workingHours`` and ``startDate``/``endDate`` exceptions)
- editor.py     ScheduleEditor, the in-memory editing model
- router.py     /staff/{employee_id}/schedule endpoints

Nothing here validates slot contents: unsorted, overlapping or inverted
slots and several exceptions on the same date are stored as given.
"""

from .editor import ScheduleEditError, ScheduleEditor, generate_exception_id, sort_exceptions
from .normalize import default_schedule, normalize_schedule
from .schemas import WEEKDAYS, DaySchedule, EmployeeSchedule, ScheduleException, TimeSlot

__all__ = [
    "WEEKDAYS",
    "DaySchedule",
    "EmployeeSchedule",
    "ScheduleEditError",
    "ScheduleEditor",
    "ScheduleException",
    "TimeSlot",
    "default_schedule",
    "generate_exception_id",
    "normalize_schedule",
    "sort_exceptions",
]
