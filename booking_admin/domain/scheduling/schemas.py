"""Scheduling domain schemas - weekly schedule, exceptions and editor operations"""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator, model_validator

from ...shared.validators import validate_iso_date

WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")

DEFAULT_SLOT_START = "09:00"
DEFAULT_SLOT_END = "17:00"

ExceptionType = Literal["holiday", "modified"]


class TimeSlot(BaseModel):
    """Working window as HH:MM strings; order and overlap are never checked"""

    start: str = DEFAULT_SLOT_START
    end: str = DEFAULT_SLOT_END


class DaySchedule(BaseModel):
    isWorking: bool = False
    timeSlots: list[TimeSlot] = Field(default_factory=list)


class ScheduleException(BaseModel):
    """A single calendar date overriding the weekly schedule"""

    id: str
    date: str
    type: ExceptionType = "holiday"
    note: Optional[str] = None
    timeSlots: list[TimeSlot] = Field(default_factory=list)

    @model_validator(mode="after")
    def holidays_have_no_slots(self):
        if self.type == "holiday":
            self.timeSlots = []
        return self


class EmployeeSchedule(BaseModel):
    weeklySchedule: dict[str, DaySchedule] = Field(default_factory=dict, validate_default=True)
    exceptions: list[ScheduleException] = Field(default_factory=list)

    @field_validator("weeklySchedule")
    @classmethod
    def ensure_all_weekdays(cls, v):
        unknown = set(v) - set(WEEKDAYS)
        if unknown:
            raise ValueError(f"Unknown weekday(s): {', '.join(sorted(unknown))}")
        return {day: v.get(day) or DaySchedule() for day in WEEKDAYS}


class ScheduleView(BaseModel):
    schedule: EmployeeSchedule
    workingDays: int
    exceptionsCount: int


# Editor operations, one model per action of the schedule editor


class ToggleWorkingDay(BaseModel):
    op: Literal["toggle_working_day"]
    day: str


class AddTimeSlot(BaseModel):
    op: Literal["add_time_slot"]
    day: str


class RemoveTimeSlot(BaseModel):
    op: Literal["remove_time_slot"]
    day: str
    index: int


class UpdateTimeSlot(BaseModel):
    op: Literal["update_time_slot"]
    day: str
    index: int
    field: Literal["start", "end"]
    value: str


class CopyDay(BaseModel):
    op: Literal["copy_day"]
    source: str
    targets: list[str]


class AddException(BaseModel):
    op: Literal["add_exception"]
    date: str
    type: ExceptionType = "holiday"
    note: Optional[str] = None
    timeSlots: list[TimeSlot] = Field(default_factory=list)

    @field_validator("date")
    @classmethod
    def validate_date(cls, v):
        return validate_iso_date(v)


class RemoveException(BaseModel):
    op: Literal["remove_exception"]
    id: str


class AddExceptionSlot(BaseModel):
    op: Literal["add_exception_slot"]
    id: str
    start: str = DEFAULT_SLOT_START
    end: str = DEFAULT_SLOT_END


class RemoveExceptionSlot(BaseModel):
    op: Literal["remove_exception_slot"]
    id: str
    index: int


ScheduleOperation = Annotated[
    Union[
        ToggleWorkingDay,
        AddTimeSlot,
        RemoveTimeSlot,
        UpdateTimeSlot,
        CopyDay,
        AddException,
        RemoveException,
        AddExceptionSlot,
        RemoveExceptionSlot,
    ],
    Field(discriminator="op"),
]


class ScheduleOperationsRequest(BaseModel):
    operations: list[ScheduleOperation] = Field(min_length=1)
