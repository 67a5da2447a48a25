"""Staff domain schemas - Pydantic models for employees"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, field_validator

from ...shared.validators import validate_email
from ..scheduling.schemas import EmployeeSchedule


class EmployeeForm(BaseModel):
    """Create-or-update payload; an ``id`` means update

    Blank name or role is rejected by the service with a 400 so that the
    message matches the form ("Name and Role are required").
    """

    id: Optional[str] = None
    name: str = ""
    role: str = ""
    email: Optional[str] = None
    phone: Optional[str] = None
    active: bool = True
    services: list[str] = []
    schedule: Optional[EmployeeSchedule] = None

    @field_validator("email")
    @classmethod
    def validate_email_format(cls, v):
        return validate_email(v) or None


class EmployeeUpdate(BaseModel):
    name: Optional[str] = None
    role: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    active: Optional[bool] = None

    @field_validator("email")
    @classmethod
    def validate_email_format(cls, v):
        return validate_email(v) or None


class ServiceAssignment(BaseModel):
    services: list[str]


class EmployeeResponse(BaseModel):
    id: str
    name: str
    role: str
    email: Optional[str] = None
    phone: Optional[str] = None
    active: bool
    services: list[str]
    serviceNames: list[str]
    schedule: EmployeeSchedule
    workingDays: int
    exceptionsCount: int
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None
