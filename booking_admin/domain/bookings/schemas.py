"""Booking domain schemas - canonical read model for widget-written bookings"""

from datetime import datetime
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field

BookingStatus = Literal["pending", "confirmed", "completed", "canceled"]

UNKNOWN_CLIENT = "Unknown Client"
UNKNOWN_SERVICE = "Unknown Service"


class _ClientBase(BaseModel):
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None


class ClientInfoClient(_ClientBase):
    """``clientInfo`` object written by the current widget"""

    shape: Literal["clientInfo"] = "clientInfo"
    firstName: str = ""
    lastName: str = ""
    comments: Optional[str] = None


class FlatClient(_ClientBase):
    """Top-level ``clientName``/``clientEmail``/``clientPhone``"""

    shape: Literal["flat"] = "flat"


class EmbeddedClient(_ClientBase):
    """``client`` object embedded in the booking"""

    shape: Literal["embedded"] = "embedded"


class ReferencedClient(_ClientBase):
    """``clientId`` pointing at the clients collection"""

    shape: Literal["reference"] = "reference"
    clientId: str


class UnknownClient(_ClientBase):
    shape: Literal["unknown"] = "unknown"
    name: str = UNKNOWN_CLIENT


BookingClient = Annotated[
    Union[ClientInfoClient, FlatClient, EmbeddedClient, ReferencedClient, UnknownClient],
    Field(discriminator="shape"),
]


class BookingTimeSlot(BaseModel):
    start: Optional[str] = None
    end: Optional[str] = None


class BookedService(BaseModel):
    id: Optional[str] = None
    name: str


class Booking(BaseModel):
    id: str
    date: str
    dateLabel: str
    timeSlot: Optional[BookingTimeSlot] = None
    timeLabel: str
    client: BookingClient
    clientName: str
    services: list[BookedService]
    serviceName: str
    professionalId: Optional[str] = None
    status: BookingStatus
    comments: Optional[str] = None
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None


class ProfessionalBookings(BaseModel):
    employeeId: str
    employeeName: str
    email: Optional[str] = None
    active: bool = True
    bookings: list[Booking]


class StatusUpdate(BaseModel):
    status: BookingStatus


class StatusUpdateResponse(BaseModel):
    message: str
    booking: Booking


class MessageResponse(BaseModel):
    message: str
