"""
Booking normalization.

Bookings are written by the public widget, and older widget versions used
different field layouts. Every stored document goes through
``normalize_booking`` exactly once, right after it is read, so nothing past
this module ever looks at the raw shapes.
"""

import logging
import re
from datetime import date, datetime, timezone
from typing import Any, Iterable, Optional

from dateutil import parser as date_parser

from .schemas import (
    UNKNOWN_CLIENT,
    UNKNOWN_SERVICE,
    BookedService,
    Booking,
    BookingTimeSlot,
    ClientInfoClient,
    EmbeddedClient,
    FlatClient,
    ProfessionalBookings,
    ReferencedClient,
    UnknownClient,
)

logger = logging.getLogger(__name__)

STATUSES = ("pending", "confirmed", "completed", "canceled")

SPANISH_MONTHS = {
    "enero": 1,
    "febrero": 2,
    "marzo": 3,
    "abril": 4,
    "mayo": 5,
    "junio": 6,
    "julio": 7,
    "agosto": 8,
    "septiembre": 9,
    "setiembre": 9,
    "octubre": 10,
    "noviembre": 11,
    "diciembre": 12,
}

# "lunes, 27 de marzo de 2025"
SPANISH_DATE = re.compile(r"^(?:[^\W\d_]+,\s*)?(\d{1,2})\s+de\s+([^\W\d_]+)\s+de\s+(\d{4})$", re.IGNORECASE)


def _text(value: Any) -> Optional[str]:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def normalize_status(value: Any) -> str:
    status = str(value or "").strip().lower()
    if status == "cancelled":
        return "canceled"
    return status if status in STATUSES else "pending"


def parse_booking_date(value: Any) -> Optional[date]:
    """ISO dates, Spanish long dates, then anything dateutil understands"""
    raw = _text(value)
    if not raw:
        return None

    try:
        return date_parser.isoparse(raw).date()
    except (ValueError, OverflowError):
        pass

    match = SPANISH_DATE.match(raw)
    if match:
        day, month_name, year = match.groups()
        month = SPANISH_MONTHS.get(month_name.lower())
        if month is None:
            return None
        try:
            return date(int(year), month, int(day))
        except ValueError:
            return None

    try:
        return date_parser.parse(raw).date()
    except (ValueError, OverflowError):
        return None


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Store timestamps or ISO strings, always returned timezone-aware"""
    if isinstance(value, str):
        try:
            value = date_parser.isoparse(value)
        except (ValueError, OverflowError):
            return None
    if not isinstance(value, datetime):
        return None
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


def format_booking_date(value: Any) -> str:
    parsed = parse_booking_date(value)
    if parsed is None:
        return _text(value) or "N/A"
    return f"{parsed:%B} {parsed.day}, {parsed.year}"


def parse_time_slot(doc: dict) -> tuple[Optional[BookingTimeSlot], str]:
    """Return the slot and its display label ("start - end", raw text or N/A)"""
    raw = doc.get("timeSlot")

    if isinstance(raw, dict):
        start, end = _text(raw.get("start")), _text(raw.get("end"))
        if start and end:
            return BookingTimeSlot(start=start, end=end), f"{start} - {end}"
        return BookingTimeSlot(start=start, end=end), "N/A"

    if not isinstance(raw, str) or not raw.strip():
        raw = doc.get("time") if isinstance(doc.get("time"), str) else None
    if not raw or not raw.strip():
        return None, "N/A"

    label = raw.strip()
    start, _, end = label.partition("-")
    return BookingTimeSlot(start=start.strip() or None, end=end.strip() or None), label


def resolve_client(doc: dict, clients: dict[str, dict]):
    """First matching shape wins: clientInfo, flat fields, embedded, reference"""
    info = doc.get("clientInfo")
    if isinstance(info, dict):
        first, last = _text(info.get("firstName")) or "", _text(info.get("lastName")) or ""
        return ClientInfoClient(
            name=f"{first} {last}".strip() or UNKNOWN_CLIENT,
            firstName=first,
            lastName=last,
            email=_text(info.get("email")),
            phone=_text(info.get("phone")),
            comments=_text(info.get("comments")),
        )

    if _text(doc.get("clientName")):
        return FlatClient(
            name=_text(doc["clientName"]),
            email=_text(doc.get("clientEmail")),
            phone=_text(doc.get("clientPhone")),
        )

    embedded = doc.get("client")
    if isinstance(embedded, dict):
        return EmbeddedClient(
            name=_text(embedded.get("name")) or _text(embedded.get("firstName")) or UNKNOWN_CLIENT,
            email=_text(embedded.get("email")),
            phone=_text(embedded.get("phone")),
        )

    client_id = _text(doc.get("clientId"))
    if client_id and client_id in clients:
        stored = clients[client_id]
        full_name = f"{_text(stored.get('firstName')) or ''} {_text(stored.get('lastName')) or ''}".strip()
        return ReferencedClient(
            clientId=client_id,
            name=_text(stored.get("name")) or full_name or UNKNOWN_CLIENT,
            email=_text(stored.get("email")),
            phone=_text(stored.get("phone")),
        )

    return UnknownClient()


def resolve_services(doc: dict, services: dict[str, dict]) -> list[BookedService]:
    raw = doc.get("services")
    if isinstance(raw, list) and raw:
        return [
            BookedService(id=_text(item.get("id")), name=_text(item.get("name")))
            for item in raw
            if isinstance(item, dict) and _text(item.get("name"))
        ]

    service_id = _text(doc.get("serviceId")) or _text(doc.get("service"))
    if service_id and _text(services.get(service_id, {}).get("name")):
        return [BookedService(id=service_id, name=_text(services[service_id]["name"]))]
    return []


def normalize_booking(doc: dict, clients: dict[str, dict], services: dict[str, dict]) -> Booking:
    client = resolve_client(doc, clients)
    booked = resolve_services(doc, services)
    time_slot, time_label = parse_time_slot(doc)

    comments = client.comments if isinstance(client, ClientInfoClient) else None

    return Booking(
        id=doc["id"],
        date=_text(doc.get("date")) or "",
        dateLabel=format_booking_date(doc.get("date")),
        timeSlot=time_slot,
        timeLabel=time_label,
        client=client,
        clientName=client.name,
        services=booked,
        serviceName=", ".join(s.name for s in booked) or UNKNOWN_SERVICE,
        professionalId=_text(doc.get("employeeId")) or _text(doc.get("professionalId")),
        status=normalize_status(doc.get("status")),
        comments=comments or _text(doc.get("clientComments")),
        createdAt=parse_timestamp(doc.get("createdAt")),
        updatedAt=parse_timestamp(doc.get("updatedAt")),
    )


def booking_sort_key(booking: Booking):
    """Date, then start time; bookings with unreadable dates go last"""
    parsed = parse_booking_date(booking.date)
    start = booking.timeSlot.start if booking.timeSlot and booking.timeSlot.start else ""
    return (parsed is None, parsed or date.max, start)


def group_by_professional(bookings: Iterable[Booking], employees: list[dict]) -> list[ProfessionalBookings]:
    """
    One entry per employee, each with its bookings in date and time order.

    Bookings whose professional is missing or unknown are left out.
    """
    grouped: dict[str, list[Booking]] = {employee["id"]: [] for employee in employees}
    dropped = 0
    for booking in bookings:
        if booking.professionalId in grouped:
            grouped[booking.professionalId].append(booking)
        else:
            dropped += 1
            logger.debug(f"Booking {booking.id} has unknown professional {booking.professionalId}")

    if dropped:
        logger.warning(f"⚠️ {dropped} bookings skipped: no matching professional")

    ordered_employees = sorted(employees, key=lambda e: str(e.get("name") or "").casefold())
    return [
        ProfessionalBookings(
            employeeId=employee["id"],
            employeeName=_text(employee.get("name")) or "",
            email=_text(employee.get("email")),
            active=employee["active"] if isinstance(employee.get("active"), bool) else True,
            bookings=sorted(grouped[employee["id"]], key=booking_sort_key),
        )
        for employee in ordered_employees
    ]
