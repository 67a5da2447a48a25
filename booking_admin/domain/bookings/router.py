"""Bookings router - FastAPI endpoints for the bookings page"""

from fastapi import APIRouter, Depends

from ...auth import get_current_admin
from ...i18n import get_language
from ...store import DocumentStore, get_store
from .schemas import Booking, MessageResponse, ProfessionalBookings, StatusUpdate, StatusUpdateResponse
from .service import BookingService

router = APIRouter(prefix="/bookings", tags=["Bookings"], dependencies=[Depends(get_current_admin)])


def get_booking_service(
    store: DocumentStore = Depends(get_store),
    lang: str = Depends(get_language),
) -> BookingService:
    """Dependency injection for BookingService"""
    return BookingService(store, lang)


@router.get("", response_model=list[ProfessionalBookings])
async def get_bookings(service: BookingService = Depends(get_booking_service)):
    """Get every professional with their bookings in date and time order"""
    return service.get_bookings_by_professional()


@router.get("/{booking_id}", response_model=Booking)
async def get_booking(booking_id: str, service: BookingService = Depends(get_booking_service)):
    return service.get_booking(booking_id)


@router.put("/{booking_id}/status", response_model=StatusUpdateResponse)
async def update_booking_status(
    booking_id: str,
    data: StatusUpdate,
    service: BookingService = Depends(get_booking_service),
):
    """Change the status and return the booking as stored afterwards"""
    return service.update_status(booking_id, data.status)


@router.delete("/{booking_id}", response_model=MessageResponse)
async def delete_booking(booking_id: str, service: BookingService = Depends(get_booking_service)):
    return service.delete_booking(booking_id)
