"""Booking service - Business logic for the bookings page"""

import logging

from fastapi import HTTPException

from ...i18n import translate
from ...store import DocumentNotFound, DocumentStore, StoreError
from .normalize import group_by_professional
from .repository import BookingRepository
from .schemas import Booking, MessageResponse, ProfessionalBookings, StatusUpdateResponse

logger = logging.getLogger(__name__)


class BookingService:
    """Service layer for bookings

    A status change re-reads the single booking it touched; nothing else is
    refreshed.
    """

    def __init__(self, store: DocumentStore, lang: str = "en"):
        self.store = store
        self.lang = lang
        self.repo = BookingRepository()

    def get_bookings_by_professional(self) -> list[ProfessionalBookings]:
        employees = self.repo.get_employees(self.store)
        bookings = self.repo.get_bookings(self.store)
        logger.info(f"Loaded {len(bookings)} bookings for {len(employees)} employees")
        return group_by_professional(bookings, employees)

    def get_booking(self, booking_id: str) -> Booking:
        booking = self.repo.get_booking(self.store, booking_id)
        if not booking:
            raise HTTPException(status_code=404, detail=translate("errors.notFound", self.lang))
        return booking

    def update_status(self, booking_id: str, status: str) -> StatusUpdateResponse:
        try:
            self.repo.update_status(self.store, booking_id, status)
        except DocumentNotFound:
            raise
        except StoreError as e:
            raise HTTPException(
                status_code=503,
                detail=f"{translate('bookings.status.updateError', self.lang)}: {e}",
            ) from e

        logger.info(f"✅ Booking {booking_id} status set to {status}")
        message = translate(
            "bookings.status.updateSuccess",
            self.lang,
            status=translate(f"bookings.status.{status}", self.lang),
        )
        return StatusUpdateResponse(message=message, booking=self.get_booking(booking_id))

    def delete_booking(self, booking_id: str) -> MessageResponse:
        try:
            self.repo.delete_booking(self.store, booking_id)
        except DocumentNotFound:
            raise
        except StoreError as e:
            raise HTTPException(status_code=503, detail=translate("bookings.deleteError", self.lang)) from e
        return MessageResponse(message=translate("bookings.deleteSuccess", self.lang))
