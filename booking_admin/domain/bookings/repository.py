"""Booking repository - Document store operations for bookings"""

from typing import Optional

from ...config import BOOKINGS_COLLECTION, CLIENTS_COLLECTION, EMPLOYEES_COLLECTION, SERVICES_COLLECTION
from ...store import DocumentStore, utcnow
from .normalize import normalize_booking
from .schemas import Booking


def _by_id(docs: list[dict]) -> dict[str, dict]:
    return {doc["id"]: doc for doc in docs}


class BookingRepository:
    """Repository for booking document operations

    Every booking leaving this class is already normalized.
    """

    @staticmethod
    def get_lookups(store: DocumentStore) -> tuple[dict[str, dict], dict[str, dict]]:
        """Clients and services by id, used to resolve legacy references"""
        return _by_id(store.list(CLIENTS_COLLECTION)), _by_id(store.list(SERVICES_COLLECTION))

    @staticmethod
    def normalize_all(store: DocumentStore, docs: list[dict]) -> list[Booking]:
        clients, services = BookingRepository.get_lookups(store)
        return [normalize_booking(doc, clients, services) for doc in docs]

    @staticmethod
    def get_bookings(store: DocumentStore) -> list[Booking]:
        return BookingRepository.normalize_all(store, store.list(BOOKINGS_COLLECTION))

    @staticmethod
    def get_booking(store: DocumentStore, booking_id: str) -> Optional[Booking]:
        doc = store.get(BOOKINGS_COLLECTION, booking_id)
        if not doc:
            return None
        return BookingRepository.normalize_all(store, [doc])[0]

    @staticmethod
    def get_employees(store: DocumentStore) -> list[dict]:
        return store.list(EMPLOYEES_COLLECTION)

    @staticmethod
    def update_status(store: DocumentStore, booking_id: str, status: str) -> None:
        store.update(BOOKINGS_COLLECTION, booking_id, {"status": status, "updatedAt": utcnow()})

    @staticmethod
    def delete_booking(store: DocumentStore, booking_id: str) -> None:
        store.delete(BOOKINGS_COLLECTION, booking_id)
