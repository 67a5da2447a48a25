"""Calendar repository - Google Calendar settings document"""

from typing import Optional

from ...config import CALENDAR_SETTINGS_COLLECTION, CALENDAR_SETTINGS_DOCUMENT, EMPLOYEES_COLLECTION
from ...store import DocumentStore, utcnow


class CalendarRepository:
    @staticmethod
    def get_settings(store: DocumentStore) -> dict:
        """``credentials`` and ``tokens``; ``tokens`` is only written by the OAuth callback"""
        return store.get(CALENDAR_SETTINGS_COLLECTION, CALENDAR_SETTINGS_DOCUMENT) or {}

    @staticmethod
    def save_credentials(store: DocumentStore, credentials: dict) -> None:
        store.set(
            CALENDAR_SETTINGS_COLLECTION,
            CALENDAR_SETTINGS_DOCUMENT,
            {"credentials": credentials, "updatedAt": utcnow()},
            merge=True,
        )

    @staticmethod
    def get_employees(store: DocumentStore) -> list[dict]:
        return store.list(EMPLOYEES_COLLECTION)

    @staticmethod
    def get_employee(store: DocumentStore, employee_id: str) -> Optional[dict]:
        return store.get(EMPLOYEES_COLLECTION, employee_id)
