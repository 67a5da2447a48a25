"""
Live booking feed for the dashboard.

Holds the latest push snapshot of the bookings collection. The snapshot
callback runs on the Firestore listener thread, so every access goes
through a lock.
"""

import logging
from datetime import datetime
from threading import Lock
from typing import Callable, Optional

from fastapi import Request

from ...config import BOOKINGS_COLLECTION
from ...store import DocumentStore, utcnow

logger = logging.getLogger(__name__)


class BookingFeed:
    def __init__(self, store: DocumentStore):
        self.store = store
        self._lock = Lock()
        self._docs: Optional[list[dict]] = None
        self._received_at: Optional[datetime] = None
        self._unsubscribe: Optional[Callable[[], None]] = None

    @property
    def running(self) -> bool:
        return self._unsubscribe is not None

    def start(self) -> None:
        if self.running:
            return
        self._unsubscribe = self.store.watch(BOOKINGS_COLLECTION, self._on_snapshot)
        logger.info("📡 Live booking feed subscribed")

    def stop(self) -> None:
        if not self.running:
            return
        self._unsubscribe()
        self._unsubscribe = None
        logger.info("Live booking feed unsubscribed")

    def _on_snapshot(self, docs: list[dict]) -> None:
        with self._lock:
            self._docs = docs
            self._received_at = utcnow()
        logger.debug(f"Booking snapshot received ({len(docs)} documents)")

    def snapshot(self) -> Optional[list[dict]]:
        """Latest documents, or None until the first snapshot arrives"""
        with self._lock:
            if self._docs is None:
                return None
            return list(self._docs)

    @property
    def received_at(self) -> Optional[datetime]:
        with self._lock:
            return self._received_at


def get_booking_feed(request: Request) -> Optional[BookingFeed]:
    return getattr(request.app.state, "booking_feed", None)
