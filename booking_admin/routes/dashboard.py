import logging
from datetime import datetime, timezone
from typing import Literal, Optional

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from ..auth import get_current_admin
from ..config import BOOKINGS_COLLECTION
from ..domain.bookings.feed import BookingFeed, get_booking_feed
from ..domain.bookings.normalize import parse_booking_date
from ..domain.bookings.repository import BookingRepository
from ..domain.bookings.schemas import Booking
from ..store import DocumentStore, get_store, utcnow

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/dashboard", tags=["Dashboard"], dependencies=[Depends(get_current_admin)])

OLDEST = datetime.min.replace(tzinfo=timezone.utc)


class DashboardStats(BaseModel):
    totalBookings: int
    pendingBookings: int
    todayBookings: int


class DashboardResponse(BaseModel):
    stats: DashboardStats
    bookings: list[Booking]
    source: Literal["live", "pull"]
    snapshotAt: Optional[datetime] = None


def compute_stats(bookings: list[Booking], today=None) -> DashboardStats:
    today = today or utcnow().date()
    return DashboardStats(
        totalBookings=len(bookings),
        pendingBookings=sum(1 for b in bookings if b.status == "pending"),
        todayBookings=sum(1 for b in bookings if parse_booking_date(b.date) == today),
    )


def newest_first(bookings: list[Booking]) -> list[Booking]:
    return sorted(bookings, key=lambda b: b.createdAt or OLDEST, reverse=True)


@router.get("", response_model=DashboardResponse)
async def get_dashboard(
    limit: int = Query(100, ge=1, le=1000),
    store: DocumentStore = Depends(get_store),
    feed: Optional[BookingFeed] = Depends(get_booking_feed),
):
    """
    Booking counters and the most recent bookings.

    Served from the live feed when it has delivered a snapshot, otherwise
    read directly from the store.
    """
    docs = feed.snapshot() if feed and feed.running else None
    source = "live"
    if docs is None:
        source = "pull"
        docs = store.list(BOOKINGS_COLLECTION)
        logger.debug("Dashboard served from a direct read")

    bookings = BookingRepository.normalize_all(store, docs)
    return DashboardResponse(
        stats=compute_stats(bookings),
        bookings=newest_first(bookings)[:limit],
        source=source,
        snapshotAt=feed.received_at if source == "live" else None,
    )
