"""Calendar router - Google Calendar credentials and staff authorization links"""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import RedirectResponse

from ...auth import get_current_admin
from ...i18n import get_language
from ...store import DocumentStore, get_store
from .schemas import AuthorizationLink, CalendarCredentials, CalendarStatus, Delivery
from .service import CalendarService

router = APIRouter(prefix="/calendar", tags=["Calendar"], dependencies=[Depends(get_current_admin)])


def get_calendar_service(
    store: DocumentStore = Depends(get_store),
    lang: str = Depends(get_language),
) -> CalendarService:
    """Dependency injection for CalendarService"""
    return CalendarService(store, lang)


@router.get("", response_model=CalendarStatus)
async def get_calendar_status(service: CalendarService = Depends(get_calendar_service)):
    return service.get_status()


@router.put("/credentials", response_model=CalendarStatus)
async def save_calendar_credentials(
    data: CalendarCredentials,
    service: CalendarService = Depends(get_calendar_service),
):
    return service.save_credentials(data)


@router.get("/authorize/{employee_id}", response_model=AuthorizationLink)
async def authorize_employee(
    employee_id: str,
    delivery: Delivery = Query("link"),
    service: CalendarService = Depends(get_calendar_service),
):
    """
    Authorization URL for a staff member.

    ``link`` returns it for copying, ``redirect`` sends the browser there and
    ``email`` adds a mailto draft addressed to the staff member.
    """
    link = service.authorize(employee_id, delivery)
    if delivery == "redirect":
        return RedirectResponse(link.url, status_code=307)
    return link
