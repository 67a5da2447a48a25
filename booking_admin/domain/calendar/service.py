"""
Calendar service - Google Calendar authorization links for staff members.

Only the authorization URL is produced here. The code exchange and token
refresh happen in the callback service that owns ``tokens``.
"""

import logging
from datetime import datetime
from typing import Optional
from urllib.parse import quote, urlencode

from fastapi import HTTPException

from ...config import GOOGLE_AUTH_URL, GOOGLE_CALENDAR_SCOPES
from ...i18n import translate
from ...store import DocumentStore
from .repository import CalendarRepository
from .schemas import (
    AuthorizationLink,
    CalendarCredentials,
    CalendarStaffMember,
    CalendarStatus,
    Delivery,
)

logger = logging.getLogger(__name__)

# Characters encodeURIComponent leaves alone besides the unreserved set
URI_COMPONENT_SAFE = "!*'()"


def build_authorization_url(credentials: dict, staff_email: str) -> str:
    """OAuth consent URL for one staff member; ``state`` carries their email"""
    params = {
        "client_id": credentials["client_id"],
        "redirect_uri": credentials["redirect_uris"][0],
        "response_type": "code",
        "scope": " ".join(GOOGLE_CALENDAR_SCOPES),
        "access_type": "offline",
        "prompt": "consent",
        "state": staff_email,
    }
    return f"{GOOGLE_AUTH_URL}?{urlencode(params, safe=URI_COMPONENT_SAFE, quote_via=quote)}"


def build_mailto(email: str, subject: str, body: str) -> str:
    query = urlencode({"subject": subject, "body": body}, safe=URI_COMPONENT_SAFE, quote_via=quote)
    return f"mailto:{quote(email, safe='@')}?{query}"


def _usable_credentials(settings: dict) -> Optional[dict]:
    credentials = settings.get("credentials")
    if not isinstance(credentials, dict) or not credentials.get("client_id"):
        return None
    uris = credentials.get("redirect_uris")
    if not isinstance(uris, list) or not uris or not uris[0]:
        return None
    return credentials


class CalendarService:
    def __init__(self, store: DocumentStore, lang: str = "en"):
        self.store = store
        self.lang = lang
        self.repo = CalendarRepository()

    def get_status(self) -> CalendarStatus:
        """Connection overview; the client secret never leaves the store"""
        settings = self.repo.get_settings(self.store)
        credentials = _usable_credentials(settings)
        tokens = settings.get("tokens") if isinstance(settings.get("tokens"), dict) else {}

        staff = [
            CalendarStaffMember(
                id=doc["id"],
                name=doc.get("name") or "",
                email=doc["email"],
                authorized=bool(tokens.get(doc["email"])),
            )
            for doc in self.repo.get_employees(self.store)
            if doc.get("email")
        ]

        return CalendarStatus(
            configured=credentials is not None,
            clientIdPreview=f"{credentials['client_id'][:10]}..." if credentials else None,
            redirectUri=credentials["redirect_uris"][0] if credentials else None,
            staff=sorted(staff, key=lambda s: s.name.casefold()),
            updatedAt=settings["updatedAt"] if isinstance(settings.get("updatedAt"), datetime) else None,
        )

    def save_credentials(self, data: CalendarCredentials) -> CalendarStatus:
        self.repo.save_credentials(self.store, data.model_dump())
        logger.info(f"✅ Google Calendar credentials saved (client {data.client_id[:10]}...)")
        return self.get_status()

    def authorize(self, employee_id: str, delivery: Delivery = "link") -> AuthorizationLink:
        credentials = _usable_credentials(self.repo.get_settings(self.store))
        if credentials is None:
            raise HTTPException(status_code=400, detail=translate("calendar.notConfigured", self.lang))

        employee = self.repo.get_employee(self.store, employee_id)
        if not employee:
            raise HTTPException(status_code=404, detail=translate("errors.notFound", self.lang))
        email = (employee.get("email") or "").strip()
        if not email:
            raise HTTPException(status_code=400, detail=translate("calendar.noEmail", self.lang))

        url = build_authorization_url(credentials, email)
        link = AuthorizationLink(employeeId=employee_id, email=email, url=url)
        if delivery == "email":
            link.mailto = build_mailto(
                email,
                translate("calendar.email.subject", self.lang),
                translate("calendar.email.body", self.lang, name=employee.get("name") or email, url=url),
            )
        logger.info(f"Calendar authorization link generated for {email} ({delivery})")
        return link
