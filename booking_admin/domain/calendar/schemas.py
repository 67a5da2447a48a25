"""Calendar domain schemas - Google Calendar OAuth settings"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

from ...shared.validators import validate_required_text

Delivery = Literal["link", "redirect", "email"]


class CalendarCredentials(BaseModel):
    """OAuth client registered in the Google Cloud console"""

    client_id: str
    client_secret: str
    redirect_uris: list[str] = Field(min_length=1)

    @field_validator("client_id")
    @classmethod
    def validate_client_id(cls, v):
        return validate_required_text(v, "Client ID")

    @field_validator("client_secret")
    @classmethod
    def validate_client_secret(cls, v):
        return validate_required_text(v, "Client secret")

    @field_validator("redirect_uris")
    @classmethod
    def validate_redirect_uris(cls, v):
        uris = [uri.strip() for uri in v if uri and uri.strip()]
        if not uris:
            raise ValueError("Redirect URI is required")
        return uris


class CalendarStaffMember(BaseModel):
    id: str
    name: str
    email: str
    authorized: bool


class CalendarStatus(BaseModel):
    configured: bool
    clientIdPreview: Optional[str] = None
    redirectUri: Optional[str] = None
    staff: list[CalendarStaffMember]
    updatedAt: Optional[datetime] = None


class AuthorizationLink(BaseModel):
    employeeId: str
    email: str
    url: str
    mailto: Optional[str] = None
