"""Settings domain schemas - public booking widget configuration"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...shared.validators import validate_clock_time, validate_email


class WorkingHours(BaseModel):
    start: str = "09:00"
    end: str = "17:00"

    @field_validator("start", "end")
    @classmethod
    def validate_time(cls, v):
        return validate_clock_time(v)


class WidgetConfig(BaseModel):
    """Singleton document read by the public booking widget"""

    businessName: str = ""
    businessEmail: str = ""
    businessPhone: str = ""
    timezone: str = "Europe/Paris"
    workingHours: WorkingHours = Field(default_factory=WorkingHours)
    slotDuration: int = Field(30, gt=0)
    allowedDaysInAdvance: int = Field(30, ge=0)
    requirePhoneNumber: bool = True
    requireEmailConfirmation: bool = True
    customCss: Optional[str] = None

    model_config = ConfigDict(extra="forbid")

    @field_validator("businessEmail")
    @classmethod
    def validate_business_email(cls, v):
        return validate_email(v) or ""


class WidgetConfigPatch(BaseModel):
    """Changes keyed by dotted path, e.g. ``{"workingHours.start": "08:00"}``"""

    changes: dict[str, Any] = Field(min_length=1)


class WidgetConfigSaved(BaseModel):
    message: str
    config: WidgetConfig


class WidgetEmbed(BaseModel):
    snippet: str
