"""Service catalog schemas - Pydantic models for validation"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ...shared.validators import validate_required_text


class ServiceForm(BaseModel):
    """Create-or-update payload; an ``id`` means update"""

    id: Optional[str] = None
    name: str
    description: str = ""
    duration: int = Field(default=30, gt=0, description="Duration in minutes")
    price: float = Field(default=0, ge=0)
    categoryId: str = ""
    active: bool = True
    order: Optional[int] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        return validate_required_text(v, "Name")


class ServiceUpdate(BaseModel):
    """Schema for partially updating an existing service"""

    name: Optional[str] = None
    description: Optional[str] = None
    duration: Optional[int] = Field(default=None, gt=0)
    price: Optional[float] = Field(default=None, ge=0)
    categoryId: Optional[str] = None
    active: Optional[bool] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        if v is not None:
            return validate_required_text(v, "Name")
        return v


class ServiceResponse(BaseModel):
    id: str
    name: str
    description: str
    duration: int
    price: float
    categoryId: str
    categoryName: str
    active: bool
    order: int
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None
