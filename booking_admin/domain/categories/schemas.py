"""Category domain schemas - Pydantic models for validation"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, field_validator

from ...shared.ordering import Direction
from ...shared.validators import validate_required_text


class CategoryForm(BaseModel):
    """Create-or-update payload; an ``id`` means update"""

    id: Optional[str] = None
    name: str
    description: str = ""
    active: bool = True
    order: Optional[int] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        return validate_required_text(v, "Name")


class CategoryUpdate(BaseModel):
    """Schema for partially updating an existing category"""

    name: Optional[str] = None
    description: Optional[str] = None
    active: Optional[bool] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        if v is not None:
            return validate_required_text(v, "Name")
        return v


class ActiveToggle(BaseModel):
    active: bool


class MoveRequest(BaseModel):
    direction: Direction


class CategoryResponse(BaseModel):
    id: str
    name: str
    description: str
    active: bool
    order: int
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None
