"""Pydantic schemas for group endpoints."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from ..models import GroupStatus
from .base import MAX_AMOUNT, CamelModel


class GroupCreate(CamelModel):
    """Request body for creating a group."""

    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    schedule: Optional[str] = Field(None, description="Free-form schedule, e.g. 'Mon, Wed - 10:00 AM'.")
    capacity: int = Field(30, ge=0, le=MAX_AMOUNT)
    status: GroupStatus = GroupStatus.ACTIVE


class GroupUpdate(CamelModel):
    """Partial update; only supplied fields are applied."""

    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    schedule: Optional[str] = None
    capacity: Optional[int] = Field(None, ge=0, le=MAX_AMOUNT)
    status: Optional[GroupStatus] = None


class GroupRead(CamelModel):
    id: str
    name: str
    description: Optional[str]
    schedule: Optional[str]
    capacity: int
    status: GroupStatus
    created_at: datetime
