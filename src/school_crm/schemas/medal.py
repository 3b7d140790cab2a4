"""Pydantic schemas for medal endpoints."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from ..models import MedalType
from .auth import UserSummary
from .base import CamelModel
from .student import StudentRead


class MedalCreate(CamelModel):
    """Request body for awarding a medal."""

    student_id: str
    type: MedalType
    reason: str = Field(..., min_length=1)
    awarded_by: str = Field(..., description="Id of the administrator awarding the medal.")


class MedalRead(CamelModel):
    id: str
    student_id: str
    type: MedalType
    reason: str
    awarded_by: str
    created_at: datetime


class MedalDetail(MedalRead):
    """Medal with recipient, recipient's user account and awarder attached."""

    student: Optional[StudentRead] = None
    user: Optional[UserSummary] = None
    awarder: Optional[UserSummary] = None
