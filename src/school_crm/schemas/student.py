"""Pydantic schemas for student endpoints."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .auth import UserSummary
from .base import MAX_AMOUNT, CamelModel
from .group import GroupRead


class StudentCreate(CamelModel):
    """Request body for enrolling a user as a student."""

    user_id: str
    student_id: str = Field(..., min_length=1, description="Human-readable student code, e.g. TIT-2024-001.")
    group_id: Optional[str] = None
    gold_medals: int = Field(0, ge=0, le=MAX_AMOUNT)
    silver_medals: int = Field(0, ge=0, le=MAX_AMOUNT)
    bronze_medals: int = Field(0, ge=0, le=MAX_AMOUNT)


class StudentUpdate(CamelModel):
    """Partial update; an explicit null groupId removes the student from their group."""

    user_id: Optional[str] = None
    student_id: Optional[str] = Field(None, min_length=1)
    group_id: Optional[str] = None
    gold_medals: Optional[int] = Field(None, ge=0, le=MAX_AMOUNT)
    silver_medals: Optional[int] = Field(None, ge=0, le=MAX_AMOUNT)
    bronze_medals: Optional[int] = Field(None, ge=0, le=MAX_AMOUNT)


class StudentRead(CamelModel):
    id: str
    user_id: str
    student_id: str
    group_id: Optional[str]
    gold_medals: int
    silver_medals: int
    bronze_medals: int
    created_at: datetime


class StudentDetail(StudentRead):
    """Student with owning user and group attached for display."""

    user: Optional[UserSummary] = None
    group: Optional[GroupRead] = None
