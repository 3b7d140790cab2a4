"""Pydantic schemas for attendance endpoints."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import field_validator

from ..models import AttendanceStatus
from .base import CamelModel


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    # stored naive, in UTC, like every other timestamp
    if value is not None and value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


class AttendanceCreate(CamelModel):
    student_id: str
    group_id: str
    date: datetime
    status: AttendanceStatus
    notes: Optional[str] = None

    @field_validator("date")
    @classmethod
    def date_in_utc(cls, value):
        return _as_utc(value)


class AttendanceUpdate(CamelModel):
    student_id: Optional[str] = None
    group_id: Optional[str] = None
    date: Optional[datetime] = None
    status: Optional[AttendanceStatus] = None
    notes: Optional[str] = None

    @field_validator("date")
    @classmethod
    def date_in_utc(cls, value):
        return _as_utc(value)


class AttendanceRead(CamelModel):
    id: str
    student_id: str
    group_id: str
    date: datetime
    status: AttendanceStatus
    notes: Optional[str]
    created_at: datetime
