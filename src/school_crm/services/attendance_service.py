"""Attendance sheets."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..models import Attendance, AttendanceStatus, Group, Student
from .common import RuleViolation, apply_updates

_NULLABLE_FIELDS = ("notes",)


class AttendanceRuleViolation(RuleViolation):
    """Raised when attendance references are invalid."""


def _ensure_student(session: Session, student_id: str) -> Student:
    student = session.get(Student, student_id)
    if student is None:
        raise AttendanceRuleViolation(f"Student {student_id} not found", status_code=404)
    return student


def _ensure_group(session: Session, group_id: str) -> Group:
    group = session.get(Group, group_id)
    if group is None:
        raise AttendanceRuleViolation(f"Group {group_id} not found", status_code=404)
    return group


def list_attendance(
    session: Session,
    *,
    student_id: Optional[str] = None,
    group_id: Optional[str] = None,
) -> Sequence[Attendance]:
    """Return records for a student, else for a group, else all of them."""

    stmt = select(Attendance).order_by(Attendance.date, Attendance.created_at)
    if student_id:
        stmt = stmt.where(Attendance.student_id == student_id)
    elif group_id:
        stmt = stmt.where(Attendance.group_id == group_id)
    return session.execute(stmt).scalars().all()


def create_attendance(
    session: Session,
    *,
    student_id: str,
    group_id: str,
    date: datetime,
    status: AttendanceStatus,
    notes: Optional[str] = None,
) -> Attendance:
    student = _ensure_student(session, student_id)
    group = _ensure_group(session, group_id)

    record = Attendance(student=student, group=group, date=date, status=status, notes=notes)
    session.add(record)
    session.flush()
    return record


def update_attendance(session: Session, attendance_id: str, updates: Mapping[str, Any]) -> Optional[Attendance]:
    """Apply a partial update. Returns ``None`` when the record does not exist."""

    record = session.get(Attendance, attendance_id)
    if record is None:
        return None

    if updates.get("student_id") is not None:
        _ensure_student(session, updates["student_id"])
    if updates.get("group_id") is not None:
        _ensure_group(session, updates["group_id"])

    apply_updates(record, updates, nullable=_NULLABLE_FIELDS)
    session.flush()
    return record
