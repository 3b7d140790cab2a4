"""Student enrolment records."""

from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session, joinedload

from ..models import Group, Student, User
from .common import RuleViolation, apply_updates

_NULLABLE_FIELDS = ("group_id",)


class StudentRuleViolation(RuleViolation):
    """Raised when student constraints are violated."""


def _ensure_user(session: Session, user_id: str) -> User:
    user = session.get(User, user_id)
    if user is None:
        raise StudentRuleViolation(f"User {user_id} not found", status_code=404)
    return user


def _ensure_group(session: Session, group_id: str) -> Group:
    group = session.get(Group, group_id)
    if group is None:
        raise StudentRuleViolation(f"Group {group_id} not found", status_code=404)
    return group


def _ensure_unique_code(session: Session, code: str, *, exclude_id: Optional[str] = None) -> None:
    existing = get_student_by_code(session, code)
    if existing is not None and existing.id != exclude_id:
        raise StudentRuleViolation(f"Student code {code} is already in use.")


def list_students(session: Session) -> Sequence[Student]:
    """Return all students with user and group eagerly loaded."""

    stmt = (
        select(Student)
        .options(joinedload(Student.user), joinedload(Student.group))
        .order_by(Student.created_at, Student.student_id)
    )
    return session.execute(stmt).scalars().all()


def get_student(session: Session, student_id: str) -> Optional[Student]:
    return session.get(Student, student_id)


def get_student_by_user_id(session: Session, user_id: str) -> Optional[Student]:
    stmt = (
        select(Student)
        .options(joinedload(Student.user), joinedload(Student.group))
        .where(Student.user_id == user_id)
        .order_by(Student.created_at)
        .limit(1)
    )
    return session.execute(stmt).scalars().first()


def get_student_by_code(session: Session, code: str) -> Optional[Student]:
    stmt = select(Student).where(Student.student_id == code)
    return session.execute(stmt).scalar_one_or_none()


def create_student(
    session: Session,
    *,
    user_id: str,
    student_id: str,
    group_id: Optional[str] = None,
    gold_medals: int = 0,
    silver_medals: int = 0,
    bronze_medals: int = 0,
) -> Student:
    """Enrol an existing user, optionally into a group."""

    user = _ensure_user(session, user_id)
    group = _ensure_group(session, group_id) if group_id is not None else None
    _ensure_unique_code(session, student_id)

    student = Student(
        user=user,
        group=group,
        student_id=student_id,
        gold_medals=gold_medals,
        silver_medals=silver_medals,
        bronze_medals=bronze_medals,
    )
    session.add(student)
    session.flush()
    return student


def update_student(session: Session, student_id: str, updates: Mapping[str, Any]) -> Optional[Student]:
    """Merge fields over the record. Returns ``None`` when the student does not exist.

    Balances written here are taken as given; only the medal and purchase
    paths adjust them arithmetically.
    """

    student = get_student(session, student_id)
    if student is None:
        return None

    if updates.get("user_id") is not None:
        _ensure_user(session, updates["user_id"])
    if updates.get("group_id") is not None:
        _ensure_group(session, updates["group_id"])
    if updates.get("student_id") is not None:
        _ensure_unique_code(session, updates["student_id"], exclude_id=student.id)

    apply_updates(student, updates, nullable=_NULLABLE_FIELDS)
    session.flush()
    # relationships must reflect the new foreign keys on read
    session.expire(student, ["user", "group"])
    return student


def delete_student(session: Session, student_id: str) -> bool:
    """Remove a student with their attendance, medals and purchases."""

    student = get_student(session, student_id)
    if student is None:
        return False
    session.delete(student)
    session.flush()
    return True
