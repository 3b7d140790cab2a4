"""Medal awards and the balances they drive.

Every award adds exactly one medal to the matching balance of the student and
every revocation takes one away, never going below zero.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session, joinedload

from ..models import Medal, MedalType, Student, User
from .common import RuleViolation

logger = logging.getLogger(__name__)


class MedalRuleViolation(RuleViolation):
    """Raised when a medal cannot be awarded."""


def _lock_student(session: Session, student_id: str) -> Optional[Student]:
    stmt = select(Student).where(Student.id == student_id).with_for_update()
    return session.execute(stmt).scalar_one_or_none()


def _ensure_awarder(session: Session, user_id: str) -> User:
    user = session.get(User, user_id)
    if user is None:
        raise MedalRuleViolation(f"User {user_id} not found", status_code=404)
    return user


def list_medals(session: Session, *, student_id: Optional[str] = None) -> Sequence[Medal]:
    """Return medals, newest first, with recipient and awarder loaded."""

    stmt = (
        select(Medal)
        .options(
            joinedload(Medal.student).joinedload(Student.user),
            joinedload(Medal.awarder),
        )
        .order_by(Medal.created_at.desc())
    )
    if student_id:
        stmt = stmt.where(Medal.student_id == student_id)
    return session.execute(stmt).scalars().all()


def award_medal(
    session: Session,
    *,
    student_id: str,
    medal_type: MedalType,
    reason: str,
    awarded_by: str,
) -> Medal:
    """Record a medal and add one to the student's balance for its tier."""

    student = _lock_student(session, student_id)
    if student is None:
        raise MedalRuleViolation("Student not found", status_code=404)
    awarder = _ensure_awarder(session, awarded_by)

    medal = Medal(student=student, awarder=awarder, type=medal_type, reason=reason)
    session.add(medal)

    field = medal_type.balance_field
    setattr(student, field, (getattr(student, field) or 0) + 1)
    session.flush()

    logger.info("%s medal awarded to student %s by %s", medal_type.value, student.id, awarder.id)
    return medal


def revoke_medal(session: Session, medal_id: str) -> bool:
    """Delete a medal and take it back from the student's balance.

    Returns ``False`` when no such medal exists.
    """

    medal = session.get(Medal, medal_id)
    if medal is None:
        return False

    student = _lock_student(session, medal.student_id)
    if student is not None:
        field = MedalType(medal.type).balance_field
        setattr(student, field, max(0, (getattr(student, field) or 0) - 1))

    session.delete(medal)
    session.flush()

    logger.info("medal %s revoked from student %s", medal_id, medal.student_id)
    return True
