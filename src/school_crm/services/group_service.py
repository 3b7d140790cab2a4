"""Group management."""

from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..models import Group, GroupStatus
from .common import apply_updates

_NULLABLE_FIELDS = ("description", "schedule")


def list_groups(session: Session) -> Sequence[Group]:
    stmt = select(Group).order_by(Group.created_at, Group.name)
    return session.execute(stmt).scalars().all()


def get_group(session: Session, group_id: str) -> Optional[Group]:
    return session.get(Group, group_id)


def create_group(
    session: Session,
    *,
    name: str,
    description: Optional[str] = None,
    schedule: Optional[str] = None,
    capacity: int = 30,
    status: GroupStatus = GroupStatus.ACTIVE,
) -> Group:
    group = Group(
        name=name,
        description=description,
        schedule=schedule,
        capacity=capacity,
        status=status,
    )
    session.add(group)
    session.flush()
    return group


def update_group(session: Session, group_id: str, updates: Mapping[str, Any]) -> Optional[Group]:
    """Apply a partial update. Returns ``None`` when the group does not exist."""

    group = get_group(session, group_id)
    if group is None:
        return None
    apply_updates(group, updates, nullable=_NULLABLE_FIELDS)
    session.flush()
    return group


def delete_group(session: Session, group_id: str) -> bool:
    """Remove a group, detaching its students. Returns ``False`` when missing."""

    group = get_group(session, group_id)
    if group is None:
        return False
    session.delete(group)
    session.flush()
    return True
