"""User accounts and credential checks."""

from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..models import User, UserRole
from .common import RuleViolation

logger = logging.getLogger(__name__)


class UserRuleViolation(RuleViolation):
    """Raised when account rules are violated."""


def get_user(session: Session, user_id: str) -> Optional[User]:
    return session.get(User, user_id)


def get_user_by_email(session: Session, email: str) -> Optional[User]:
    stmt = select(User).where(User.email == email)
    return session.execute(stmt).scalar_one_or_none()


def create_user(
    session: Session,
    *,
    email: str,
    password: str,
    role: UserRole,
    name: str,
) -> User:
    """Provision a new account; emails are unique."""

    if get_user_by_email(session, email) is not None:
        raise UserRuleViolation(f"User with email {email} already exists.")

    user = User(email=email, password=password, role=role, name=name)
    session.add(user)
    session.flush()
    return user


def authenticate(session: Session, *, email: str, password: str) -> User:
    """Return the user matching the credentials.

    Unknown email and wrong password are reported identically.
    """

    user = get_user_by_email(session, email)
    if user is None or user.password != password:
        logger.info("login refused for %s", email)
        raise UserRuleViolation("Invalid credentials", status_code=401)
    return user
