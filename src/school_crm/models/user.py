"""User account model."""

import enum

from sqlalchemy import Column, Enum as SAEnum, String, UniqueConstraint
from sqlalchemy.orm import relationship

from ..core.database import Base
from ._ids import created_at_column, id_column


class UserRole(str, enum.Enum):
    """Account roles."""

    ADMIN = "admin"
    STUDENT = "student"


class User(Base):
    """Login identity for administrators and students.

    Passwords are stored as provided; there is no hashing or session layer.
    """

    __tablename__ = "users"
    __table_args__ = (UniqueConstraint("email", name="users_email_unique"),)

    id = id_column()
    email = Column(String, nullable=False)
    password = Column(String, nullable=False)
    role = Column(
        SAEnum(UserRole, name="user_role", values_callable=lambda roles: [r.value for r in roles]),
        nullable=False,
    )
    name = Column(String, nullable=False)
    created_at = created_at_column()

    students = relationship("Student", back_populates="user")
    medals_awarded = relationship("Medal", back_populates="awarder")
