"""Group (class) model."""

import enum

from sqlalchemy import Column, Enum as SAEnum, Integer, String
from sqlalchemy.orm import relationship

from ..core.database import Base
from ._ids import created_at_column, id_column


class GroupStatus(str, enum.Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class Group(Base):
    """A class of students sharing a schedule."""

    __tablename__ = "groups"

    id = id_column()
    name = Column(String, nullable=False)
    description = Column(String)
    schedule = Column(String)
    capacity = Column(Integer, nullable=False, default=30)
    status = Column(
        SAEnum(GroupStatus, name="group_status", values_callable=lambda items: [i.value for i in items]),
        nullable=False,
        default=GroupStatus.ACTIVE,
    )
    created_at = created_at_column()

    # deleting a group detaches its students but drops its attendance sheet
    students = relationship("Student", back_populates="group")
    attendance = relationship("Attendance", back_populates="group", cascade="all, delete")
