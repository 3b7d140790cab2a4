"""Attendance record model."""

import enum

from sqlalchemy import Column, DateTime, Enum as SAEnum, ForeignKey, String
from sqlalchemy.orm import relationship

from ..core.database import Base
from ._ids import created_at_column, id_column


class AttendanceStatus(str, enum.Enum):
    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"


class Attendance(Base):
    """One student's presence at one group session."""

    __tablename__ = "attendance"

    id = id_column()
    student_id = Column(String(36), ForeignKey("students.id", ondelete="CASCADE"), nullable=False)
    group_id = Column(String(36), ForeignKey("groups.id", ondelete="CASCADE"), nullable=False)
    date = Column(DateTime, nullable=False)
    status = Column(
        SAEnum(AttendanceStatus, name="attendance_status", values_callable=lambda items: [i.value for i in items]),
        nullable=False,
    )
    notes = Column(String)
    created_at = created_at_column()

    student = relationship("Student", back_populates="attendance")
    group = relationship("Group", back_populates="attendance")
