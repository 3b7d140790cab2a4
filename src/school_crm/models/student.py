"""Student domain model."""

from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from ..core.database import Base
from ._ids import created_at_column, id_column


class Student(Base):
    """Enrolment record of a user, carrying the three medal balances."""

    __tablename__ = "students"
    __table_args__ = (
        UniqueConstraint("student_id", name="students_student_id_unique"),
        CheckConstraint("gold_medals >= 0", name="students_gold_medals_positive"),
        CheckConstraint("silver_medals >= 0", name="students_silver_medals_positive"),
        CheckConstraint("bronze_medals >= 0", name="students_bronze_medals_positive"),
    )

    id = id_column()
    user_id = Column(String(36), ForeignKey("users.id", ondelete="RESTRICT"), nullable=False)
    student_id = Column(String, nullable=False)
    group_id = Column(String(36), ForeignKey("groups.id", ondelete="SET NULL"))
    gold_medals = Column(Integer, nullable=False, default=0)
    silver_medals = Column(Integer, nullable=False, default=0)
    bronze_medals = Column(Integer, nullable=False, default=0)
    created_at = created_at_column()

    user = relationship("User", back_populates="students")
    group = relationship("Group", back_populates="students")
    attendance = relationship("Attendance", back_populates="student", cascade="all, delete")
    medals = relationship("Medal", back_populates="student", cascade="all, delete")
    purchases = relationship("Purchase", back_populates="student", cascade="all, delete")
