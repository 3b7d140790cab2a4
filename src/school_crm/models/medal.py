"""Medal award model."""

import enum

from sqlalchemy import Column, Enum as SAEnum, ForeignKey, String
from sqlalchemy.orm import relationship

from ..core.database import Base
from ._ids import created_at_column, id_column


class MedalType(str, enum.Enum):
    """Medal tiers, each backed by its own balance on the student."""

    GOLD = "gold"
    SILVER = "silver"
    BRONZE = "bronze"

    @property
    def balance_field(self) -> str:
        return f"{self.value}_medals"


class Medal(Base):
    """A single medal handed to a student by an administrator."""

    __tablename__ = "medals"

    id = id_column()
    student_id = Column(String(36), ForeignKey("students.id", ondelete="CASCADE"), nullable=False)
    type = Column(
        SAEnum(MedalType, name="medal_type", values_callable=lambda items: [i.value for i in items]),
        nullable=False,
    )
    reason = Column(String, nullable=False)
    awarded_by = Column(String(36), ForeignKey("users.id", ondelete="RESTRICT"), nullable=False)
    created_at = created_at_column()

    student = relationship("Student", back_populates="medals")
    awarder = relationship("User", back_populates="medals_awarded")
