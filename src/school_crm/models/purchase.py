"""Marketplace purchase model."""

import enum

from sqlalchemy import CheckConstraint, Column, Enum as SAEnum, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from ..core.database import Base
from ._ids import created_at_column, id_column


class PurchaseStatus(str, enum.Enum):
    COMPLETED = "completed"
    PROCESSING = "processing"
    SHIPPED = "shipped"


class Purchase(Base):
    """Medals spent by a student on a product, priced at purchase time."""

    __tablename__ = "purchases"
    __table_args__ = (
        CheckConstraint("gold_spent >= 0", name="purchases_gold_spent_positive"),
        CheckConstraint("silver_spent >= 0", name="purchases_silver_spent_positive"),
        CheckConstraint("bronze_spent >= 0", name="purchases_bronze_spent_positive"),
    )

    id = id_column()
    student_id = Column(String(36), ForeignKey("students.id", ondelete="CASCADE"), nullable=False)
    product_id = Column(String(36), ForeignKey("products.id", ondelete="SET NULL"))
    gold_spent = Column(Integer, nullable=False, default=0)
    silver_spent = Column(Integer, nullable=False, default=0)
    bronze_spent = Column(Integer, nullable=False, default=0)
    status = Column(
        SAEnum(PurchaseStatus, name="purchase_status", values_callable=lambda items: [i.value for i in items]),
        nullable=False,
        default=PurchaseStatus.COMPLETED,
    )
    created_at = created_at_column()

    student = relationship("Student", back_populates="purchases")
    product = relationship("Product", back_populates="purchases")
