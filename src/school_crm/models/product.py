"""Marketplace product model."""

from sqlalchemy import Boolean, CheckConstraint, Column, Integer, String
from sqlalchemy.orm import relationship

from ..core.database import Base
from ._ids import created_at_column, id_column


class Product(Base):
    """Item students can buy with medals. All prices zero means free."""

    __tablename__ = "products"
    __table_args__ = (
        CheckConstraint("gold_price >= 0", name="products_gold_price_positive"),
        CheckConstraint("silver_price >= 0", name="products_silver_price_positive"),
        CheckConstraint("bronze_price >= 0", name="products_bronze_price_positive"),
    )

    id = id_column()
    name = Column(String, nullable=False)
    description = Column(String)
    image = Column(String)
    gold_price = Column(Integer, nullable=False, default=0)
    silver_price = Column(Integer, nullable=False, default=0)
    bronze_price = Column(Integer, nullable=False, default=0)
    in_stock = Column(Boolean, nullable=False, default=True)
    created_at = created_at_column()

    # purchase history survives product removal with a null product reference
    purchases = relationship("Purchase", back_populates="product")
