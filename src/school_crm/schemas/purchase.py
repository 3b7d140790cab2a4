"""Pydantic schemas for marketplace purchases."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from ..models import PurchaseStatus
from .base import MAX_AMOUNT, CamelModel


class PurchaseCreate(CamelModel):
    """Incoming payload for buying a product.

    Spend amounts are optional; when sent they must equal the product's prices.
    """

    student_id: str
    product_id: str
    gold_spent: Optional[int] = Field(None, ge=0, le=MAX_AMOUNT)
    silver_spent: Optional[int] = Field(None, ge=0, le=MAX_AMOUNT)
    bronze_spent: Optional[int] = Field(None, ge=0, le=MAX_AMOUNT)
    status: PurchaseStatus = PurchaseStatus.COMPLETED


class PurchaseRead(CamelModel):
    id: str
    student_id: str
    product_id: Optional[str]
    gold_spent: int
    silver_spent: int
    bronze_spent: int
    status: PurchaseStatus
    created_at: datetime
