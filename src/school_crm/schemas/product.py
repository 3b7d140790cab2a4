"""Pydantic schemas for marketplace products."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import MAX_AMOUNT, CamelModel


class ProductCreate(CamelModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    image: Optional[str] = Field(None, description="Image URL shown in the marketplace.")
    gold_price: int = Field(0, ge=0, le=MAX_AMOUNT)
    silver_price: int = Field(0, ge=0, le=MAX_AMOUNT)
    bronze_price: int = Field(0, ge=0, le=MAX_AMOUNT)
    in_stock: bool = True


class ProductUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    image: Optional[str] = None
    gold_price: Optional[int] = Field(None, ge=0, le=MAX_AMOUNT)
    silver_price: Optional[int] = Field(None, ge=0, le=MAX_AMOUNT)
    bronze_price: Optional[int] = Field(None, ge=0, le=MAX_AMOUNT)
    in_stock: Optional[bool] = None


class ProductRead(CamelModel):
    id: str
    name: str
    description: Optional[str]
    image: Optional[str]
    gold_price: int
    silver_price: int
    bronze_price: int
    in_stock: bool
    created_at: datetime
