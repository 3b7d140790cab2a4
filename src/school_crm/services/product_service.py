"""Marketplace catalogue."""

from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..models import Product
from .common import apply_updates

_NULLABLE_FIELDS = ("description", "image")


def list_products(session: Session, *, in_stock: Optional[bool] = None) -> Sequence[Product]:
    stmt = select(Product).order_by(Product.created_at, Product.name)
    if in_stock is not None:
        stmt = stmt.where(Product.in_stock == in_stock)
    return session.execute(stmt).scalars().all()


def get_product(session: Session, product_id: str) -> Optional[Product]:
    return session.get(Product, product_id)


def create_product(
    session: Session,
    *,
    name: str,
    description: Optional[str] = None,
    image: Optional[str] = None,
    gold_price: int = 0,
    silver_price: int = 0,
    bronze_price: int = 0,
    in_stock: bool = True,
) -> Product:
    product = Product(
        name=name,
        description=description,
        image=image,
        gold_price=gold_price,
        silver_price=silver_price,
        bronze_price=bronze_price,
        in_stock=in_stock,
    )
    session.add(product)
    session.flush()
    return product


def update_product(session: Session, product_id: str, updates: Mapping[str, Any]) -> Optional[Product]:
    product = get_product(session, product_id)
    if product is None:
        return None
    apply_updates(product, updates, nullable=_NULLABLE_FIELDS)
    session.flush()
    return product


def delete_product(session: Session, product_id: str) -> bool:
    """Remove a product; past purchases keep their spend with a null product."""

    product = get_product(session, product_id)
    if product is None:
        return False
    session.delete(product)
    session.flush()
    return True
