"""Marketplace product endpoints."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from ..core.database import get_db
from ..schemas import MessageResponse, ProductCreate, ProductRead, ProductUpdate
from ..services import product_service

router = APIRouter(prefix="/products", tags=["products"])


@router.get("", response_model=List[ProductRead], summary="List products")
async def list_products(
    in_stock: Optional[bool] = Query(None, alias="inStock", description="Only products with this stock flag"),
    db: Session = Depends(get_db),
) -> List[ProductRead]:
    return list(product_service.list_products(db, in_stock=in_stock))


@router.post(
    "",
    response_model=ProductRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a product",
    responses={400: {"description": "Invalid product data"}},
)
async def create_product(payload: ProductCreate, db: Session = Depends(get_db)) -> ProductRead:
    """Add a product to the marketplace.

    Example request body::

        {
            "name": "Programming Books Set",
            "bronzePrice": 8
        }
    """

    product = product_service.create_product(db, **payload.model_dump())
    db.commit()
    db.refresh(product)
    return product


@router.put(
    "/{product_id}",
    response_model=ProductRead,
    summary="Update a product",
    responses={404: {"description": "Product not found"}},
)
async def update_product(product_id: str, payload: ProductUpdate, db: Session = Depends(get_db)) -> ProductRead:
    product = product_service.update_product(db, product_id, payload.model_dump(exclude_unset=True))
    if product is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")
    db.commit()
    db.refresh(product)
    return product


@router.delete(
    "/{product_id}",
    response_model=MessageResponse,
    summary="Delete a product",
    responses={404: {"description": "Product not found"}},
)
async def delete_product(product_id: str, db: Session = Depends(get_db)) -> MessageResponse:
    if not product_service.delete_product(db, product_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")
    db.commit()
    return MessageResponse(message="Product deleted successfully")
