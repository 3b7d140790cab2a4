"""Endpoints for marketplace purchases."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from ..core.database import get_db
from ..schemas import PurchaseCreate, PurchaseRead
from ..services import purchase_service
from ..services.purchase_service import PurchaseRuleViolation

router = APIRouter(prefix="/purchases", tags=["purchases"])


@router.get("", response_model=List[PurchaseRead], summary="List purchases")
async def list_purchases(
    student_id: Optional[str] = Query(None, alias="studentId", description="Filter by student id"),
    db: Session = Depends(get_db),
) -> List[PurchaseRead]:
    return list(purchase_service.list_purchases(db, student_id=student_id))


@router.post(
    "",
    response_model=PurchaseRead,
    status_code=status.HTTP_201_CREATED,
    summary="Buy a product with medals",
    responses={
        201: {
            "description": "Purchase completed",
            "content": {
                "application/json": {
                    "example": {
                        "id": "3b4c5d6e-7f80-4a1b-9c2d-3e4f5a6b7c81",
                        "studentId": "9a6e2b1d-3f4c-4e5a-8b7c-6d5e4f3a2b10",
                        "productId": "6f7a8b9c-0d1e-4f2a-8b3c-4d5e6f7a8b92",
                        "goldSpent": 0,
                        "silverSpent": 0,
                        "bronzeSpent": 8,
                        "status": "completed",
                        "createdAt": "2024-09-10T12:30:00",
                    }
                }
            },
        },
        400: {"description": "Insufficient medals, product out of stock, spend not matching the price or invalid data"},
        404: {"description": "Student or product not found"},
    },
)
async def create_purchase(payload: PurchaseCreate, db: Session = Depends(get_db)) -> PurchaseRead:
    """Spend medals on a product.

    Example request body::

        {
            "studentId": "9a6e2b1d-3f4c-4e5a-8b7c-6d5e4f3a2b10",
            "productId": "6f7a8b9c-0d1e-4f2a-8b3c-4d5e6f7a8b92",
            "bronzeSpent": 8
        }
    """

    try:
        purchase = purchase_service.create_purchase(db, **payload.model_dump())
        db.commit()
        db.refresh(purchase)
        return purchase
    except PurchaseRuleViolation as exc:
        db.rollback()
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc
