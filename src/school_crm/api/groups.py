"""Group endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from ..core.database import get_db
from ..schemas import GroupCreate, GroupRead, GroupUpdate, MessageResponse
from ..services import group_service

router = APIRouter(prefix="/groups", tags=["groups"])


@router.get("", response_model=List[GroupRead], summary="List groups")
async def list_groups(db: Session = Depends(get_db)) -> List[GroupRead]:
    return list(group_service.list_groups(db))


@router.post(
    "",
    response_model=GroupRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a group",
    responses={
        201: {
            "description": "Group created",
            "content": {
                "application/json": {
                    "example": {
                        "id": "5d0c7f3e-8a0b-4c1e-b3f4-2a9e6f1d7c20",
                        "name": "React Fundamentals",
                        "description": "Frontend Development",
                        "schedule": "Mon, Wed, Fri - 10:00 AM",
                        "capacity": 30,
                        "status": "active",
                        "createdAt": "2024-09-01T08:00:00",
                    }
                }
            },
        },
        400: {"description": "Invalid group data"},
    },
)
async def create_group(payload: GroupCreate, db: Session = Depends(get_db)) -> GroupRead:
    """Create a group.

    Example request body::

        {
            "name": "React Fundamentals",
            "schedule": "Mon, Wed, Fri - 10:00 AM",
            "capacity": 25
        }
    """

    group = group_service.create_group(db, **payload.model_dump())
    db.commit()
    db.refresh(group)
    return group


@router.put(
    "/{group_id}",
    response_model=GroupRead,
    summary="Update a group",
    responses={404: {"description": "Group not found"}},
)
async def update_group(group_id: str, payload: GroupUpdate, db: Session = Depends(get_db)) -> GroupRead:
    group = group_service.update_group(db, group_id, payload.model_dump(exclude_unset=True))
    if group is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Group not found")
    db.commit()
    db.refresh(group)
    return group


@router.delete(
    "/{group_id}",
    response_model=MessageResponse,
    summary="Delete a group",
    responses={404: {"description": "Group not found"}},
)
async def delete_group(group_id: str, db: Session = Depends(get_db)) -> MessageResponse:
    """Delete a group. Its students stay enrolled without a group."""

    if not group_service.delete_group(db, group_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Group not found")
    db.commit()
    return MessageResponse(message="Group deleted successfully")
