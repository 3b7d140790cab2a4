"""Medal endpoints."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from ..core.database import get_db
from ..schemas import MedalCreate, MedalDetail, MedalRead, MessageResponse, StudentRead, UserSummary
from ..services import medal_service
from ..services.medal_service import MedalRuleViolation

router = APIRouter(prefix="/medals", tags=["medals"])


@router.get(
    "",
    response_model=List[MedalDetail],
    summary="List medals",
    responses={
        200: {
            "description": "Medals with recipient and awarder",
            "content": {
                "application/json": {
                    "example": [
                        {
                            "id": "7e1f2a3b-4c5d-4e6f-8a9b-0c1d2e3f4a50",
                            "studentId": "9a6e2b1d-3f4c-4e5a-8b7c-6d5e4f3a2b10",
                            "type": "gold",
                            "reason": "Top score",
                            "awardedBy": "0b9f1c52-4c61-4d1e-9a7e-0f3f7d3c2a11",
                            "createdAt": "2024-09-05T14:00:00",
                            "student": {
                                "id": "9a6e2b1d-3f4c-4e5a-8b7c-6d5e4f3a2b10",
                                "userId": "2c8d4e6f-1a3b-4c5d-9e8f-7a6b5c4d3e21",
                                "studentId": "TIT-2024-001",
                                "groupId": None,
                                "goldMedals": 1,
                                "silverMedals": 0,
                                "bronzeMedals": 0,
                                "createdAt": "2024-09-01T08:00:00",
                            },
                            "user": {
                                "id": "2c8d4e6f-1a3b-4c5d-9e8f-7a6b5c4d3e21",
                                "email": "student@mail.com",
                                "role": "student",
                                "name": "Student User",
                            },
                            "awarder": {
                                "id": "0b9f1c52-4c61-4d1e-9a7e-0f3f7d3c2a11",
                                "email": "admin@mail.com",
                                "role": "admin",
                                "name": "Admin User",
                            },
                        }
                    ]
                }
            },
        }
    },
)
async def list_medals(
    student_id: Optional[str] = Query(None, alias="studentId", description="Filter by student id"),
    db: Session = Depends(get_db),
) -> List[MedalDetail]:
    """Return medals, newest first, with the recipient's user and the awarder inlined."""

    medals = medal_service.list_medals(db, student_id=student_id)
    response: List[MedalDetail] = []
    for medal in medals:
        student = medal.student
        response.append(
            MedalDetail(
                id=medal.id,
                student_id=medal.student_id,
                type=medal.type,
                reason=medal.reason,
                awarded_by=medal.awarded_by,
                created_at=medal.created_at,
                student=StudentRead.model_validate(student) if student else None,
                user=UserSummary.model_validate(student.user) if student and student.user else None,
                awarder=UserSummary.model_validate(medal.awarder) if medal.awarder else None,
            )
        )
    return response


@router.post(
    "",
    response_model=MedalRead,
    status_code=status.HTTP_201_CREATED,
    summary="Award a medal",
    responses={
        400: {"description": "Invalid medal data"},
        404: {"description": "Student or awarder not found"},
    },
)
async def award_medal(payload: MedalCreate, db: Session = Depends(get_db)) -> MedalRead:
    """Award a medal, adding one to the student's balance of that tier.

    Example request body::

        {
            "studentId": "9a6e2b1d-3f4c-4e5a-8b7c-6d5e4f3a2b10",
            "type": "gold",
            "reason": "Top score",
            "awardedBy": "0b9f1c52-4c61-4d1e-9a7e-0f3f7d3c2a11"
        }
    """

    try:
        medal = medal_service.award_medal(
            db,
            student_id=payload.student_id,
            medal_type=payload.type,
            reason=payload.reason,
            awarded_by=payload.awarded_by,
        )
        db.commit()
        db.refresh(medal)
        return medal
    except MedalRuleViolation as exc:
        db.rollback()
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc


@router.delete(
    "/{medal_id}",
    response_model=MessageResponse,
    summary="Revoke a medal",
    responses={404: {"description": "Medal not found"}},
)
async def revoke_medal(medal_id: str, db: Session = Depends(get_db)) -> MessageResponse:
    """Delete a medal and take it back from the student's balance."""

    if not medal_service.revoke_medal(db, medal_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Medal not found")
    db.commit()
    return MessageResponse(message="Medal revoked successfully")
