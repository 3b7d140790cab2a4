"""Student endpoints."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from ..core.database import get_db
from ..schemas import MessageResponse, StudentCreate, StudentDetail, StudentRead, StudentUpdate
from ..services import student_service
from ..services.student_service import StudentRuleViolation

router = APIRouter(prefix="/students", tags=["students"])

_STUDENT_EXAMPLE = {
    "id": "9a6e2b1d-3f4c-4e5a-8b7c-6d5e4f3a2b10",
    "userId": "2c8d4e6f-1a3b-4c5d-9e8f-7a6b5c4d3e21",
    "studentId": "TIT-2024-001",
    "groupId": "5d0c7f3e-8a0b-4c1e-b3f4-2a9e6f1d7c20",
    "goldMedals": 3,
    "silverMedals": 5,
    "bronzeMedals": 8,
    "createdAt": "2024-09-01T08:00:00",
    "user": {
        "id": "2c8d4e6f-1a3b-4c5d-9e8f-7a6b5c4d3e21",
        "email": "student@mail.com",
        "role": "student",
        "name": "Student User",
    },
    "group": {
        "id": "5d0c7f3e-8a0b-4c1e-b3f4-2a9e6f1d7c20",
        "name": "React Fundamentals",
        "description": "Frontend Development",
        "schedule": "Mon, Wed, Fri - 10:00 AM",
        "capacity": 30,
        "status": "active",
        "createdAt": "2024-09-01T08:00:00",
    },
}


@router.get(
    "",
    response_model=List[StudentDetail],
    summary="List students",
    responses={
        200: {
            "description": "Students with their user and group",
            "content": {"application/json": {"example": [_STUDENT_EXAMPLE]}},
        }
    },
)
async def list_students(db: Session = Depends(get_db)) -> List[StudentDetail]:
    return list(student_service.list_students(db))


@router.get(
    "/current",
    response_model=StudentDetail,
    summary="Student record of a user",
    responses={
        200: {
            "description": "Student with user and group",
            "content": {"application/json": {"example": _STUDENT_EXAMPLE}},
        },
        400: {"description": "User ID required"},
        404: {"description": "Student not found"},
    },
)
async def get_current_student(
    user_id: Optional[str] = Query(None, alias="userId", description="Id of the logged-in user"),
    db: Session = Depends(get_db),
) -> StudentDetail:
    """Resolve the student owned by the given user."""

    if not user_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="User ID required")
    student = student_service.get_student_by_user_id(db, user_id)
    if student is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Student not found")
    return student


@router.post(
    "",
    response_model=StudentRead,
    status_code=status.HTTP_201_CREATED,
    summary="Enrol a student",
    responses={
        400: {"description": "Invalid student data or duplicate student code"},
        404: {"description": "User or group not found"},
    },
)
async def create_student(payload: StudentCreate, db: Session = Depends(get_db)) -> StudentRead:
    """Enrol an existing user as a student.

    Example request body::

        {
            "userId": "2c8d4e6f-1a3b-4c5d-9e8f-7a6b5c4d3e21",
            "studentId": "TIT-2024-002",
            "groupId": "5d0c7f3e-8a0b-4c1e-b3f4-2a9e6f1d7c20"
        }
    """

    try:
        student = student_service.create_student(db, **payload.model_dump())
        db.commit()
        db.refresh(student)
        return student
    except StudentRuleViolation as exc:
        db.rollback()
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc


@router.put(
    "/{student_id}",
    response_model=StudentRead,
    summary="Update a student",
    responses={
        400: {"description": "Invalid update data"},
        404: {"description": "Student, user or group not found"},
    },
)
async def update_student(student_id: str, payload: StudentUpdate, db: Session = Depends(get_db)) -> StudentRead:
    try:
        student = student_service.update_student(db, student_id, payload.model_dump(exclude_unset=True))
    except StudentRuleViolation as exc:
        db.rollback()
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc
    if student is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Student not found")
    db.commit()
    db.refresh(student)
    return student


@router.delete(
    "/{student_id}",
    response_model=MessageResponse,
    summary="Delete a student",
    responses={404: {"description": "Student not found"}},
)
async def delete_student(student_id: str, db: Session = Depends(get_db)) -> MessageResponse:
    """Delete a student together with their attendance, medals and purchases."""

    if not student_service.delete_student(db, student_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Student not found")
    db.commit()
    return MessageResponse(message="Student deleted successfully")
