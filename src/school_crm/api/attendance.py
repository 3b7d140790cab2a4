"""Attendance endpoints."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from ..core.database import get_db
from ..schemas import AttendanceCreate, AttendanceRead, AttendanceUpdate
from ..services import attendance_service
from ..services.attendance_service import AttendanceRuleViolation

router = APIRouter(prefix="/attendance", tags=["attendance"])


@router.get("", response_model=List[AttendanceRead], summary="List attendance records")
async def list_attendance(
    *,
    student_id: Optional[str] = Query(None, alias="studentId", description="Filter by student id"),
    group_id: Optional[str] = Query(None, alias="groupId", description="Filter by group id"),
    db: Session = Depends(get_db),
) -> List[AttendanceRead]:
    """Return records for a student, or for a group when no student is given."""

    return list(attendance_service.list_attendance(db, student_id=student_id, group_id=group_id))


@router.post(
    "",
    response_model=AttendanceRead,
    status_code=status.HTTP_201_CREATED,
    summary="Record attendance",
    responses={
        400: {"description": "Invalid attendance data"},
        404: {"description": "Student or group not found"},
    },
)
async def create_attendance(payload: AttendanceCreate, db: Session = Depends(get_db)) -> AttendanceRead:
    """Mark a student present, absent or late for a group session.

    Example request body::

        {
            "studentId": "9a6e2b1d-3f4c-4e5a-8b7c-6d5e4f3a2b10",
            "groupId": "5d0c7f3e-8a0b-4c1e-b3f4-2a9e6f1d7c20",
            "date": "2024-09-02T10:00:00",
            "status": "late",
            "notes": "Bus delay"
        }
    """

    try:
        record = attendance_service.create_attendance(db, **payload.model_dump())
        db.commit()
        db.refresh(record)
        return record
    except AttendanceRuleViolation as exc:
        db.rollback()
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc


@router.put(
    "/{attendance_id}",
    response_model=AttendanceRead,
    summary="Update an attendance record",
    responses={404: {"description": "Record, student or group not found"}},
)
async def update_attendance(
    attendance_id: str,
    payload: AttendanceUpdate,
    db: Session = Depends(get_db),
) -> AttendanceRead:
    try:
        record = attendance_service.update_attendance(db, attendance_id, payload.model_dump(exclude_unset=True))
    except AttendanceRuleViolation as exc:
        db.rollback()
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc
    if record is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Attendance record not found")
    db.commit()
    db.refresh(record)
    return record
