"""Dashboard endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..core.database import get_db
from ..schemas import DashboardStats
from ..services import dashboard_service

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get(
    "/stats",
    response_model=DashboardStats,
    summary="Dashboard counters",
    responses={
        200: {
            "description": "Totals across the school",
            "content": {
                "application/json": {
                    "example": {
                        "totalGroups": 4,
                        "totalStudents": 52,
                        "medalsAwarded": 130,
                        "totalMedals": 130,
                        "totalAttendance": 412,
                        "attendanceRate": "87%",
                    }
                }
            },
        }
    },
)
async def get_dashboard_stats(db: Session = Depends(get_db)) -> DashboardStats:
    return DashboardStats(**dashboard_service.dashboard_stats(db))
