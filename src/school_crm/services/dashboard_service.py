"""Dashboard aggregation services."""

from __future__ import annotations

import math
from typing import Dict, Union

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from ..models import Attendance, AttendanceStatus, Group, Medal, Student


def attendance_rate(present: int, total: int) -> int:
    """Percentage of present records, rounded half up; zero when nothing is recorded."""

    if total <= 0:
        return 0
    return math.floor(100 * present / total + 0.5)


def dashboard_stats(session: Session) -> Dict[str, Union[int, str]]:
    """Return headline counters across groups, students, medals and attendance."""

    def _count(stmt) -> int:
        return int(session.execute(stmt).scalar_one() or 0)

    total_groups = _count(select(func.count(Group.id)))
    total_students = _count(select(func.count(Student.id)))
    total_medals = _count(select(func.count(Medal.id)))
    total_attendance = _count(select(func.count(Attendance.id)))
    present = _count(
        select(func.count(Attendance.id)).where(Attendance.status == AttendanceStatus.PRESENT)
    )

    return {
        "total_groups": total_groups,
        "total_students": total_students,
        "medals_awarded": total_medals,
        "total_medals": total_medals,
        "total_attendance": total_attendance,
        "attendance_rate": f"{attendance_rate(present, total_attendance)}%",
    }
