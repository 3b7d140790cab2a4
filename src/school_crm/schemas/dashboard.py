"""Dashboard response schema."""

from pydantic import Field

from .base import CamelModel


class DashboardStats(CamelModel):
    """Headline counters for the admin dashboard."""

    total_groups: int = Field(..., ge=0)
    total_students: int = Field(..., ge=0)
    medals_awarded: int = Field(..., ge=0)
    total_medals: int = Field(..., ge=0)
    total_attendance: int = Field(..., ge=0)
    attendance_rate: str = Field(..., description="Share of present records, e.g. '75%'.")
