"""Service layer exports."""

from . import (
	attendance_service,
	dashboard_service,
	group_service,
	medal_service,
	product_service,
	purchase_service,
	seed_service,
	student_service,
	user_service,
)

__all__ = [
	"attendance_service",
	"dashboard_service",
	"group_service",
	"medal_service",
	"product_service",
	"purchase_service",
	"seed_service",
	"student_service",
	"user_service",
]
