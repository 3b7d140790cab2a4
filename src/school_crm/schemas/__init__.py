"""Public schema exports."""

from .attendance import AttendanceCreate, AttendanceRead, AttendanceUpdate
from .auth import LoginRequest, LoginResponse, UserSummary
from .base import MessageResponse
from .dashboard import DashboardStats
from .group import GroupCreate, GroupRead, GroupUpdate
from .medal import MedalCreate, MedalDetail, MedalRead
from .product import ProductCreate, ProductRead, ProductUpdate
from .purchase import PurchaseCreate, PurchaseRead
from .student import StudentCreate, StudentDetail, StudentRead, StudentUpdate

__all__ = [
	"AttendanceCreate",
	"AttendanceRead",
	"AttendanceUpdate",
	"DashboardStats",
	"GroupCreate",
	"GroupRead",
	"GroupUpdate",
	"LoginRequest",
	"LoginResponse",
	"MedalCreate",
	"MedalDetail",
	"MedalRead",
	"MessageResponse",
	"ProductCreate",
	"ProductRead",
	"ProductUpdate",
	"PurchaseCreate",
	"PurchaseRead",
	"StudentCreate",
	"StudentDetail",
	"StudentRead",
	"StudentUpdate",
	"UserSummary",
]
