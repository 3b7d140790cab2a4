"""SQLAlchemy models for the School CRM."""

from .attendance import Attendance, AttendanceStatus
from .group import Group, GroupStatus
from .medal import Medal, MedalType
from .product import Product
from .purchase import Purchase, PurchaseStatus
from .student import Student
from .user import User, UserRole

__all__ = [
    "Attendance",
    "AttendanceStatus",
    "Group",
    "GroupStatus",
    "Medal",
    "MedalType",
    "Product",
    "Purchase",
    "PurchaseStatus",
    "Student",
    "User",
    "UserRole",
]
