"""Demo data loaded into a fresh store."""

from __future__ import annotations

import logging

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from ..models import User, UserRole
from . import group_service, product_service, student_service, user_service

logger = logging.getLogger(__name__)

DEMO_PRODUCTS = (
    {
        "name": "MacBook Pro",
        "description": "High-performance laptop for development",
        "image": "https://images.unsplash.com/photo-1496181133206-80ce9b88a853?auto=format&fit=crop&w=400&h=250",
        "gold_price": 50,
    },
    {
        "name": "Wireless Mouse & Keyboard",
        "description": "Premium wireless peripherals set",
        "image": "https://images.unsplash.com/photo-1527864550417-7fd91fc51a46?auto=format&fit=crop&w=400&h=250",
        "silver_price": 15,
    },
    {
        "name": "Programming Books Set",
        "description": "Essential programming literature collection",
        "image": "https://images.unsplash.com/photo-1481627834876-b7833e8f5570?auto=format&fit=crop&w=400&h=250",
        "bronze_price": 8,
    },
)


def seed_demo_data(session: Session) -> bool:
    """Populate an empty store with demo accounts, a group and products.

    Returns ``False`` without touching anything when users already exist.
    """

    if session.execute(select(func.count(User.id))).scalar_one():
        return False

    user_service.create_user(
        session,
        email="admin@mail.com",
        password="admin123",
        role=UserRole.ADMIN,
        name="Admin User",
    )
    student_user = user_service.create_user(
        session,
        email="student@mail.com",
        password="student123",
        role=UserRole.STUDENT,
        name="Student User",
    )
    group = group_service.create_group(
        session,
        name="React Fundamentals",
        description="Frontend Development",
        schedule="Mon, Wed, Fri - 10:00 AM",
    )
    student_service.create_student(
        session,
        user_id=student_user.id,
        student_id="TIT-2024-001",
        group_id=group.id,
        gold_medals=3,
        silver_medals=5,
        bronze_medals=8,
    )
    for product in DEMO_PRODUCTS:
        product_service.create_product(session, **product)

    logger.info("demo data seeded")
    return True
