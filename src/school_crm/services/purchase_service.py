"""Domain logic for marketplace purchases."""

from __future__ import annotations

import logging
from typing import Dict, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..models import Product, Purchase, PurchaseStatus, Student
from .common import RuleViolation

logger = logging.getLogger(__name__)

# spend column -> balance column it draws from
_CURRENCIES = {
    "gold_spent": "gold_medals",
    "silver_spent": "silver_medals",
    "bronze_spent": "bronze_medals",
}


class PurchaseRuleViolation(RuleViolation):
    """Raised when purchase rules are violated."""


class InsufficientMedals(PurchaseRuleViolation):
    """Raised when a purchase would overdraw any medal balance.

    ``shortfall`` maps each overdrawn spend field to the missing amount.
    """

    def __init__(self, shortfall: Dict[str, int]) -> None:
        super().__init__("Insufficient medals")
        self.shortfall = shortfall


def _ensure_student(session: Session, student_id: str) -> Student:
    stmt = select(Student).where(Student.id == student_id).with_for_update()
    student = session.execute(stmt).scalar_one_or_none()
    if student is None:
        raise PurchaseRuleViolation("Student not found", status_code=404)
    return student


def _ensure_product(session: Session, product_id: str) -> Product:
    product = session.get(Product, product_id)
    if product is None:
        raise PurchaseRuleViolation("Product not found", status_code=404)
    return product


def list_purchases(session: Session, *, student_id: Optional[str] = None) -> Sequence[Purchase]:
    stmt = select(Purchase).order_by(Purchase.created_at.desc())
    if student_id:
        stmt = stmt.where(Purchase.student_id == student_id)
    return session.execute(stmt).scalars().all()


def create_purchase(
    session: Session,
    *,
    student_id: str,
    product_id: str,
    gold_spent: Optional[int] = None,
    silver_spent: Optional[int] = None,
    bronze_spent: Optional[int] = None,
    status: PurchaseStatus = PurchaseStatus.COMPLETED,
) -> Purchase:
    """Spend medals on a product.

    The spend is always the product's current price. Amounts passed by the
    caller are only accepted when they match that price. The purchase is
    refused as a whole when any balance is smaller than its spend.
    """

    student = _ensure_student(session, student_id)
    product = _ensure_product(session, product_id)
    if not product.in_stock:
        raise PurchaseRuleViolation("Product out of stock")

    spend = {
        "gold_spent": product.gold_price or 0,
        "silver_spent": product.silver_price or 0,
        "bronze_spent": product.bronze_price or 0,
    }
    requested = {"gold_spent": gold_spent, "silver_spent": silver_spent, "bronze_spent": bronze_spent}
    if any(amount is not None and amount != spend[field] for field, amount in requested.items()):
        raise PurchaseRuleViolation("Spend does not match product price")

    shortfall = {}
    for spend_field, balance_field in _CURRENCIES.items():
        balance = getattr(student, balance_field) or 0
        if spend[spend_field] > balance:
            shortfall[spend_field] = spend[spend_field] - balance
    if shortfall:
        logger.info("purchase of %s refused for student %s: short %s", product.id, student.id, shortfall)
        raise InsufficientMedals(shortfall)

    purchase = Purchase(student=student, product=product, status=status, **spend)
    session.add(purchase)

    for spend_field, balance_field in _CURRENCIES.items():
        setattr(student, balance_field, (getattr(student, balance_field) or 0) - spend[spend_field])
    session.flush()

    logger.info(
        "student %s bought %s for %d/%d/%d medals",
        student.id,
        product.id,
        spend["gold_spent"],
        spend["silver_spent"],
        spend["bronze_spent"],
    )
    return purchase
