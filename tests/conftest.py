"""
Pytest configuration for the School CRM.

Provides fixtures for:
- an isolated in-memory store per test (``database`` / ``session``)
- ready-made accounts, a group and an enrolled student
- an HTTP client over an application seeded with the demo data
"""

from __future__ import annotations

from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from school_crm.core.config import Settings
from school_crm.core.database import Database
from school_crm.main import create_app
from school_crm.models import Group, Student, User, UserRole
from school_crm.services import group_service, student_service, user_service

IN_MEMORY_URL = "sqlite+pysqlite:///:memory:"


@pytest.fixture
def database() -> Generator[Database, None, None]:
    db = Database(IN_MEMORY_URL)
    db.create_all()
    yield db
    db.dispose()


@pytest.fixture
def session(database: Database) -> Generator[Session, None, None]:
    db_session = database.session()
    yield db_session
    db_session.close()


@pytest.fixture
def admin(session: Session) -> User:
    return user_service.create_user(
        session,
        email="principal@example.com",
        password="letmein",
        role=UserRole.ADMIN,
        name="Principal Skinner",
    )


@pytest.fixture
def group(session: Session) -> Group:
    return group_service.create_group(session, name="Algebra I", schedule="Tue, Thu - 09:00 AM")


@pytest.fixture
def student(session: Session, group: Group) -> Student:
    user = user_service.create_user(
        session,
        email="lisa@example.com",
        password="saxophone",
        role=UserRole.STUDENT,
        name="Lisa Simpson",
    )
    return student_service.create_student(session, user_id=user.id, student_id="SPR-2024-001", group_id=group.id)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(database_url=IN_MEMORY_URL, seed_demo_data=True, log_level="WARNING")


@pytest.fixture
def client(test_settings: Settings) -> Generator[TestClient, None, None]:
    app = create_app(test_settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_user(client: TestClient) -> dict:
    response = client.post("/api/auth/login", json={"email": "admin@mail.com", "password": "admin123"})
    assert response.status_code == 200
    return response.json()["user"]


@pytest.fixture
def demo_student(client: TestClient) -> dict:
    response = client.get("/api/students")
    assert response.status_code == 200
    return next(s for s in response.json() if s["studentId"] == "TIT-2024-001")


@pytest.fixture
def demo_products(client: TestClient) -> dict:
    response = client.get("/api/products")
    assert response.status_code == 200
    return {product["name"]: product for product in response.json()}
