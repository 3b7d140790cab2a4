"""Authentication endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ..core.database import get_db
from ..schemas import LoginRequest, LoginResponse, MessageResponse, UserSummary
from ..services import user_service
from ..services.user_service import UserRuleViolation

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Log in with email and password",
    responses={
        200: {
            "description": "Credentials accepted",
            "content": {
                "application/json": {
                    "example": {
                        "user": {
                            "id": "0b9f1c52-4c61-4d1e-9a7e-0f3f7d3c2a11",
                            "email": "admin@mail.com",
                            "role": "admin",
                            "name": "Admin User",
                        }
                    }
                }
            },
        },
        400: {"description": "Malformed request body"},
        401: {"description": "Invalid credentials"},
    },
)
async def login(payload: LoginRequest, db: Session = Depends(get_db)) -> LoginResponse:
    """Check credentials and return the user's public profile.

    No session or token is issued; clients keep the returned user themselves.
    """

    try:
        user = user_service.authenticate(db, email=payload.email, password=payload.password)
    except UserRuleViolation as exc:
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc
    return LoginResponse(user=UserSummary.model_validate(user))


@router.post("/logout", response_model=MessageResponse, summary="Log out")
async def logout() -> MessageResponse:
    return MessageResponse(message="Logged out successfully")
