"""Pydantic schemas for authentication endpoints."""

from pydantic import Field

from ..models import UserRole
from .base import CamelModel


class LoginRequest(CamelModel):
    """Credentials submitted by the login form.

    The email only needs the ``local@domain`` shape; any address that is not
    on file is answered with 401 by the credential check.
    """

    email: str = Field(..., min_length=3, pattern=r"^[^@\s]+@[^@\s]+$")
    password: str = Field(..., min_length=1)


class UserSummary(CamelModel):
    """Public projection of a user; never carries the password."""

    id: str
    email: str
    role: UserRole
    name: str


class LoginResponse(CamelModel):
    user: UserSummary
