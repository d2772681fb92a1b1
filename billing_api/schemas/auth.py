"""Authentication schemas."""

from typing import Annotated

from pydantic import AfterValidator, EmailStr, Field

from billing_api.schemas.base import CamelModel
from billing_api.services.security import MAX_PASSWORD_BYTES


def _check_password_bytes(value: str) -> str:
    # bcrypt only hashes the first 72 bytes
    if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
    return value


NewPassword = Annotated[
    str, Field(min_length=6, max_length=128), AfterValidator(_check_password_bytes)
]


class AccountCreate(CamelModel):
    """Account registration request."""

    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr = Field(..., max_length=255)
    password: NewPassword


class AccountCreatedResponse(CamelModel):
    """Identifier of a newly registered account."""

    user_id: str


class PasswordLogin(CamelModel):
    """Password login request."""

    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=1, max_length=128)


class TokenResponse(CamelModel):
    """Signed bearer token."""

    token: str


class ProfileUser(CamelModel):
    """Public profile of a user."""

    id: str
    name: str | None
    email: str
    avatar_url: str | None = None


class ProfileResponse(CamelModel):
    """Profile response."""

    user: ProfileUser


class PasswordRecoverRequest(CamelModel):
    """Request a password recovery code."""

    email: EmailStr = Field(..., max_length=255)


class PasswordReset(CamelModel):
    """Reset a password with a recovery code."""

    token: str = Field(..., min_length=1, max_length=64)
    password: NewPassword
