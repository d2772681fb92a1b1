"""Pydantic schemas for API requests and responses."""

from billing_api.schemas.auth import (
    AccountCreate,
    AccountCreatedResponse,
    PasswordLogin,
    PasswordRecoverRequest,
    PasswordReset,
    ProfileResponse,
    ProfileUser,
    TokenResponse,
)
from billing_api.schemas.billing import (
    BillingCreate,
    BillingCreatedResponse,
    BillingDetailResponse,
    BillingListResponse,
    BillingResponse,
    BillingUpdate,
)

__all__ = [
    "AccountCreate",
    "AccountCreatedResponse",
    "PasswordLogin",
    "TokenResponse",
    "ProfileUser",
    "ProfileResponse",
    "PasswordRecoverRequest",
    "PasswordReset",
    "BillingCreate",
    "BillingUpdate",
    "BillingResponse",
    "BillingCreatedResponse",
    "BillingDetailResponse",
    "BillingListResponse",
]
