"""SQLAlchemy models."""

from billing_api.models.billing import Billing
from billing_api.models.token import Token
from billing_api.models.user import User

__all__ = [
    "User",
    "Token",
    "Billing",
]
