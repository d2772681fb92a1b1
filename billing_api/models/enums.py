"""Enums for model fields."""

from enum import Enum


class TokenType(str, Enum):
    """Purposes a single-use token can authorize."""

    PASSWORD_RECOVER = "PASSWORD_RECOVER"


class BillingStatus(str, Enum):
    """Lifecycle states of a billing."""

    PENDING = "PENDING"
    EXPIRED = "EXPIRED"
    PAID = "PAID"
