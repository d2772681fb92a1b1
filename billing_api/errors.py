"""Service-level errors.

Services raise these instead of HTTP exceptions; the API layer maps each
``ErrorKind`` to a status code in one place (see ``billing_api.main``).
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Categories of request-scoped failures."""

    BAD_REQUEST = "bad_request"
    CONFLICT = "conflict"
    UNAUTHORIZED = "unauthorized"


class ServiceError(Exception):
    """Base error carrying a kind and a client-safe message."""

    kind: ErrorKind = ErrorKind.BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequestError(ServiceError):
    """Invalid input, invalid token, or a resource that is missing or not owned."""

    kind = ErrorKind.BAD_REQUEST


class ConflictError(ServiceError):
    """A unique resource already exists."""

    kind = ErrorKind.CONFLICT


class UnauthorizedError(ServiceError):
    """Missing, malformed or expired bearer token."""

    kind = ErrorKind.UNAUTHORIZED
