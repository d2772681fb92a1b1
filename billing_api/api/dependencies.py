"""FastAPI dependencies for authentication, data access and services."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from billing_api.database import get_db
from billing_api.errors import UnauthorizedError
from billing_api.repositories import DataStore, SqlAlchemyDataStore
from billing_api.services.accounts import AccountService
from billing_api.services.billing import BillingService
from billing_api.services.recovery import LoggingRecoveryCodeSender, RecoveryCodeSender
from billing_api.services.security import decode_access_token

security = HTTPBearer(scheme_name="bearerAuth", auto_error=False)


def get_current_user_id(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> str:
    """Verify the bearer token and return the user id it was issued for.

    Only the signature and expiry are checked here; whether the user still
    exists is up to the service handling the request.
    """
    if credentials is None:
        raise UnauthorizedError("Invalid auth token")

    payload = decode_access_token(credentials.credentials)
    if payload is None:
        raise UnauthorizedError("Invalid auth token")

    user_id = payload.get("sub")
    if not isinstance(user_id, str) or not user_id:
        raise UnauthorizedError("Invalid auth token")

    return user_id


CurrentUserId = Annotated[str, Depends(get_current_user_id)]


def get_store(db: Annotated[Session, Depends(get_db)]) -> DataStore:
    """Get the data store bound to the request's session."""
    return SqlAlchemyDataStore(db)


def get_recovery_code_sender() -> RecoveryCodeSender:
    """Get the channel used to deliver password recovery codes."""
    return LoggingRecoveryCodeSender()


def get_account_service(
    store: Annotated[DataStore, Depends(get_store)],
    sender: Annotated[RecoveryCodeSender, Depends(get_recovery_code_sender)],
) -> AccountService:
    """Get account service with dependencies."""
    return AccountService(store, sender)


def get_billing_service(
    store: Annotated[DataStore, Depends(get_store)],
) -> BillingService:
    """Get billing service with dependencies."""
    return BillingService(store)
