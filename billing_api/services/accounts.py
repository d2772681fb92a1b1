"""Account registration, login and password recovery."""

import logging
from datetime import UTC, datetime, timedelta

from billing_api.config import Settings, get_settings
from billing_api.errors import BadRequestError, ConflictError
from billing_api.models.enums import TokenType
from billing_api.models.token import Token
from billing_api.models.user import User
from billing_api.repositories import DataStore
from billing_api.services.recovery import LoggingRecoveryCodeSender, RecoveryCodeSender
from billing_api.services.security import (
    create_access_token,
    dummy_verify,
    get_password_hash,
    verify_password,
)

logger = logging.getLogger(__name__)


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


class AccountService:
    """Service for account and credential operations."""

    def __init__(
        self,
        store: DataStore,
        sender: RecoveryCodeSender | None = None,
        settings: Settings | None = None,
    ):
        self.store = store
        self.sender = sender or LoggingRecoveryCodeSender()
        self.settings = settings or get_settings()

    def register(self, email: str, password: str, name: str | None) -> str:
        """Create an account and return its id."""
        if self.store.users.get_by_email(email):
            raise ConflictError("User with same email already exists")

        user = self.store.users.create(
            email=email, name=name, password_hash=get_password_hash(password)
        )
        self.store.commit()
        logger.info(f"Registered user {user.id}")
        return user.id

    def authenticate_with_password(self, email: str, password: str) -> str:
        """Check credentials and return a signed bearer token.

        Every failure produces the same error so callers cannot tell an unknown
        email from a wrong password or an account without a local password.
        """
        user = self.store.users.get_by_email(email)

        if user is None or user.password_hash is None:
            dummy_verify()
            logger.warning("Rejected password login")
            raise BadRequestError("Invalid credentials")

        if not verify_password(password, user.password_hash):
            logger.warning(f"Rejected password login for user {user.id}")
            raise BadRequestError("Invalid credentials")

        return create_access_token(user.id)

    def get_profile(self, user_id: str) -> User:
        """Return the user behind an authenticated identity."""
        user = self.store.users.get_by_id(user_id)
        if user is None:
            raise BadRequestError("User not found")
        return user

    def request_password_recover(self, email: str) -> None:
        """Issue a recovery code if the email belongs to a user.

        Returns nothing either way so the endpoint does not reveal which emails
        are registered.
        """
        user = self.store.users.get_by_email(email)
        if user is None:
            return

        token = self.store.tokens.create(user_id=user.id, type=TokenType.PASSWORD_RECOVER)
        self.store.commit()
        self.sender.send(user, token.id)

    def reset_password(self, token_id: str, password: str) -> None:
        """Set a new password using a recovery code, consuming the code."""
        token = self.store.tokens.get(token_id)

        if token is None or token.type != TokenType.PASSWORD_RECOVER:
            logger.warning("Rejected password reset with unknown token")
            raise BadRequestError("Invalid token")

        if self._is_expired(token):
            self.store.tokens.delete(token)
            self.store.commit()
            logger.warning(f"Rejected password reset with expired token for user {token.user_id}")
            raise BadRequestError("Invalid token")

        user = self.store.users.get_by_id(token.user_id)
        if user is None:
            raise BadRequestError("Invalid token")

        self.store.users.set_password_hash(user, get_password_hash(password))
        self.store.tokens.delete(token)
        self.store.commit()
        logger.info(f"Password reset for user {user.id}")

    def _is_expired(self, token: Token) -> bool:
        lifetime = timedelta(minutes=self.settings.password_recover_expiration_minutes)
        return _as_utc(token.created_at) + lifetime <= datetime.now(UTC)
