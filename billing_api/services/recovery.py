"""Delivery of password recovery codes."""

import logging
from typing import Protocol

from billing_api.config import Settings, get_settings
from billing_api.models.user import User

logger = logging.getLogger(__name__)


class RecoveryCodeSender(Protocol):
    def send(self, user: User, code: str) -> None: ...


class LoggingRecoveryCodeSender:
    """Writes recovery codes to the server log.

    Only suitable for development: outside it the code is withheld and a real
    sender (email, SMS) has to be injected through ``get_recovery_code_sender``.
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()

    def send(self, user: User, code: str) -> None:
        if self.settings.is_development:
            logger.info(f"Recover password code for user {user.id}: {code}")
        else:
            logger.warning(
                f"Recover password code issued for user {user.id} but no delivery channel "
                "is configured"
            )
