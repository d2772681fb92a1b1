"""Billing service scoped to the authenticated user."""

import logging
from collections.abc import Sequence
from datetime import UTC, date, datetime

from billing_api.errors import BadRequestError
from billing_api.models.billing import Billing
from billing_api.models.enums import BillingStatus
from billing_api.models.user import User
from billing_api.repositories import DataStore
from billing_api.schemas.billing import BillingCreate, BillingUpdate

logger = logging.getLogger(__name__)


def is_past(value: date) -> bool:
    """Check whether a date lies before today (UTC)."""
    return value < datetime.now(UTC).date()


class BillingService:
    """CRUD over billings. Every lookup is filtered by the owner's id."""

    def __init__(self, store: DataStore):
        self.store = store

    def _get_user(self, user_id: str) -> User:
        # A valid token can outlive its account
        user = self.store.users.get_by_id(user_id)
        if user is None:
            raise BadRequestError("User not found")
        return user

    def _get_billing(self, user_id: str, billing_id: str) -> Billing:
        billing = self.store.billings.get_for_user(billing_id, user_id)
        if billing is None:
            raise BadRequestError("Billing not found")
        return billing

    def create(self, user_id: str, data: BillingCreate) -> str:
        """Create a pending billing and return its id."""
        self._get_user(user_id)

        if is_past(data.date):
            raise BadRequestError("Date is invalid")

        billing = self.store.billings.create(
            user_id,
            owner_name=data.owner_name,
            owner_email=data.owner_email,
            owner_phone=data.owner_phone,
            date=data.date,
            value=data.value,
            observation=data.observation,
            status=BillingStatus.PENDING,
        )
        self.store.commit()
        logger.info(f"Created billing {billing.id} for user {user_id}")
        return billing.id

    def list(self, user_id: str) -> Sequence[Billing]:
        """Get all billings of a user."""
        self._get_user(user_id)
        return self.store.billings.list_for_user(user_id)

    def get(self, user_id: str, billing_id: str) -> Billing:
        """Get one billing owned by the user."""
        self._get_user(user_id)
        return self._get_billing(user_id, billing_id)

    def update(self, user_id: str, billing_id: str, data: BillingUpdate) -> None:
        """Overwrite every field of a billing, status included."""
        self._get_user(user_id)

        if is_past(data.date):
            raise BadRequestError("Date is invalid")

        billing = self._get_billing(user_id, billing_id)

        # TODO: add a version column so concurrent updates cannot silently overwrite each other
        self.store.billings.update(
            billing,
            owner_name=data.owner_name,
            owner_email=data.owner_email,
            owner_phone=data.owner_phone,
            date=data.date,
            value=data.value,
            observation=data.observation,
            status=data.status,
        )
        self.store.commit()
        logger.info(f"Updated billing {billing.id}")

    def delete(self, user_id: str, billing_id: str) -> None:
        """Delete a billing owned by the user."""
        self._get_user(user_id)
        billing = self._get_billing(user_id, billing_id)
        self.store.billings.delete(billing)
        self.store.commit()
        logger.info(f"Deleted billing {billing_id}")
