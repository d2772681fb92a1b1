"""Service tests against the in-memory data store."""

from datetime import UTC, datetime, timedelta
from decimal import Decimal

import pytest

from billing_api.config import Settings
from billing_api.errors import BadRequestError, ConflictError, ErrorKind
from billing_api.models.enums import BillingStatus
from billing_api.schemas.billing import BillingCreate, BillingUpdate
from billing_api.services.accounts import AccountService
from billing_api.services.billing import BillingService
from billing_api.services.security import decode_access_token, verify_password
from tests.fakes import InMemoryDataStore, RecordingRecoveryCodeSender


@pytest.fixture
def store():
    return InMemoryDataStore()


@pytest.fixture
def sender():
    return RecordingRecoveryCodeSender()


@pytest.fixture
def accounts(store, sender):
    return AccountService(
        store, sender, settings=Settings(password_recover_expiration_minutes=30)
    )


@pytest.fixture
def billings(store):
    return BillingService(store)


@pytest.fixture
def alice_id(accounts):
    return accounts.register("alice@example.com", "secret123", "Alice")


def make_billing_data(days_ahead=7, **overrides):
    data = {
        "owner_name": "John Doe",
        "owner_email": "john@example.com",
        "owner_phone": None,
        "date": datetime.now(UTC).date() + timedelta(days=days_ahead),
        "value": Decimal("10.00"),
        "observation": None,
    }
    data.update(overrides)
    return data


class TestAccountService:
    def test_register_hashes_password(self, accounts, store, alice_id):
        user = store.users.get_by_id(alice_id)
        assert user.password_hash != "secret123"
        assert verify_password("secret123", user.password_hash)

    def test_register_duplicate(self, accounts, store, alice_id):
        with pytest.raises(ConflictError) as exc_info:
            accounts.register("alice@example.com", "other123", "Other")
        assert exc_info.value.kind == ErrorKind.CONFLICT
        assert len(store.users.rows) == 1

    def test_login_returns_token_for_user(self, accounts, alice_id):
        token = accounts.authenticate_with_password("alice@example.com", "secret123")
        assert decode_access_token(token)["sub"] == alice_id

    @pytest.mark.parametrize(
        ("email", "password"),
        [("alice@example.com", "wrong"), ("nobody@example.com", "secret123")],
    )
    def test_login_failures_share_message(self, accounts, alice_id, email, password):
        with pytest.raises(BadRequestError, match="Invalid credentials"):
            accounts.authenticate_with_password(email, password)

    def test_login_without_password_hash(self, accounts, store):
        store.users.create(email="sso@example.com", name=None, password_hash=None)
        with pytest.raises(BadRequestError, match="Invalid credentials"):
            accounts.authenticate_with_password("sso@example.com", "anything")

    def test_recover_unknown_email_is_silent(self, accounts, store, sender):
        assert accounts.request_password_recover("nobody@example.com") is None
        assert store.tokens.rows == {}
        assert sender.sent == []

    def test_recover_and_reset(self, accounts, store, sender, alice_id):
        accounts.request_password_recover("alice@example.com")
        code = sender.last_code_for("alice@example.com")
        assert code in store.tokens.rows

        accounts.reset_password(code, "newsecret1")

        user = store.users.get_by_id(alice_id)
        assert verify_password("newsecret1", user.password_hash)
        assert not verify_password("secret123", user.password_hash)
        assert code not in store.tokens.rows

        with pytest.raises(BadRequestError, match="Invalid token"):
            accounts.reset_password(code, "again1234")

    def test_reset_with_expired_token(self, accounts, store, sender, alice_id):
        accounts.request_password_recover("alice@example.com")
        code = sender.last_code_for("alice@example.com")
        store.tokens.rows[code].created_at = datetime.now(UTC) - timedelta(minutes=31)
        before = store.users.get_by_id(alice_id).password_hash

        with pytest.raises(BadRequestError, match="Invalid token"):
            accounts.reset_password(code, "newsecret1")

        assert store.users.get_by_id(alice_id).password_hash == before
        assert code not in store.tokens.rows

    def test_reset_accepts_naive_timestamps(self, accounts, store, sender, alice_id):
        accounts.request_password_recover("alice@example.com")
        code = sender.last_code_for("alice@example.com")
        token = store.tokens.rows[code]
        token.created_at = token.created_at.replace(tzinfo=None)

        accounts.reset_password(code, "newsecret1")
        assert code not in store.tokens.rows

    def test_profile_of_missing_user(self, accounts):
        with pytest.raises(BadRequestError, match="User not found"):
            accounts.get_profile("missing")


class TestBillingService:
    def test_create_starts_pending(self, billings, store, alice_id):
        billing_id = billings.create(alice_id, BillingCreate(**make_billing_data()))
        billing = billings.get(alice_id, billing_id)
        assert billing.status == BillingStatus.PENDING
        assert billing.user_id == alice_id

    def test_create_rejects_past_date(self, billings, store, alice_id):
        with pytest.raises(BadRequestError, match="Date is invalid"):
            billings.create(alice_id, BillingCreate(**make_billing_data(days_ahead=-1)))
        assert store.billings.rows == {}

    def test_create_accepts_today(self, billings, alice_id):
        billings.create(alice_id, BillingCreate(**make_billing_data(days_ahead=0)))

    def test_operations_require_existing_user(self, billings):
        with pytest.raises(BadRequestError, match="User not found"):
            billings.list("missing")
        with pytest.raises(BadRequestError, match="User not found"):
            billings.create("missing", BillingCreate(**make_billing_data()))

    def test_update_overwrites_status(self, billings, alice_id):
        billing_id = billings.create(alice_id, BillingCreate(**make_billing_data()))
        billings.update(
            alice_id,
            billing_id,
            BillingUpdate(**make_billing_data(owner_name="Jane"), status=BillingStatus.EXPIRED),
        )
        billing = billings.get(alice_id, billing_id)
        assert billing.owner_name == "Jane"
        assert billing.status == BillingStatus.EXPIRED

    def test_cross_user_access_is_not_found(self, accounts, billings, alice_id):
        bob_id = accounts.register("bob@example.com", "hunter22", "Bob")
        billing_id = billings.create(alice_id, BillingCreate(**make_billing_data()))

        with pytest.raises(BadRequestError, match="Billing not found"):
            billings.get(bob_id, billing_id)
        with pytest.raises(BadRequestError, match="Billing not found"):
            billings.update(
                bob_id,
                billing_id,
                BillingUpdate(**make_billing_data(), status=BillingStatus.PAID),
            )
        with pytest.raises(BadRequestError, match="Billing not found"):
            billings.delete(bob_id, billing_id)

        assert billings.get(alice_id, billing_id).status == BillingStatus.PENDING
        assert billings.list(bob_id) == []

    def test_delete(self, billings, store, alice_id):
        billing_id = billings.create(alice_id, BillingCreate(**make_billing_data()))
        billings.delete(alice_id, billing_id)
        assert billing_id not in store.billings.rows
