"""Data access for users, tokens and billings.

Services depend on the ``DataStore`` protocol rather than on a session, so the
SQLAlchemy-backed store used in production can be swapped for an in-memory one.
Writes are staged by the repositories and made durable by ``DataStore.commit``.
"""

from collections.abc import Sequence
from typing import Any, Protocol

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from billing_api.errors import ConflictError
from billing_api.models.billing import Billing
from billing_api.models.enums import TokenType
from billing_api.models.token import Token
from billing_api.models.user import User


class UserRepository(Protocol):
    def get_by_id(self, user_id: str) -> User | None: ...

    def get_by_email(self, email: str) -> User | None: ...

    def create(self, email: str, name: str | None, password_hash: str | None) -> User: ...

    def set_password_hash(self, user: User, password_hash: str) -> None: ...


class TokenRepository(Protocol):
    def create(self, user_id: str, type: TokenType) -> Token: ...

    def get(self, token_id: str) -> Token | None: ...

    def delete(self, token: Token) -> None: ...


class BillingRepository(Protocol):
    def create(self, user_id: str, **fields: Any) -> Billing: ...

    def list_for_user(self, user_id: str) -> Sequence[Billing]: ...

    def get_for_user(self, billing_id: str, user_id: str) -> Billing | None: ...

    def update(self, billing: Billing, **fields: Any) -> None: ...

    def delete(self, billing: Billing) -> None: ...


class DataStore(Protocol):
    users: UserRepository
    tokens: TokenRepository
    billings: BillingRepository

    def commit(self) -> None: ...


class SqlAlchemyUserRepository:
    """Users stored in the relational database."""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, user_id: str) -> User | None:
        return self.db.query(User).filter(User.id == user_id).first()

    def get_by_email(self, email: str) -> User | None:
        return self.db.query(User).filter(User.email == email).first()

    def create(self, email: str, name: str | None, password_hash: str | None) -> User:
        user = User(email=email, name=name, password_hash=password_hash)
        self.db.add(user)
        try:
            self.db.flush()
        except IntegrityError as e:
            # Lost a race against a concurrent registration with the same email
            self.db.rollback()
            raise ConflictError("User with same email already exists") from e
        return user

    def set_password_hash(self, user: User, password_hash: str) -> None:
        user.password_hash = password_hash


class SqlAlchemyTokenRepository:
    """Single-use tokens stored in the relational database."""

    def __init__(self, db: Session):
        self.db = db

    def create(self, user_id: str, type: TokenType) -> Token:
        token = Token(user_id=user_id, type=type)
        self.db.add(token)
        self.db.flush()
        return token

    def get(self, token_id: str) -> Token | None:
        return self.db.query(Token).filter(Token.id == token_id).first()

    def delete(self, token: Token) -> None:
        self.db.delete(token)


class SqlAlchemyBillingRepository:
    """Billings stored in the relational database, always scoped by owner."""

    def __init__(self, db: Session):
        self.db = db

    def create(self, user_id: str, **fields: Any) -> Billing:
        billing = Billing(user_id=user_id, **fields)
        self.db.add(billing)
        self.db.flush()
        return billing

    def list_for_user(self, user_id: str) -> Sequence[Billing]:
        return (
            self.db.query(Billing)
            .filter(Billing.user_id == user_id)
            .order_by(Billing.date, Billing.created_at)
            .all()
        )

    def get_for_user(self, billing_id: str, user_id: str) -> Billing | None:
        return (
            self.db.query(Billing)
            .filter(Billing.id == billing_id, Billing.user_id == user_id)
            .first()
        )

    def update(self, billing: Billing, **fields: Any) -> None:
        for name, value in fields.items():
            setattr(billing, name, value)

    def delete(self, billing: Billing) -> None:
        self.db.delete(billing)


class SqlAlchemyDataStore:
    """All repositories sharing one session, and therefore one transaction."""

    def __init__(self, db: Session):
        self.db = db
        self.users = SqlAlchemyUserRepository(db)
        self.tokens = SqlAlchemyTokenRepository(db)
        self.billings = SqlAlchemyBillingRepository(db)

    def commit(self) -> None:
        self.db.commit()
