"""User model."""

from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from billing_api.database import Base
from billing_api.models.mixins import TimestampMixin, UUIDPrimaryKeyMixin


class User(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """User model for authentication and ownership."""

    __tablename__ = "users"

    email = Column(String(255), unique=True, nullable=False, index=True)
    name = Column(String(255), nullable=True)
    # Null for accounts provisioned by an external identity provider
    password_hash = Column(String(255), nullable=True)
    avatar_url = Column(String(2048), nullable=True)

    # Relationships
    tokens = relationship("Token", back_populates="user", passive_deletes=True)
    billings = relationship("Billing", back_populates="user", passive_deletes=True)
