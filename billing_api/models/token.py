"""Single-use token model."""

from sqlalchemy import Column, DateTime, Enum, ForeignKey, String, func
from sqlalchemy.orm import relationship

from billing_api.database import Base
from billing_api.models.enums import TokenType
from billing_api.models.mixins import UUIDPrimaryKeyMixin, utcnow


class Token(Base, UUIDPrimaryKeyMixin):
    """Token bound to one user and one purpose. The id is the secret handed out."""

    __tablename__ = "tokens"

    type = Column(Enum(TokenType, name="token_type"), nullable=False)
    user_id = Column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    created_at = Column(
        DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False
    )

    # Relationships
    user = relationship("User", back_populates="tokens")
