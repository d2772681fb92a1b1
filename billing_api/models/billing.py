"""Billing model."""

from sqlalchemy import Column, Date, Enum, ForeignKey, Numeric, String, Text
from sqlalchemy.orm import relationship

from billing_api.database import Base
from billing_api.models.enums import BillingStatus
from billing_api.models.mixins import TimestampMixin, UUIDPrimaryKeyMixin


class Billing(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """A charge owned by a single user."""

    __tablename__ = "billings"

    user_id = Column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    owner_name = Column(String(255), nullable=False)
    owner_email = Column(String(255), nullable=False)
    owner_phone = Column(String(50), nullable=True)
    date = Column(Date, nullable=False)
    value = Column(Numeric(12, 2), nullable=False)
    observation = Column(Text, nullable=True)
    status = Column(
        Enum(BillingStatus, name="billing_status"),
        nullable=False,
        default=BillingStatus.PENDING,
    )

    # Relationships
    user = relationship("User", back_populates="billings")
