from datetime import datetime, timezone
from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Index, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
import uuid
import enum
from app.core.database import Base


class SwapRequestStatus(str, enum.Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    DECLINED = "declined"
    COMPLETED = "completed"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SwapRequest(Base):
    __tablename__ = "swap_requests"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    sender_id = Column(UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    receiver_id = Column(UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    # Proposed trade; free text, not interpreted by the lifecycle
    skill_offered = Column(String(200), nullable=False)
    skill_wanted = Column(String(200), nullable=False)
    message = Column(Text)
    scheduled_date = Column(DateTime(timezone=True), nullable=True)

    status = Column(String(20), nullable=False, default=SwapRequestStatus.PENDING.value, index=True)
    # Values: pending, accepted, declined, completed. Never returns to pending.

    # Timestamps (set in Python so ordering has sub-second resolution)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, index=True)
    responded_at = Column(DateTime(timezone=True), nullable=True)
    # Set once, by accept or decline
    updated_at = Column(DateTime(timezone=True), onupdate=_utcnow)

    # Relationships
    sender = relationship("User", foreign_keys=[sender_id])
    receiver = relationship("User", foreign_keys=[receiver_id])

    __table_args__ = (
        CheckConstraint("sender_id <> receiver_id", name="ck_swap_request_distinct_parties"),
        Index("ix_swap_requests_pair_status", "sender_id", "receiver_id", "status"),
    )

    def is_party(self, user_id: uuid.UUID) -> bool:
        return user_id in (self.sender_id, self.receiver_id)

    def other_party(self, user_id: uuid.UUID) -> uuid.UUID:
        return self.receiver_id if user_id == self.sender_id else self.sender_id

    def __repr__(self):
        return f"<SwapRequest(id={self.id}, sender_id={self.sender_id}, receiver_id={self.receiver_id}, status={self.status})>"
