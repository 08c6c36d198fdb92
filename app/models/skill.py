from sqlalchemy import Boolean, Column, DateTime, Float, ForeignKey, Integer, JSON, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from datetime import datetime, timezone
import uuid
import enum
from app.core.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SkillCategory(str, enum.Enum):
    TECH = "tech"
    CREATIVE = "creative"
    LANGUAGE = "language"
    BUSINESS = "business"
    OTHER = "other"


class ProficiencyLevel(str, enum.Enum):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    EXPERT = "Expert"


class SkillStatus(str, enum.Enum):
    ACTIVE = "active"
    PAUSED = "paused"
    INACTIVE = "inactive"


class Skill(Base):
    __tablename__ = "skills"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    user_id = Column(UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    title = Column(String(100), nullable=False)
    description = Column(Text, nullable=False)
    category = Column(String(20), nullable=False, default=SkillCategory.OTHER.value, index=True)
    proficiency_level = Column(String(20), nullable=False, default=ProficiencyLevel.INTERMEDIATE.value)
    skills_wanted = Column(JSON, default=list)  # What the owner would like to learn in exchange
    availability = Column(String(100), default="Flexible")
    images = Column(JSON, default=list)
    status = Column(String(20), nullable=False, default=SkillStatus.ACTIVE.value, index=True)

    views = Column(Integer, nullable=False, default=0)
    rating = Column(Float, nullable=False, default=0)  # 0-5
    verified = Column(Boolean, nullable=False, default=False)

    # Timestamps
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, index=True)
    updated_at = Column(DateTime(timezone=True), onupdate=_utcnow)

    # Relationships
    owner = relationship("User", back_populates="skills")

    def __repr__(self):
        return f"<Skill(id={self.id}, title={self.title}, category={self.category})>"
