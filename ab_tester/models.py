"""SQLAlchemy models for variants and users.

Table names match the original Postgres schema ("variant" and "user").
"""
import uuid

from sqlalchemy import Column, ForeignKey, Integer, Text, Uuid
from sqlalchemy.orm import relationship

from ab_tester.database import Base


class Variant(Base):
    """Variant model - one arm of an A/B test"""
    __tablename__ = "variant"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    # rollout weight, not validated (no 0-100 range, no sum check)
    percent = Column(Integer, nullable=False)

    users = relationship("User", back_populates="variant")


class User(Base):
    """User model - a participant bound to exactly one variant"""
    __tablename__ = "user"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    # external id supplied by the client, optional
    user_id = Column(Text, nullable=True)
    variant_id = Column(Uuid, ForeignKey("variant.id"), nullable=False, index=True)

    variant = relationship("Variant", back_populates="users")
