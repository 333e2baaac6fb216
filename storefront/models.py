"""SQLAlchemy models."""
import uuid

from sqlalchemy import Column, DateTime, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.sql import func

from .database import Base


class User(Base):
    """User model."""
    __tablename__ = "users"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    username = Column(String(100), unique=True, nullable=False, index=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    # bcrypt hash of password + BCRYPT_PASSWORD; never serialized.
    password_digest = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
