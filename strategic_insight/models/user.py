"""
User Model - Document owners
"""

from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid

from strategic_insight.database import Base


class User(Base):
    """
    User model

    Attributes:
        id: Unique user identifier (UUID string)
        email: User email (unique, indexed for fast lookup)
        created_at: Registration timestamp

    Relationships:
        documents: User's uploaded documents (one-to-many)
    """

    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    email = Column(String(255), unique=True, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    documents = relationship("Document", back_populates="user")

    def __repr__(self):
        return f"<User(id={self.id}, email={self.email})>"
