"""
Document Model - Uploaded files and their storage location
"""

from sqlalchemy import Column, String, Integer, ForeignKey, DateTime
from sqlalchemy.orm import relationship
from datetime import datetime, timezone
import uuid

from strategic_insight.database import Base


class Document(Base):
    """
    Document model - uploaded file with metadata

    Attributes:
        id: Unique document identifier (UUID string)
        user_id: Foreign key to users table
        file_name: Original filename as uploaded
        storage_path: Handle returned by the storage backend
        content_type: MIME type derived from the file extension
        size_bytes: Uploaded file size in bytes
        uploaded_at: Upload timestamp

    Relationships:
        user: Document owner (many-to-one)
        chunks: Extracted text chunks (one-to-many, cascade delete)
        messages: Chat history (one-to-many, cascade delete)

    Cascade Delete:
        - Deleting a document deletes all its chunks and chat messages
        - The stored file is removed separately by the API layer
    """

    __tablename__ = "documents"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    # File metadata
    file_name = Column(String(512), nullable=False)
    storage_path = Column(String(1024), nullable=False)
    content_type = Column(String(255))
    size_bytes = Column(Integer)

    uploaded_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), index=True)

    # Relationships
    user = relationship("User", back_populates="documents")
    chunks = relationship(
        "DocumentChunk",
        back_populates="document",
        cascade="all, delete-orphan",
        order_by="DocumentChunk.chunk_index"
    )
    messages = relationship("ChatMessage", back_populates="document", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Document(id={self.id}, file_name={self.file_name})>"
