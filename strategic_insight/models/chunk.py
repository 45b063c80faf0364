"""
DocumentChunk Model - Fixed-size slices of a document's extracted text
"""

from sqlalchemy import Column, String, Text, Integer, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
import uuid

from strategic_insight.database import Base


class DocumentChunk(Base):
    """
    Document chunk model

    Attributes:
        id: Unique chunk identifier (UUID string)
        document_id: Foreign key to documents table
        chunk_index: Sequential index within document (0-based, contiguous)
        content: Chunk text (at most CHUNK_SIZE characters)

    Uniqueness:
        - (document_id, chunk_index) is unique per document

    Joining all chunks of a document in chunk_index order gives back
    the extracted text exactly.
    """

    __tablename__ = "document_chunks"
    __table_args__ = (
        UniqueConstraint("document_id", "chunk_index", name="uq_document_chunk_index"),
    )

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    document_id = Column(String(36), ForeignKey("documents.id", ondelete="CASCADE"), nullable=False, index=True)

    chunk_index = Column(Integer, nullable=False)
    content = Column(Text, nullable=False)

    # Relationships
    document = relationship("Document", back_populates="chunks")

    def __repr__(self):
        return f"<DocumentChunk(id={self.id}, document_id={self.document_id}, chunk_index={self.chunk_index})>"
