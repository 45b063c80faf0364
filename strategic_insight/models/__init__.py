"""
SQLAlchemy Database Models

All models use UUID4 strings as primary key (opaque identifiers).

Models:
    - User: Document owner
    - Document: Uploaded files with storage location
    - DocumentChunk: Fixed-size slices of extracted text
    - ChatMessage: Question/answer history for a document

Relationships:
    User 1:N Document
    Document 1:N DocumentChunk
    Document 1:N ChatMessage

Cascade Deletes:
    - Delete Document → Delete all Chunks and ChatMessages
"""

from strategic_insight.models.user import User
from strategic_insight.models.document import Document
from strategic_insight.models.chunk import DocumentChunk
from strategic_insight.models.chat_message import ChatMessage, MessageType

__all__ = ["User", "Document", "DocumentChunk", "ChatMessage", "MessageType"]
