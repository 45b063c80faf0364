"""
ChatMessage Model - Question/answer history for a document
"""

from sqlalchemy import Column, String, Text, ForeignKey, DateTime
from sqlalchemy.orm import relationship
from enum import Enum
import uuid

from strategic_insight.database import Base


class MessageType(str, Enum):
    """Who authored a chat message"""
    USER = "user"
    ASSISTANT = "assistant"


class ChatMessage(Base):
    """
    Chat message model - one side of an analysis exchange

    Attributes:
        id: Message UUID
        document_id: Document the question was asked about
        user_id: User who asked
        message_type: 'user' (the query) or 'assistant' (the generated reply)
        message_content: Message text
        timestamp: Shared by the user/assistant pair of one exchange

    Cascade Delete:
        - Deleting the document deletes all its messages
    """

    __tablename__ = "chat_history"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    document_id = Column(String(36), ForeignKey("documents.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    message_type = Column(String(20), nullable=False)  # user, assistant
    message_content = Column(Text, nullable=False)

    timestamp = Column(DateTime(timezone=True), nullable=False, index=True)

    # Relationships
    document = relationship("Document", back_populates="messages")

    def __repr__(self):
        return f"<ChatMessage(id={self.id}, type={self.message_type}, document_id={self.document_id})>"
