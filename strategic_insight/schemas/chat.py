"""
Pydantic Schemas for document analysis and chat history
"""

from pydantic import BaseModel, Field
from datetime import datetime

from strategic_insight.models.chat_message import MessageType


class AnalyzeRequest(BaseModel):
    """Question about a document"""
    query: str = Field(..., description="Natural-language question")


class AnalyzeResponse(BaseModel):
    """Generated answer"""
    response: str = Field(..., description="Assistant reply")


class ChatMessageResponse(BaseModel):
    """One stored chat message"""
    id: str
    document_id: str
    user_id: str
    message_type: MessageType
    message_content: str
    timestamp: datetime

    class Config:
        from_attributes = True
