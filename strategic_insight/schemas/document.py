"""
Pydantic Schemas for Document endpoints
Request/Response validation
"""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class DocumentResponse(BaseModel):
    """Schema for document responses"""
    id: str
    user_id: str
    file_name: str = Field(..., description="Original filename")
    storage_path: str = Field(..., description="Storage location handle")
    content_type: Optional[str] = Field(None, description="MIME type")
    size_bytes: Optional[int] = Field(None, description="File size in bytes")
    uploaded_at: datetime

    class Config:
        from_attributes = True
