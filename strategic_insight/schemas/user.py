"""
Pydantic Schemas for User endpoints
"""

from pydantic import BaseModel, EmailStr, Field
from datetime import datetime
from typing import Optional


class UserCreate(BaseModel):
    """Request schema for user registration"""
    email: EmailStr = Field(..., description="User email address")


class UserResponse(BaseModel):
    """Registered user"""
    id: str
    email: str
    created_at: Optional[datetime]

    class Config:
        from_attributes = True
