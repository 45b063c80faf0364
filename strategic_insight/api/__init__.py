"""
API Routes and Endpoints

Routers:
    - users: User registration
    - documents: Document upload and CRUD
    - chat: Document analysis and chat history
"""

from strategic_insight.api import users, documents, chat

__all__ = ["users", "documents", "chat"]
