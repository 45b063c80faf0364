"""
User API endpoints
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from strategic_insight.api.deps import get_db
from strategic_insight.core.exceptions import http_409_conflict
from strategic_insight.models.user import User
from strategic_insight.schemas.user import UserCreate, UserResponse

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    request: UserCreate,
    db: Session = Depends(get_db)
):
    """
    Register a new user

    Args:
        request: Email address
        db: Database session

    Returns:
        UserResponse: New user ID, email and creation time

    Raises:
        HTTPException: 409 if email already registered
    """
    existing_user = db.query(User).filter(User.email == request.email).first()

    if existing_user:
        raise http_409_conflict(f"Email '{request.email}' is already registered")

    user = User(email=request.email)

    db.add(user)
    db.commit()
    db.refresh(user)

    return UserResponse.model_validate(user)
