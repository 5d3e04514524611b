"""
Profile endpoints for the authenticated user.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from malasngoding.config import get_db
from malasngoding.models.models import User
from malasngoding.schemas.user_schemas import UpdateProfileRequest, UserResponse
from malasngoding.utils.auth import get_current_user, get_user_by_email, get_user_by_username

user_routes = APIRouter()


@user_routes.get("/users/profile", response_model=UserResponse)
async def get_profile(current_user: User = Depends(get_current_user)) -> UserResponse:
    return UserResponse.model_validate(current_user)


@user_routes.patch("/users/profile", response_model=UserResponse)
async def update_profile(
    body: UpdateProfileRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> UserResponse:
    """
    Update profile fields that were sent. Password changes are not accepted here.
    """
    changes = body.model_dump(exclude_unset=True)

    new_username = changes.get("username")
    if new_username and new_username != current_user.username and get_user_by_username(new_username, db):
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Username already exists")
    new_email = changes.get("email")
    if new_email and new_email != current_user.email and get_user_by_email(new_email, db):
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email already exists")

    for field, value in changes.items():
        if field in ("username", "email") and not value:
            continue
        setattr(current_user, field, value)
    db.add(current_user)
    db.commit()
    db.refresh(current_user)
    return UserResponse.model_validate(current_user)
