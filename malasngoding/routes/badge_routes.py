"""
Badge catalogue and per-user badge grants.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from malasngoding.config import get_db
from malasngoding.models.models import User
from malasngoding.schemas.badge_schemas import (
    AwardBadgeRequest,
    BadgeResponse,
    BadgeStatusResponse,
    UserBadgeResponse,
)
from malasngoding.services import badge_service
from malasngoding.utils.auth import get_current_user

badge_routes = APIRouter()


@badge_routes.get("/badges", response_model=list[BadgeResponse])
async def list_badges(db: Session = Depends(get_db)) -> list[BadgeResponse]:
    return [BadgeResponse.model_validate(b) for b in badge_service.list_badges(db)]


@badge_routes.get("/badges/category/{category}", response_model=list[BadgeResponse])
async def list_badges_by_category(category: str, db: Session = Depends(get_db)) -> list[BadgeResponse]:
    return [BadgeResponse.model_validate(b) for b in badge_service.list_badges_by_category(db, category)]


@badge_routes.get("/user/badges", response_model=list[UserBadgeResponse])
async def list_user_badges(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> list[UserBadgeResponse]:
    return [UserBadgeResponse.model_validate(g) for g in badge_service.list_user_badges(db, current_user.id)]


@badge_routes.get("/user/badges/status", response_model=list[BadgeStatusResponse])
async def list_badge_status(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> list[BadgeStatusResponse]:
    """Every badge with whether the user's points unlock it and whether it was granted."""
    statuses = badge_service.badge_statuses(
        current_user.total_points,
        badge_service.list_badges(db),
        badge_service.list_user_badges(db, current_user.id),
    )
    return [
        BadgeStatusResponse(
            badge=BadgeResponse.model_validate(s.badge),
            unlocked=s.unlocked,
            earned=s.earned,
            earned_at=s.earned_at,
        )
        for s in statuses
    ]


@badge_routes.post("/user/badges", status_code=status.HTTP_201_CREATED, response_model=UserBadgeResponse)
async def award_badge(
    body: AwardBadgeRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> UserBadgeResponse:
    """Grant a badge to the current user. Granting an owned badge returns the original grant."""
    if not body.badge_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Badge ID is required")
    if badge_service.get_badge(db, body.badge_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Badge not found")

    grant = badge_service.award_badge(db, current_user.id, body.badge_id)
    return UserBadgeResponse.model_validate(grant)
