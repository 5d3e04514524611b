from typing import Optional

from malasngoding.schemas.base import CamelModel, IsoDatetime


class BadgeResponse(CamelModel):
    id: int
    title: str
    description: str
    image_url: str
    category: str
    required_points: int
    level: str


class UserBadgeResponse(CamelModel):
    id: int
    user_id: int
    badge_id: int
    earned_at: IsoDatetime


class AwardBadgeRequest(CamelModel):
    badge_id: Optional[int] = None


class BadgeStatusResponse(CamelModel):
    """A badge as seen by one user: unlocked by points, earned by explicit grant."""
    badge: BadgeResponse
    unlocked: bool
    earned: bool
    earned_at: Optional[IsoDatetime] = None
