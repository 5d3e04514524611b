"""
Badges come in two independent flavours:

- unlocked: derived at read time from points (total_points >= required_points);
- earned: an explicit, one-time grant stored as a UserBadge.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from malasngoding.models.models import Badge, UserBadge
from malasngoding.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class BadgeStatus:
    badge: Badge
    unlocked: bool
    earned: bool
    earned_at: Optional[datetime] = None


def list_badges(db: Session) -> list[Badge]:
    return db.query(Badge).order_by(Badge.id.asc()).all()


def list_badges_by_category(db: Session, category: str) -> list[Badge]:
    return db.query(Badge).filter(Badge.category == category).order_by(Badge.id.asc()).all()


def get_badge(db: Session, badge_id: int) -> Optional[Badge]:
    return db.query(Badge).filter(Badge.id == badge_id).first()


def list_user_badges(db: Session, user_id: int) -> list[UserBadge]:
    """Grants of one user, most recent first."""
    return (
        db.query(UserBadge)
        .filter(UserBadge.user_id == user_id)
        .order_by(UserBadge.earned_at.desc(), UserBadge.id.desc())
        .all()
    )


def _find_grant(db: Session, user_id: int, badge_id: int) -> Optional[UserBadge]:
    return (
        db.query(UserBadge)
        .filter(UserBadge.user_id == user_id, UserBadge.badge_id == badge_id)
        .first()
    )


def award_badge(db: Session, user_id: int, badge_id: int) -> UserBadge:
    """Grant a badge once. An existing grant is returned untouched."""
    existing = _find_grant(db, user_id, badge_id)
    if existing is not None:
        return existing

    grant = UserBadge(user_id=user_id, badge_id=badge_id, earned_at=datetime.utcnow())
    db.add(grant)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        existing = _find_grant(db, user_id, badge_id)
        if existing is None:
            raise
        return existing
    db.refresh(grant)
    logger.info("badge granted user_id=%s badge_id=%s", user_id, badge_id)
    return grant


def is_unlocked(total_points: int, badge: Badge) -> bool:
    return total_points >= badge.required_points


def badge_statuses(total_points: int, badges: list[Badge], grants: list[UserBadge]) -> list[BadgeStatus]:
    earned_at = {g.badge_id: g.earned_at for g in grants}
    return [
        BadgeStatus(
            badge=b,
            unlocked=is_unlocked(total_points, b),
            earned=b.id in earned_at,
            earned_at=earned_at.get(b.id),
        )
        for b in badges
    ]
