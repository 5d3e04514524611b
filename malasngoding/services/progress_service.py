"""
Progress tracking and the reward policy applied after a progress write.

A progress record is keyed by (user, kind, target id). Writing to an existing
key replaces the fields given in the write and refreshes last_accessed;
otherwise a new record is created.

Rewards are a separate step run by the API layer once the write is stored:
completed records with points add those points to the user's total, and a
completed module additionally sets the user's level for the module's language.
Neither step is deduplicated: completing the same target twice adds its points
twice, and completing a lower module after a higher one lowers the level.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from malasngoding.models.models import Module, ProgressKind, User, UserProgress
from malasngoding.utils.logger import get_logger

logger = get_logger(__name__)

# Language.name -> User column holding the level for that language.
LEVEL_FIELDS: dict[str, str] = {
    "html": "html_level",
    "css": "css_level",
    "javascript": "js_level",
}

# Fields a progress write may replace on an existing record.
WRITABLE_FIELDS = ("lesson_id", "challenge_id", "completed", "code", "points_earned")


@dataclass(frozen=True)
class ProgressTarget:
    """The one module, lesson or challenge a progress record is about."""
    kind: ProgressKind
    target_id: int

    @classmethod
    def module(cls, module_id: int) -> "ProgressTarget":
        return cls(ProgressKind.MODULE, module_id)

    @classmethod
    def lesson(cls, lesson_id: int) -> "ProgressTarget":
        return cls(ProgressKind.LESSON, lesson_id)

    @classmethod
    def challenge(cls, challenge_id: int) -> "ProgressTarget":
        return cls(ProgressKind.CHALLENGE, challenge_id)

    @classmethod
    def from_ids(
        cls,
        module_id: int,
        lesson_id: Optional[int] = None,
        challenge_id: Optional[int] = None,
    ) -> "ProgressTarget":
        """Most specific id wins: challenge, then lesson, then module."""
        if challenge_id:
            return cls.challenge(challenge_id)
        if lesson_id:
            return cls.lesson(lesson_id)
        return cls.module(module_id)

    @property
    def is_module(self) -> bool:
        return self.kind == ProgressKind.MODULE


def get_progress(db: Session, user_id: int, target: ProgressTarget) -> Optional[UserProgress]:
    return (
        db.query(UserProgress)
        .filter(
            UserProgress.user_id == user_id,
            UserProgress.kind == target.kind,
            UserProgress.target_id == target.target_id,
        )
        .first()
    )


def list_progress(db: Session, user_id: int, module_id: Optional[int] = None) -> list[UserProgress]:
    query = db.query(UserProgress).filter(UserProgress.user_id == user_id)
    if module_id is not None:
        query = query.filter(UserProgress.module_id == module_id)
    return query.order_by(UserProgress.id.asc()).all()


def _apply(record: UserProgress, module_id: int, values: dict[str, Any]) -> None:
    record.module_id = module_id
    for field in WRITABLE_FIELDS:
        if field in values:
            setattr(record, field, values[field])
    record.last_accessed = datetime.utcnow()


def record_progress(
    db: Session,
    *,
    user_id: int,
    target: ProgressTarget,
    module_id: int,
    values: dict[str, Any],
) -> UserProgress:
    """
    Upsert the progress record for (user_id, target) and return it after the write.

    `values` holds only the fields the caller set; fields it leaves out keep
    their stored value (or the column default on a new record).
    """
    record = get_progress(db, user_id, target)
    created = record is None
    if record is None:
        record = UserProgress(
            user_id=user_id,
            kind=target.kind,
            target_id=target.target_id,
            completed=False,
            points_earned=0,
        )
        db.add(record)
    _apply(record, module_id, values)
    try:
        db.commit()
    except IntegrityError:
        # Another request created the same key first; write over its record.
        db.rollback()
        record = get_progress(db, user_id, target)
        if record is None:
            raise
        created = False
        _apply(record, module_id, values)
        db.commit()
    db.refresh(record)
    logger.info(
        "progress %s user_id=%s kind=%s target_id=%s completed=%s points=%s",
        "created" if created else "updated",
        user_id,
        target.kind.value,
        target.target_id,
        record.completed,
        record.points_earned,
    )
    return record


def add_points(db: Session, user_id: int, points: int) -> None:
    """Increment total_points in SQL so concurrent awards are not lost."""
    db.query(User).filter(User.id == user_id).update(
        {User.total_points: User.total_points + points},
        synchronize_session=False,
    )


def set_language_level(db: Session, user_id: int, language_name: str, level: int) -> bool:
    """Set (not raise) the user's level for a language. Unknown languages are ignored."""
    field = LEVEL_FIELDS.get(language_name)
    if field is None:
        logger.warning("no level field for language=%s", language_name)
        return False
    db.query(User).filter(User.id == user_id).update(
        {getattr(User, field): level},
        synchronize_session=False,
    )
    return True


def apply_completion_rewards(db: Session, user_id: int, record: UserProgress) -> int:
    """
    Apply points and level for a stored progress record. Returns points awarded.
    """
    if not (record.completed and record.points_earned > 0):
        return 0

    points = int(record.points_earned)
    add_points(db, user_id, points)
    logger.info("points awarded user_id=%s points=%s", user_id, points)

    if record.kind == ProgressKind.MODULE:
        module = db.query(Module).filter(Module.id == record.target_id).first()
        if module is not None and module.language is not None:
            if set_language_level(db, user_id, module.language.name, module.level_number):
                logger.info(
                    "level set user_id=%s language=%s level=%s",
                    user_id,
                    module.language.name,
                    module.level_number,
                )
    db.commit()
    return points
