"""
User progress schemas (progress writes and per-target progress reads).
"""

from typing import Optional

from pydantic import Field

from malasngoding.models.models import ProgressKind
from malasngoding.schemas.base import CamelModel, IsoDatetime


class RecordProgressRequest(CamelModel):
    """Body of POST /api/progress. moduleId is always the owning module."""
    module_id: int
    lesson_id: Optional[int] = None
    challenge_id: Optional[int] = None
    completed: bool = False
    points_earned: int = Field(default=0, ge=0)
    code: Optional[str] = None


class UserProgressResponse(CamelModel):
    id: int
    user_id: int
    kind: ProgressKind
    target_id: int
    module_id: int
    lesson_id: Optional[int] = None
    challenge_id: Optional[int] = None
    completed: bool
    code: Optional[str] = None
    points_earned: int
    last_accessed: IsoDatetime


class TargetProgressResponse(CamelModel):
    """Progress for one lesson or challenge; only completed/pointsEarned when nothing is recorded."""
    completed: bool = False
    points_earned: int = 0
    id: Optional[int] = None
    user_id: Optional[int] = None
    kind: Optional[ProgressKind] = None
    target_id: Optional[int] = None
    module_id: Optional[int] = None
    lesson_id: Optional[int] = None
    challenge_id: Optional[int] = None
    code: Optional[str] = None
    last_accessed: Optional[IsoDatetime] = None
