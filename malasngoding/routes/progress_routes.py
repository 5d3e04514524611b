"""
User progress endpoints. Writing progress runs the reward policy afterwards.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from malasngoding.config import get_db
from malasngoding.models.models import User
from malasngoding.schemas.user_progress_schemas import (
    RecordProgressRequest,
    TargetProgressResponse,
    UserProgressResponse,
)
from malasngoding.services import content_service, progress_service
from malasngoding.services.progress_service import ProgressTarget
from malasngoding.utils.auth import get_current_user

progress_routes = APIRouter()


def _target_progress(db: Session, user_id: int, target: ProgressTarget) -> TargetProgressResponse:
    record = progress_service.get_progress(db, user_id, target)
    if record is None:
        return TargetProgressResponse()
    return TargetProgressResponse.model_validate(record)


@progress_routes.get("/progress", response_model=list[UserProgressResponse])
async def list_progress(
    module_id: Optional[int] = Query(None, alias="moduleId"),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> list[UserProgressResponse]:
    """All progress of the current user, or only one module's with ?moduleId=."""
    records = progress_service.list_progress(db, current_user.id, module_id)
    return [UserProgressResponse.model_validate(r) for r in records]


@progress_routes.get(
    "/lessons/{lesson_id}/progress",
    response_model=TargetProgressResponse,
    response_model_exclude_none=True,
)
async def get_lesson_progress(
    lesson_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> TargetProgressResponse:
    return _target_progress(db, current_user.id, ProgressTarget.lesson(lesson_id))


@progress_routes.get(
    "/challenges/{challenge_id}/progress",
    response_model=TargetProgressResponse,
    response_model_exclude_none=True,
)
async def get_challenge_progress(
    challenge_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> TargetProgressResponse:
    return _target_progress(db, current_user.id, ProgressTarget.challenge(challenge_id))


def _check_containment(db: Session, body: RecordProgressRequest) -> None:
    """404 for unknown ids; 400 when the lesson or challenge is not under the given module/lesson."""
    if content_service.get_module(db, body.module_id) is None:
        raise HTTPException(status_code=404, detail="Module not found")
    if body.lesson_id:
        lesson = content_service.get_lesson(db, body.lesson_id)
        if lesson is None:
            raise HTTPException(status_code=404, detail="Lesson not found")
        if lesson.module_id != body.module_id:
            raise HTTPException(status_code=400, detail="Lesson does not belong to module")
    if body.challenge_id:
        challenge = content_service.get_challenge(db, body.challenge_id)
        if challenge is None:
            raise HTTPException(status_code=404, detail="Challenge not found")
        if body.lesson_id and challenge.lesson_id != body.lesson_id:
            raise HTTPException(status_code=400, detail="Challenge does not belong to lesson")
        if challenge.lesson.module_id != body.module_id:
            raise HTTPException(status_code=400, detail="Challenge does not belong to module")


@progress_routes.post("/progress", response_model=UserProgressResponse)
async def record_progress(
    body: RecordProgressRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> UserProgressResponse:
    """
    Store progress for a module, lesson or challenge, then award points and,
    for a completed module, set the user's level for that module's language.
    """
    _check_containment(db, body)

    user_id = current_user.id
    target = ProgressTarget.from_ids(body.module_id, body.lesson_id, body.challenge_id)
    values = body.model_dump(exclude_unset=True, exclude={"module_id"})
    record = progress_service.record_progress(
        db,
        user_id=user_id,
        target=target,
        module_id=body.module_id,
        values=values,
    )
    progress_service.apply_completion_rewards(db, user_id, record)
    return UserProgressResponse.model_validate(record)
