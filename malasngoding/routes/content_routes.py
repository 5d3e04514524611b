"""
Learning content endpoints: languages, modules, lessons and challenges.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from malasngoding.config import get_db
from malasngoding.schemas.content_schemas import (
    ChallengeResponse,
    LanguageResponse,
    LessonResponse,
    ModuleResponse,
)
from malasngoding.services import content_service

content_routes = APIRouter()


@content_routes.get("/languages", response_model=list[LanguageResponse])
async def list_languages(db: Session = Depends(get_db)) -> list[LanguageResponse]:
    return [LanguageResponse.model_validate(lang) for lang in content_service.list_languages(db)]


@content_routes.get("/languages/{language_id}", response_model=LanguageResponse)
async def get_language(language_id: int, db: Session = Depends(get_db)) -> LanguageResponse:
    language = content_service.get_language(db, language_id)
    if language is None:
        raise HTTPException(status_code=404, detail="Language not found")
    return LanguageResponse.model_validate(language)


@content_routes.get("/languages/{language_id}/modules", response_model=list[ModuleResponse])
async def list_modules(
    language_id: int,
    level: Optional[str] = None,
    db: Session = Depends(get_db),
) -> list[ModuleResponse]:
    """Modules of a language ordered by sort order; ?level=easy|medium|hard narrows them."""
    return [ModuleResponse.model_validate(m) for m in content_service.list_modules(db, language_id, level)]


@content_routes.get("/languages/{language_id}/modules/level/{level}", response_model=list[ModuleResponse])
async def list_modules_by_level(language_id: int, level: str, db: Session = Depends(get_db)) -> list[ModuleResponse]:
    return [ModuleResponse.model_validate(m) for m in content_service.list_modules(db, language_id, level)]


@content_routes.get("/modules/{module_id}", response_model=ModuleResponse)
async def get_module(module_id: int, db: Session = Depends(get_db)) -> ModuleResponse:
    module = content_service.get_module(db, module_id)
    if module is None:
        raise HTTPException(status_code=404, detail="Module not found")
    return ModuleResponse.model_validate(module)


@content_routes.get("/modules/{module_id}/lessons", response_model=list[LessonResponse])
async def list_lessons(module_id: int, db: Session = Depends(get_db)) -> list[LessonResponse]:
    return [LessonResponse.model_validate(lesson) for lesson in content_service.list_lessons(db, module_id)]


@content_routes.get("/lessons/{lesson_id}", response_model=LessonResponse)
async def get_lesson(lesson_id: int, db: Session = Depends(get_db)) -> LessonResponse:
    lesson = content_service.get_lesson(db, lesson_id)
    if lesson is None:
        raise HTTPException(status_code=404, detail="Lesson not found")
    return LessonResponse.model_validate(lesson)


@content_routes.get("/lessons/{lesson_id}/challenges", response_model=list[ChallengeResponse])
async def list_challenges(lesson_id: int, db: Session = Depends(get_db)) -> list[ChallengeResponse]:
    return [ChallengeResponse.model_validate(c) for c in content_service.list_challenges(db, lesson_id)]


@content_routes.get("/challenges/{challenge_id}", response_model=ChallengeResponse)
async def get_challenge(challenge_id: int, db: Session = Depends(get_db)) -> ChallengeResponse:
    challenge = content_service.get_challenge(db, challenge_id)
    if challenge is None:
        raise HTTPException(status_code=404, detail="Challenge not found")
    return ChallengeResponse.model_validate(challenge)
