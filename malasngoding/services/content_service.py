"""
Read-only access to the learning content graph:
languages -> modules -> lessons -> challenges, each level ordered by sort_order.
"""

from typing import Optional

from sqlalchemy.orm import Session

from malasngoding.models.models import Challenge, Language, Lesson, Module


def list_languages(db: Session) -> list[Language]:
    return db.query(Language).order_by(Language.id.asc()).all()


def get_language(db: Session, language_id: int) -> Optional[Language]:
    return db.query(Language).filter(Language.id == language_id).first()


def get_language_by_name(db: Session, name: str) -> Optional[Language]:
    return db.query(Language).filter(Language.name == name).first()


def list_modules(db: Session, language_id: int, level: Optional[str] = None) -> list[Module]:
    """Modules of one language, optionally only one difficulty level."""
    query = db.query(Module).filter(Module.language_id == language_id)
    if level:
        query = query.filter(Module.level == level)
    return query.order_by(Module.sort_order.asc(), Module.id.asc()).all()


def get_module(db: Session, module_id: int) -> Optional[Module]:
    return db.query(Module).filter(Module.id == module_id).first()


def list_lessons(db: Session, module_id: int) -> list[Lesson]:
    return (
        db.query(Lesson)
        .filter(Lesson.module_id == module_id)
        .order_by(Lesson.sort_order.asc(), Lesson.id.asc())
        .all()
    )


def get_lesson(db: Session, lesson_id: int) -> Optional[Lesson]:
    return db.query(Lesson).filter(Lesson.id == lesson_id).first()


def list_challenges(db: Session, lesson_id: int) -> list[Challenge]:
    return (
        db.query(Challenge)
        .filter(Challenge.lesson_id == lesson_id)
        .order_by(Challenge.sort_order.asc(), Challenge.id.asc())
        .all()
    )


def get_challenge(db: Session, challenge_id: int) -> Optional[Challenge]:
    return db.query(Challenge).filter(Challenge.id == challenge_id).first()
