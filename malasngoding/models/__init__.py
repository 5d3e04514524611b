"""
Data models. Single import surface for DB entities.

DB entities (malasngoding.models.models):
- User, Language, Module, Lesson, Challenge, UserProgress, Badge, UserBadge
- ProgressKind (module|lesson|challenge)
"""

from malasngoding.models.models import (
    User,
    Language,
    Module,
    Lesson,
    Challenge,
    UserProgress,
    ProgressKind,
    Badge,
    UserBadge,
)

__all__ = [
    "User",
    "Language",
    "Module",
    "Lesson",
    "Challenge",
    "UserProgress",
    "ProgressKind",
    "Badge",
    "UserBadge",
]
