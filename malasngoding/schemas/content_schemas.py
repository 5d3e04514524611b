"""
Learning content schemas: languages, modules, lessons, challenges.
"""

from typing import Optional

from malasngoding.schemas.base import CamelModel


class LanguageResponse(CamelModel):
    id: int
    name: str
    display_name: str
    description: str
    icon_url: Optional[str] = None
    color: str


class ModuleResponse(CamelModel):
    id: int
    language_id: int
    title: str
    description: str
    level: str
    level_number: int
    thumbnail_url: Optional[str] = None
    sort_order: int
    points_to_earn: int


class LessonResponse(CamelModel):
    id: int
    module_id: int
    title: str
    description: str
    content: str
    code_example: Optional[str] = None
    preview_html: Optional[str] = None
    sort_order: int


class ChallengeResponse(CamelModel):
    id: int
    lesson_id: int
    title: str
    description: str
    instructions: str
    initial_code: Optional[str] = None
    expected_output: Optional[str] = None
    hints: list[str] = []
    sort_order: int
    points: int
