"""
Complaint journal schemas. Field names are camelCase in the stored blob.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import field_validator

from malasngoding.schemas.base import CamelModel


def to_local_naive(value: datetime) -> datetime:
    """Journal times are naive local time; aware values (e.g. a trailing Z) are converted."""
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


class Feeling(str, Enum):
    """Declaration order is the display order and the tie-break order."""
    KESEL = "kesel"
    SEDIH = "sedih"
    CAPEK = "capek"
    BINGUNG = "bingung"
    BETE = "bete"


class Theme(str, Enum):
    DARK = "dark"
    LIGHT = "light"


class Timeframe(str, Enum):
    """History presets: today since midnight, week and month as rolling 7 and 30 days."""
    ALL = "all"
    TODAY = "today"
    WEEK = "week"
    MONTH = "month"


class Complaint(CamelModel):
    id: str
    text: str
    feeling: Feeling
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def created_at_local(cls, value: datetime) -> datetime:
        return to_local_naive(value)


class FeelingCount(CamelModel):
    feeling: Feeling
    count: int


class DailyMoodData(CamelModel):
    date: str  # day label, e.g. "Sen, 4 Mar"
    kesel: int = 0
    sedih: int = 0
    capek: int = 0
    bingung: int = 0
    bete: int = 0

    def total(self) -> int:
        return sum(getattr(self, f.value) for f in Feeling)


class ComplaintStats(CamelModel):
    total: int
    today: int
    yesterday: int
    week: int
    most_frequent_feeling: Optional[Feeling] = None


class WeeklySummary(CamelModel):
    total: int
    most_frequent_feeling: Optional[Feeling] = None
    most_emotional_day: Optional[str] = None  # full weekday name, e.g. "Senin"


class JournalState(CamelModel):
    """Everything the journal persists under its storage key."""
    complaints: list[Complaint] = []
    theme: Theme = Theme.DARK
