"""
Pure aggregations over a complaint collection for the mood charts.

Day boundaries are local calendar days: a complaint belongs to a day when its
created_at falls on that date, not when it is within 24 hours of it.
"""

from collections import Counter
from datetime import date, datetime, time, timedelta
from typing import Iterable, Optional

from malasngoding.schemas.complaint_schemas import (
    Complaint,
    ComplaintStats,
    DailyMoodData,
    Feeling,
    FeelingCount,
    Timeframe,
    WeeklySummary,
)

WINDOW_DAYS = 7

# Indonesian short names, indexed by date.weekday() and month - 1.
DAY_NAMES = ("Sen", "Sel", "Rab", "Kam", "Jum", "Sab", "Min")
DAY_FULL_NAMES = ("Senin", "Selasa", "Rabu", "Kamis", "Jumat", "Sabtu", "Minggu")
MONTH_NAMES = ("Jan", "Feb", "Mar", "Apr", "Mei", "Jun", "Jul", "Agt", "Sep", "Okt", "Nov", "Des")


def start_of_day(moment: datetime) -> datetime:
    return datetime.combine(moment.date(), time.min)


def day_label(day: date) -> str:
    """e.g. date(2024, 3, 4) -> "Sen, 4 Mar"."""
    return f"{DAY_NAMES[day.weekday()]}, {day.day} {MONTH_NAMES[day.month - 1]}"


def _on_day(complaints: Iterable[Complaint], day: date) -> list[Complaint]:
    return [c for c in complaints if c.created_at.date() == day]


def feeling_counts(complaints: Iterable[Complaint]) -> list[FeelingCount]:
    """Occurrences per feeling, in Feeling order, leaving out feelings never used."""
    counts = Counter(c.feeling for c in complaints)
    return [FeelingCount(feeling=f, count=counts[f]) for f in Feeling if counts[f] > 0]


def last_n_days_window(complaints: Iterable[Complaint], today: datetime, n: int = WINDOW_DAYS) -> list[Complaint]:
    """Complaints from the start of the day n-1 days ago up to `today`."""
    start = start_of_day(today - timedelta(days=n - 1))
    return [c for c in complaints if start <= c.created_at <= today]


def daily_mood_breakdown(complaints: Iterable[Complaint], today: datetime) -> list[DailyMoodData]:
    """One entry per day of the last WINDOW_DAYS days, oldest first."""
    items = list(complaints)
    result = []
    for offset in range(WINDOW_DAYS - 1, -1, -1):
        day = (today - timedelta(days=offset)).date()
        counts = Counter(c.feeling for c in _on_day(items, day))
        result.append(DailyMoodData(date=day_label(day), **{f.value: counts[f] for f in Feeling}))
    return result


def most_frequent_feeling(complaints: Iterable[Complaint]) -> Optional[Feeling]:
    """Feeling with the highest count; ties go to the one declared first."""
    counts = feeling_counts(complaints)
    if not counts:
        return None
    # max() keeps the first maximum, and counts are in declaration order.
    return max(counts, key=lambda fc: fc.count).feeling


def complaint_stats(complaints: Iterable[Complaint], today: datetime) -> ComplaintStats:
    items = list(complaints)
    return ComplaintStats(
        total=len(items),
        today=len(_on_day(items, today.date())),
        yesterday=len(_on_day(items, (today - timedelta(days=1)).date())),
        week=len(last_n_days_window(items, today)),
        most_frequent_feeling=most_frequent_feeling(items),
    )


def most_emotional_day(complaints: Iterable[Complaint]) -> Optional[str]:
    """
    Full weekday name with the most complaints, e.g. "Senin".

    Days are grouped by weekday name, so within a 7-day window each name is one
    calendar day. Ties go to the weekday seen first, i.e. the most recent one
    for a newest-first collection.
    """
    counts = Counter(DAY_FULL_NAMES[c.created_at.weekday()] for c in complaints)
    if not counts:
        return None
    return max(counts, key=counts.__getitem__)


def weekly_summary(complaints: Iterable[Complaint], today: datetime) -> WeeklySummary:
    """Total, dominant feeling and busiest day over the last WINDOW_DAYS days."""
    week = last_n_days_window(complaints, today)
    return WeeklySummary(
        total=len(week),
        most_frequent_feeling=most_frequent_feeling(week),
        most_emotional_day=most_emotional_day(week),
    )


def timeframe_start(timeframe: Timeframe, now: datetime) -> Optional[datetime]:
    """Earliest createdAt kept by a history preset; None for all time."""
    timeframe = Timeframe(timeframe)
    if timeframe == Timeframe.TODAY:
        return start_of_day(now)
    if timeframe == Timeframe.WEEK:
        return now - timedelta(days=7)
    if timeframe == Timeframe.MONTH:
        return now - timedelta(days=30)
    return None


def filter_by_timeframe(complaints: Iterable[Complaint], timeframe: Timeframe, now: datetime) -> list[Complaint]:
    start = timeframe_start(timeframe, now)
    if start is None:
        return list(complaints)
    return [c for c in complaints if c.created_at >= start]
