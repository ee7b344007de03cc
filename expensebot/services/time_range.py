"""Relative time phrase resolution for expense queries."""

import math
from dataclasses import dataclass
from datetime import datetime, timedelta

from expensebot.config import settings

# Order matters: the first phrase found in the query wins
TIME_PHRASES = (
    "today",
    "yesterday",
    "this week",
    "last week",
    "this month",
    "last month",
    "this year",
    "last year",
)

ONE_DAY = timedelta(days=1)


@dataclass(frozen=True)
class DateInterval:
    """Half-open interval: start inclusive, end exclusive."""

    start: datetime
    end: datetime

    @property
    def days(self) -> int:
        """Whole days spanned by the interval, at least 1."""
        return max(1, math.ceil((self.end - self.start) / ONE_DAY))

    def __contains__(self, moment: datetime) -> bool:
        return self.start <= moment < self.end


def find_time_phrase(query: str) -> str | None:
    """Return the first known time phrase contained in the query, if any."""
    query_lower = query.lower()
    for phrase in TIME_PHRASES:
        if phrase in query_lower:
            return phrase
    return None


def _month_start(year: int, month: int, like: datetime) -> datetime:
    """First instant of a month, normalizing month overflow in either direction."""
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    return like.replace(year=year, month=month, day=1)


def resolve_time_range(phrase: str | None, now: datetime) -> DateInterval | None:
    """
    Map a time phrase to a concrete interval relative to ``now``.

    Weeks start on ``settings.first_weekday`` (Sunday by default). Months and
    years run from their first instant to the first instant of the next one.

    Returns None for unknown phrases, which means "no date restriction".
    """
    today = now.replace(hour=0, minute=0, second=0, microsecond=0)

    if phrase == "today":
        return DateInterval(today, today + ONE_DAY)
    if phrase == "yesterday":
        return DateInterval(today - ONE_DAY, today)

    week_start = today - timedelta(days=(today.weekday() - settings.first_weekday) % 7)
    if phrase == "this week":
        return DateInterval(week_start, week_start + timedelta(days=7))
    if phrase == "last week":
        return DateInterval(week_start - timedelta(days=7), week_start)

    if phrase == "this month":
        return DateInterval(
            _month_start(today.year, today.month, today),
            _month_start(today.year, today.month + 1, today),
        )
    if phrase == "last month":
        return DateInterval(
            _month_start(today.year, today.month - 1, today),
            _month_start(today.year, today.month, today),
        )

    year_start = today.replace(month=1, day=1)
    if phrase == "this year":
        return DateInterval(year_start, year_start.replace(year=today.year + 1))
    if phrase == "last year":
        return DateInterval(year_start.replace(year=today.year - 1), year_start)

    return None
