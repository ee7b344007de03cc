"""Aggregates over a filtered expense set - done in Python for accuracy."""

from collections.abc import Sequence

from expensebot.config import settings
from expensebot.models import Expense
from expensebot.services.intent import ExtremumDirection
from expensebot.services.time_range import DateInterval

# Approximations kept on purpose: no calendar math behind either value
DAILY_AVERAGE_FALLBACK_DAYS = settings.daily_average_fallback_days
MONTHS_PER_YEAR = settings.months_per_year


def total(expenses: Sequence[Expense]) -> float:
    """Sum of amounts; 0 for an empty set."""
    return sum(e.amount for e in expenses)


def pick_extremum(expenses: Sequence[Expense], direction: ExtremumDirection) -> Expense | None:
    """
    Return the highest or lowest expense, or None if there are none.

    sorted() is stable, so among equal amounts the earliest record wins.
    """
    if not expenses:
        return None
    ranked = sorted(
        expenses,
        key=lambda e: -e.amount if direction == ExtremumDirection.HIGHEST else e.amount,
    )
    return ranked[0]


def average_overall(expenses: Sequence[Expense]) -> float | None:
    """Mean amount per expense; None for an empty set."""
    if not expenses:
        return None
    return total(expenses) / len(expenses)


def average_daily(expenses: Sequence[Expense], interval: DateInterval | None) -> float | None:
    """Total divided by the days in the interval, or by a fixed 30 without one."""
    if not expenses:
        return None
    days = interval.days if interval else DAILY_AVERAGE_FALLBACK_DAYS
    return total(expenses) / days


def average_monthly(expenses: Sequence[Expense], time_phrase: str | None) -> float | None:
    """Total divided by 12 for year phrases, otherwise the total itself."""
    if not expenses:
        return None
    months = MONTHS_PER_YEAR if time_phrase and "year" in time_phrase else 1
    return total(expenses) / months
