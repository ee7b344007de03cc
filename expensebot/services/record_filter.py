"""Date and category filtering over an expense snapshot."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime

from expensebot.models import Expense
from expensebot.services.time_range import DateInterval


@dataclass(frozen=True)
class CategoryFilter:
    """Category and/or food sub-category to restrict a query to (lower-case terms)."""

    category: str | None = None
    sub_category: str | None = None

    @property
    def label(self) -> str:
        """Term shown in replies."""
        return self.sub_category or self.category or ""


def _align(moment: datetime, reference: datetime) -> datetime:
    """Make ``moment`` comparable with ``reference`` when only one is timezone-aware."""
    if (moment.tzinfo is None) == (reference.tzinfo is None):
        return moment
    if moment.tzinfo is None:
        return moment.replace(tzinfo=reference.tzinfo)
    return moment.astimezone().replace(tzinfo=None)


def filter_by_interval(expenses: Iterable[Expense], interval: DateInterval | None) -> list[Expense]:
    """Keep expenses dated within [start, end). No interval keeps everything."""
    if interval is None:
        return list(expenses)
    return [e for e in expenses if _align(e.date, interval.start) in interval]


def _matches(expense: Expense, category_filter: CategoryFilter) -> bool:
    if category_filter.category and expense.category.value.lower() != category_filter.category.lower():
        return False
    if category_filter.sub_category:
        if expense.sub_category is None:
            return False
        return expense.sub_category.value.lower() == category_filter.sub_category.lower()
    return True


def filter_by_category(expenses: Iterable[Expense], category_filter: CategoryFilter | None) -> list[Expense]:
    """Keep expenses matching the category filter, case-insensitively."""
    if category_filter is None:
        return list(expenses)
    return [e for e in expenses if _matches(e, category_filter)]


def filter_expenses(
    expenses: Iterable[Expense],
    interval: DateInterval | None = None,
    category_filter: CategoryFilter | None = None,
) -> list[Expense]:
    """Apply date and category predicates. Input order is preserved and input is never mutated."""
    return filter_by_category(filter_by_interval(expenses, interval), category_filter)
