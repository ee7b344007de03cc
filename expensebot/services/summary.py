"""Spending summary for the dashboard."""

from collections import defaultdict
from collections.abc import Sequence
from dataclasses import dataclass, field

from expensebot.models import Expense


@dataclass
class ExpenseSummary:
    """Totals across all expenses."""

    total: float
    expense_count: int
    by_category: dict[str, float] = field(default_factory=dict)
    by_month: dict[str, float] = field(default_factory=dict)  # "YYYY-MM", oldest first


def summarize_expenses(expenses: Sequence[Expense]) -> ExpenseSummary:
    """Compute total, per-category and per-month spending."""
    by_category: dict[str, float] = defaultdict(float)
    by_month: dict[str, float] = defaultdict(float)

    for expense in expenses:
        by_category[expense.category.value] += expense.amount
        by_month[expense.date.strftime("%Y-%m")] += expense.amount

    return ExpenseSummary(
        total=round(sum(e.amount for e in expenses), 2),
        expense_count=len(expenses),
        by_category={cat: round(amount, 2) for cat, amount in by_category.items()},
        by_month={month: round(by_month[month], 2) for month in sorted(by_month)},
    )
