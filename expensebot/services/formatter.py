"""Reply rendering for expense queries."""

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal, localcontext

from expensebot.config import settings
from expensebot.models import Expense
from expensebot.services.intent import AverageMode, ExtremumDirection
from expensebot.services.record_filter import CategoryFilter

HELP_MESSAGE = """I can help you with expenses! Try asking:

📊 **Totals**: "total food this month", "total rent today"
📈 **Highest/Lowest**: "highest expense last week", "lowest food expense"
📉 **Averages**: "average daily spending", "average food expense this month"
⏰ **Time periods**: today, yesterday, this week, last week, this month, last month, this year, last year
🏷️ **Categories**: food, travel, groceries, rent, other
🍽️ **Food types**: breakfast, lunch, dinner, snacks, drinks"""


def _group_digits(digits: str, grouping: str) -> str:
    if grouping == "western" or len(digits) <= 3:
        return f"{int(digits):,}"
    # Indian grouping: last three digits, then pairs (1,23,45,678)
    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    return ",".join([head, *pairs, tail])


def format_currency(amount: float) -> str:
    """Render an amount with the configured symbol, grouping and two decimals."""
    # Enough precision for any finite float quantized to cents (max ~1.8e308)
    with localcontext() as ctx:
        ctx.prec = 400
        value = Decimal(str(amount)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
        sign = "-" if value < 0 else ""
        whole, cents = f"{abs(value):.2f}".split(".")
    return f"{sign}{settings.currency_symbol}{_group_digits(whole, settings.digit_grouping)}.{cents}"


def format_date(value: datetime) -> str:
    """M/D/YYYY without zero padding."""
    return f"{value.month}/{value.day}/{value.year}"


def expense_label(expense: Expense) -> str:
    """Sub-category, else description, else the category name."""
    if expense.sub_category:
        return expense.sub_category.value
    if expense.description:
        return expense.description
    return expense.category.value


def _period(time_phrase: str | None) -> str:
    return f" {time_phrase}" if time_phrase else ""


def _for_period(time_phrase: str | None) -> str:
    return f" for {time_phrase}" if time_phrase else ""


def format_no_expenses(time_phrase: str | None, for_average: bool = False) -> str:
    suffix = " to calculate average" if for_average else ""
    return f"No expenses found{_for_period(time_phrase)}{suffix}."


def format_no_category_expenses(category_filter: CategoryFilter, time_phrase: str | None) -> str:
    return f"No {category_filter.label} expenses found{_for_period(time_phrase)}."


def format_total(amount: float, category_filter: CategoryFilter | None, time_phrase: str | None) -> str:
    if category_filter:
        return f"Total spent on {category_filter.label}{_period(time_phrase)}: {format_currency(amount)}"
    return f"Total net expenditure{_period(time_phrase)}: {format_currency(amount)}"


def format_extremum(
    expense: Expense,
    direction: ExtremumDirection,
    category_filter: CategoryFilter | None,
    time_phrase: str | None,
) -> str:
    heading = "Highest" if direction == ExtremumDirection.HIGHEST else "Lowest"
    subject = category_filter.label if category_filter else "expense"
    return (
        f"{heading} {subject}{_period(time_phrase)}: {format_currency(expense.amount)} "
        f"for {expense_label(expense)} on {format_date(expense.date)}."
    )


def format_average(
    amount: float,
    mode: AverageMode,
    category_filter: CategoryFilter | None,
    time_phrase: str | None,
    count: int,
) -> str:
    """Render one of the three average shapes."""
    label = category_filter.label if category_filter else None
    if mode == AverageMode.DAILY:
        return f"Average daily {label or 'spending'}{_period(time_phrase)}: {format_currency(amount)}"
    if mode == AverageMode.MONTHLY:
        return f"Average monthly {label or 'spending'}{_period(time_phrase)}: {format_currency(amount)}"
    return f"Average {label or 'expense'} amount{_period(time_phrase)}: {format_currency(amount)} ({count} transactions)"
