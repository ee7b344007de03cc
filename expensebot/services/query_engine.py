"""Free-text query engine over an expense snapshot."""

import logging
from collections.abc import Sequence
from datetime import datetime

from expensebot.models import Expense
from expensebot.services import aggregator, formatter
from expensebot.services.intent import (
    AverageMode,
    IntentKind,
    QueryIntent,
    classify_intent,
    extract_category_filter,
)
from expensebot.services.record_filter import filter_expenses
from expensebot.services.time_range import DateInterval, find_time_phrase, resolve_time_range

logger = logging.getLogger(__name__)


def answer(query: str, transactions: Sequence[Expense], now: datetime | None = None) -> str:
    """
    Answer a free-text question about expenses.

    Pipeline: resolve time phrase -> filter by date -> classify intent ->
    extract category -> aggregate -> format. Never raises for unmatched input;
    unknown questions get the help text.

    Args:
        query: The user's question
        transactions: Snapshot to evaluate against; read once, never mutated
        now: Evaluation instant, defaults to the current local time
    """
    now = now or datetime.now()
    query_lower = query.lower()

    time_phrase = find_time_phrase(query_lower)
    interval = resolve_time_range(time_phrase, now)
    in_period = filter_expenses(transactions, interval)

    intent = classify_intent(query_lower)
    logger.debug(f"Query {query_lower!r}: phrase={time_phrase}, intent={intent}, matched={len(in_period)}")

    if intent.kind == IntentKind.EXTREMUM:
        return _answer_extremum(query_lower, intent, in_period, time_phrase)
    if intent.kind == IntentKind.AVERAGE:
        return _answer_average(query_lower, intent, in_period, time_phrase, interval)
    if intent.kind == IntentKind.TOTAL:
        return _answer_total(query_lower, in_period, time_phrase)
    return formatter.HELP_MESSAGE


def _answer_extremum(
    query: str,
    intent: QueryIntent,
    expenses: list[Expense],
    time_phrase: str | None,
) -> str:
    if not expenses:
        return formatter.format_no_expenses(time_phrase)

    category_filter = extract_category_filter(query)
    matching = filter_expenses(expenses, category_filter=category_filter)
    target = aggregator.pick_extremum(matching, intent.direction)
    if target is None:
        return formatter.format_no_category_expenses(category_filter, time_phrase)

    return formatter.format_extremum(target, intent.direction, category_filter, time_phrase)


def _answer_average(
    query: str,
    intent: QueryIntent,
    expenses: list[Expense],
    time_phrase: str | None,
    interval: DateInterval | None,
) -> str:
    if not expenses:
        return formatter.format_no_expenses(time_phrase, for_average=True)

    category_filter = extract_category_filter(query)
    matching = filter_expenses(expenses, category_filter=category_filter)
    if not matching:
        return formatter.format_no_category_expenses(category_filter, time_phrase)

    if intent.mode == AverageMode.DAILY:
        value = aggregator.average_daily(matching, interval)
    elif intent.mode == AverageMode.MONTHLY:
        value = aggregator.average_monthly(matching, time_phrase)
    else:
        value = aggregator.average_overall(matching)

    return formatter.format_average(value, intent.mode, category_filter, time_phrase, len(matching))


def _answer_total(query: str, expenses: list[Expense], time_phrase: str | None) -> str:
    category_filter = extract_category_filter(query, include_sub_categories=True)
    matching = filter_expenses(expenses, category_filter=category_filter)
    return formatter.format_total(aggregator.total(matching), category_filter, time_phrase)
