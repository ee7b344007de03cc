"""Keyword-based intent classification and category extraction."""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from expensebot.services.record_filter import CategoryFilter

# Vocabularies are scanned in order; the first term found wins
CATEGORIES = ("food", "travel", "groceries", "rent", "other")
SUB_CATEGORIES = ("breakfast", "lunch", "dinner", "snacks", "drinks")


class IntentKind(str, Enum):
    """Kind of aggregate a query asks for."""

    TOTAL = "total"
    EXTREMUM = "extremum"
    AVERAGE = "average"
    UNRECOGNIZED = "unrecognized"


class ExtremumDirection(str, Enum):
    HIGHEST = "highest"
    LOWEST = "lowest"


class AverageMode(str, Enum):
    OVERALL = "overall"
    DAILY = "daily"
    MONTHLY = "monthly"


@dataclass(frozen=True)
class QueryIntent:
    """What the user wants computed."""

    kind: IntentKind
    direction: ExtremumDirection | None = None  # EXTREMUM only
    mode: AverageMode | None = None  # AVERAGE only


def _extremum(text: str) -> QueryIntent:
    direction = ExtremumDirection.HIGHEST if "highest" in text else ExtremumDirection.LOWEST
    return QueryIntent(IntentKind.EXTREMUM, direction=direction)


def _average(text: str) -> QueryIntent:
    if "daily" in text:
        mode = AverageMode.DAILY
    elif "monthly" in text:
        mode = AverageMode.MONTHLY
    else:
        mode = AverageMode.OVERALL
    return QueryIntent(IntentKind.AVERAGE, mode=mode)


# Evaluated top to bottom, first match wins: "average ... total" is an AVERAGE query
_INTENT_RULES: list[tuple[Callable[[str], bool], Callable[[str], QueryIntent]]] = [
    (lambda text: "highest" in text or "lowest" in text, _extremum),
    (lambda text: "average" in text, _average),
    (lambda text: "total" in text, lambda text: QueryIntent(IntentKind.TOTAL)),
]


def classify_intent(query: str) -> QueryIntent:
    """Decide which aggregate the query asks for."""
    text = query.lower()
    for matches, build in _INTENT_RULES:
        if matches(text):
            return build(text)
    return QueryIntent(IntentKind.UNRECOGNIZED)


def _first_term(text: str, vocabulary: tuple[str, ...]) -> str | None:
    for term in vocabulary:
        if term in text:
            return term
    return None


def extract_category_filter(query: str, include_sub_categories: bool = False) -> CategoryFilter | None:
    """
    Find the category filter embedded in the query.

    Only one term ever applies. When ``include_sub_categories`` is set (total
    queries), food sub-categories are checked before categories.
    """
    text = query.lower()
    if include_sub_categories:
        sub_category = _first_term(text, SUB_CATEGORIES)
        if sub_category:
            return CategoryFilter(sub_category=sub_category)

    category = _first_term(text, CATEGORIES)
    if category:
        return CategoryFilter(category=category)
    return None
