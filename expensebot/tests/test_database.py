"""Tests for the SQLite expense store."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from expensebot.db.sqlite import Database
from expensebot.models import Expense, ExpenseCategory, FoodSubCategory


def make_expense(
    amount: float,
    when: datetime,
    category: ExpenseCategory = ExpenseCategory.OTHER,
    sub_category: FoodSubCategory | None = None,
    description: str | None = None,
) -> Expense:
    """Helper to create a test expense."""
    return Expense(
        category=category,
        sub_category=sub_category,
        description=description,
        amount=amount,
        date=when,
    )


@pytest.fixture
def database(tmp_path):
    return Database(db_path=tmp_path / "expenses.db")


class TestDatabase:
    """Test storing and reading expenses."""

    def test_starts_empty(self, database):
        assert database.get_expense_count() == 0
        assert database.get_all_expenses() == []

    def test_round_trip(self, database):
        lunch = make_expense(250.0, datetime(2025, 5, 21, 13, 0), ExpenseCategory.FOOD, FoodSubCategory.LUNCH)
        rent = make_expense(15000.0, datetime(2025, 5, 1, 9, 0), ExpenseCategory.RENT, description="May rent")
        database.add_expense(lunch)
        database.add_expense(rent)

        assert database.get_expense_count() == 2
        assert database.get_expense(lunch.id) == lunch
        assert database.get_expense(rent.id) == rent

    def test_lists_most_recent_first(self, database):
        for day in (3, 10, 1):
            database.add_expense(make_expense(float(day), datetime(2025, 5, day), description="x"))

        assert [e.date.day for e in database.get_all_expenses()] == [10, 3, 1]

    def test_orders_by_real_time_across_utc_offsets(self, database):
        """23:00 at +05:30 is 17:30 UTC, so it is older than 20:00 UTC the same day."""
        ist = timezone(timedelta(hours=5, minutes=30))
        early = make_expense(1.0, datetime(2025, 5, 21, 23, 0, tzinfo=ist), description="early")
        late = make_expense(2.0, datetime(2025, 5, 21, 20, 0, tzinfo=timezone.utc), description="late")
        database.add_expense(early)
        database.add_expense(late)

        assert [e.description for e in database.get_all_expenses()] == ["late", "early"]

    def test_equal_dates_keep_insertion_order(self, database):
        when = datetime(2025, 5, 21, 9, 0)
        for name in ("first", "second", "third"):
            database.add_expense(make_expense(5.0, when, description=name))

        assert [e.description for e in database.get_all_expenses()] == ["first", "second", "third"]

    def test_missing_expense(self, database):
        assert database.get_expense(uuid4()) is None
