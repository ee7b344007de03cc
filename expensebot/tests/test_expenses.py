"""Tests for expense creation rules."""

from datetime import datetime

import pytest
from pydantic import ValidationError

from expensebot.models import ExpenseCategory, ExpenseCreate, FoodSubCategory
from expensebot.services.expenses import build_expense


class TestBuildExpense:
    """Test category-dependent validation."""

    def test_food_requires_sub_category(self):
        with pytest.raises(ValueError, match="Sub-category is required for Food expenses"):
            build_expense(ExpenseCreate(category=ExpenseCategory.FOOD, amount=100))

    def test_non_food_requires_description(self):
        with pytest.raises(ValueError, match="Description is required for non-Food expenses"):
            build_expense(ExpenseCreate(category=ExpenseCategory.RENT, amount=100, description="   "))

    def test_food_drops_description(self):
        expense = build_expense(
            ExpenseCreate(
                category=ExpenseCategory.FOOD,
                sub_category=FoodSubCategory.LUNCH,
                description="ignored",
                amount=250,
            )
        )
        assert expense.sub_category == FoodSubCategory.LUNCH
        assert expense.description is None

    def test_non_food_drops_sub_category_and_strips_description(self):
        expense = build_expense(
            ExpenseCreate(
                category=ExpenseCategory.TRAVEL,
                sub_category=FoodSubCategory.DRINKS,
                description="  Train to Pune ",
                amount=800,
            )
        )
        assert expense.sub_category is None
        assert expense.description == "Train to Pune"

    def test_date_defaults_to_now(self):
        now = datetime(2025, 5, 21, 9, 0)
        expense = build_expense(ExpenseCreate(category=ExpenseCategory.OTHER, description="Gift", amount=10), now=now)
        assert expense.date == now

    def test_explicit_date_is_kept(self):
        when = datetime(2025, 1, 2, 12, 0)
        data = ExpenseCreate(category=ExpenseCategory.OTHER, description="Gift", amount=10, date=when)
        assert build_expense(data, now=datetime(2025, 5, 21)).date == when

    @pytest.mark.parametrize("amount", [0, -5])
    def test_amount_must_be_positive(self, amount):
        with pytest.raises(ValidationError):
            ExpenseCreate(category=ExpenseCategory.OTHER, description="Gift", amount=amount)
