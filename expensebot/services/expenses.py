"""Validation rules for new expenses."""

from datetime import datetime

from expensebot.models import Expense, ExpenseCategory, ExpenseCreate


def build_expense(data: ExpenseCreate, now: datetime | None = None) -> Expense:
    """
    Turn a create request into an Expense.

    Food expenses keep only their sub-category; everything else keeps only its
    description.

    Raises:
        ValueError: If the field required by the category is missing
    """
    if data.category == ExpenseCategory.FOOD:
        if not data.sub_category:
            raise ValueError("Sub-category is required for Food expenses")
        return Expense(
            category=data.category,
            sub_category=data.sub_category,
            amount=data.amount,
            date=data.date or now or datetime.now(),
        )

    description = (data.description or "").strip()
    if not description:
        raise ValueError("Description is required for non-Food expenses")
    return Expense(
        category=data.category,
        description=description,
        amount=data.amount,
        date=data.date or now or datetime.now(),
    )
