"""Data models for ExpenseBot."""

from datetime import datetime
from enum import Enum
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class ExpenseCategory(str, Enum):
    """Supported expense categories."""

    FOOD = "Food"
    TRAVEL = "Travel"
    GROCERIES = "Groceries"
    RENT = "Rent"
    OTHER = "Other"


class FoodSubCategory(str, Enum):
    """Meal types, only used for Food expenses."""

    BREAKFAST = "Breakfast"
    LUNCH = "Lunch"
    DINNER = "Dinner"
    SNACKS = "Snacks"
    DRINKS = "Drinks"


class Expense(BaseModel):
    """A recorded expense."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID = Field(default_factory=uuid4)
    category: ExpenseCategory
    sub_category: FoodSubCategory | None = None  # Food only
    description: str | None = None  # Everything except Food
    amount: float = Field(ge=0)
    date: datetime


class ExpenseCreate(BaseModel):
    """Expense data for creation (before ID assignment)."""

    category: ExpenseCategory
    sub_category: FoodSubCategory | None = None
    description: str | None = None
    amount: float = Field(gt=0)
    date: datetime | None = None  # Defaults to now


class QueryRequest(BaseModel):
    """Free-text question about expenses."""

    query: str


class QueryResponse(BaseModel):
    """Answer to a free-text question."""

    answer: str


class SummaryResponse(BaseModel):
    """Spending summary for the dashboard."""

    total: float
    by_category: dict[str, float]
    by_month: dict[str, float]
    expense_count: int
