"""SQLite database operations for ExpenseBot."""

import logging
import sqlite3
from collections.abc import Generator
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from uuid import UUID

from expensebot.config import settings
from expensebot.models import Expense, ExpenseCategory, FoodSubCategory

logger = logging.getLogger(__name__)

# SQL schema
SCHEMA = """
CREATE TABLE IF NOT EXISTS expenses (
    id TEXT PRIMARY KEY,
    category TEXT NOT NULL,
    sub_category TEXT,
    description TEXT,
    amount REAL NOT NULL,
    date TEXT NOT NULL,
    created_at TEXT DEFAULT CURRENT_TIMESTAMP
);

CREATE INDEX IF NOT EXISTS idx_expenses_date ON expenses(date);
CREATE INDEX IF NOT EXISTS idx_expenses_category ON expenses(category);
"""

COLUMNS = "id, category, sub_category, description, amount, date"


def _sort_key(moment: datetime) -> datetime:
    """Comparable form of a naive or aware datetime (aware ones as local naive time)."""
    if moment.tzinfo is None:
        return moment
    return moment.astimezone().replace(tzinfo=None)


class Database:
    """SQLite database manager."""

    def __init__(self, db_path: Path | None = None):
        if db_path is None:
            settings.ensure_directories()
        self.db_path = db_path or settings.db_path
        self._init_db()

    def _init_db(self) -> None:
        """Initialize the database schema."""
        with self._get_connection() as conn:
            conn.executescript(SCHEMA)
            conn.commit()

    @contextmanager
    def _get_connection(self) -> Generator[sqlite3.Connection, None, None]:
        """Get a database connection."""
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        try:
            yield conn
        finally:
            conn.close()

    def add_expense(self, expense: Expense) -> None:
        """Store an expense."""
        with self._get_connection() as conn:
            conn.execute(
                f"INSERT INTO expenses ({COLUMNS}) VALUES (?, ?, ?, ?, ?, ?)",
                (
                    str(expense.id),
                    expense.category.value,
                    expense.sub_category.value if expense.sub_category else None,
                    expense.description,
                    expense.amount,
                    expense.date.isoformat(),
                ),
            )
            conn.commit()
        logger.info(f"Saved expense {expense.id} ({expense.category.value}, {expense.amount:.2f})")

    def get_all_expenses(self) -> list[Expense]:
        """Get every expense, most recent first."""
        with self._get_connection() as conn:
            cursor = conn.execute(f"SELECT {COLUMNS} FROM expenses ORDER BY rowid")
            expenses = [self._row_to_expense(row) for row in cursor.fetchall()]
        # Sorted on parsed datetimes: ISO strings with mixed offsets don't sort by real time
        return sorted(expenses, key=lambda e: _sort_key(e.date), reverse=True)

    def get_expense(self, expense_id: UUID) -> Expense | None:
        """Get a single expense by ID."""
        with self._get_connection() as conn:
            cursor = conn.execute(f"SELECT {COLUMNS} FROM expenses WHERE id = ?", (str(expense_id),))
            row = cursor.fetchone()
            return self._row_to_expense(row) if row else None

    def get_expense_count(self) -> int:
        """Get total number of expenses."""
        with self._get_connection() as conn:
            cursor = conn.execute("SELECT COUNT(*) as count FROM expenses")
            return cursor.fetchone()["count"]

    def _row_to_expense(self, row: sqlite3.Row) -> Expense:
        """Convert a database row to an Expense model."""
        return Expense(
            id=UUID(row["id"]),
            category=ExpenseCategory(row["category"]),
            sub_category=FoodSubCategory(row["sub_category"]) if row["sub_category"] else None,
            description=row["description"],
            amount=row["amount"],
            date=datetime.fromisoformat(row["date"]),
        )


# Global database instance
db = Database()
