"""FastAPI application for ExpenseBot."""

import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from expensebot.config import settings
from expensebot.db.sqlite import db
from expensebot.models import Expense, ExpenseCreate, QueryRequest, QueryResponse, SummaryResponse
from expensebot.services.expenses import build_expense
from expensebot.services.query_engine import answer
from expensebot.services.summary import summarize_expenses

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="ExpenseBot",
    description="Personal expense tracker with a keyword-driven spending chat",
    version="0.1.0",
)

# CORS for the web frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
async def startup():
    """Initialize on startup."""
    settings.ensure_directories()
    settings.log_config()


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "expense_count": db.get_expense_count()}


@app.get("/expenses", response_model=list[Expense])
async def get_expenses():
    """Get all expenses, most recent first."""
    return db.get_all_expenses()


@app.post("/expenses", response_model=Expense, status_code=201)
async def create_expense(data: ExpenseCreate):
    """Record a new expense."""
    try:
        expense = build_expense(data)
    except ValueError as e:
        logger.warning(f"Rejected expense: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    db.add_expense(expense)
    return expense


@app.post("/query", response_model=QueryResponse)
async def query(request: QueryRequest):
    """Answer a free-text question about expenses."""
    # One snapshot per question so the answer matches the data it was computed from
    snapshot = db.get_all_expenses()
    try:
        return QueryResponse(answer=answer(request.query, snapshot))
    except Exception as e:
        logger.exception("Query failed")
        raise HTTPException(status_code=500, detail=f"Query error: {str(e)}")


@app.get("/summary", response_model=SummaryResponse)
async def get_summary():
    """Get total, per-category and per-month spending."""
    summary = summarize_expenses(db.get_all_expenses())
    return SummaryResponse(
        total=summary.total,
        by_category=summary.by_category,
        by_month=summary.by_month,
        expense_count=summary.expense_count,
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "expensebot.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.dev_mode,
    )
