"""Summary figures and chart datasets derived from the transaction list."""
from collections import defaultdict
from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence
from society.models.preferences import Language
from society.models.summary import ChartPoint, DashboardResponse
from society.models.transaction import (
    Category,
    FinancialSummary,
    Transaction,
    TransactionType,
)
from society.services.labels import category_label, weekday_label

WEEKLY_TREND_DAYS = 7


def current_month_string(now: Optional[datetime] = None) -> str:
    """Return the calendar month of ``now`` (UTC wall clock by default) as YYYY-MM."""
    reference = now if now else datetime.now(timezone.utc)
    return reference.strftime("%Y-%m")


def compute_summary(
    transactions: Sequence[Transaction],
    current_month: Optional[str] = None,
) -> FinancialSummary:
    """
    Compute the dashboard summary.

    Income and expense are scoped to ``current_month`` by prefix match on
    the ISO date. The balance runs over every transaction regardless of date.

    Args:
        transactions: Full in-memory collection
        current_month: YYYY-MM; resolved from the wall clock when omitted

    Returns:
        FinancialSummary, recomputed from scratch on every call
    """
    month = current_month or current_month_string()

    total_income = sum(
        t.total_amount
        for t in transactions
        if t.type == TransactionType.INCOME and t.date.startswith(month)
    )
    total_expense = sum(
        t.total_amount
        for t in transactions
        if t.type == TransactionType.EXPENSE and t.date.startswith(month)
    )
    current_balance = sum(t.signed_amount for t in transactions)

    return FinancialSummary(
        current_balance=current_balance,
        total_income=total_income,
        total_expense=total_expense,
        total_items_sold=len(transactions),
    )


def category_distribution(
    transactions: Sequence[Transaction],
    language: Language = Language.ENGLISH,
) -> List[ChartPoint]:
    """Sum item totals per category across all income transactions."""
    totals: Dict[Category, float] = defaultdict(float)
    for t in transactions:
        if t.type != TransactionType.INCOME:
            continue
        for item in t.items:
            totals[item.category] += item.total

    return [
        ChartPoint(label=category_label(category, language), value=value)
        for category, value in totals.items()
    ]


def weekly_trend(
    transactions: Sequence[Transaction],
    language: Language = Language.ENGLISH,
) -> List[ChartPoint]:
    """Income per date for the last seven distinct dates, oldest first."""
    per_date: Dict[str, float] = defaultdict(float)
    for t in transactions:
        if t.type == TransactionType.INCOME:
            per_date[t.date] += t.total_amount

    # ISO dates sort chronologically as strings
    recent_dates = sorted(per_date)[-WEEKLY_TREND_DAYS:]
    return [
        ChartPoint(label=weekday_label(d, language), value=per_date[d])
        for d in recent_dates
    ]


def build_dashboard(
    transactions: Sequence[Transaction],
    language: Language = Language.ENGLISH,
    current_month: Optional[str] = None,
) -> DashboardResponse:
    """Summary cards and both charts for one dashboard render."""
    month = current_month or current_month_string()
    return DashboardResponse(
        summary=compute_summary(transactions, month),
        category_distribution=category_distribution(transactions, language),
        weekly_trend=weekly_trend(transactions, language),
        current_month=month,
    )
