"""Tests for the summary and chart aggregation."""
from datetime import datetime, timezone
import pytest
from pydantic import ValidationError
from society.models.preferences import Language
from society.models.transaction import Category, TransactionType
from society.services.aggregation import (
    build_dashboard,
    category_distribution,
    compute_summary,
    current_month_string,
    weekly_trend,
)


def test_summary_for_january_scenario(scenario_transactions):
    summary = compute_summary(scenario_transactions, "2026-01")

    assert summary.current_balance == 1500
    assert summary.total_income == 2000
    assert summary.total_expense == 500
    assert summary.total_items_sold == 2


def test_summary_after_removing_expense(scenario_transactions):
    remaining = [t for t in scenario_transactions if t.id != "USS-2026-002"]
    summary = compute_summary(remaining, "2026-01")

    assert summary.current_balance == 2000
    assert summary.total_income == 2000
    assert summary.total_expense == 0
    assert summary.total_items_sold == 1


def test_balance_ignores_month(make_transaction):
    transactions = [
        make_transaction(date="2025-06-01", items=[("Monthly Savings", Category.SAVINGS, 1000, 3)]),
        make_transaction(date="2025-12-31", type=TransactionType.EXPENSE,
                         items=[("Loan", Category.LOAN_DISBURSEMENT, 1200, 1)]),
        make_transaction(date="2026-03-15", items=[("Donation", Category.DONATION, 250, 1)]),
    ]
    summary = compute_summary(transactions, "2026-03")

    assert summary.current_balance == 3000 - 1200 + 250
    assert summary.total_income == 250
    assert summary.total_expense == 0
    assert summary.total_items_sold == 3


def test_month_boundary_is_prefix_match(make_transaction):
    transactions = [
        make_transaction(date="2024-02-28", items=[("Monthly Savings", Category.SAVINGS, 700, 1)]),
        make_transaction(date="2024-02-29", type=TransactionType.EXPENSE,
                         items=[("Withdrawal", Category.WITHDRAWAL, 300, 1)]),
        make_transaction(date="2024-03-01", items=[("Monthly Savings", Category.SAVINGS, 100, 1)]),
    ]
    summary = compute_summary(transactions, "2024-03")

    assert summary.total_income == 100
    assert summary.total_expense == 0
    assert summary.current_balance == 500


def test_items_sold_counts_transactions_not_lines(make_transaction):
    t = make_transaction(items=[
        ("Monthly Savings", Category.SAVINGS, 2000, 1),
        ("Membership Fee", Category.MEMBERSHIP_FEE, 500, 1),
        ("Donation", Category.DONATION, 50, 2),
    ])
    assert compute_summary([t], "2026-01").total_items_sold == 1


def test_empty_collection():
    summary = compute_summary([], "2026-01")
    assert summary.current_balance == 0
    assert summary.total_income == 0
    assert summary.total_expense == 0
    assert summary.total_items_sold == 0


def test_summary_is_idempotent(scenario_transactions):
    first = compute_summary(scenario_transactions, "2026-01")
    second = compute_summary(scenario_transactions, "2026-01")
    assert first == second
    assert first.model_dump() == second.model_dump()


def test_current_month_string():
    assert current_month_string(datetime(2026, 1, 31, 23, 59, tzinfo=timezone.utc)) == "2026-01"
    assert len(current_month_string()) == 7


def test_category_distribution_income_only(make_transaction):
    transactions = [
        make_transaction(date="2025-11-02", items=[
            ("Monthly Savings", Category.SAVINGS, 2000, 1),
            ("Membership Fee", Category.MEMBERSHIP_FEE, 500, 1),
        ]),
        make_transaction(date="2026-01-05", items=[("Monthly Savings", Category.SAVINGS, 1000, 2)]),
        make_transaction(date="2026-01-06", type=TransactionType.EXPENSE,
                         items=[("Loan", Category.LOAN_DISBURSEMENT, 9000, 1)]),
    ]
    points = {p.label: p.value for p in category_distribution(transactions)}

    assert points == {"Savings": 4000, "Membership Fee": 500}


def test_category_distribution_localized(make_transaction):
    transactions = [make_transaction(items=[("Donation", Category.DONATION, 80, 1)])]
    points = category_distribution(transactions, Language.BENGALI)

    assert [(p.label, p.value) for p in points] == [("দান", 80)]


def test_weekly_trend_keeps_last_seven_dates(make_transaction):
    transactions = [
        make_transaction(date=f"2026-01-{day:02d}", items=[("Monthly Savings", Category.SAVINGS, day * 10, 1)])
        for day in range(1, 10)
    ]
    # Newest-first input order must not matter
    transactions.reverse()
    points = weekly_trend(transactions)

    assert [p.label for p in points] == ["Sat", "Sun", "Mon", "Tue", "Wed", "Thu", "Fri"]
    assert [p.value for p in points] == [30, 40, 50, 60, 70, 80, 90]


def test_weekly_trend_sums_same_date_and_skips_expenses(make_transaction):
    transactions = [
        make_transaction(date="2026-01-05", items=[("Monthly Savings", Category.SAVINGS, 2000, 1)]),
        make_transaction(date="2026-01-05", items=[("Donation", Category.DONATION, 150, 1)]),
        make_transaction(date="2026-01-10", type=TransactionType.EXPENSE,
                         items=[("Loan Installment", Category.LOAN_REPAYMENT, 500, 1)]),
    ]
    points = weekly_trend(transactions, Language.BENGALI)

    assert len(points) == 1
    assert points[0].label == "সোম"
    assert points[0].value == 2150


def test_build_dashboard(scenario_transactions):
    dashboard = build_dashboard(scenario_transactions, Language.ENGLISH, "2026-01")

    assert dashboard.current_month == "2026-01"
    assert dashboard.summary.current_balance == 1500
    assert [p.label for p in dashboard.category_distribution] == ["Savings"]
    assert [p.label for p in dashboard.weekly_trend] == ["Mon"]


@pytest.mark.parametrize("value", ["20260105", "2026-W02-1", "2026-005"])
def test_only_calendar_dates_reach_the_month_totals(make_transaction, value):
    with pytest.raises(ValidationError):
        make_transaction(date=value)

    summary = compute_summary([make_transaction(date="2026-01-05")], "2026-01")
    assert summary.total_income == 2000
