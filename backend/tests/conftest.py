"""Shared fixtures for the society ledger tests."""
import pytest
from society.models.transaction import (
    Category,
    PaymentMethod,
    Transaction,
    TransactionItem,
    TransactionType,
)


@pytest.fixture
def make_transaction():
    """Factory for transactions whose totals are computed from (title, category, price, qty) tuples."""
    counter = {"n": 0}

    def _make(
        id=None,
        date="2026-01-05",
        type=TransactionType.INCOME,
        items=(("Monthly Savings", Category.SAVINGS, 2000, 1),),
        received_from=None,
        mobile_number=None,
        payment_method=PaymentMethod.CASH,
    ):
        counter["n"] += 1
        line_items = [
            TransactionItem.create(title=title, category=category, price_per_unit=price, quantity=qty)
            for title, category, price, qty in items
        ]
        return Transaction.create(
            id=id or f"USS-2026-{counter['n']:03d}",
            date=date,
            type=type,
            items=line_items,
            payment_method=payment_method,
            received_from=received_from,
            mobile_number=mobile_number,
        )

    return _make


@pytest.fixture
def scenario_transactions(make_transaction):
    """One January deposit and one January loan installment payout."""
    return [
        make_transaction(
            id="USS-2026-001",
            date="2026-01-05",
            type=TransactionType.INCOME,
            items=[("Monthly Savings", Category.SAVINGS, 2000, 1)],
        ),
        make_transaction(
            id="USS-2026-002",
            date="2026-01-10",
            type=TransactionType.EXPENSE,
            items=[("Loan Installment", Category.LOAN_REPAYMENT, 500, 1)],
        ),
    ]
