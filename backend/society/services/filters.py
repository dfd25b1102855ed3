"""Search and month filters for the transaction history."""
from typing import List, Sequence
from society.models.transaction import Transaction

ALL_MONTHS = "all"
MONTH_PATTERN = r"^\d{4}-\d{2}$"
MONTH_FILTER_PATTERN = r"^(all|\d{4}-\d{2})$"


def matches_query(transaction: Transaction, query: str) -> bool:
    """Case-insensitive substring match on member name or joined item titles."""
    needle = query.lower()
    member_name = (transaction.received_from or "").lower()
    item_titles = " ".join(item.title.lower() for item in transaction.items)
    return needle in item_titles or needle in member_name


def matches_month(transaction: Transaction, month: str) -> bool:
    return month == ALL_MONTHS or transaction.date.startswith(month)


def filter_transactions(
    transactions: Sequence[Transaction],
    query: str = "",
    month: str = ALL_MONTHS,
) -> List[Transaction]:
    """
    Narrow the collection by free-text query and calendar month.

    Both conditions must hold. An empty query matches everything. The
    relative order of the input is preserved.
    """
    return [
        t for t in transactions
        if matches_query(t, query) and matches_month(t, month)
    ]


def available_months(transactions: Sequence[Transaction]) -> List[str]:
    """Distinct YYYY-MM values present in the collection, newest first."""
    return sorted({t.month for t in transactions}, reverse=True)
