"""In-memory transaction ledger kept in sync with the transaction store.

Writes are optimistic: memory changes first, the store is called second,
and memory is rolled back if the store reports failure. Adds and deletes
follow the same rollback policy.
"""
import json
import logging
from datetime import date, datetime, timezone
from typing import List, Optional, Tuple
from pydantic import BaseModel
from society.context import AppContext
from society.models.preferences import Language
from society.models.summary import DashboardResponse
from society.models.transaction import (
    Category,
    FinancialSummary,
    PaymentMethod,
    Transaction,
    TransactionItem,
    TransactionType,
)
from society.services.aggregation import build_dashboard, compute_summary
from society.services.filters import ALL_MONTHS, filter_transactions
from society.services.labels import general_member
from society.storage.database import TransactionStore

logger = logging.getLogger(__name__)

RECEIPT_PREFIX = "USS"

SAVE_FAILED = {
    Language.ENGLISH: "Error saving to cloud.",
    Language.BENGALI: "তথ্য সেভ করতে সমস্যা হয়েছে।",
}
DELETE_FAILED = {
    Language.ENGLISH: "Error deleting from cloud.",
    Language.BENGALI: "মুছে ফেলতে সমস্যা হয়েছে।",
}


class LedgerResult(BaseModel):
    """Outcome of one user action on the ledger."""

    ok: bool
    code: str = "ok"
    message: Optional[str] = None
    transaction: Optional[Transaction] = None


def format_receipt_id(year: int, sequence: int) -> str:
    return f"{RECEIPT_PREFIX}-{year}-{sequence:03d}"


class ReceiptDraft:
    """Collects line items before a transaction is finalized."""

    def __init__(self, language: Language = Language.ENGLISH):
        self.language = language
        self.items: List[TransactionItem] = []

    def add_item(
        self,
        title: str,
        price_per_unit: Optional[float],
        quantity: Optional[int] = 1,
        category: Category = Category.SAVINGS,
    ) -> Optional[TransactionItem]:
        """Add a line; a blank title or missing price is ignored."""
        if not title or price_per_unit is None:
            return None
        item = TransactionItem.create(
            title=title,
            category=category,
            price_per_unit=price_per_unit,
            quantity=quantity or 1,
        )
        self.items.append(item)
        return item

    def remove_item(self, item_id: str) -> None:
        self.items = [item for item in self.items if item.id != item_id]

    @property
    def grand_total(self) -> float:
        return sum(item.total for item in self.items)

    def build(
        self,
        transaction_id: str,
        transaction_date: str,
        transaction_type: TransactionType = TransactionType.INCOME,
        payment_method: PaymentMethod = PaymentMethod.CASH,
        received_from: Optional[str] = None,
        mobile_number: Optional[str] = None,
    ) -> Transaction:
        """
        Finalize the draft.

        Raises:
            ValueError: If no items were added
        """
        if not self.items:
            raise ValueError("Receipt is empty")
        return Transaction.create(
            id=transaction_id,
            date=transaction_date,
            type=transaction_type,
            items=list(self.items),
            payment_method=payment_method,
            received_from=received_from or general_member(self.language),
            mobile_number=mobile_number,
        )


class LedgerService:
    """Owns the session's transaction collection."""

    def __init__(self, store: TransactionStore, context: AppContext):
        self.store = store
        self.context = context
        self._transactions: List[Transaction] = []
        self.loaded = False

    @property
    def transactions(self) -> List[Transaction]:
        return list(self._transactions)

    def load(self) -> List[Transaction]:
        """Replace memory with the stored list. A failed read leaves it empty."""
        result = self.store.list_transactions()
        if result.ok:
            self._transactions = list(result.transactions)
        else:
            logger.error("Error fetching transactions", extra={"error": result.error})
            self._transactions = []
        self.loaded = True
        return self.transactions

    def get(self, transaction_id: str) -> Optional[Transaction]:
        for t in self._transactions:
            if t.id == transaction_id:
                return t
        return None

    def next_receipt_id(self, today: Optional[date] = None) -> str:
        """
        Next ``USS-<year>-<nnn>`` number: count + 1, advanced past any id
        already present in memory.
        """
        year = (today or datetime.now(timezone.utc).date()).year
        existing = {t.id for t in self._transactions}
        sequence = len(self._transactions) + 1
        while format_receipt_id(year, sequence) in existing:
            sequence += 1
        return format_receipt_id(year, sequence)

    def draft(self) -> ReceiptDraft:
        return ReceiptDraft(self.context.language)

    def add(self, transaction: Transaction) -> LedgerResult:
        """Prepend, persist, and roll back the prepend if the store fails."""
        self._transactions.insert(0, transaction)

        result = self.store.insert_transaction(transaction)
        if not result.ok:
            self._remove_exact(transaction)
            logger.error("Error adding transaction", extra={"transaction_id": transaction.id, "error": result.error})
            return LedgerResult(ok=False, code="save_failed", message=SAVE_FAILED[self.context.language])

        logger.info("Transaction recorded", extra={"transaction_id": transaction.id, "total": transaction.total_amount})
        return LedgerResult(ok=True, transaction=transaction)

    def delete(self, transaction_id: str) -> LedgerResult:
        """Remove, persist, and restore at the original position if the store fails."""
        position, transaction = self._find(transaction_id)
        if transaction is None:
            return LedgerResult(ok=False, code="not_found", message=f"Transaction {transaction_id} not found")
        del self._transactions[position]

        result = self.store.delete_transaction(transaction_id)
        if not result.ok:
            self._transactions.insert(position, transaction)
            logger.error("Error deleting transaction", extra={"transaction_id": transaction_id, "error": result.error})
            return LedgerResult(ok=False, code="delete_failed", message=DELETE_FAILED[self.context.language])

        logger.info("Transaction deleted", extra={"transaction_id": transaction_id})
        return LedgerResult(ok=True, transaction=transaction)

    def summary(self, current_month: Optional[str] = None) -> FinancialSummary:
        return compute_summary(self._transactions, current_month)

    def dashboard(self, current_month: Optional[str] = None) -> DashboardResponse:
        return build_dashboard(self._transactions, self.context.language, current_month)

    def search(self, query: str = "", month: str = ALL_MONTHS) -> List[Transaction]:
        return filter_transactions(self._transactions, query, month)

    def export_backup(self, today: Optional[date] = None) -> Tuple[str, str]:
        """Return ``(filename, json_text)`` for a download of every transaction."""
        day = today or datetime.now(timezone.utc).date()
        filename = f"unity_savings_backup_{day.isoformat()}.json"
        payload = [t.model_dump(mode="json", by_alias=True) for t in self._transactions]
        return filename, json.dumps(payload, ensure_ascii=False, indent=2)

    def _find(self, transaction_id: str) -> Tuple[int, Optional[Transaction]]:
        for position, t in enumerate(self._transactions):
            if t.id == transaction_id:
                return position, t
        return -1, None

    def _remove_exact(self, transaction: Transaction) -> None:
        for position, t in enumerate(self._transactions):
            if t is transaction:
                del self._transactions[position]
                return
