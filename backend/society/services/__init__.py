from .aggregation import compute_summary, category_distribution, weekly_trend, build_dashboard
from .filters import filter_transactions, available_months
from .receipts import build_receipt
from .ledger import LedgerService, LedgerResult, ReceiptDraft
from .advice import AdviceService
from .credentials import CredentialStore, CredentialError
from .schemes import SOCIETY_SCHEMES, search_schemes

__all__ = [
    "compute_summary",
    "category_distribution",
    "weekly_trend",
    "build_dashboard",
    "filter_transactions",
    "available_months",
    "build_receipt",
    "LedgerService",
    "LedgerResult",
    "ReceiptDraft",
    "AdviceService",
    "CredentialStore",
    "CredentialError",
    "SOCIETY_SCHEMES",
    "search_schemes",
]
