from .transaction import (
    Category,
    TransactionType,
    PaymentMethod,
    TransactionItem,
    Transaction,
    FinancialSummary,
)
from .preferences import Language, Theme
from .summary import (
    ChartPoint,
    DashboardResponse,
    TransactionListResponse,
    ItemInput,
    TransactionCreateRequest,
    AdviceResponse,
    NextIdResponse,
    TransactionCreatedResponse,
)
from .receipt import ReceiptKind, ReceiptLine, ReceiptLabels, ReceiptDocument
from .auth import (
    Credentials,
    Profile,
    RegisterRequest,
    LoginRequest,
    ResetRequest,
    SessionResponse,
    PreferencesResponse,
    PreferencesUpdate,
    Scheme,
)

__all__ = [
    "Category",
    "TransactionType",
    "PaymentMethod",
    "TransactionItem",
    "Transaction",
    "FinancialSummary",
    "Language",
    "Theme",
    "ChartPoint",
    "DashboardResponse",
    "TransactionListResponse",
    "ItemInput",
    "TransactionCreateRequest",
    "AdviceResponse",
    "NextIdResponse",
    "TransactionCreatedResponse",
    "ReceiptKind",
    "ReceiptLine",
    "ReceiptLabels",
    "ReceiptDocument",
    "Credentials",
    "Profile",
    "RegisterRequest",
    "LoginRequest",
    "ResetRequest",
    "SessionResponse",
    "PreferencesResponse",
    "PreferencesUpdate",
    "Scheme",
]
