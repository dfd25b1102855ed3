"""FastAPI main application."""
import json
import logging
from datetime import datetime, timezone
from typing import List, Optional
from dotenv import load_dotenv
from fastapi import Depends, FastAPI, HTTPException, Query, Response
from fastapi.middleware.cors import CORSMiddleware
from society.config import settings
from society.context import AppContext
from society.models.auth import (
    LoginRequest,
    PreferencesResponse,
    PreferencesUpdate,
    RegisterRequest,
    ResetRequest,
    Scheme,
    SessionResponse,
)
from society.models.receipt import ReceiptDocument
from society.models.summary import (
    AdviceResponse,
    DashboardResponse,
    NextIdResponse,
    TransactionCreateRequest,
    TransactionCreatedResponse,
    TransactionListResponse,
)
from society.models.transaction import Category, Transaction
from society.services.advice import AdviceService
from society.services.credentials import CredentialError, CredentialStore
from society.services.filters import ALL_MONTHS, MONTH_FILTER_PATTERN, MONTH_PATTERN, available_months
from society.services.ledger import LedgerService
from society.services.receipts import build_receipt
from society.services.schemes import search_schemes
from society.storage.database import get_db
from society.storage.local_state import LocalStateStore

load_dotenv()

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Logging: one line per record, extra= fields appended as JSON
# ---------------------------------------------------------------------------
_STANDARD_LOG_RECORD_KEYS = frozenset(
    (
        "name", "msg", "args", "created", "filename", "funcName", "levelname", "levelno",
        "lineno", "module", "msecs", "pathname", "process", "processName", "relativeCreated",
        "stack_info", "exc_info", "exc_text", "message", "thread", "threadName", "taskName",
        "asctime", "getMessage",
    )
)


def _format_extra(record: logging.LogRecord) -> str:
    extra = {k: getattr(record, k) for k in record.__dict__ if k not in _STANDARD_LOG_RECORD_KEYS}
    if not extra:
        return ""
    try:
        return " | " + json.dumps(extra, default=str, ensure_ascii=False)
    except (TypeError, ValueError):
        return " | " + str(extra)


class ExtraFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        suffix = _format_extra(record)
        return base + suffix if suffix else base


def _configure_logging() -> None:
    if logging.root.handlers:
        return
    logging.basicConfig(level=settings.log_level.upper(), format="%(asctime)s | %(levelname)s | %(name)s | %(message)s")
    for h in logging.root.handlers:
        h.setFormatter(ExtraFormatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s"))


_configure_logging()

# ---------------------------------------------------------------------------
# App
# ---------------------------------------------------------------------------

app = FastAPI(title=settings.app_name, debug=settings.debug, version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# Session-wide instances, created on first use
_context: Optional[AppContext] = None
_ledger: Optional[LedgerService] = None
_advice_service: Optional[AdviceService] = None


def get_context() -> AppContext:
    global _context
    if _context is None:
        _context = AppContext(LocalStateStore(settings.local_state_path)).load()
    return _context


def get_credentials(context: AppContext = Depends(get_context)) -> CredentialStore:
    _, profile_store = get_db()
    return CredentialStore(context.state, context, profile_store)


def get_ledger(context: AppContext = Depends(get_context)) -> LedgerService:
    """The in-memory ledger, loaded from the store once per process."""
    global _ledger
    if _ledger is None:
        transaction_store, _ = get_db()
        _ledger = LedgerService(transaction_store, context)
        _ledger.load()
    return _ledger


def get_advice_service() -> AdviceService:
    global _advice_service
    if _advice_service is None:
        _advice_service = AdviceService()
    return _advice_service


def require_session(context: AppContext = Depends(get_context)) -> str:
    if not context.is_authenticated:
        raise HTTPException(status_code=401, detail="Login required")
    return context.session_user


def _session(context: AppContext, credentials: CredentialStore) -> SessionResponse:
    return SessionResponse(
        username=context.session_user,
        authenticated=context.is_authenticated,
        has_credentials=credentials.has_credentials(),
    )


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _today() -> str:
    return _now().date().isoformat()


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": settings.app_name, "store_name": settings.store_name, "version": "1.0.0"}


# ---------------------------------------------------------------------------
# Preferences
# ---------------------------------------------------------------------------

@app.get("/preferences", response_model=PreferencesResponse)
async def get_preferences(context: AppContext = Depends(get_context)):
    return PreferencesResponse(language=context.language, theme=context.theme)


@app.put("/preferences", response_model=PreferencesResponse)
async def update_preferences(
    update: PreferencesUpdate,
    context: AppContext = Depends(get_context),
):
    """Change language and/or theme; each change is saved immediately."""
    if update.language is not None:
        context.set_language(update.language)
    if update.theme is not None:
        context.set_theme(update.theme)
    return PreferencesResponse(language=context.language, theme=context.theme)


# ---------------------------------------------------------------------------
# Credentials and session
# ---------------------------------------------------------------------------

@app.get("/auth/session", response_model=SessionResponse)
async def get_session(
    context: AppContext = Depends(get_context),
    credentials: CredentialStore = Depends(get_credentials),
):
    return _session(context, credentials)


@app.post("/auth/register", response_model=SessionResponse)
async def register(
    request: RegisterRequest,
    context: AppContext = Depends(get_context),
    credentials: CredentialStore = Depends(get_credentials),
):
    try:
        credentials.register(request.username, request.password, request.email)
    except CredentialError as e:
        raise HTTPException(status_code=400, detail=e.message)
    return _session(context, credentials)


@app.post("/auth/login", response_model=SessionResponse)
async def login(
    request: LoginRequest,
    context: AppContext = Depends(get_context),
    credentials: CredentialStore = Depends(get_credentials),
):
    try:
        credentials.login(request.username, request.password)
    except CredentialError as e:
        status_code = 400 if e.code == "empty" else 401
        raise HTTPException(status_code=status_code, detail=e.message)
    return _session(context, credentials)


@app.post("/auth/reset")
async def reset_pin(
    request: ResetRequest,
    credentials: CredentialStore = Depends(get_credentials),
):
    try:
        message = credentials.reset(request.username, request.password, request.confirm_password)
    except CredentialError as e:
        status_code = 404 if e.code == "no_user" else 400
        raise HTTPException(status_code=status_code, detail=e.message)
    return {"message": message}


@app.post("/auth/resume", response_model=SessionResponse)
async def resume_session(
    context: AppContext = Depends(get_context),
    credentials: CredentialStore = Depends(get_credentials),
):
    """Confirm the current session's profile still exists; clear it otherwise."""
    if credentials.verify_session() is None:
        raise HTTPException(status_code=401, detail="Session is no longer valid")
    return _session(context, credentials)


@app.post("/auth/logout", response_model=SessionResponse)
async def logout(
    context: AppContext = Depends(get_context),
    credentials: CredentialStore = Depends(get_credentials),
):
    credentials.logout()
    return _session(context, credentials)


# ---------------------------------------------------------------------------
# Ledger
# ---------------------------------------------------------------------------

@app.get("/dashboard", response_model=DashboardResponse)
async def get_dashboard(
    month: Optional[str] = Query(None, pattern=MONTH_PATTERN, description="YYYY-MM; defaults to the current month"),
    ledger: LedgerService = Depends(get_ledger),
    _user: str = Depends(require_session),
):
    """Summary cards plus the category and weekly charts."""
    return ledger.dashboard(month)


@app.get("/transactions", response_model=TransactionListResponse)
async def list_transactions(
    q: str = Query("", description="Member name or item title"),
    month: str = Query(ALL_MONTHS, pattern=MONTH_FILTER_PATTERN, description='"all" or YYYY-MM'),
    ledger: LedgerService = Depends(get_ledger),
    _user: str = Depends(require_session),
):
    filtered = ledger.search(q, month)
    return TransactionListResponse(
        query=q,
        month=month,
        count=len(filtered),
        transactions=filtered,
        available_months=available_months(ledger.transactions),
    )


@app.get("/transactions/next-id", response_model=NextIdResponse)
async def next_transaction_id(
    ledger: LedgerService = Depends(get_ledger),
    _user: str = Depends(require_session),
):
    return NextIdResponse(id=ledger.next_receipt_id())


@app.post("/transactions", response_model=TransactionCreatedResponse, status_code=201)
async def create_transaction(
    request: TransactionCreateRequest,
    ledger: LedgerService = Depends(get_ledger),
    _user: str = Depends(require_session),
):
    """
    Record a receipt or voucher.

    The receipt number, item totals and grand total are computed here; the
    client only sends titles, prices and quantities.
    """
    draft = ledger.draft()
    for item in request.items:
        draft.add_item(item.title, item.price_per_unit, item.quantity, item.category)

    transaction = draft.build(
        transaction_id=ledger.next_receipt_id(),
        transaction_date=request.date or _today(),
        transaction_type=request.type,
        payment_method=request.payment_method,
        received_from=request.received_from,
        mobile_number=request.mobile_number,
    )

    result = ledger.add(transaction)
    if not result.ok:
        raise HTTPException(status_code=502, detail=result.message)

    return TransactionCreatedResponse(
        transaction=transaction,
        receipt=build_receipt(transaction, settings.store_name, ledger.context.language),
    )


@app.get("/transactions/{transaction_id}", response_model=Transaction)
async def get_transaction(
    transaction_id: str,
    ledger: LedgerService = Depends(get_ledger),
    _user: str = Depends(require_session),
):
    transaction = ledger.get(transaction_id)
    if transaction is None:
        raise HTTPException(status_code=404, detail=f"Transaction {transaction_id} not found")
    return transaction


@app.delete("/transactions/{transaction_id}")
async def delete_transaction(
    transaction_id: str,
    ledger: LedgerService = Depends(get_ledger),
    _user: str = Depends(require_session),
):
    result = ledger.delete(transaction_id)
    if result.code == "not_found":
        raise HTTPException(status_code=404, detail=result.message)
    if not result.ok:
        raise HTTPException(status_code=502, detail=result.message)
    return {"deleted": transaction_id}


@app.get("/transactions/{transaction_id}/receipt", response_model=ReceiptDocument)
async def get_receipt(
    transaction_id: str,
    printed: bool = Query(False, description="Stamp the current time on the document"),
    ledger: LedgerService = Depends(get_ledger),
    _user: str = Depends(require_session),
):
    transaction = ledger.get(transaction_id)
    if transaction is None:
        raise HTTPException(status_code=404, detail=f"Transaction {transaction_id} not found")
    printed_at = _now() if printed else None
    return build_receipt(transaction, settings.store_name, ledger.context.language, printed_at)


@app.get("/schemes", response_model=List[Scheme])
async def list_schemes(
    q: str = Query("", description="Scheme name or short code"),
    category: Optional[Category] = Query(None),
):
    return search_schemes(q, category or "all")


@app.get("/backup")
async def download_backup(
    ledger: LedgerService = Depends(get_ledger),
    _user: str = Depends(require_session),
):
    filename, content = ledger.export_backup()
    return Response(
        content=content,
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@app.post("/advice", response_model=AdviceResponse)
async def get_advice(
    ledger: LedgerService = Depends(get_ledger),
    advice_service: AdviceService = Depends(get_advice_service),
    _user: str = Depends(require_session),
):
    """Short financial tips for the current transaction list."""
    transactions = ledger.transactions
    if not transactions:
        raise HTTPException(status_code=400, detail="No transactions to analyze")
    language = ledger.context.language
    advice = await advice_service.get_advice(transactions, language)
    return AdviceResponse(advice=advice, language=language.value)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
