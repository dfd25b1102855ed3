"""Database storage layer using SQLite.

Every public method reports failure through its return value instead of
raising, so callers can decide how to reconcile their in-memory state.
"""
import json
import logging
import sqlite3
from abc import ABC, abstractmethod
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import List, Optional
from pydantic import BaseModel, Field
from society.config import settings
from society.models.auth import Profile
from society.models.transaction import Transaction

logger = logging.getLogger(__name__)


class StoreResult(BaseModel):
    """Outcome of one store operation."""

    ok: bool
    error: Optional[str] = None
    transactions: List[Transaction] = Field(default_factory=list)

    @classmethod
    def success(cls, transactions: Optional[List[Transaction]] = None) -> "StoreResult":
        return cls(ok=True, transactions=transactions or [])

    @classmethod
    def failure(cls, error: str) -> "StoreResult":
        return cls(ok=False, error=error)


class _SQLiteStore(ABC):
    """Shared connection handling; subclasses create their own tables."""

    def __init__(self, db_path: str):
        self.db_path = db_path
        self._init_db()

    @abstractmethod
    def _init_db(self):
        """Create the tables this store needs."""
        pass

    @contextmanager
    def _get_conn(self):
        """Get database connection."""
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        try:
            yield conn
        finally:
            conn.close()


class TransactionStore(_SQLiteStore):
    """Durable copy of the society's transactions."""

    def _init_db(self):
        """Initialize database tables."""
        with self._get_conn() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS transactions (
                    id TEXT PRIMARY KEY,
                    date TEXT NOT NULL,
                    type TEXT NOT NULL,
                    items TEXT NOT NULL,
                    total_amount REAL NOT NULL,
                    payment_method TEXT NOT NULL,
                    received_from TEXT,
                    mobile_number TEXT,
                    created_at TEXT NOT NULL
                )
            """)
            conn.execute("""
                CREATE INDEX IF NOT EXISTS idx_transactions_date
                ON transactions(date)
            """)
            conn.commit()

    def list_transactions(self) -> StoreResult:
        """All transactions, newest date first."""
        try:
            with self._get_conn() as conn:
                rows = conn.execute("""
                    SELECT * FROM transactions
                    ORDER BY date DESC, created_at DESC
                """).fetchall()
                transactions = [
                    Transaction(
                        id=row["id"],
                        date=row["date"],
                        type=row["type"],
                        items=json.loads(row["items"]),
                        total_amount=row["total_amount"],
                        payment_method=row["payment_method"],
                        received_from=row["received_from"],
                        mobile_number=row["mobile_number"],
                    )
                    for row in rows
                ]
        except (sqlite3.Error, ValueError) as e:
            logger.error("Error fetching transactions", extra={"error": str(e)})
            return StoreResult.failure(str(e))
        return StoreResult.success(transactions)

    def insert_transaction(self, transaction: Transaction) -> StoreResult:
        """Insert one transaction. An existing id is a failure, not an overwrite."""
        items = [item.model_dump(mode="json", by_alias=True) for item in transaction.items]
        try:
            with self._get_conn() as conn:
                conn.execute("""
                    INSERT INTO transactions
                    (id, date, type, items, total_amount, payment_method, received_from, mobile_number, created_at)
                    VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
                """, (
                    transaction.id,
                    transaction.date,
                    transaction.type.value,
                    json.dumps(items),
                    transaction.total_amount,
                    transaction.payment_method.value,
                    transaction.received_from,
                    transaction.mobile_number,
                    datetime.now(timezone.utc).isoformat(),
                ))
                conn.commit()
        except sqlite3.Error as e:
            logger.error("Error adding transaction", extra={"transaction_id": transaction.id, "error": str(e)})
            return StoreResult.failure(str(e))
        return StoreResult.success()

    def delete_transaction(self, transaction_id: str) -> StoreResult:
        """Delete by id. Deleting an id that is not stored is not an error."""
        try:
            with self._get_conn() as conn:
                conn.execute("DELETE FROM transactions WHERE id = ?", (transaction_id,))
                conn.commit()
        except sqlite3.Error as e:
            logger.error("Error deleting transaction", extra={"transaction_id": transaction_id, "error": str(e)})
            return StoreResult.failure(str(e))
        return StoreResult.success()


class ProfileStore(_SQLiteStore):
    """Profiles used to confirm that a remembered session user still exists."""

    def _init_db(self):
        """Initialize database tables."""
        with self._get_conn() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS profiles (
                    username TEXT PRIMARY KEY,
                    email TEXT,
                    created_at TEXT NOT NULL
                )
            """)
            conn.commit()

    def find_profile(self, username: str) -> Optional[Profile]:
        try:
            with self._get_conn() as conn:
                row = conn.execute(
                    "SELECT username, email FROM profiles WHERE username = ?",
                    (username,),
                ).fetchone()
        except sqlite3.Error as e:
            logger.error("Error looking up profile", extra={"username": username, "error": str(e)})
            return None
        if not row:
            return None
        return Profile(username=row["username"], email=row["email"])

    def upsert_profile(self, profile: Profile) -> StoreResult:
        try:
            with self._get_conn() as conn:
                conn.execute("""
                    INSERT OR REPLACE INTO profiles (username, email, created_at)
                    VALUES (?, ?, ?)
                """, (
                    profile.username,
                    profile.email,
                    datetime.now(timezone.utc).isoformat(),
                ))
                conn.commit()
        except sqlite3.Error as e:
            logger.error("Error saving profile", extra={"username": profile.username, "error": str(e)})
            return StoreResult.failure(str(e))
        return StoreResult.success()


# Global instances
_transaction_store = None
_profile_store = None


def get_db():
    """Get database store instances."""
    global _transaction_store, _profile_store
    if _transaction_store is None:
        _transaction_store = TransactionStore(settings.database_path)
    if _profile_store is None:
        _profile_store = ProfileStore(settings.database_path)
    return _transaction_store, _profile_store
