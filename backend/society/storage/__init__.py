from .database import StoreResult, TransactionStore, ProfileStore, get_db
from .local_state import LocalStateStore

__all__ = ["StoreResult", "TransactionStore", "ProfileStore", "get_db", "LocalStateStore"]
