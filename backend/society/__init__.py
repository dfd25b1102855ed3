"""Unity Savings Society ledger backend."""

__version__ = "1.0.0"
