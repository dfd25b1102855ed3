"""Printable receipt / voucher document model."""
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field


class ReceiptKind(str, Enum):
    RECEIPT = "receipt"
    VOUCHER = "voucher"


class ReceiptLine(BaseModel):
    """One row of the item table."""

    title: str
    quantity: int
    total: float
    total_display: str


class ReceiptLabels(BaseModel):
    """Localized captions for every printed field."""

    title: str
    tagline: str
    party: str
    mobile: str
    date: str
    time: str
    payment_method: str
    receipt_no: str
    description: str
    quantity: str
    amount: str
    grand_total: str
    member_signature: str
    collector_signature: str
    thank_you: str
    system_generated: str


class ReceiptDocument(BaseModel):
    """Everything needed to render and print one transaction."""

    receipt_no: str = Field(..., description="The transaction id, unchanged")
    kind: ReceiptKind
    language: str
    store_name: str
    labels: ReceiptLabels
    show_cash_stamp: bool
    cash_stamp: Optional[str] = None
    member_name: str
    mobile_number: Optional[str] = None
    date: str
    date_display: str
    time_display: Optional[str] = None
    payment_method: str
    lines: List[ReceiptLine]
    grand_total: float
    grand_total_display: str
    contact_email: str
    print_filename: str
