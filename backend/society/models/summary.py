"""Dashboard, request and response models."""
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from society.models.receipt import ReceiptDocument
from society.models.transaction import (
    Category,
    FinancialSummary,
    PaymentMethod,
    Transaction,
    TransactionType,
    check_iso_date,
)


class ChartPoint(BaseModel):
    """A labelled value for the category pie or the weekly bar chart."""

    label: str
    value: float


class DashboardResponse(BaseModel):
    """Summary cards plus both chart datasets."""

    summary: FinancialSummary
    category_distribution: List[ChartPoint] = Field(default_factory=list)
    weekly_trend: List[ChartPoint] = Field(default_factory=list)
    current_month: str = Field(..., description="YYYY-MM used for income/expense totals")


class TransactionListResponse(BaseModel):
    """Filtered transaction history."""

    query: str = ""
    month: str = "all"
    count: int
    transactions: List[Transaction]
    available_months: List[str] = Field(default_factory=list)


class ItemInput(BaseModel):
    """A line item as entered on the receipt form."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(..., min_length=1)
    category: Category = Category.SAVINGS
    quantity: int = Field(1, ge=1)
    price_per_unit: float = Field(..., ge=0, alias="pricePerUnit")


class TransactionCreateRequest(BaseModel):
    """Request to record a new receipt or voucher."""

    model_config = ConfigDict(populate_by_name=True)

    type: TransactionType = TransactionType.INCOME
    items: List[ItemInput] = Field(..., min_length=1)
    payment_method: PaymentMethod = Field(PaymentMethod.CASH, alias="paymentMethod")
    received_from: Optional[str] = Field(None, alias="receivedFrom")
    mobile_number: Optional[str] = Field(None, alias="mobileNumber")
    date: Optional[str] = Field(None, description="Defaults to today's UTC date")

    @field_validator("date")
    @classmethod
    def _check_date(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        return check_iso_date(value)


class AdviceResponse(BaseModel):
    advice: str
    language: str


class NextIdResponse(BaseModel):
    id: str


class TransactionCreatedResponse(BaseModel):
    transaction: Transaction
    receipt: ReceiptDocument
