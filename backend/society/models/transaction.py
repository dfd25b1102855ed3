"""Transaction data models."""
import uuid
from datetime import date
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


def check_iso_date(value: str) -> str:
    """Accept only the extended calendar form YYYY-MM-DD."""
    if date.fromisoformat(value).isoformat() != value:
        raise ValueError(f"Date must be YYYY-MM-DD, got {value!r}")
    return value


class Category(str, Enum):
    """Purpose of a single line item."""

    SAVINGS = "Monthly Savings"
    LOAN_REPAYMENT = "Loan Repayment"
    MEMBERSHIP_FEE = "Membership Fee"
    DONATION = "Donation"
    LOAN_DISBURSEMENT = "Loan Disbursement"
    WITHDRAWAL = "Withdrawal"
    OTHERS = "Others"


class TransactionType(str, Enum):
    """Direction of money relative to the society fund."""

    INCOME = "Deposit/Income"
    EXPENSE = "Withdrawal/Expense"


class PaymentMethod(str, Enum):
    CASH = "Cash"
    BANK = "Bank"
    BKASH = "bKash"
    NAGAD = "Nagad"
    ROCKET = "Rocket"


class TransactionItem(BaseModel):
    """One line of a receipt."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="Short line item identifier")
    title: str = Field(..., min_length=1, description="Line item description")
    category: Category
    quantity: int = Field(..., ge=1)
    price_per_unit: float = Field(..., ge=0, alias="pricePerUnit")
    total: float = Field(..., ge=0, description="price_per_unit * quantity, fixed at creation")

    @classmethod
    def create(
        cls,
        title: str,
        category: Category,
        price_per_unit: float,
        quantity: int = 1,
    ) -> "TransactionItem":
        """Build an item and fix its total from price and quantity."""
        return cls(
            id=uuid.uuid4().hex[:8],
            title=title,
            category=category,
            quantity=quantity,
            price_per_unit=price_per_unit,
            total=price_per_unit * quantity,
        )


class Transaction(BaseModel):
    """A recorded deposit or withdrawal made of one or more items."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "USS-2026-001",
                "date": "2026-01-05",
                "type": "Deposit/Income",
                "items": [
                    {
                        "id": "a1b2c3d4",
                        "title": "Monthly Savings",
                        "category": "Monthly Savings",
                        "quantity": 1,
                        "pricePerUnit": 2000,
                        "total": 2000,
                    }
                ],
                "totalAmount": 2000,
                "paymentMethod": "Cash",
                "receivedFrom": "Rahim Uddin",
                "mobileNumber": "01700000000",
            }
        },
    )

    id: str = Field(..., description="Receipt number, e.g. USS-2026-001")
    date: str = Field(..., description="ISO calendar date YYYY-MM-DD")
    type: TransactionType
    items: List[TransactionItem] = Field(..., min_length=1)
    total_amount: float = Field(..., ge=0, alias="totalAmount")
    payment_method: PaymentMethod = Field(PaymentMethod.CASH, alias="paymentMethod")
    received_from: Optional[str] = Field(None, alias="receivedFrom", description="Member name")
    mobile_number: Optional[str] = Field(None, alias="mobileNumber")

    @field_validator("date")
    @classmethod
    def _check_date(cls, value: str) -> str:
        return check_iso_date(value)

    @property
    def is_income(self) -> bool:
        return self.type == TransactionType.INCOME

    @property
    def signed_amount(self) -> float:
        return self.total_amount if self.is_income else -self.total_amount

    @property
    def month(self) -> str:
        return self.date[:7]

    @classmethod
    def create(
        cls,
        id: str,
        date: str,
        type: TransactionType,
        items: List[TransactionItem],
        payment_method: PaymentMethod = PaymentMethod.CASH,
        received_from: Optional[str] = None,
        mobile_number: Optional[str] = None,
    ) -> "Transaction":
        """Build a transaction whose total is the sum of its item totals."""
        return cls(
            id=id,
            date=date,
            type=type,
            items=items,
            total_amount=sum(item.total for item in items),
            payment_method=payment_method,
            received_from=received_from,
            mobile_number=mobile_number,
        )


class FinancialSummary(BaseModel):
    """Aggregate figures for the dashboard cards. Never persisted."""

    model_config = ConfigDict(populate_by_name=True)

    current_balance: float = Field(..., alias="currentBalance")
    total_income: float = Field(..., alias="totalIncome")
    total_expense: float = Field(..., alias="totalExpense")
    total_items_sold: int = Field(..., alias="totalItemsSold")
