"""Localized display labels for categories, types, payment methods, dates and amounts.

Every enum member must have a label in every language. The tables are
checked when this module is imported, so adding a member without labels
fails loudly instead of leaking the raw value into the UI.
"""
from datetime import date
from enum import Enum
from typing import Dict, Type
from society.models.preferences import Language
from society.models.transaction import Category, PaymentMethod, TransactionType

CURRENCY_SYMBOL = "৳"

CATEGORY_LABELS: Dict[Category, Dict[Language, str]] = {
    Category.SAVINGS: {Language.ENGLISH: "Savings", Language.BENGALI: "সঞ্চয়"},
    Category.LOAN_REPAYMENT: {Language.ENGLISH: "Loan Repayment", Language.BENGALI: "ঋণ পরিশোধ"},
    Category.MEMBERSHIP_FEE: {Language.ENGLISH: "Membership Fee", Language.BENGALI: "সদস্যপদ ফি"},
    Category.DONATION: {Language.ENGLISH: "Donation", Language.BENGALI: "দান"},
    Category.LOAN_DISBURSEMENT: {Language.ENGLISH: "Loan Disbursement", Language.BENGALI: "ঋণ বিতরণ"},
    Category.WITHDRAWAL: {Language.ENGLISH: "Withdrawal", Language.BENGALI: "উত্তোলন"},
    Category.OTHERS: {Language.ENGLISH: "Others", Language.BENGALI: "অন্যান্য"},
}

TYPE_LABELS: Dict[TransactionType, Dict[Language, str]] = {
    TransactionType.INCOME: {Language.ENGLISH: "Deposit / Income", Language.BENGALI: "জমা / আয়"},
    TransactionType.EXPENSE: {Language.ENGLISH: "Withdrawal / Expense", Language.BENGALI: "উত্তোলন / ব্যয়"},
}

PAYMENT_METHOD_LABELS: Dict[PaymentMethod, Dict[Language, str]] = {
    PaymentMethod.CASH: {Language.ENGLISH: "Cash", Language.BENGALI: "নগদ"},
    PaymentMethod.BANK: {Language.ENGLISH: "Bank", Language.BENGALI: "ব্যাংক"},
    PaymentMethod.BKASH: {Language.ENGLISH: "bKash", Language.BENGALI: "বিকাশ"},
    PaymentMethod.NAGAD: {Language.ENGLISH: "Nagad", Language.BENGALI: "নগদ (মোবাইল)"},
    PaymentMethod.ROCKET: {Language.ENGLISH: "Rocket", Language.BENGALI: "রকেট"},
}

# Monday first, matching date.weekday()
WEEKDAY_SHORT: Dict[Language, tuple] = {
    Language.ENGLISH: ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"),
    Language.BENGALI: ("সোম", "মঙ্গল", "বুধ", "বৃহস্পতি", "শুক্র", "শনি", "রবি"),
}

MONTH_SHORT: Dict[Language, tuple] = {
    Language.ENGLISH: (
        "Jan", "Feb", "Mar", "Apr", "May", "Jun",
        "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
    ),
    Language.BENGALI: (
        "জানু", "ফেব্রু", "মার্চ", "এপ্রিল", "মে", "জুন",
        "জুলাই", "আগস্ট", "সেপ্টে", "অক্টো", "নভে", "ডিসে",
    ),
}

GENERAL_MEMBER: Dict[Language, str] = {
    Language.ENGLISH: "General Member",
    Language.BENGALI: "সাধারণ সদস্য",
}

_BENGALI_DIGITS = str.maketrans("0123456789", "০১২৩৪৫৬৭৮৯")


def _require_complete(table: Dict, enum_cls: Type[Enum]) -> None:
    missing = [member for member in enum_cls if member not in table]
    if missing:
        raise RuntimeError(f"Missing labels for {enum_cls.__name__}: {missing}")
    if enum_cls is Language:
        return
    for member, by_language in table.items():
        absent = [lang for lang in Language if lang not in by_language]
        if absent:
            raise RuntimeError(f"Missing {absent} labels for {member!r}")


_require_complete(CATEGORY_LABELS, Category)
_require_complete(TYPE_LABELS, TransactionType)
_require_complete(PAYMENT_METHOD_LABELS, PaymentMethod)
_require_complete(GENERAL_MEMBER, Language)


def category_label(category: Category, language: Language) -> str:
    return CATEGORY_LABELS[category][language]


def type_label(transaction_type: TransactionType, language: Language) -> str:
    return TYPE_LABELS[transaction_type][language]


def payment_method_label(method: PaymentMethod, language: Language) -> str:
    return PAYMENT_METHOD_LABELS[method][language]


def general_member(language: Language) -> str:
    return GENERAL_MEMBER[language]


def localize_digits(text: str, language: Language) -> str:
    """Swap ASCII digits for Bengali digits when the language is Bengali."""
    if language == Language.BENGALI:
        return text.translate(_BENGALI_DIGITS)
    return text


def weekday_label(iso_date: str, language: Language) -> str:
    """Short weekday name for an ISO calendar date."""
    return WEEKDAY_SHORT[language][date.fromisoformat(iso_date).weekday()]


def format_date(iso_date: str, language: Language) -> str:
    """Format an ISO date as e.g. "05 Jan 2026"."""
    d = date.fromisoformat(iso_date)
    text = f"{d.day:02d} {MONTH_SHORT[language][d.month - 1]} {d.year}"
    return localize_digits(text, language)


def format_amount(value: float, language: Language) -> str:
    """Format a money value with the taka sign and two decimals."""
    return CURRENCY_SYMBOL + localize_digits(f"{value:,.2f}", language)
