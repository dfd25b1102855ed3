"""Receipt / voucher document builder.

The document is a pure function of the transaction, the store name, the
language and (optionally) the print time, so a receipt can be reprinted
identically at any later date. The grand total is always the stored
``total_amount``; it is never re-added from the items.
"""
import re
from datetime import datetime
from typing import Dict, Optional
from society.config import settings
from society.models.preferences import Language
from society.models.receipt import ReceiptDocument, ReceiptKind, ReceiptLabels, ReceiptLine
from society.models.transaction import Transaction
from society.services.labels import (
    format_amount,
    format_date,
    general_member,
    localize_digits,
    payment_method_label,
)

_UNSAFE_FILENAME_CHARS = re.compile(r"[^a-z0-9]", re.IGNORECASE)

_TEXT: Dict[str, Dict[Language, str]] = {
    "receipt_title": {Language.ENGLISH: "Money Receipt", Language.BENGALI: "মানি রিসিট"},
    "voucher_title": {Language.ENGLISH: "Payment Voucher", Language.BENGALI: "পেমেন্ট ভাউচার"},
    "tagline": {Language.ENGLISH: "Small Savings, Strong Unity", Language.BENGALI: "ক্ষুদ্র সঞ্চয়, সুদৃঢ় ঐক্য"},
    "member_name": {Language.ENGLISH: "Member Name", Language.BENGALI: "সদস্যের নাম"},
    "recipient_name": {Language.ENGLISH: "Recipient Name", Language.BENGALI: "গ্রহীতার নাম"},
    "mobile": {Language.ENGLISH: "Mobile", Language.BENGALI: "মোবাইল"},
    "date": {Language.ENGLISH: "Date", Language.BENGALI: "তারিখ"},
    "time": {Language.ENGLISH: "Time", Language.BENGALI: "সময়"},
    "payment_method": {Language.ENGLISH: "Payment Method", Language.BENGALI: "পরিশোধের মাধ্যম"},
    "receipt_no": {Language.ENGLISH: "Receipt No", Language.BENGALI: "রিসিট নং"},
    "description": {Language.ENGLISH: "Description", Language.BENGALI: "বিবরণ"},
    "quantity": {Language.ENGLISH: "Qty", Language.BENGALI: "টি"},
    "amount": {Language.ENGLISH: "Amount", Language.BENGALI: "পরিমাণ"},
    "grand_total": {Language.ENGLISH: "Total Amount:", Language.BENGALI: "সর্বমোট টাকা:"},
    "member_signature": {Language.ENGLISH: "Member Signature", Language.BENGALI: "সদস্যের স্বাক্ষর"},
    "collector_signature": {Language.ENGLISH: "Treasurer / Director", Language.BENGALI: "কোষাধ্যক্ষ / পরিচালক"},
    "thank_you": {Language.ENGLISH: "Thank you for saving with us.", Language.BENGALI: "আমাদের সাথে সঞ্চয় করার জন্য ধন্যবাদ!"},
    "system_generated": {
        Language.ENGLISH: "This is a system generated receipt and requires no physical signature.",
        Language.BENGALI: "এটি একটি কম্পিউটার জেনারেটেড রিসিট, কোন স্বাক্ষরের প্রয়োজন নেই।",
    },
    "cash_stamp": {Language.ENGLISH: "CASH RECEIVED", Language.BENGALI: "নগদ গ্রহণ"},
}


def _text(key: str, language: Language) -> str:
    return _TEXT[key][language]


def member_display_name(transaction: Transaction, language: Language) -> str:
    """Member name, or the localized "General Member" when none was recorded."""
    return transaction.received_from or general_member(language)


def print_filename(transaction: Transaction, language: Language) -> str:
    """File name for the PDF print: ``<safe_member_name>_<receipt id>``."""
    safe_name = _UNSAFE_FILENAME_CHARS.sub("_", member_display_name(transaction, language)).lower()
    return f"{safe_name}_{transaction.id}"


def _labels(is_income: bool, language: Language) -> ReceiptLabels:
    return ReceiptLabels(
        title=_text("receipt_title" if is_income else "voucher_title", language),
        tagline=_text("tagline", language),
        party=_text("member_name" if is_income else "recipient_name", language),
        mobile=_text("mobile", language),
        date=_text("date", language),
        time=_text("time", language),
        payment_method=_text("payment_method", language),
        receipt_no=_text("receipt_no", language),
        description=_text("description", language),
        quantity=_text("quantity", language),
        amount=_text("amount", language),
        grand_total=_text("grand_total", language),
        member_signature=_text("member_signature", language),
        collector_signature=_text("collector_signature", language),
        thank_you=_text("thank_you", language),
        system_generated=_text("system_generated", language),
    )


def build_receipt(
    transaction: Transaction,
    store_name: str,
    language: Language = Language.ENGLISH,
    printed_at: Optional[datetime] = None,
) -> ReceiptDocument:
    """
    Build the printable document for one transaction.

    Args:
        transaction: The stored transaction; it is not modified
        store_name: Society name printed in the header
        language: Language for every label
        printed_at: Print time to show; omitted from the document when None

    Returns:
        ReceiptDocument with items in stored order
    """
    is_income = transaction.is_income
    time_display = None
    if printed_at is not None:
        time_display = localize_digits(printed_at.strftime("%I:%M %p"), language)

    return ReceiptDocument(
        receipt_no=transaction.id,
        kind=ReceiptKind.RECEIPT if is_income else ReceiptKind.VOUCHER,
        language=language.value,
        store_name=store_name,
        labels=_labels(is_income, language),
        show_cash_stamp=is_income,
        cash_stamp=_text("cash_stamp", language) if is_income else None,
        member_name=member_display_name(transaction, language),
        mobile_number=transaction.mobile_number or None,
        date=transaction.date,
        date_display=format_date(transaction.date, language),
        time_display=time_display,
        payment_method=payment_method_label(transaction.payment_method, language),
        lines=[
            ReceiptLine(
                title=item.title,
                quantity=item.quantity,
                total=item.total,
                total_display=format_amount(item.total, language),
            )
            for item in transaction.items
        ],
        grand_total=transaction.total_amount,
        grand_total_display=format_amount(transaction.total_amount, language),
        contact_email=settings.contact_email,
        print_filename=print_filename(transaction, language),
    )
