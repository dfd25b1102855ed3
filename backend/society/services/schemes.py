"""Directory of standard schemes and fees offered on the receipt form."""
from typing import List, Union
from society.models.auth import Scheme
from society.models.transaction import Category

SOCIETY_SCHEMES: List[Scheme] = [
    Scheme(name="Monthly Savings", price=2000, category=Category.SAVINGS, code="MS-01"),
    Scheme(name="Initial Membership Fee", price=2000, category=Category.MEMBERSHIP_FEE, code="MF-01"),
    Scheme(name="Loan Installment", price=0, category=Category.LOAN_REPAYMENT, code="LR-01"),
    Scheme(name="Emergency Fund Contribution", price=100, category=Category.OTHERS, code="EF-01"),
    Scheme(name="General Donation", price=0, category=Category.DONATION, code="GD-01"),
]


def search_schemes(query: str = "", category: Union[Category, str] = "all") -> List[Scheme]:
    """Match name or code case-insensitively, optionally by category, sorted by name."""
    needle = query.lower()
    matches = [
        s for s in SOCIETY_SCHEMES
        if (needle in s.name.lower() or needle in s.code.lower())
        and (category == "all" or s.category == category)
    ]
    return sorted(matches, key=lambda s: s.name.lower())
