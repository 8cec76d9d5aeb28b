"""Data models for the mortgage calculator.

This module defines the two value types the calculator works with: the loan
inputs collected from the user and the payment summary derived from them. Both
are frozen dataclasses, so a summary is replaced rather than updated whenever
the inputs change.
"""

from dataclasses import asdict, dataclass
from typing import Dict

MORTGAGE_TYPES = ("fixed", "variable")


@dataclass(frozen=True)
class LoanInput:
    """The three numbers a payment summary is computed from.

    Attributes
    ----------
    principal: float
        The amount borrowed, in currency units.
    annual_rate_percent: float
        The annual nominal interest rate in percent. ``6.5`` means 6.5 %, not
        650 %.
    term_years: float
        The loan term in years. Fractional values are allowed and are not
        rounded to whole months.
    """

    principal: float
    annual_rate_percent: float
    term_years: float


@dataclass(frozen=True)
class PaymentSummary:
    """Aggregate payment figures for a fully amortizing loan.

    ``total_payment`` is ``monthly_payment`` times the number of monthly
    payments, ``total_interest`` is whatever part of it exceeds the principal
    and the two percentages split ``total_payment`` between principal and
    interest.
    """

    monthly_payment: float
    total_payment: float
    total_interest: float
    principal_amount: float
    interest_percentage: float
    principal_percentage: float

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)
