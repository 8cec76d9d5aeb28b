"""Core calculation engine for the mortgage calculator.

This module turns a principal, an annual interest rate (in percent) and a term
(in years) into a ``PaymentSummary`` using the standard annuity formula. The
functions are pure: they keep no state between calls and perform no I/O, so the
same inputs always produce the same summary.

Invalid input is an expected state (for example a form the user has not
finished filling in), so ``compute`` signals it by returning ``None`` instead of
raising. ``require_summary`` is available for callers that want an exception.
"""

from __future__ import annotations

import logging
import math
from typing import List, Optional

from .data_models import LoanInput, PaymentSummary

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12


class InvalidLoanInput(ValueError):
    """Raised by ``require_summary`` when no summary can be computed."""

    def __init__(self, reasons: List[str]) -> None:
        self.reasons = list(reasons)
        super().__init__("; ".join(self.reasons))


def validation_errors(principal: float, annual_rate_percent: float, term_years: float) -> List[str]:
    """Return the reasons the given loan figures cannot be used.

    An empty list means the figures are valid. Comparisons are written so that
    NaN (an unparseable value) fails every check.
    """
    errors: List[str] = []
    if not math.isfinite(principal) or not principal > 0:
        errors.append("Principal must be a positive number")
    if not math.isfinite(annual_rate_percent) or not annual_rate_percent >= 0:
        errors.append("Interest rate must be zero or a positive number")
    if not math.isfinite(term_years) or not term_years > 0:
        errors.append("Loan term must be a positive number of years")
    return errors


def _monthly_payment(principal: float, rate_per_month: float, months: float) -> float:
    """Return the fixed monthly payment for a fully amortizing loan.

    The formula is:

        payment = P * (r * (1 + r)^n) / ((1 + r)^n - 1)

    where ``P`` is the principal, ``r`` the monthly rate and ``n`` the number
    of payments. With a zero rate the payment is simply ``P / n``.

    ``(1 + r)^n - 1`` is evaluated as ``expm1(n * log1p(r))`` so that rates
    too small to change ``1 + r`` in floating point still give a positive
    growth term.
    """
    if rate_per_month == 0:
        return principal / months
    try:
        growth = math.expm1(months * math.log1p(rate_per_month))
    except OverflowError:
        # limit of the formula as (1 + r)^n grows without bound
        return principal * rate_per_month
    if growth == 0:
        return principal / months
    return principal * rate_per_month * (growth + 1) / growth


def compute(principal: float, annual_rate_percent: float, term_years: float) -> Optional[PaymentSummary]:
    """Compute the payment summary for a loan.

    Parameters
    ----------
    principal: float
        The amount borrowed. Must be positive.
    annual_rate_percent: float
        Annual interest rate in percent (``8`` for 8 %). Zero is allowed.
    term_years: float
        Loan term in years. Must be positive. The number of payments is
        ``term_years * 12`` and is not rounded.

    Returns
    -------
    PaymentSummary or None
        ``None`` when the inputs fail validation.
    """
    errors = validation_errors(principal, annual_rate_percent, term_years)
    if errors:
        logger.debug("No summary for principal=%r rate=%r term=%r: %s",
                     principal, annual_rate_percent, term_years, "; ".join(errors))
        return None

    rate_per_month = annual_rate_percent / MONTHS_PER_YEAR / 100
    months = term_years * MONTHS_PER_YEAR

    monthly_payment = _monthly_payment(principal, rate_per_month, months)
    total_payment = monthly_payment * months
    total_interest = total_payment - principal

    return PaymentSummary(
        monthly_payment=monthly_payment,
        total_payment=total_payment,
        total_interest=total_interest,
        principal_amount=principal,
        interest_percentage=total_interest / total_payment * 100,
        principal_percentage=principal / total_payment * 100,
    )


def compute_from_input(loan: LoanInput) -> Optional[PaymentSummary]:
    return compute(loan.principal, loan.annual_rate_percent, loan.term_years)


def require_summary(principal: float, annual_rate_percent: float, term_years: float) -> PaymentSummary:
    """Like ``compute`` but raise ``InvalidLoanInput`` instead of returning ``None``."""
    summary = compute(principal, annual_rate_percent, term_years)
    if summary is None:
        raise InvalidLoanInput(validation_errors(principal, annual_rate_percent, term_years))
    return summary
