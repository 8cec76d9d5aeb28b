"""Utility functions for the mortgage calculator.

This module converts the raw text a user types into the numbers the engine
works with. Anything that cannot be read as a number becomes NaN rather than
zero, so it fails validation instead of silently producing a result.
"""

from __future__ import annotations

import math
from typing import Optional, Union

from .data_models import LoanInput
from .engine import validation_errors

RawValue = Union[str, int, float, None]


def parse_number(value: RawValue) -> float:
    """Convert a numeric string into a ``float``.

    Whitespace and comma thousands separators are stripped. Empty strings,
    ``None`` and anything that is not a number return ``nan``.
    """
    if value is None:
        return math.nan
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    cleaned = str(value).strip().replace(",", "")
    if not cleaned:
        return math.nan
    try:
        return float(cleaned)
    except ValueError:
        return math.nan


def is_blank(value: RawValue) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def has_all_inputs(principal: RawValue, rate: RawValue, term: RawValue) -> bool:
    """Return True when none of the three raw inputs is blank."""
    return not any(is_blank(v) for v in (principal, rate, term))


def parse_loan_input(principal: RawValue, rate: RawValue, term: RawValue) -> Optional[LoanInput]:
    """Build a ``LoanInput`` from raw form values.

    Returns ``None`` if any value is blank, unparseable or out of range.
    """
    if not has_all_inputs(principal, rate, term):
        return None
    loan = LoanInput(
        principal=parse_number(principal),
        annual_rate_percent=parse_number(rate),
        term_years=parse_number(term),
    )
    if validation_errors(loan.principal, loan.annual_rate_percent, loan.term_years):
        return None
    return loan
