"""Output helpers for the mortgage calculator.

This module renders payment summaries for people: currency amounts in whole
units with the grouping conventions of the selected currency, percentages with
one decimal, and a plain text summary/comparison for the terminal.
"""

from __future__ import annotations

import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict

from .data_models import PaymentSummary

DEFAULT_CURRENCY = "INR"

CURRENCY_OPTIONS = {
    "INR": {"label": "Indian rupee", "prefix": "₹", "suffix": "", "grouping": "indian"},
    "USD": {"label": "US dollar", "prefix": "$", "suffix": "", "grouping": "western"},
    "EUR": {"label": "Euro", "prefix": "€", "suffix": "", "grouping": "western"},
    "GBP": {"label": "British pound", "prefix": "£", "suffix": "", "grouping": "western"},
    "PLN": {"label": "Polish złoty", "prefix": "", "suffix": " zł", "grouping": "western"},
}


def normalize_currency(code: str | None) -> str:
    code = str(code or DEFAULT_CURRENCY).strip().upper()
    return code if code in CURRENCY_OPTIONS else DEFAULT_CURRENCY


def _group_digits(digits: str, grouping: str) -> str:
    """Insert comma separators into a string of digits.

    Western grouping uses groups of three. Indian grouping keeps the last three
    digits together and groups the rest in pairs (12,34,567).
    """
    if grouping != "indian":
        return f"{int(digits):,}"
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ",".join(pairs + [tail])


def format_currency(amount: float, currency: str = DEFAULT_CURRENCY) -> str:
    """Format an amount as whole currency units, e.g. ``₹10,00,000``.

    Halves round away from zero.
    """
    meta = CURRENCY_OPTIONS[normalize_currency(currency)]
    if not math.isfinite(amount):
        return f"{meta['prefix']}{amount}{meta['suffix']}"
    whole = Decimal(repr(amount)).to_integral_value(rounding=ROUND_HALF_UP)
    sign = "-" if whole < 0 else ""
    digits = _group_digits(format(whole.copy_abs(), "f"), meta["grouping"])
    return f"{sign}{meta['prefix']}{digits}{meta['suffix']}"


def format_percentage(value: float) -> str:
    return f"{value:.1f}%"


def summary_display(summary: PaymentSummary, currency: str = DEFAULT_CURRENCY) -> Dict[str, str]:
    """Return the formatted text for every field of a summary."""
    return {
        "monthly_payment": format_currency(summary.monthly_payment, currency),
        "total_payment": format_currency(summary.total_payment, currency),
        "total_interest": format_currency(summary.total_interest, currency),
        "principal_amount": format_currency(summary.principal_amount, currency),
        "interest_percentage": format_percentage(summary.interest_percentage),
        "principal_percentage": format_percentage(summary.principal_percentage),
    }


def print_summary(summary: PaymentSummary, currency: str = DEFAULT_CURRENCY) -> None:
    """Print a summary of loan metrics in a human-readable format."""
    display = summary_display(summary, currency)
    print("Summary")
    print("-" * 48)
    print(f"Monthly payment    : {display['monthly_payment']}")
    print(f"Total payment      : {display['total_payment']}")
    print(f"Total interest     : {display['total_interest']}")
    print(f"Principal amount   : {display['principal_amount']}")
    print(f"Principal share    : {display['principal_percentage']}")
    print(f"Interest share     : {display['interest_percentage']}")
    print("-" * 48)


def print_comparison(s1: PaymentSummary, s2: PaymentSummary, currency: str = DEFAULT_CURRENCY) -> None:
    """Print two loan summaries side by side.

    The difference column is scenario2 - scenario1, so a negative difference
    means the second scenario is cheaper.
    """
    print("Comparison")
    print("=" * 72)
    keys = [
        "monthly_payment",
        "total_payment",
        "total_interest",
    ]
    print(f"{'Metric':20s} {'Scenario1':>15s} {'Scenario2':>15s} {'Difference':>15s}")
    for key in keys:
        v1 = getattr(s1, key)
        v2 = getattr(s2, key)
        cells = [format_currency(v, currency) for v in (v1, v2, v2 - v1)]
        print(f"{key:20s} {cells[0]:>15s} {cells[1]:>15s} {cells[2]:>15s}")
    print("=" * 72)
