"""Application state for the web interface.

``AppState`` holds what the page is currently showing: the raw form strings,
the selected mortgage type, the theme and the latest payment summary. The web
routes own one state value per request and pass it to the functions below;
the calculation engine never sees it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from mortgage_calc.data_models import MORTGAGE_TYPES, PaymentSummary
from mortgage_calc.engine import compute_from_input
from mortgage_calc.theme import DEFAULT_THEME, normalize_theme, toggle_theme
from mortgage_calc.utils import parse_loan_input

DEFAULT_MORTGAGE_TYPE = "fixed"


@dataclass
class AppState:
    principal: str = ""
    interest_rate: str = ""
    loan_term: str = ""
    mortgage_type: str = DEFAULT_MORTGAGE_TYPE
    theme: str = DEFAULT_THEME
    results: Optional[PaymentSummary] = None

    def has_inputs(self) -> bool:
        return bool(self.principal and self.interest_rate and self.loan_term)


def _clean(value: Any) -> str:
    return "" if value is None else str(value).strip()


def normalize_mortgage_type(value: Any) -> str:
    value = _clean(value).lower()
    return value if value in MORTGAGE_TYPES else DEFAULT_MORTGAGE_TYPE


def recalculate(state: AppState) -> Optional[PaymentSummary]:
    """Replace ``state.results`` with a fresh summary for the current inputs."""
    loan = parse_loan_input(state.principal, state.interest_rate, state.loan_term)
    state.results = compute_from_input(loan) if loan else None
    return state.results


def apply_inputs(state: AppState, principal: Any, interest_rate: Any, loan_term: Any,
                 mortgage_type: Any = DEFAULT_MORTGAGE_TYPE) -> Optional[PaymentSummary]:
    """Store the raw form values on ``state`` and recompute the summary.

    The mortgage type does not change the figures, but switching it still
    triggers a recalculation like any other input.
    """
    state.principal = _clean(principal)
    state.interest_rate = _clean(interest_rate)
    state.loan_term = _clean(loan_term)
    state.mortgage_type = normalize_mortgage_type(mortgage_type)
    return recalculate(state)


def reset_state(state: AppState) -> None:
    """Clear the form and the results. The theme is kept."""
    state.principal = ""
    state.interest_rate = ""
    state.loan_term = ""
    state.mortgage_type = DEFAULT_MORTGAGE_TYPE
    state.results = None


def switch_theme(state: AppState) -> str:
    state.theme = toggle_theme(state.theme)
    return state.theme


def state_to_record(state: AppState) -> Dict[str, str]:
    """Return the parts of the state worth keeping between requests.

    Results are left out; they are recomputed from the inputs on load.
    """
    return {
        "principal": state.principal,
        "interest_rate": state.interest_rate,
        "loan_term": state.loan_term,
        "mortgage_type": state.mortgage_type,
        "theme": state.theme,
    }


def state_from_record(record: Optional[Dict[str, Any]]) -> AppState:
    if not record:
        return AppState()
    state = AppState(
        principal=_clean(record.get("principal")),
        interest_rate=_clean(record.get("interest_rate")),
        loan_term=_clean(record.get("loan_term")),
        mortgage_type=normalize_mortgage_type(record.get("mortgage_type")),
        theme=normalize_theme(record.get("theme")),
    )
    if state.has_inputs():
        recalculate(state)
    return state
