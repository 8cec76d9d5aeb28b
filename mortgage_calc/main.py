"""Command-line interface for the mortgage calculator.

This module uses the ``click`` library to implement a multi-command interface.
Users can print the payment summary for a loan (optionally exporting it to
JSON) or compare two loan scenarios side by side.
"""

from __future__ import annotations

import json
import shlex
from pathlib import Path
from typing import Any, Dict, Optional

import click

from .data_models import MORTGAGE_TYPES, PaymentSummary
from .engine import InvalidLoanInput, require_summary
from .formatter import CURRENCY_OPTIONS, DEFAULT_CURRENCY, print_comparison, print_summary, summary_display


def parse_amount(value: str) -> float:
    """Parse a numeric string with optional suffixes.

    Accepts plain numbers ("500000"), thousands separators ("5,00,000") and
    shorthand with ``k``/``m`` suffixes (e.g. "500k" meaning 500_000).
    """
    value = value.strip().lower()
    value = value.replace(",", "")
    factor = 1.0
    if value.endswith("k"):
        factor = 1_000.0
        value = value[:-1]
    elif value.endswith("m"):
        factor = 1_000_000.0
        value = value[:-1]
    try:
        return float(value) * factor
    except ValueError:
        raise click.BadParameter(f"Invalid amount: {value}")


def summarize(principal: str, rate: float, term: float) -> PaymentSummary:
    """Compute a summary or fail with a usage error listing what is wrong."""
    try:
        return require_summary(parse_amount(principal), rate, term)
    except InvalidLoanInput as exc:
        raise click.UsageError("; ".join(exc.reasons))


@click.group()
def cli() -> None:
    """A command-line mortgage payment calculator."""
    pass


@cli.command()
@click.option("--principal", "-p", "principal", required=True, help="Loan amount")
@click.option("--rate", "-r", "rate", required=True, type=float, help="Annual interest rate (percent)")
@click.option("--term", "-t", "term", required=True, type=float, help="Loan term in years")
@click.option("--type", "mortgage_type", type=click.Choice(MORTGAGE_TYPES), default="fixed", help="Mortgage type")
@click.option(
    "--currency",
    "currency",
    type=click.Choice(sorted(CURRENCY_OPTIONS), case_sensitive=False),
    default=DEFAULT_CURRENCY,
    help="Currency used to display amounts",
)
@click.option("--output", "output", type=str, help="Output file path (.json)")
def summary(
    principal: str,
    rate: float,
    term: float,
    mortgage_type: str,
    currency: str,
    output: Optional[str],
) -> None:
    """Compute and print the payment summary for a loan."""
    result = summarize(principal, rate, term)
    if output:
        path = Path(output)
        if path.suffix.lower() != ".json":
            raise click.BadParameter("Summary export must use .json extension")
        data = {
            "input": {"principal": result.principal_amount, "rate": rate, "term": term, "type": mortgage_type},
            "summary": result.to_dict(),
            "display": summary_display(result, currency),
        }
        with path.open("w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        click.echo(f"Summary exported to {path}")
    else:
        click.echo(f"Mortgage type: {mortgage_type}")
        print_summary(result, currency)


def parse_scenario_opts(opts: str) -> Dict[str, Any]:
    """Turn a quoted option string such as ``"-p 500k -r 8 -t 20"`` into arguments."""
    tokens = shlex.split(opts)
    params: Dict[str, Any] = {"principal": None, "rate": None, "term": None}
    names = {
        "-p": "principal",
        "--principal": "principal",
        "-r": "rate",
        "--rate": "rate",
        "-t": "term",
        "--term": "term",
    }
    i = 0
    while i < len(tokens):
        token = tokens[i]
        if token not in names:
            raise click.BadParameter(f"Unknown option in scenario: {token}")
        if i + 1 >= len(tokens):
            raise click.BadParameter(f"Missing value for {token}")
        params[names[token]] = tokens[i + 1]
        i += 2
    for name, value in params.items():
        if value is None:
            raise click.BadParameter(f"Scenario missing required option {name}")
    try:
        params["rate"] = float(params["rate"])
        params["term"] = float(params["term"])
    except ValueError as exc:
        raise click.BadParameter(str(exc))
    return params


@cli.command()
@click.option("--scenario1", "scenario1", required=True, help="First scenario options quoted string")
@click.option("--scenario2", "scenario2", required=True, help="Second scenario options quoted string")
@click.option(
    "--currency",
    "currency",
    type=click.Choice(sorted(CURRENCY_OPTIONS), case_sensitive=False),
    default=DEFAULT_CURRENCY,
    help="Currency used to display amounts",
)
def compare(scenario1: str, scenario2: str, currency: str) -> None:
    """Compare two loan scenarios.

    Scenarios are provided as quoted option strings, for example:

        mortgage-calc compare --scenario1 "-p 500k -r 8 -t 20" --scenario2 "-p 500k -r 7.5 -t 15"
    """
    summary1 = summarize(**parse_scenario_opts(scenario1))
    summary2 = summarize(**parse_scenario_opts(scenario2))
    print_comparison(summary1, summary2, currency)


if __name__ == "__main__":
    cli()
