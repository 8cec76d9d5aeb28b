"""Chart data for the principal/interest breakdown.

The web page draws a two-slice doughnut chart client-side. This module builds
everything the chart needs (data points, theme colours, tooltip text and the
legend) so the page only has to hand it to the charting library.
"""

from __future__ import annotations

from typing import Any, Dict

from .data_models import PaymentSummary
from .formatter import DEFAULT_CURRENCY, format_currency
from .theme import theme_palette

CHART_LABELS = ("Principal", "Interest")


def chart_payload(summary: PaymentSummary, theme: str = "light", currency: str = DEFAULT_CURRENCY) -> Dict[str, Any]:
    """Return the doughnut chart definition for a payment summary.

    Tooltip percentages are shares of the total payment.
    """
    palette = theme_palette(theme)
    values = (summary.principal_amount, summary.total_interest)
    colors = (palette["chart_primary"], palette["chart_secondary"])

    tooltips = []
    legend = []
    for label, value, color in zip(CHART_LABELS, values, colors):
        amount = format_currency(value, currency)
        share = value / summary.total_payment * 100
        tooltips.append(f"{label}: {amount} ({share:.1f}%)")
        legend.append({"label": label, "color": color, "value": amount})

    return {
        "type": "doughnut",
        "labels": list(CHART_LABELS),
        "data": list(values),
        "background_colors": list(colors),
        "tooltips": tooltips,
        "legend": legend,
    }
