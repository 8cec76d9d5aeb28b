import pytest

from mortgage_calc.chart import chart_payload
from mortgage_calc.engine import compute
from mortgage_calc.theme import THEMES, normalize_theme, theme_palette, toggle_theme


class TestTheme:
    def test_toggle(self):
        assert toggle_theme("light") == "dark"
        assert toggle_theme("dark") == "light"

    def test_unknown_theme_is_light(self):
        assert normalize_theme("neon") == "light"
        assert toggle_theme(None) == "dark"

    def test_palette_is_a_copy(self):
        palette = theme_palette("dark")
        palette["icon"] = "x"
        assert THEMES["dark"]["icon"] != "x"


class TestChartPayload:
    def test_two_slices(self):
        s = compute(1_000_000, 8, 20)
        chart = chart_payload(s)
        assert chart["type"] == "doughnut"
        assert chart["labels"] == ["Principal", "Interest"]
        assert chart["data"] == [s.principal_amount, s.total_interest]

    def test_colors_follow_theme(self):
        s = compute(1_000_000, 8, 20)
        chart = chart_payload(s, theme="dark")
        assert chart["background_colors"] == [THEMES["dark"]["chart_primary"], THEMES["dark"]["chart_secondary"]]
        assert chart["legend"][1]["color"] == THEMES["dark"]["chart_secondary"]

    def test_tooltips_and_legend(self):
        s = compute(500_000, 0, 10)
        chart = chart_payload(s)
        assert chart["tooltips"][0] == "Principal: ₹5,00,000 (100.0%)"
        assert chart["legend"][0] == {"label": "Principal", "color": THEMES["light"]["chart_primary"], "value": "₹5,00,000"}

    def test_tooltip_shares_use_total_payment(self):
        s = compute(1_000_000, 8, 20)
        share = s.total_interest / s.total_payment * 100
        assert chart_payload(s)["tooltips"][1].endswith(f"({share:.1f}%)")
        assert share == pytest.approx(s.interest_percentage)
