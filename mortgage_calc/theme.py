"""Light and dark display themes.

Each theme carries the two chart colours and the icon shown on the toggle
button (the icon advertises the theme you would switch to).
"""

from typing import Dict

DEFAULT_THEME = "light"

THEMES: Dict[str, Dict[str, str]] = {
    "light": {"chart_primary": "#21808d", "chart_secondary": "#e68161", "icon": "🌙"},
    "dark": {"chart_primary": "#32b8c6", "chart_secondary": "#ff9f7a", "icon": "☀️"},
}


def normalize_theme(name) -> str:
    return name if name in THEMES else DEFAULT_THEME


def toggle_theme(name) -> str:
    return "dark" if normalize_theme(name) == "light" else "light"


def theme_palette(name) -> Dict[str, str]:
    return dict(THEMES[normalize_theme(name)])
