"""Day/night colour themes for the catalogue front-end."""

from typing import Dict

from .schemas import Theme


THEME_COLORS: Dict[str, Dict[str, str]] = {
    "day": {"--color-dark": "10, 10, 20", "--color-light": "255, 255, 255"},
    "night": {"--color-dark": "255, 255, 255", "--color-light": "10, 10, 20"},
}


def preferred_theme(prefers_dark: bool) -> Theme:
    return "night" if prefers_dark else "day"


def theme_colors(theme: Theme) -> Dict[str, str]:
    return dict(THEME_COLORS[theme])
