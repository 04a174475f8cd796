"""Colour and glyph roles for article results."""
from __future__ import annotations

from functools import lru_cache
from typing import Dict

ARTICLE_COLORS: Dict[str, str] = {
    "het": "#f59e0b",      # orange
    "de": "#3178c6",       # blue
    "both": "#8b5cf6",     # purple
    "unknown": "#6c757d",  # secondary text
}

ARTICLE_ICONS: Dict[str, str] = {
    "het": "●",
    "de": "○",
    "both": "◌",
    "unknown": "?",
}

EMPTY_STATE_ICON: str = "📖"

LAYOUT: Dict[str, str] = {
    "radius_sm": "6px",
    "tag_font_size": "0.8rem",
}


@lru_cache(maxsize=1)
def load_theme_css() -> str:
    """Return the stylesheet for the coloured article tags as a cached string."""

    rules = [
        ".article-tag {"
        f" border-radius: {LAYOUT['radius_sm']};"
        " padding: 0.1rem 0.5rem;"
        f" font-size: {LAYOUT['tag_font_size']};"
        " font-weight: 600;"
        " color: #ffffff;"
        " }"
    ]
    for article, color in ARTICLE_COLORS.items():
        rules.append(f".article-tag.article-{article} {{ background-color: {color}; }}")
    return "<style>\n" + "\n".join(rules) + "\n</style>"
