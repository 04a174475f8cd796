"""
Configuration for Het of De?
"""

import os
from pathlib import Path

from typing import Dict, Tuple

# ==========================
# Articles
# ==========================

ARTICLE_HET: str = "het"
ARTICLE_DE: str = "de"
ARTICLE_BOTH: str = "both"
ARTICLE_UNKNOWN: str = "unknown"

# Values a dictionary entry may carry ("unknown" is a lookup outcome only)
DICTIONARY_ARTICLES: Tuple[str, ...] = (ARTICLE_HET, ARTICLE_DE, ARTICLE_BOTH)
ALL_ARTICLES: Tuple[str, ...] = DICTIONARY_ARTICLES + (ARTICLE_UNKNOWN,)

SOURCE_LOCAL: str = "local"
SOURCE_ONLINE: str = "online"

# Display form of the "both" article
BOTH_LABEL: str = "het/de"

# ==========================
# Local dictionary
# ==========================

_HERE = Path(__file__).resolve().parent
DEFAULT_DICTIONARY_PATH: Path = _HERE.parent / "core" / "data" / "dutch_words.tsv"
DICTIONARY_PATH: Path = Path(os.environ.get("HETOFDE_DICTIONARY_PATH", "") or DEFAULT_DICTIONARY_PATH)

# ==========================
# Remote lookup (welklidwoord.nl)
# ==========================

LOOKUP_BASE_URL: str = os.environ.get("HETOFDE_LOOKUP_BASE_URL", "https://welklidwoord.nl").rstrip("/")
LOOKUP_SERVICE_NAME: str = "Welklidwoord.nl"

REQUEST_HEADERS: Dict[str, str] = {
    "User-Agent": "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7)",
    "Accept": "text/html,application/xhtml+xml",
}


def _float_env(name: str, default: float) -> float:
    raw = os.environ.get(name, "")
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default


# Request timeout (in seconds); a timeout counts as a failed lookup
REQUEST_TIMEOUT: float = _float_env("HETOFDE_REQUEST_TIMEOUT", 8.0)

# Quiet period after the last keystroke before a lookup fires (in seconds)
DEBOUNCE_SECONDS: float = _float_env("HETOFDE_DEBOUNCE_SECONDS", 0.3)

# ==========================
# UI settings
# ==========================

PAGE_TITLE: str = "Het of De? | Dutch article lookup"
PAGE_LAYOUT: str = "centered"

SEARCH_PLACEHOLDER: str = "Type a Dutch noun (e.g., huis, auto, kind)..."
EMPTY_TITLE: str = "Het of De?"
EMPTY_DESCRIPTION: str = "Type a Dutch noun to find out if it uses 'het' or 'de'"

SUBTITLE_UNKNOWN: str = "Article not found - try a different spelling"
SUBTITLE_BOTH: str = 'This word can use both "het" and "de"'
SUBTITLE_SINGLE: str = 'The article is "{article}"'

# ==========================
# Logging
# ==========================

LOG_DIR: Path = Path(os.environ.get("HETOFDE_LOG_DIR", "logs"))
LOG_FILE_NAME: str = "lookup.debug.log"
