"""Bundled Dutch noun dictionary (word -> het / de / both).

The mapping is read once from a tab-separated file and cached for the life
of the process. It is returned as a read-only ``MappingProxyType``.
"""
from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional

from config.settings import DICTIONARY_ARTICLES, DICTIONARY_PATH

from core.articles import normalize_word

__all__ = ["parse_dictionary", "load_dictionary", "get_dictionary"]

logger = logging.getLogger(__name__)


def parse_dictionary(lines: Iterable[str], *, origin: str = "<memory>") -> Dict[str, str]:
    """Parse ``word<TAB>article`` lines into a plain dict.

    Blank lines and ``#`` comments are ignored. Malformed lines and unknown
    articles are skipped with a warning; a later duplicate overrides an
    earlier one.
    """
    out: Dict[str, str] = {}
    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        parts = [p.strip() for p in line.split("\t")]
        if len(parts) != 2 or not parts[0]:
            logger.warning("%s:%d: expected 'word<TAB>article', got %r", origin, lineno, line)
            continue
        word = normalize_word(parts[0])
        article = parts[1].lower()
        if article not in DICTIONARY_ARTICLES:
            logger.warning("%s:%d: unknown article %r for %r", origin, lineno, parts[1], word)
            continue
        out[word] = article
    return out


def load_dictionary(path: Path) -> Mapping[str, str]:
    """Read a dictionary file. Raises ``FileNotFoundError`` if it is missing."""
    text = Path(path).read_text(encoding="utf-8")
    entries = parse_dictionary(text.splitlines(), origin=str(path))
    logger.debug("Loaded %d dictionary entries from %s", len(entries), path)
    return MappingProxyType(entries)


@lru_cache(maxsize=None)
def get_dictionary(path: Optional[Path] = None) -> Mapping[str, str]:
    """Return the process-wide dictionary (``DICTIONARY_PATH`` by default)."""
    return load_dictionary(path or DICTIONARY_PATH)
