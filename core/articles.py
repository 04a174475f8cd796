# core/articles.py
# Word normalization and display formatting shared by both resolvers.
from __future__ import annotations

import re
from typing import Optional

from config.settings import ARTICLE_BOTH, ARTICLE_UNKNOWN, BOTH_LABEL, SOURCE_LOCAL

from core.models import ArticleResult

__all__ = ["normalize_word", "format_full_word", "article_label", "make_result", "empty_result", "unknown_result"]

_WHITESPACE_RE = re.compile(r"\s+")


def normalize_word(raw: Optional[str]) -> str:
    """Trim and lower-case a user-typed noun.

    Invisible characters that sneak in with pasted text are removed first.
    Inner whitespace is collapsed to single spaces.
    """
    if not raw:
        return ""
    w = str(raw)
    w = w.replace("\u00A0", " ")  # NO-BREAK SPACE
    w = w.replace("\u200B", "")   # ZERO WIDTH SPACE
    w = w.replace("\uFEFF", "")   # ZERO WIDTH NO-BREAK SPACE (BOM)
    return _WHITESPACE_RE.sub(" ", w).strip().lower()


def article_label(article: str) -> str:
    """Article token as shown to the user ("het/de" for nouns taking both)."""
    if article == ARTICLE_BOTH:
        return BOTH_LABEL
    return article


def format_full_word(article: str, word: str) -> str:
    if article == ARTICLE_UNKNOWN:
        return word
    return f"{article_label(article)} {word}"


def make_result(word: str, article: str, source: str) -> ArticleResult:
    return ArticleResult(
        word=word,
        article=article,
        full_word=format_full_word(article, word),
        source=source,
    )


def unknown_result(word: str, source: str) -> ArticleResult:
    return make_result(word, ARTICLE_UNKNOWN, source)


def empty_result() -> ArticleResult:
    """Placeholder for blank input; no resolver is consulted."""
    return unknown_result("", SOURCE_LOCAL)
