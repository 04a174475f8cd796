"""Display helpers for article results (UI-agnostic)."""
from __future__ import annotations

from typing import Optional

from config.settings import (
    ARTICLE_BOTH,
    ARTICLE_UNKNOWN,
    SUBTITLE_BOTH,
    SUBTITLE_SINGLE,
    SUBTITLE_UNKNOWN,
)
from config.theme import ARTICLE_COLORS, ARTICLE_ICONS

from core.articles import article_label
from core.models import ArticleResult
from core.remote_resolver import build_lookup_url

__all__ = [
    "article_color",
    "article_icon",
    "title",
    "subtitle",
    "tag_text",
    "copy_full_word_text",
    "copy_article_text",
    "service_page_url",
]


def article_color(article: str) -> str:
    return ARTICLE_COLORS.get(article, ARTICLE_COLORS[ARTICLE_UNKNOWN])


def article_icon(article: str) -> str:
    return ARTICLE_ICONS.get(article, ARTICLE_ICONS[ARTICLE_UNKNOWN])


def title(result: ArticleResult) -> str:
    if result.article == ARTICLE_UNKNOWN:
        return result.word
    return result.full_word


def subtitle(result: ArticleResult) -> str:
    if result.article == ARTICLE_UNKNOWN:
        return SUBTITLE_UNKNOWN
    if result.article == ARTICLE_BOTH:
        return SUBTITLE_BOTH
    return SUBTITLE_SINGLE.format(article=result.article)


def tag_text(result: ArticleResult) -> str:
    return result.article.upper()


def copy_full_word_text(result: ArticleResult) -> str:
    """Text placed on the clipboard by "Copy Full Word"."""
    return title(result)


def copy_article_text(result: ArticleResult) -> Optional[str]:
    """Text for "Copy Article Only"; None when there is no article to copy."""
    if result.article == ARTICLE_UNKNOWN:
        return None
    return article_label(result.article)


def service_page_url(result: ArticleResult) -> str:
    """Link to the same word on the lookup site."""
    return build_lookup_url(result.word)
