"""
core/remote_resolver.py

Online fallback: fetch the welklidwoord.nl page for a noun and infer its
article from the raw HTML.
Responsibilities:
- build the lookup URL (percent-encoded word)
- fetch the page with a browser-like User-Agent and a bounded timeout
- detect "Het" / "De" cues with substring and regex checks (no HTML parsing)
- turn any failure into an "unknown" result instead of raising

This module is Streamlit-agnostic and contains no UI code.
"""
from __future__ import annotations

import logging
import re
from typing import Any, Callable, Dict, Optional
from urllib.parse import quote

import requests

from config.settings import (
    ARTICLE_BOTH,
    ARTICLE_DE,
    ARTICLE_HET,
    ARTICLE_UNKNOWN,
    LOOKUP_BASE_URL,
    REQUEST_HEADERS,
    REQUEST_TIMEOUT,
    SOURCE_LOCAL,
    SOURCE_ONLINE,
)

from core.articles import make_result, unknown_result
from core.models import ArticleResult

__all__ = ["build_lookup_url", "has_article_cue", "classify_html", "resolve_online"]

logger = logging.getLogger(__name__)

Fetch = Callable[..., Any]

# Characters encodeURIComponent leaves untouched besides [A-Za-z0-9_.-~]
_URI_COMPONENT_SAFE = "!*'()"


def build_lookup_url(word: str, base_url: Optional[str] = None) -> str:
    """Return the lookup page URL for a normalized word."""
    base = (base_url or LOOKUP_BASE_URL).rstrip("/")
    return f"{base}/{quote(word, safe=_URI_COMPONENT_SAFE)}"


def has_article_cue(html: str, token: str, word: str) -> bool:
    """True if the page marks ``token`` ("Het"/"De") as the article of ``word``.

    Any one of these counts:
    - ``<strong>Token</strong>``
    - ``>Token word<``
    - ``Token word`` as plain text
    - an ``<h1>`` starting with ``Token word`` (case-insensitive, attributes
      and whitespace allowed)
    """
    if f"<strong>{token}</strong>" in html:
        return True
    if f">{token} {word}<" in html:
        return True
    if f"{token} {word}" in html:
        return True
    heading = re.compile(
        rf"<h1[^>]*>\s*{re.escape(token)}\s+{re.escape(word)}",
        re.IGNORECASE,
    )
    return heading.search(html) is not None


def classify_html(html: str, word: str) -> str:
    """Map the page text to "both", "het", "de" or "unknown"."""
    is_het = has_article_cue(html, "Het", word)
    is_de = has_article_cue(html, "De", word)

    if is_het and is_de:
        return ARTICLE_BOTH
    if is_het:
        return ARTICLE_HET
    if is_de:
        return ARTICLE_DE
    return ARTICLE_UNKNOWN


def _fetch_html(word: str, fetch: Fetch, timeout: float, headers: Dict[str, str]) -> str:
    url = build_lookup_url(word)
    response = fetch(url, headers=headers, timeout=timeout)
    status = getattr(response, "status_code", None)
    if isinstance(status, int) and status >= 400:
        # The page body is still classified; a missing word just yields no cues.
        logger.debug("Lookup for %r returned HTTP %s", word, status)
    return response.text or ""


def resolve_online(
    word: str,
    *,
    fetch: Optional[Fetch] = None,
    timeout: Optional[float] = None,
    headers: Optional[Dict[str, str]] = None,
) -> ArticleResult:
    """Look the word up online. Never raises.

    Returns ``source="online"`` whenever the page was fetched (including when
    nothing matched). Network or parsing failures are logged and come back as
    ``article="unknown"`` with ``source="local"``.
    """
    fetch_fn = fetch or requests.get
    try:
        html = _fetch_html(
            word,
            fetch_fn,
            REQUEST_TIMEOUT if timeout is None else timeout,
            dict(headers or REQUEST_HEADERS),
        )
        article = classify_html(html, word)
    except requests.RequestException as err:
        logger.warning("Error looking up article for %r: %s", word, err)
        return unknown_result(word, SOURCE_LOCAL)
    except Exception:
        logger.exception("Unexpected error looking up article for %r", word)
        return unknown_result(word, SOURCE_LOCAL)

    logger.debug("Online lookup for %r -> %s", word, article)
    return make_result(word, article, SOURCE_ONLINE)
