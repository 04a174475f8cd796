"""Article lookup: local dictionary first, then the online heuristic."""
from __future__ import annotations

import logging
from typing import Mapping, Optional

from core.articles import empty_result, normalize_word
from core.local_resolver import resolve_local
from core.models import ArticleResult
from core.remote_resolver import Fetch, resolve_online
from core.words import get_dictionary

__all__ = ["lookup_article"]

logger = logging.getLogger(__name__)


def lookup_article(
    raw_input: Optional[str],
    *,
    dictionary: Optional[Mapping[str, str]] = None,
    fetch: Optional[Fetch] = None,
    timeout: Optional[float] = None,
) -> ArticleResult:
    """Return the article for a Dutch noun.

    Input is trimmed and lower-cased. Blank input returns an empty "unknown"
    result without consulting either resolver. Every path ends in a valid
    ``ArticleResult``; nothing is raised to the caller.
    """
    word = normalize_word(raw_input)
    if not word:
        return empty_result()

    if dictionary is None:
        try:
            words: Mapping[str, str] = get_dictionary()
        except (OSError, ValueError) as err:
            logger.error("Local dictionary unavailable, using online lookup only: %s", err)
            words = {}
    else:
        words = dictionary
    local = resolve_local(word, words)
    if local is not None:
        logger.debug("Local hit for %r -> %s", word, local.article)
        return local

    return resolve_online(word, fetch=fetch, timeout=timeout)
