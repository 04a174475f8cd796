"""Local dictionary lookup."""
from __future__ import annotations

from typing import Mapping, Optional

from config.settings import SOURCE_LOCAL

from core.articles import make_result
from core.models import ArticleResult

__all__ = ["resolve_local"]


def resolve_local(word: str, dictionary: Mapping[str, str]) -> Optional[ArticleResult]:
    """Return the dictionary answer for an already normalized word.

    ``None`` means the word has no local entry and the caller should fall
    back to the online lookup.
    """
    article = dictionary.get(word)
    if not article:
        return None
    return make_result(word, article, SOURCE_LOCAL)
