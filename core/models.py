"""Result record returned by every article lookup."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from config.settings import ALL_ARTICLES, SOURCE_LOCAL, SOURCE_ONLINE

__all__ = ["ArticleResult"]


@dataclass(frozen=True)
class ArticleResult:
    """Outcome of a single lookup.

    ``word`` is the normalized noun, ``full_word`` the display form
    ("het huis", "het/de kind", or the bare word when the article is unknown)
    and ``source`` tells whether the local dictionary or the online lookup
    produced the answer.
    """

    word: str
    article: str
    full_word: str
    source: str

    def __post_init__(self) -> None:
        if self.article not in ALL_ARTICLES:
            raise ValueError(f"invalid article: {self.article!r}")
        if self.source not in (SOURCE_LOCAL, SOURCE_ONLINE):
            raise ValueError(f"invalid source: {self.source!r}")

    @property
    def is_known(self) -> bool:
        return self.article != "unknown"

    def as_dict(self) -> Dict[str, str]:
        return {
            "word": self.word,
            "article": self.article,
            "fullWord": self.full_word,
            "source": self.source,
        }
