"""Tests for word normalization, display formatting and the result record."""
from __future__ import annotations

import dataclasses

import pytest

from core import articles
from core.models import ArticleResult


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("  Huis ", "huis"),
        ("AUTO", "auto"),
        ("\u00a0kind\u200b", "kind"),
        ("\ufeffboek", "boek"),
        ("Rode   Kool", "rode kool"),
        ("   ", ""),
        ("", ""),
        (None, ""),
    ],
)
def test_normalize_word(raw, expected) -> None:
    assert articles.normalize_word(raw) == expected


def test_format_full_word_per_article() -> None:
    assert articles.format_full_word("het", "huis") == "het huis"
    assert articles.format_full_word("de", "auto") == "de auto"
    assert articles.format_full_word("both", "kind") == "het/de kind"
    assert articles.format_full_word("unknown", "xyz") == "xyz"


def test_article_label_renders_both_as_slash_pair() -> None:
    assert articles.article_label("both") == "het/de"
    assert articles.article_label("de") == "de"


def test_empty_result_shape() -> None:
    result = articles.empty_result()
    assert result.as_dict() == {"word": "", "article": "unknown", "fullWord": "", "source": "local"}
    assert result.is_known is False


def test_result_rejects_invalid_article_and_source() -> None:
    with pytest.raises(ValueError):
        ArticleResult(word="huis", article="een", full_word="een huis", source="local")
    with pytest.raises(ValueError):
        ArticleResult(word="huis", article="het", full_word="het huis", source="cache")


def test_result_is_immutable() -> None:
    result = articles.make_result("huis", "het", "local")
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.article = "de"  # type: ignore[misc]
