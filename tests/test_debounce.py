"""Tests for the debounced lookup session (single pending timer, latest query wins)."""
from __future__ import annotations

import logging
import threading
import time
from typing import List, Optional

import pytest

from core.articles import make_result
from core.debounce import Debouncer, LookupSession
from core.models import ArticleResult


def _fake_lookup(calls: List[str]):
    def lookup(text: str) -> ArticleResult:
        calls.append(text)
        return make_result(text.strip().lower(), "de", "online")

    return lookup


def test_debouncer_runs_only_the_last_call() -> None:
    seen: List[int] = []
    fired = threading.Event()

    def callback(value: int) -> None:
        seen.append(value)
        fired.set()

    debouncer = Debouncer(0.05, callback)
    debouncer.call(1)
    debouncer.call(2)

    assert fired.wait(2.0)
    time.sleep(0.1)
    assert seen == [2]
    assert debouncer.pending is False


def test_debouncer_flush_and_cancel() -> None:
    seen: List[str] = []
    debouncer = Debouncer(60, seen.append)

    assert debouncer.flush() is False
    debouncer.call("a")
    debouncer.cancel()
    assert debouncer.pending is False
    debouncer.call("b")
    assert debouncer.flush() is True
    assert seen == ["b"]


def test_session_looks_up_latest_query_only() -> None:
    calls: List[str] = []
    published: List[Optional[ArticleResult]] = []
    session = LookupSession(published.append, delay=60, lookup=_fake_lookup(calls))

    session.submit("hu")
    session.submit("huis")
    assert session.pending is True
    assert session.flush() is True

    assert calls == ["huis"]
    assert [r.word for r in published if r] == ["huis"]
    assert session.latest is published[-1]
    assert session.sequence == 2


def test_session_blank_input_clears_without_lookup() -> None:
    calls: List[str] = []
    published: List[Optional[ArticleResult]] = []
    session = LookupSession(published.append, delay=60, lookup=_fake_lookup(calls))

    session.submit("huis")
    session.submit("   ")

    assert session.pending is False
    assert calls == []
    assert published == [None]
    assert session.latest is None


def test_session_fires_after_quiet_period() -> None:
    done = threading.Event()
    published: List[Optional[ArticleResult]] = []

    def on_result(result: Optional[ArticleResult]) -> None:
        published.append(result)
        done.set()

    session = LookupSession(on_result, delay=0.01, lookup=_fake_lookup([]))
    session.submit("Auto")

    assert done.wait(2.0)
    assert published[0] is not None and published[0].word == "auto"


def test_session_drops_stale_result() -> None:
    started = threading.Event()
    release = threading.Event()
    published: List[Optional[ArticleResult]] = []

    def slow_lookup(text: str) -> ArticleResult:
        if text == "huis":
            started.set()
            release.wait(2.0)
        return make_result(text, "het", "local")

    session = LookupSession(published.append, delay=60, lookup=slow_lookup)

    session.submit("huis")
    worker = threading.Thread(target=session.flush)
    worker.start()
    assert started.wait(2.0)

    session.submit("boek")
    session.flush()
    release.set()
    worker.join(2.0)

    assert [r.word for r in published if r] == ["boek"]
    assert session.latest is not None and session.latest.word == "boek"


def test_session_reports_lookup_errors(caplog: pytest.LogCaptureFixture) -> None:
    errors: List[Exception] = []
    published: List[Optional[ArticleResult]] = []

    def broken(text: str) -> ArticleResult:
        raise RuntimeError("boom")

    session = LookupSession(published.append, delay=60, lookup=broken, on_error=errors.append)
    session.submit("huis")

    with caplog.at_level(logging.ERROR):
        session.flush()

    assert published == []
    assert len(errors) == 1 and str(errors[0]) == "boom"
    assert "Lookup for 'huis' failed" in caplog.text
