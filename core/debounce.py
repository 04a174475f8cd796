"""Debounced lookups for search-as-you-type input.

``Debouncer`` keeps a single pending timer: every call replaces the previous
one. ``LookupSession`` builds on it and numbers each submitted query, so a
lookup that finishes after a newer query was typed is dropped instead of
overwriting the newer answer. In-flight requests are not cancelled.
"""
from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Dict, Optional, Tuple

from config.settings import DEBOUNCE_SECONDS

from core.articles import normalize_word
from core.lookup import lookup_article
from core.models import ArticleResult

__all__ = ["Debouncer", "LookupSession"]

logger = logging.getLogger(__name__)


class Debouncer:
    """Run ``callback`` once the input has been quiet for ``delay`` seconds."""

    def __init__(self, delay: float, callback: Callable[..., Any]):
        self.delay = max(0.0, float(delay))
        self._callback = callback
        self._lock = threading.Lock()
        self._timer: Optional[threading.Timer] = None

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._timer is not None

    def call(self, *args: Any, **kwargs: Any) -> None:
        """Schedule the callback, replacing any call that has not fired yet."""
        timer = threading.Timer(self.delay, self._fire, args=(args, kwargs))
        timer.daemon = True
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = timer
        timer.start()

    def cancel(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    def flush(self) -> bool:
        """Run the pending call right now in the calling thread.

        Returns False if nothing was pending.
        """
        with self._lock:
            timer = self._timer
            if timer is None:
                return False
            timer.cancel()
            self._timer = None
        args, kwargs = timer.args
        self._callback(*args, **kwargs)
        return True

    def _fire(self, args: Tuple[Any, ...], kwargs: Dict[str, Any]) -> None:
        with self._lock:
            # A replaced or flushed timer may still wake up; only the current one runs.
            if self._timer is not threading.current_thread():
                return
            self._timer = None
        self._callback(*args, **kwargs)


class LookupSession:
    """Per-user lookup state: the latest query wins."""

    def __init__(
        self,
        on_result: Callable[[Optional[ArticleResult]], None],
        *,
        delay: float = DEBOUNCE_SECONDS,
        lookup: Callable[[str], ArticleResult] = lookup_article,
        on_error: Optional[Callable[[Exception], None]] = None,
    ):
        self._on_result = on_result
        self._on_error = on_error
        self._lookup = lookup
        self._lock = threading.RLock()
        self._seq = 0
        self._debouncer = Debouncer(delay, self._run)
        self.latest: Optional[ArticleResult] = None
        self.query: str = ""

    @property
    def sequence(self) -> int:
        with self._lock:
            return self._seq

    @property
    def pending(self) -> bool:
        return self._debouncer.pending

    def submit(self, text: Optional[str]) -> int:
        """Register new input and return its sequence number.

        Blank input clears the result at once; anything else is looked up
        after the quiet period.
        """
        with self._lock:
            self._seq += 1
            seq = self._seq
            self.query = text or ""
        if not normalize_word(text):
            self._debouncer.cancel()
            self._publish(seq, None)
            return seq
        self._debouncer.call(seq, text)
        return seq

    def flush(self) -> bool:
        """Run a pending lookup immediately (blocking)."""
        return self._debouncer.flush()

    def cancel(self) -> None:
        self._debouncer.cancel()

    def _is_current(self, seq: int) -> bool:
        with self._lock:
            return seq == self._seq

    def _run(self, seq: int, text: str) -> None:
        try:
            result = self._lookup(text)
        except Exception as exc:
            logger.exception("Lookup for %r failed", text)
            if self._on_error is not None and self._is_current(seq):
                self._on_error(exc)
            return
        self._publish(seq, result)

    def _publish(self, seq: int, result: Optional[ArticleResult]) -> bool:
        with self._lock:
            if seq != self._seq:
                logger.debug("Dropping stale result #%d (latest is #%d)", seq, self._seq)
                return False
            self.latest = result
            self._on_result(result)
            return True
