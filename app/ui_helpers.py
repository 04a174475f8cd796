"""Streamlit UI helper utilities for the Het of De? app."""
from __future__ import annotations

from typing import Dict, Optional

import streamlit as st

from config.settings import EMPTY_DESCRIPTION, EMPTY_TITLE, LOOKUP_SERVICE_NAME, SOURCE_ONLINE
from config.theme import EMPTY_STATE_ICON, load_theme_css
from core import presentation
from core.debounce import LookupSession
from core.models import ArticleResult


def toast(message: str, *, icon: Optional[str] = None, variant: str = "info") -> None:
    """Show toast with optional fallback for older Streamlit versions."""

    toast_fn = getattr(st, "toast", None)
    if callable(toast_fn):
        kwargs: Dict[str, str] = {}
        if icon:
            kwargs["icon"] = icon
        toast_fn(message, **kwargs)
        return

    fallback_msg = f"{icon} {message}" if icon else message
    if variant == "error":
        st.error(fallback_msg)
    else:
        st.info(fallback_msg)


def apply_theme() -> None:
    st.markdown(load_theme_css(), unsafe_allow_html=True)


def ensure_session_defaults(*, delay: float) -> LookupSession:
    """Populate session_state with the lookup session and UI flags."""

    state = st.session_state
    state.setdefault("lookup_error", None)
    if "lookup_session" not in state:

        def _on_error(exc: Exception) -> None:
            state["lookup_error"] = str(exc) or exc.__class__.__name__

        state["lookup_session"] = LookupSession(lambda _result: None, delay=delay, on_error=_on_error)
    return state["lookup_session"]


def render_empty_state() -> None:
    st.markdown(f"### {EMPTY_STATE_ICON} {EMPTY_TITLE}")
    st.caption(EMPTY_DESCRIPTION)


def render_result(result: ArticleResult) -> None:
    """Render one result row: coloured tag, subtitle, copy fields and link."""

    icon = presentation.article_icon(result.article)
    color = presentation.article_color(result.article)
    st.markdown(
        f"<span style='color:{color}'>{icon}</span> **{presentation.title(result)}** "
        f"<span class='article-tag article-{result.article}'>{presentation.tag_text(result)}</span>",
        unsafe_allow_html=True,
    )
    st.caption(presentation.subtitle(result))

    # st.code renders a copy-to-clipboard button in the top-right corner
    cols = st.columns([2, 1])
    with cols[0]:
        st.caption("Copy full word")
        st.code(presentation.copy_full_word_text(result), language=None)
    article_text = presentation.copy_article_text(result)
    if article_text is not None:
        with cols[1]:
            st.caption("Copy article only")
            st.code(article_text, language=None)

    st.link_button(f"Open in {LOOKUP_SERVICE_NAME}", presentation.service_page_url(result))
    if result.source == SOURCE_ONLINE:
        st.caption("Found online")
