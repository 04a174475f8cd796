"""Streamlit entry point for the Het of De? app."""
from __future__ import annotations

from pathlib import Path
import sys

import streamlit as st

import logging

if __package__ is None or __package__ == "":
    package_root = Path(__file__).resolve().parent
    sys.path.insert(0, str(package_root.parent))
    __package__ = "app"  # type: ignore[misc]

# Ensure project root on sys.path when run via ``streamlit run app/app.py``
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

from config.settings import (  # noqa: E402
    DEBOUNCE_SECONDS as CFG_DEBOUNCE,
    LOG_DIR as CFG_LOG_DIR,
    LOG_FILE_NAME as CFG_LOG_FILE,
    PAGE_LAYOUT as CFG_PAGE_LAYOUT,
    PAGE_TITLE as CFG_PAGE_TITLE,
    SEARCH_PLACEHOLDER as CFG_PLACEHOLDER,
)

from . import ui_helpers  # noqa: E402


def configure_logging() -> None:
    """Send ``core`` lookup diagnostics to the debug log file (idempotent)."""

    CFG_LOG_DIR.mkdir(parents=True, exist_ok=True)

    core_logger = logging.getLogger("core")
    core_logger.setLevel(logging.DEBUG)
    core_logger.propagate = False  # keep lookup diagnostics out of the Streamlit console

    handler = logging.FileHandler(CFG_LOG_DIR / CFG_LOG_FILE, mode="a", encoding="utf-8")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))

    for old in core_logger.handlers:
        old.close()
    core_logger.handlers.clear()
    core_logger.addHandler(handler)


def render() -> None:
    """Build the whole page; Streamlit calls this on every rerun."""

    configure_logging()

    st.set_page_config(page_title=CFG_PAGE_TITLE, layout=CFG_PAGE_LAYOUT)

    ui_helpers.apply_theme()

    session = ui_helpers.ensure_session_defaults(delay=CFG_DEBOUNCE)

    st.title("📖 Het of De?")

    query = st.text_input(
        "Dutch noun",
        key="search_text",
        placeholder=CFG_PLACEHOLDER,
        label_visibility="collapsed",
    )

    if query != session.query:
        session.submit(query)
        with st.spinner("Looking up…"):
            try:
                session.flush()
            except Exception:
                logging.getLogger("core.lookup").exception("Lookup crashed for %r", query)
                st.session_state["lookup_error"] = "Failed to look up article"

    error = st.session_state.pop("lookup_error", None)
    if error:
        ui_helpers.toast(f"Error: {error}", icon="⚠️", variant="error")

    result = session.latest
    if result is not None and result.word:
        st.subheader("Result")
        ui_helpers.render_result(result)
    elif not session.pending:
        ui_helpers.render_empty_state()


if __name__ == "__main__":
    render()
