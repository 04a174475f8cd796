"""Tests for the Streamlit page rendered through the project entrypoint."""
from __future__ import annotations

import logging
from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

import app.app as app_module

ENTRYPOINT = str(Path(__file__).resolve().parents[1] / "het_of_de.py")


@pytest.fixture(autouse=True)
def _restore_core_logger(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    monkeypatch.setattr(app_module, "CFG_LOG_DIR", tmp_path / "logs")
    core_logger = logging.getLogger("core")
    saved = (list(core_logger.handlers), core_logger.propagate, core_logger.level)
    yield
    for handler in core_logger.handlers:
        if handler not in saved[0]:
            handler.close()
    core_logger.handlers[:] = saved[0]
    core_logger.propagate = saved[1]
    core_logger.setLevel(saved[2])


def test_page_renders_again_on_every_rerun() -> None:
    at = AppTest.from_file(ENTRYPOINT, default_timeout=10)

    at.run()
    assert not at.exception
    assert len(at.text_input) == 1

    at.run()
    assert not at.exception
    assert len(at.text_input) == 1


def test_entering_a_word_shows_the_result() -> None:
    at = AppTest.from_file(ENTRYPOINT, default_timeout=10)
    at.run()

    # "huis" is in the bundled dictionary, so no request leaves the process
    at.text_input[0].input("  Huis ").run()

    assert not at.exception
    assert len(at.text_input) == 1
    assert any("het huis" in md.value for md in at.markdown)
    assert any('The article is "het"' in caption.value for caption in at.caption)
