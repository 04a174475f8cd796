# scripts/lookup_word.py
# Quick check of the article lookup from a terminal (local dictionary, then welklidwoord.nl).
# Usage: python scripts/lookup_word.py huis auto kind

from __future__ import annotations
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from core.lookup import lookup_article  # noqa: E402
from core.presentation import subtitle  # noqa: E402

WORDS = ["huis", "auto", "kind"]


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s %(message)s")
    words = argv if argv else WORDS
    for w in words:
        result = lookup_article(w)
        print(f"{w!r:15} -> {result.full_word or '(empty)':20} [{result.source}] {subtitle(result)}")
    return 0


if __name__ == '__main__':
    sys.exit(main(sys.argv[1:]))
