"""Filter for tokens that must not appear in emitted contexts."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from spacy.lang.en.stop_words import STOP_WORDS

from wsd_trainingset.constants import ENCODING_UTF8, UNDESIRABLES_FILENAME

logger = logging.getLogger(__name__)


class Undesirables:
    """Stop-word and symbol filter over lower-cased token texts.

    A word is undesirable when it is a spaCy English stop word, one of the
    extra words, or contains no alphabetic character (numbers, symbols).

    Args:
        extra_words: Additional words to exclude.
    """

    def __init__(self, extra_words: Iterable[str] | None = None):
        self.words: frozenset[str] = frozenset(STOP_WORDS) | frozenset(
            w.strip().lower() for w in (extra_words or ()) if w.strip()
        )

    def is_undesirable(self, word: str) -> bool:
        if not word or word in self.words:
            return True
        return not any(ch.isalpha() for ch in word)

    def __contains__(self, word: str) -> bool:
        return self.is_undesirable(word)

    @classmethod
    def from_data_path(cls, data_path: Path | str) -> "Undesirables":
        """Build the filter, adding ``<data_path>/undesirables.txt`` if present.

        The file holds one word per line; ``#`` starts a comment.
        """
        path = Path(data_path) / UNDESIRABLES_FILENAME
        if not path.exists():
            return cls()

        extra = []
        for line in path.read_text(encoding=ENCODING_UTF8).splitlines():
            word = line.split("#", 1)[0].strip()
            if word:
                extra.append(word)
        logger.info(f"Loaded {len(extra)} extra undesirable words from {path}")
        return cls(extra)
