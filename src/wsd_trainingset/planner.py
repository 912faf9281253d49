"""Resumption planning: decide which focus words still need extraction."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Mapping

from wsd_trainingset.models import AmbiguousEntry
from wsd_trainingset.output import trainingset_path

logger = logging.getLogger(__name__)


class UnknownFocusWordError(KeyError):
    """Raised when a requested focus word is not in the lexicon."""

    def __init__(self, word: str):
        super().__init__(word)
        self.word = word

    def __str__(self) -> str:
        return f'unknown focus word "{self.word}"'


def canonical_word(lexicon: Mapping[str, AmbiguousEntry], word: str) -> str:
    """Map a lower-cased surface form to its output file key.

    A plural form maps to the entry's singular; everything else maps to itself.
    """
    entry = lexicon.get(word)
    if entry is not None and entry.plural is not None and entry.plural == word:
        return entry.singular
    return word


def plan_focus_set(
    lexicon: Mapping[str, AmbiguousEntry],
    unlabelled_dir: Path,
    focus_words: Iterable[str] | None = None,
) -> frozenset[str]:
    """Compute the set of focus words still to be extracted.

    Starts from focus_words (or every lexicon key when empty) and drops each
    word whose training set file already exists, together with its plural.

    Args:
        lexicon: Mapping from lower-cased surface form to entry.
        unlabelled_dir: Directory holding ``<word>-trainingset.csv`` files.
        focus_words: Optional restriction list.

    Returns:
        Frozen set of lower-cased focus words.

    Raises:
        UnknownFocusWordError: If a restriction word is not a lexicon key.
    """
    requested = [w.strip().lower() for w in (focus_words or ()) if w and w.strip()]
    for word in requested:
        if word not in lexicon:
            raise UnknownFocusWordError(word)

    focus = set(requested) if requested else set(lexicon)

    to_remove: set[str] = set()
    for word in focus:
        entry = lexicon[word]
        canonical = canonical_word(lexicon, word)
        if not trainingset_path(unlabelled_dir, canonical).exists():
            continue
        to_remove.add(word)
        to_remove.add(canonical)
        if entry.has_distinct_plural:
            to_remove.add(entry.plural)

    if to_remove:
        done = sorted(w for w in to_remove if w in focus)
        logger.info(f"Skipping {len(done)} already processed focus words: {', '.join(done)}")

    return frozenset(focus - to_remove)
