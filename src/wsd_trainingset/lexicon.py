"""Ambiguous noun lexicon loader."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict

import pandas as pd

from wsd_trainingset.constants import LEXICON_FILENAME, PLURAL, REQUIRED_LEXICON_COLUMNS, WORD
from wsd_trainingset.models import AmbiguousEntry

logger = logging.getLogger(__name__)

Lexicon = Dict[str, AmbiguousEntry]


class LexiconLoadError(ValueError):
    """Raised when the lexicon file has an invalid format."""


def lexicon_path(data_path: Path | str) -> Path:
    """Get path to the lexicon CSV under data_path."""
    return Path(data_path) / LEXICON_FILENAME


def load_lexicon(data_path: Path | str) -> Lexicon:
    """Load the ambiguous noun lexicon.

    Reads ``<data_path>/ambiguous_nouns.csv`` with columns ``word`` and
    ``plural`` (plural may be empty). Both the singular and a distinct plural
    are keys of the returned mapping and point at the same entry.

    Args:
        data_path: Directory holding lexicon and parser resources.

    Returns:
        Mapping from lower-cased surface form to AmbiguousEntry.

    Raises:
        FileNotFoundError: If the lexicon file does not exist.
        LexiconLoadError: If required columns are missing.
    """
    path = lexicon_path(data_path)
    if not path.exists():
        raise FileNotFoundError(path)

    try:
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
    except pd.errors.EmptyDataError:
        logger.warning(f"Lexicon file {path} is empty")
        return {}

    missing = [col for col in REQUIRED_LEXICON_COLUMNS if col not in df.columns]
    if missing:
        raise LexiconLoadError(f"Lexicon file {path} is missing columns: {missing}")

    return build_lexicon(zip(df[WORD], df[PLURAL]))


def build_lexicon(rows) -> Lexicon:
    """Build the lexicon mapping from (word, plural) pairs."""

    lexicon: Lexicon = {}
    for word, plural in rows:
        singular = str(word).strip().lower()
        if not singular:
            continue
        plural_norm = str(plural).strip().lower() if plural is not None else ""
        entry = AmbiguousEntry(singular=singular, plural=plural_norm or None)

        keys = [singular]
        if entry.has_distinct_plural:
            keys.append(entry.plural)
        for key in keys:
            if key in lexicon:
                logger.warning(f"Duplicate lexicon key '{key}', keeping first entry")
                continue
            lexicon[key] = entry

    logger.info(f"Loaded lexicon with {len(lexicon)} keys")
    return lexicon
