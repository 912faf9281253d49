"""Data models shared across the extraction pipeline.

- AmbiguousEntry: one lexicon entry (singular with optional plural form)
- Token: one tagged token produced by the parser
- Sentence: ordered tokens
- Chunk: one unit of raw corpus text handed to the parser
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from wsd_trainingset.constants import NOUN_TAG_PREFIX, SENTENCE_TERMINATOR


@dataclass(frozen=True)
class AmbiguousEntry:
    """Lexicon entry for an ambiguous noun.

    Attributes:
        singular: Canonical (lower-cased) form, used as the output file key
        plural: Plural form, or None when the noun has no distinct plural
    """

    singular: str
    plural: str | None = None

    @property
    def has_distinct_plural(self) -> bool:
        return bool(self.plural) and self.plural != self.singular


@dataclass(frozen=True)
class Token:
    """A single tagged token.

    Attributes:
        text: Surface text as it appears in the source
        tag: Fine-grained (Penn Treebank) POS tag
        is_text: True for words, False for punctuation and symbols
    """

    text: str
    tag: str
    is_text: bool

    @property
    def is_terminator(self) -> bool:
        return self.text == SENTENCE_TERMINATOR

    @property
    def is_noun(self) -> bool:
        return self.tag.startswith(NOUN_TAG_PREFIX)


@dataclass(frozen=True)
class Sentence:
    """Ordered sequence of tokens."""

    tokens: tuple[Token, ...]

    def __len__(self) -> int:
        return len(self.tokens)

    def __getitem__(self, index: int) -> Token:
        return self.tokens[index]

    def __iter__(self) -> Iterator[Token]:
        return iter(self.tokens)


@dataclass(frozen=True)
class Chunk:
    """Raw text unit produced by a corpus reader.

    Attributes:
        source: File the chunk came from (for log messages)
        text: Free text, or a pretagged line when ``pretagged`` is set
        pretagged: Whether ``text`` is in ``word:tag word:tag`` format
    """

    source: str
    text: str
    pretagged: bool = False
