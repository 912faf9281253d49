"""Sentence parsing: spaCy tagging of free text and the pretagged line format.

Two entry points produce sentences of tagged tokens:
- parse(text): tokenize, sentence-split and POS-tag free text with spaCy
- parse_pretagged(line): read a line already in ``word1:tag word2:tag ...`` format
"""

from __future__ import annotations

from functools import lru_cache
from typing import Iterator, List, Protocol, Sequence

import spacy
from spacy.language import Language
from spacy.tokens import Token as SpacyToken

from wsd_trainingset.constants import (
    COMPONENT_SENTER,
    DEFAULT_MODEL_NAME,
    MAX_CHARS_DEFAULT,
    NON_TEXT_POS,
    PENN_PUNCT_TAGS,
    PRETAGGED_SEPARATOR,
    SPACY_MAX_LENGTH,
    TAG_SENTENCE_FINAL,
    TAGGING_DISABLED,
)
from wsd_trainingset.models import Sentence, Token


class ParseError(Exception):
    """Raised when a chunk of text cannot be turned into sentences."""


class ModelLoadError(RuntimeError):
    """Raised when the spaCy model cannot be loaded."""


class SentenceParser(Protocol):
    """Interface the extraction engine needs from a parser."""

    def parse(self, text: str) -> List[Sentence]:
        ...

    def parse_pretagged(self, line: str) -> List[Sentence]:
        ...


@lru_cache
def initialize_spacy_model(model_name: str = DEFAULT_MODEL_NAME) -> Language:
    """Load and cache spaCy model."""

    nlp = spacy.load(model_name, disable=TAGGING_DISABLED)
    if COMPONENT_SENTER in nlp.disabled:
        nlp.enable_pipe(COMPONENT_SENTER)
    nlp.max_length = max(nlp.max_length, SPACY_MAX_LENGTH)
    return nlp


def iterate_text_chunks(text: str, max_chars: int = MAX_CHARS_DEFAULT) -> Iterator[str]:
    """Yield chunks of text not exceeding max_chars, split on paragraph boundaries.

    A paragraph longer than max_chars is cut at the last sentence end or space
    before the limit.
    """

    if max_chars <= 0:
        raise ValueError("max_chars must be positive")

    buffer: List[str] = []
    current_len = 0

    for raw_para in text.split("\n\n"):
        para = raw_para.strip()
        if not para:
            continue

        if current_len + len(para) + 2 > max_chars and buffer:
            yield "\n\n".join(buffer)
            buffer = []
            current_len = 0

        while len(para) > max_chars:
            end = max_chars
            for sep in (". ", "! ", "? ", " "):
                idx = para.rfind(sep, 0, max_chars)
                if idx > 0:
                    end = idx + len(sep)
                    break
            head = para[:end].strip()
            if head:
                yield head
            para = para[end:].strip()

        if para:
            buffer.append(para)
            current_len += len(para) + 2

    if buffer:
        yield "\n\n".join(buffer)


def _is_text_token(token: SpacyToken) -> bool:
    return not (token.is_punct or token.is_space or token.pos_ in NON_TEXT_POS)


class SpacyParser:
    """Free-text parser backed by a spaCy pipeline.

    The model is loaded on first use so constructing a parser is cheap.
    """

    def __init__(self, model_name: str = DEFAULT_MODEL_NAME, *, max_chars: int = MAX_CHARS_DEFAULT):
        self.model_name = model_name
        self.max_chars = max_chars
        self._nlp: Language | None = None

    @property
    def nlp(self) -> Language:
        if self._nlp is None:
            try:
                self._nlp = initialize_spacy_model(self.model_name)
            except OSError as exc:
                raise ModelLoadError(f"Cannot load spaCy model '{self.model_name}': {exc}") from exc
        return self._nlp

    def parse(self, text: str) -> List[Sentence]:
        """Tokenize, sentence-split and tag free text.

        Args:
            text: Raw text; may be empty.

        Returns:
            Sentences in document order. Empty list for blank text.

        Raises:
            ParseError: If spaCy fails on the text.
            ModelLoadError: If the spaCy model cannot be loaded.
        """
        if text is None:
            raise ParseError("text must not be None")
        if not text.strip():
            return []

        # Model load errors propagate instead of becoming ParseError
        nlp = self.nlp

        sentences: List[Sentence] = []
        try:
            for doc in nlp.pipe(iterate_text_chunks(text, max_chars=self.max_chars)):
                for sent in doc.sents:
                    tokens = tuple(
                        Token(text=tok.text, tag=tok.tag_, is_text=_is_text_token(tok))
                        for tok in sent
                        if not tok.is_space
                    )
                    if tokens:
                        sentences.append(Sentence(tokens))
        except Exception as exc:
            raise ParseError(f"spaCy failed to parse text: {exc}") from exc
        return sentences

    def parse_pretagged(self, line: str) -> List[Sentence]:
        return parse_pretagged(line)


def _pretagged_is_text(text: str, tag: str) -> bool:
    if tag in PENN_PUNCT_TAGS:
        return False
    return any(ch.isalnum() for ch in text)


def parse_pretagged(line: str) -> List[Sentence]:
    """Parse a line in ``word1:tag word2:tag ...`` format.

    Tokens are whitespace separated; the last ``:`` in each item splits text
    from tag, so ``10:30:CD`` is the text ``10:30`` tagged ``CD``. A sentence
    ends after every token tagged with the sentence-final tag ``.``.

    Raises:
        ParseError: If an item has no separator or an empty text or tag.
    """
    if line is None:
        raise ParseError("line must not be None")

    sentences: List[Sentence] = []
    current: List[Token] = []
    for item in line.split():
        text, sep, tag = item.rpartition(PRETAGGED_SEPARATOR)
        if not sep or not text or not tag:
            raise ParseError(f"Malformed pretagged token: {item!r}")
        current.append(Token(text=text, tag=tag, is_text=_pretagged_is_text(text, tag)))
        if tag == TAG_SENTENCE_FINAL:
            sentences.append(Sentence(tuple(current)))
            current = []

    if current:
        sentences.append(Sentence(tuple(current)))
    return sentences


def serialize_pretagged(sentences: Sequence[Sentence]) -> str:
    """Write sentences back to the pretagged line format."""

    return " ".join(
        f"{token.text}{PRETAGGED_SEPARATOR}{token.tag}"
        for sentence in sentences
        for token in sentence
    )
