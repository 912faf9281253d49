"""Shared test helpers: a fake parser and a fixed-word undesirables filter."""

from __future__ import annotations

from typing import Iterable, List

import pytest

from wsd_trainingset.lexicon import build_lexicon
from wsd_trainingset.models import Sentence
from wsd_trainingset.parser import ParseError, parse_pretagged


class FakeParser:
    """Parser that reads free text as pretagged ``word:TAG`` tokens.

    Records every call so tests can assert on chunking.
    """

    def __init__(self, fail_on: Iterable[str] = ()):
        self.fail_on = set(fail_on)
        self.parse_calls: List[str] = []
        self.pretagged_calls: List[str] = []

    def parse(self, text: str) -> List[Sentence]:
        self.parse_calls.append(text)
        if text in self.fail_on:
            raise ParseError(f"cannot parse {text!r}")
        return parse_pretagged(text)

    def parse_pretagged(self, line: str) -> List[Sentence]:
        self.pretagged_calls.append(line)
        return parse_pretagged(line)


class WordFilter:
    """Undesirables filter over an explicit word set."""

    def __init__(self, words: Iterable[str] = ("the", "a")):
        self.words = set(words)

    def is_undesirable(self, word: str) -> bool:
        return word in self.words


def one_sentence(line: str) -> Sentence:
    """Build a single sentence from pretagged tokens, ignoring sentence splits."""
    return Sentence(tuple(token for sentence in parse_pretagged(line) for token in sentence))


@pytest.fixture
def fake_parser() -> FakeParser:
    return FakeParser()


@pytest.fixture
def word_filter() -> WordFilter:
    return WordFilter()


@pytest.fixture
def bat_lexicon():
    return build_lexicon([("bat", "bats"), ("mouse", "mice"), ("sheep", "sheep"), ("bank", "")])
