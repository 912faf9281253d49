from __future__ import annotations

import pytest

from wsd_trainingset.parser import (
    ModelLoadError,
    ParseError,
    SpacyParser,
    initialize_spacy_model,
    iterate_text_chunks,
    parse_pretagged,
    serialize_pretagged,
)


@pytest.fixture(scope="session")
def spacy_parser() -> SpacyParser:
    try:
        initialize_spacy_model()
    except OSError:
        pytest.skip("spaCy model en_core_web_sm is not installed")
    return SpacyParser()


class TestParsePretagged:
    def test_splits_text_and_tag(self) -> None:
        sentences = parse_pretagged("The:DT bat:NN flew:VBD")

        assert len(sentences) == 1
        assert [(t.text, t.tag) for t in sentences[0]] == [
            ("The", "DT"),
            ("bat", "NN"),
            ("flew", "VBD"),
        ]

    def test_last_colon_separates_tag(self) -> None:
        token = parse_pretagged("10:30:CD")[0][0]

        assert token.text == "10:30"
        assert token.tag == "CD"

    def test_sentence_final_tag_closes_sentence(self) -> None:
        sentences = parse_pretagged("The:DT bat:NN flew:VBD .:. A:DT bat:NN ate:VBD .:.")

        assert len(sentences) == 2
        assert sentences[0][-1].text == "."
        assert [t.text for t in sentences[1]] == ["A", "bat", "ate", "."]

    def test_trailing_tokens_form_last_sentence(self) -> None:
        sentences = parse_pretagged("Bats:NNS fly:VBP .:. at:IN night:NN")

        assert len(sentences) == 2
        assert [t.text for t in sentences[1]] == ["at", "night"]

    def test_punctuation_and_symbols_are_not_text(self) -> None:
        tokens = parse_pretagged("bat:NN ,:, .:. ---:XX 42:CD")
        flat = [t for s in tokens for t in s]

        assert [t.is_text for t in flat] == [True, False, False, False, True]

    def test_blank_line_returns_no_sentences(self) -> None:
        assert parse_pretagged("") == []
        assert parse_pretagged("   \t ") == []

    @pytest.mark.parametrize("line", ["bat", "bat:", ":NN", "bat:NN fly"])
    def test_malformed_items_raise(self, line: str) -> None:
        with pytest.raises(ParseError, match="Malformed"):
            parse_pretagged(line)

    def test_round_trip_through_serializer(self) -> None:
        line = "The:DT 10:30:CD train:NN left:VBD .:. It:PRP was:VBD late:JJ !:."
        sentences = parse_pretagged(line)

        serialized = serialize_pretagged(sentences)

        assert serialized == line
        assert parse_pretagged(serialized) == sentences


class TestIterateTextChunks:
    def test_short_text_is_single_chunk(self) -> None:
        assert list(iterate_text_chunks("One.\n\nTwo.", max_chars=100)) == ["One.\n\nTwo."]

    def test_paragraphs_grouped_under_limit(self) -> None:
        text = "aaaa.\n\nbbbb.\n\ncccc."

        chunks = list(iterate_text_chunks(text, max_chars=14))

        assert chunks == ["aaaa.\n\nbbbb.", "cccc."]

    def test_long_paragraph_split_at_sentence_end(self) -> None:
        text = "First sentence. Second sentence."

        chunks = list(iterate_text_chunks(text, max_chars=20))

        assert chunks == ["First sentence.", "Second sentence."]
        assert all(len(c) <= 20 for c in chunks)

    def test_invalid_max_chars(self) -> None:
        with pytest.raises(ValueError):
            list(iterate_text_chunks("text", max_chars=0))


def test_spacy_parser_blank_text_skips_model() -> None:
    parser = SpacyParser(model_name="not_a_real_model")

    assert parser.parse("") == []
    assert parser.parse("  \n\n ") == []


def test_spacy_parser_missing_model_raises() -> None:
    parser = SpacyParser(model_name="not_a_real_model")

    with pytest.raises(ModelLoadError, match="not_a_real_model"):
        parser.parse("The bat flew.")


def test_spacy_parser_tags_nouns_and_punctuation(spacy_parser: SpacyParser) -> None:
    sentences = spacy_parser.parse("The bat flew out of the cave.")

    assert len(sentences) == 1
    tokens = list(sentences[0])
    bat = next(t for t in tokens if t.text == "bat")
    assert bat.tag.startswith("NN")
    assert bat.is_text
    assert tokens[-1].text == "."
    assert tokens[-1].is_text is False


def test_spacy_parser_splits_sentences(spacy_parser: SpacyParser) -> None:
    sentences = spacy_parser.parse("The bat flew away. A cricket bat lay on the grass.")

    assert len(sentences) == 2


def test_spacy_parser_pretagged_entry_point() -> None:
    parser = SpacyParser(model_name="not_a_real_model")

    sentences = parser.parse_pretagged("bat:NN .:.")

    assert [t.text for t in sentences[0]] == ["bat", "."]
