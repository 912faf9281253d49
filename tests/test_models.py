from wsd_trainingset.models import AmbiguousEntry, Sentence, Token


def test_token_terminator_ignores_is_text() -> None:
    assert Token(".", ".", False).is_terminator
    assert Token(".", "NN", True).is_terminator
    assert not Token("!", ".", False).is_terminator


def test_token_is_noun_uses_nn_prefix() -> None:
    assert Token("bat", "NN", True).is_noun
    assert Token("bats", "NNS", True).is_noun
    assert Token("Gotham", "NNP", True).is_noun
    assert not Token("bat", "VB", True).is_noun


def test_sentence_sequence_protocol() -> None:
    tokens = (Token("a", "DT", True), Token("bat", "NN", True))
    sentence = Sentence(tokens)

    assert len(sentence) == 2
    assert sentence[1].text == "bat"
    assert [t.text for t in sentence] == ["a", "bat"]


def test_ambiguous_entry_distinct_plural() -> None:
    assert AmbiguousEntry("bat", "bats").has_distinct_plural
    assert not AmbiguousEntry("sheep", "sheep").has_distinct_plural
    assert not AmbiguousEntry("bank").has_distinct_plural
