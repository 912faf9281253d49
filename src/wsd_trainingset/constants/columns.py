"""Lexicon CSV column name constants."""

WORD = "word"
PLURAL = "plural"

REQUIRED_LEXICON_COLUMNS = (WORD, PLURAL)
