"""spaCy model and component constants."""

# Default model name
DEFAULT_MODEL_NAME = "en_core_web_sm"

# spaCy component names
COMPONENT_PARSER = "parser"
COMPONENT_NER = "ner"
COMPONENT_TEXTCAT = "textcat"
COMPONENT_LEMMATIZER = "lemmatizer"
COMPONENT_SENTER = "senter"

# Only the tagger and sentence segmentation are needed
TAGGING_DISABLED = [COMPONENT_PARSER, COMPONENT_NER, COMPONENT_TEXTCAT, COMPONENT_LEMMATIZER]

# Coarse POS tags never treated as words
NON_TEXT_POS = frozenset({"PUNCT", "SPACE", "SYM"})

# Penn Treebank tags
TAG_SENTENCE_FINAL = "."
PENN_PUNCT_TAGS = frozenset(
    {
        ".",
        ",",
        ":",
        "``",
        "''",
        "-LRB-",
        "-RRB-",
        "HYPH",
        "NFP",
        "SYM",
        "#",
        "$",
    }
)
