"""Project-wide constants."""

from .columns import PLURAL, REQUIRED_LEXICON_COLUMNS, WORD
from .defaults import (
    CONTEXT_SEPARATOR,
    ENCODING_UTF8,
    MAX_CHARS_DEFAULT,
    MAX_FILE_BYTES_DEFAULT,
    NOUN_TAG_PREFIX,
    PRETAGGED_SEPARATOR,
    PROGRESS_EVERY_DEFAULT,
    SENTENCE_TERMINATOR,
    SPACY_MAX_LENGTH,
    WINDOW_SIZE_DEFAULT,
)
from .files import (
    DIR_UNLABELLED,
    EXT_GZ,
    EXT_PARSED,
    EXT_TXT,
    LEXICON_FILENAME,
    TEMPLATE_TRAININGSET,
    UNDESIRABLES_FILENAME,
)
from .paths import ENV_CORPUS_DIR, ENV_DATA_PATH, ENV_OUTPUT_DIR
from .spacy_config import (
    COMPONENT_SENTER,
    DEFAULT_MODEL_NAME,
    NON_TEXT_POS,
    PENN_PUNCT_TAGS,
    TAG_SENTENCE_FINAL,
    TAGGING_DISABLED,
)

__all__ = [
    "COMPONENT_SENTER",
    "CONTEXT_SEPARATOR",
    "DEFAULT_MODEL_NAME",
    "DIR_UNLABELLED",
    "ENCODING_UTF8",
    "ENV_CORPUS_DIR",
    "ENV_DATA_PATH",
    "ENV_OUTPUT_DIR",
    "EXT_GZ",
    "EXT_PARSED",
    "EXT_TXT",
    "LEXICON_FILENAME",
    "MAX_CHARS_DEFAULT",
    "MAX_FILE_BYTES_DEFAULT",
    "NON_TEXT_POS",
    "NOUN_TAG_PREFIX",
    "PENN_PUNCT_TAGS",
    "PLURAL",
    "PRETAGGED_SEPARATOR",
    "PROGRESS_EVERY_DEFAULT",
    "REQUIRED_LEXICON_COLUMNS",
    "SENTENCE_TERMINATOR",
    "SPACY_MAX_LENGTH",
    "TAG_SENTENCE_FINAL",
    "TAGGING_DISABLED",
    "TEMPLATE_TRAININGSET",
    "UNDESIRABLES_FILENAME",
    "WINDOW_SIZE_DEFAULT",
    "WORD",
]
