"""Default values for extraction runs."""

# File encoding
ENCODING_UTF8 = "utf-8"

# Context window defaults
WINDOW_SIZE_DEFAULT = 25
MAX_FILE_BYTES_DEFAULT = 0  # <= 0 disables the per-word cap

# Progress reporting (sentences between progress lines)
PROGRESS_EVERY_DEFAULT = 100_000

# Token conventions
NOUN_TAG_PREFIX = "NN"
SENTENCE_TERMINATOR = "."
CONTEXT_SEPARATOR = ","
PRETAGGED_SEPARATOR = ":"

# Text processing defaults
MAX_CHARS_DEFAULT = 250_000
SPACY_MAX_LENGTH = 2_500_000
