"""Environment variable names used as CLI fallbacks."""

ENV_DATA_PATH = "WSD_DATA_PATH"
ENV_CORPUS_DIR = "WSD_CORPUS_DIR"
ENV_OUTPUT_DIR = "WSD_OUTPUT_DIR"
