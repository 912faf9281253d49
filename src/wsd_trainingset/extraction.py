"""Context window extraction around ambiguous nouns.

For every noun occurrence of a focus word, a window of up to ``window_size``
tokens on each side is taken, clipped to the sentence, filtered through the
undesirables list and written to the word's training set file.

Window rules:
- the left edge is moved past the last ``.`` token before the focus word
- the right edge is only clipped to the sentence length; collection stops
  at the first non-text ``.`` token instead
- windows spanning fewer than ``window_size // 2`` positions are dropped,
  as are contexts keeping fewer than ``window_size // 2`` tokens
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Mapping, Sequence, Tuple

from tqdm import tqdm

from wsd_trainingset.constants import (
    EXT_TXT,
    MAX_FILE_BYTES_DEFAULT,
    PROGRESS_EVERY_DEFAULT,
    WINDOW_SIZE_DEFAULT,
)
from wsd_trainingset.corpus import get_reader_for_path, iter_corpus_files
from wsd_trainingset.models import AmbiguousEntry, Chunk, Sentence, Token
from wsd_trainingset.output import TrainingSetWriter
from wsd_trainingset.parser import ParseError, SentenceParser
from wsd_trainingset.planner import canonical_word
from wsd_trainingset.readers import CorpusReadError
from wsd_trainingset.undesirables import Undesirables

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExtractionConfig:
    """Extraction parameters.

    Attributes:
        window_size: Half-width of the context window
        max_file_bytes: Soft per-word output cap; <= 0 disables it
        progress_every: Sentences between progress log lines
    """

    window_size: int = WINDOW_SIZE_DEFAULT
    max_file_bytes: int = MAX_FILE_BYTES_DEFAULT
    progress_every: int = PROGRESS_EVERY_DEFAULT

    def __post_init__(self) -> None:
        if self.window_size < 0:
            raise ValueError("window_size must be non-negative")
        if self.progress_every <= 0:
            raise ValueError("progress_every must be positive")

    @property
    def min_valid_size(self) -> int:
        return self.window_size // 2


@dataclass
class ExtractionStats:
    """Counters for one extraction run."""

    files_seen: int = 0
    files_processed: int = 0
    files_skipped: int = 0
    chunks: int = 0
    parse_failures: int = 0
    empty_parses: int = 0
    sentences: int = 0
    windows_rejected: int = 0
    contexts_written: int = 0
    contexts_skipped_cap: int = 0
    words_written: int = 0


def find_window(tokens: Sequence[Token], index: int, window_size: int) -> Tuple[int, int]:
    """Return the (left, right) token range around index.

    The left edge starts ``window_size`` tokens back and moves past the last
    ``.`` before index. The right edge is only clipped to the sentence end.
    """
    left = max(0, index - window_size)
    for j in range(left, index):
        if tokens[j].is_terminator:
            left = j + 1
    right = min(len(tokens) - 1, index + window_size)
    return left, right


def collect_context(
    tokens: Sequence[Token], left: int, right: int, undesirables: Undesirables
) -> List[str]:
    """Collect lower-cased, filtered word texts from tokens[left..right].

    Stops at the first non-text ``.`` token.
    """
    context: List[str] = []
    for token in tokens[left : right + 1]:
        if token.is_text:
            word = token.text.lower()
            if not undesirables.is_undesirable(word):
                context.append(word)
        elif token.is_terminator:
            break
    return context


class ContextExtractor:
    """Scan sentences for focus nouns and write their context windows.

    Args:
        lexicon: Mapping from lower-cased surface form to entry.
        focus: Lower-cased focus words (lexicon keys).
        undesirables: Filter for tokens excluded from contexts.
        parser: Parser used for text and pretagged chunks.
        writer: Output stream registry.
        config: Window and cap settings.
    """

    def __init__(
        self,
        lexicon: Mapping[str, AmbiguousEntry],
        focus: Iterable[str],
        undesirables: Undesirables,
        parser: SentenceParser,
        writer: TrainingSetWriter,
        config: ExtractionConfig | None = None,
    ):
        self.lexicon = lexicon
        self.focus = frozenset(focus)
        self.undesirables = undesirables
        self.parser = parser
        self.writer = writer
        self.config = config or ExtractionConfig()
        self.stats = ExtractionStats()
        self._written_words: set[str] = set()

    def process_corpus(self, corpus_dir: Path | str, *, progress: bool = False) -> ExtractionStats:
        """Process every supported file directly inside corpus_dir."""

        try:
            files = iter_corpus_files(corpus_dir)
        except CorpusReadError as exc:
            logger.error(str(exc))
            return self.stats

        iterator = tqdm(files, desc="Extracting contexts", unit="file") if progress else files
        for path in iterator:
            self.process_file(path)
        return self.stats

    def process_file(self, path: Path) -> None:
        """Process one corpus file; unreadable files are logged and skipped."""

        self.stats.files_seen += 1
        logger.debug(f"found file: {path}")

        reader = get_reader_for_path(path)
        if reader is None:
            return

        logger.info(f"parsing and analysing {path}")
        try:
            for chunk in reader.iter_chunks(path):
                self.process_chunk(chunk)
        except CorpusReadError as exc:
            self.stats.files_skipped += 1
            logger.warning(f"Skipping unreadable file {path}: {exc}")
            return
        self.stats.files_processed += 1

    def process_chunk(self, chunk: Chunk) -> None:
        """Parse a chunk and process its sentences; parse failures skip the chunk."""

        self.stats.chunks += 1
        try:
            if chunk.pretagged:
                sentences = self.parser.parse_pretagged(chunk.text)
            else:
                sentences = self.parser.parse(chunk.text)
        except ParseError as exc:
            self.stats.parse_failures += 1
            logger.warning(f"error parsing {chunk.source}: {exc}")
            return

        if not sentences:
            self.stats.empty_parses += 1
            logger.info(f"empty: {chunk.source}")
            return

        # Line-based formats produce one chunk per line
        level = logging.INFO if chunk.source.lower().endswith(EXT_TXT) else logging.DEBUG
        logger.log(level, f"sentences: {len(sentences)}, for {chunk.source}")
        self.process_sentences(sentences)

    def process_sentences(self, sentences: Iterable[Sentence]) -> None:
        for sentence in sentences:
            self._process_sentence(sentence.tokens)
            self.stats.sentences += 1
            if self.stats.sentences % self.config.progress_every == 0:
                logger.info(f"   lines processed: {self.stats.sentences}")

    def _under_cap(self, word: str) -> bool:
        # Checked before writing, so one line may overshoot the cap
        cap = self.config.max_file_bytes
        return cap <= 0 or self.writer.bytes_written(word) < cap

    def _process_sentence(self, tokens: Sequence[Token]) -> None:
        window_size = self.config.window_size
        min_valid_size = self.config.min_valid_size

        for i, token in enumerate(tokens):
            word = token.text.lower()
            if word not in self.focus or not token.is_noun:
                continue

            left, right = find_window(tokens, i, window_size)
            if abs(left - right) < min_valid_size:
                self.stats.windows_rejected += 1
                continue

            context = collect_context(tokens, left, right, self.undesirables)
            if len(context) < min_valid_size:
                self.stats.windows_rejected += 1
                continue

            key = canonical_word(self.lexicon, word)
            if not self._under_cap(key):
                self.stats.contexts_skipped_cap += 1
                continue

            self.writer.write(key, context)
            self.stats.contexts_written += 1
            if key not in self._written_words:
                self._written_words.add(key)
                self.stats.words_written += 1
