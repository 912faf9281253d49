"""Unlabelled training set creation: orchestration and CLI."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Mapping, Sequence

from dotenv import load_dotenv

from wsd_trainingset.constants import (
    DEFAULT_MODEL_NAME,
    DIR_UNLABELLED,
    ENV_CORPUS_DIR,
    ENV_DATA_PATH,
    ENV_OUTPUT_DIR,
    MAX_FILE_BYTES_DEFAULT,
    WINDOW_SIZE_DEFAULT,
)
from wsd_trainingset.extraction import ContextExtractor, ExtractionConfig, ExtractionStats
from wsd_trainingset.lexicon import load_lexicon
from wsd_trainingset.models import AmbiguousEntry
from wsd_trainingset.output import StreamOpenError, StreamWriteError, TrainingSetWriter
from wsd_trainingset.parser import ModelLoadError, SentenceParser, SpacyParser
from wsd_trainingset.planner import UnknownFocusWordError, plan_focus_set
from wsd_trainingset.undesirables import Undesirables

logger = logging.getLogger(__name__)


def setup_logging(log_file: str | Path | None = None) -> None:
    """Configure logging to output to both terminal and file (if specified)."""
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path))

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s | %(levelname)s | %(message)s",
        handlers=handlers,
        force=True,
    )


def create_unlabelled_trainingset(
    data_path: Path | str,
    corpus_dir: Path | str,
    output_dir: Path | str,
    max_file_bytes: int = MAX_FILE_BYTES_DEFAULT,
    window_size: int = WINDOW_SIZE_DEFAULT,
    focus_words: Sequence[str] | None = None,
    *,
    model_name: str = DEFAULT_MODEL_NAME,
    parser: SentenceParser | None = None,
    lexicon: Mapping[str, AmbiguousEntry] | None = None,
    undesirables: Undesirables | None = None,
    progress: bool = False,
) -> ExtractionStats:
    """Write ``<output_dir>/unlabelled/<word>-trainingset.csv`` context files.

    Words whose file already exists are skipped, so re-running after an
    interruption only processes the remaining words. Delete a partial file to
    force that word to be redone.

    Args:
        data_path: Directory with the lexicon and optional undesirables list
        corpus_dir: Flat directory of .txt, .gz and .parsed files
        output_dir: Directory under which ``unlabelled/`` is created
        max_file_bytes: Soft per-word output cap; <= 0 disables it
        window_size: Half-width of the context window
        focus_words: Restrict extraction to these words (all lexicon keys if empty)
        model_name: spaCy model used when no parser is given
        parser: Parser override (mainly for testing)
        lexicon: Pre-loaded lexicon; loaded from data_path if None
        undesirables: Filter override; built from data_path if None
        progress: Show a progress bar over corpus files

    Returns:
        Counters for the run.

    Raises:
        UnknownFocusWordError: If a focus word is not in the lexicon.
        StreamOpenError: If an output file cannot be created.
        StreamWriteError: If writing an output file fails.
        ModelLoadError: If the spaCy model is needed and cannot be loaded.
    """
    config = ExtractionConfig(window_size=window_size, max_file_bytes=max_file_bytes)

    unlabelled_dir = Path(output_dir) / DIR_UNLABELLED

    if lexicon is None:
        lexicon = load_lexicon(data_path)

    focus = plan_focus_set(lexicon, unlabelled_dir, focus_words)
    unlabelled_dir.mkdir(parents=True, exist_ok=True)
    if not focus:
        logger.info("all items already processed, nothing to extract")
        return ExtractionStats()

    logger.info(f"reading each corpus file in {corpus_dir} for {len(focus)} focus words")

    if undesirables is None:
        undesirables = Undesirables.from_data_path(data_path)
    if parser is None:
        parser = SpacyParser(model_name)

    with TrainingSetWriter(unlabelled_dir) as writer:
        extractor = ContextExtractor(
            lexicon=lexicon,
            focus=focus,
            undesirables=undesirables,
            parser=parser,
            writer=writer,
            config=config,
        )
        stats = extractor.process_corpus(corpus_dir, progress=progress)

    logger.info(
        f"Done: {stats.contexts_written} contexts for {stats.words_written} words "
        f"from {stats.sentences} sentences in {stats.files_processed} files "
        f"({stats.parse_failures} parse failures, {stats.files_skipped} unreadable files)"
    )
    return stats


def _env_path(name: str) -> Path | None:
    value = os.getenv(name)
    return Path(value) if value else None


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Extract unlabelled context windows for ambiguous nouns"
    )
    parser.add_argument(
        "--data-path",
        type=Path,
        default=None,
        help=f"Directory with ambiguous_nouns.csv (default: ${ENV_DATA_PATH})",
    )
    parser.add_argument(
        "--corpus-dir",
        type=Path,
        default=None,
        help=f"Directory of .txt/.gz/.parsed files (default: ${ENV_CORPUS_DIR})",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help=f"Directory under which unlabelled/ is created (default: ${ENV_OUTPUT_DIR})",
    )
    parser.add_argument(
        "--max-file-bytes",
        type=int,
        default=MAX_FILE_BYTES_DEFAULT,
        help="Soft per-word output size cap in bytes (<= 0 disables)",
    )
    parser.add_argument(
        "--window-size",
        type=int,
        default=WINDOW_SIZE_DEFAULT,
        help="Tokens taken on each side of the focus word",
    )
    parser.add_argument(
        "--model-name", type=str, default=DEFAULT_MODEL_NAME, help="spaCy model for tagging"
    )
    parser.add_argument(
        "--focus-word",
        dest="focus_words",
        action="append",
        default=[],
        help="Restrict extraction to this word (repeatable)",
    )
    parser.add_argument("--log-file", type=str, default=None, help="Also log to this file")
    parser.add_argument("--progress", action="store_true", help="Show a progress bar")
    return parser


def run_cli(argv: Sequence[str] | None = None) -> int:
    """CLI entry point for unlabelled training set creation."""

    load_dotenv()

    arg_parser = build_arg_parser()
    args = arg_parser.parse_args(argv)
    setup_logging(args.log_file)

    data_path = args.data_path or _env_path(ENV_DATA_PATH)
    corpus_dir = args.corpus_dir or _env_path(ENV_CORPUS_DIR)
    output_dir = args.output_dir or _env_path(ENV_OUTPUT_DIR)
    if data_path is None or corpus_dir is None or output_dir is None:
        arg_parser.error("--data-path, --corpus-dir and --output-dir are required")

    try:
        create_unlabelled_trainingset(
            data_path=data_path,
            corpus_dir=corpus_dir,
            output_dir=output_dir,
            max_file_bytes=args.max_file_bytes,
            window_size=args.window_size,
            focus_words=args.focus_words,
            model_name=args.model_name,
            progress=args.progress,
        )
    except UnknownFocusWordError as exc:
        arg_parser.error(str(exc))
    except (StreamOpenError, StreamWriteError) as exc:
        logger.error(f"Aborting, output file {exc.path} failed: {exc}")
        return 1
    except ModelLoadError as exc:
        logger.error(f"Aborting, {exc}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(run_cli())
