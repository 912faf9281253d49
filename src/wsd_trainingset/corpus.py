"""Corpus directory listing and reader dispatch."""

from __future__ import annotations

from pathlib import Path
from typing import List

from wsd_trainingset.readers import ChunkReader, CorpusReadError
from wsd_trainingset.readers.gzip_reader import GzipChunkReader
from wsd_trainingset.readers.parsed_reader import ParsedChunkReader
from wsd_trainingset.readers.text_reader import TextChunkReader


def get_reader_for_path(path: Path) -> ChunkReader | None:
    """Get the ChunkReader for a corpus file.

    Args:
        path: Path to the corpus file.

    Returns:
        Reader instance that supports the file, or None for unsupported extensions.
    """
    readers = [TextChunkReader(), GzipChunkReader(), ParsedChunkReader()]

    for reader in readers:
        if reader.supports(path):
            return reader
    return None


def iter_corpus_files(corpus_dir: Path | str) -> List[Path]:
    """List regular files directly inside corpus_dir (non-recursive), sorted by name.

    Raises:
        CorpusReadError: If the directory does not exist or cannot be listed.
    """
    corpus_dir = Path(corpus_dir)
    if not corpus_dir.is_dir():
        raise CorpusReadError(f"Corpus directory not found: {corpus_dir}")

    try:
        return sorted(path for path in corpus_dir.iterdir() if path.is_file())
    except OSError as exc:
        raise CorpusReadError(f"Cannot list corpus directory {corpus_dir}: {exc}") from exc
