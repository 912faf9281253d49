"""Corpus readers turning files into text chunks (.txt, .gz, .parsed)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterator

from wsd_trainingset.models import Chunk

__all__ = ["ChunkReader", "CorpusReadError"]


class CorpusReadError(Exception):
    """Raised when a corpus file or directory cannot be read."""


class ChunkReader(ABC):
    """Abstract interface for producing parser input from a corpus file."""

    @abstractmethod
    def iter_chunks(self, path: Path) -> Iterator[Chunk]:
        """Yield text chunks from the file, in file order.

        Args:
            path: Path to the corpus file.

        Yields:
            Chunks to hand to the parser.

        Raises:
            CorpusReadError: If the file cannot be opened, decompressed or decoded.
        """
        pass

    @abstractmethod
    def supports(self, path: Path) -> bool:
        """Check if this reader supports the given file.

        Args:
            path: Path to the corpus file.

        Returns:
            True if this reader can handle the file format, False otherwise.
        """
        pass
