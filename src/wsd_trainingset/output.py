"""Per-word training set output streams and byte accounting."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Sequence, TextIO

from wsd_trainingset.constants import CONTEXT_SEPARATOR, ENCODING_UTF8, TEMPLATE_TRAININGSET

logger = logging.getLogger(__name__)


class StreamOpenError(OSError):
    """Raised when a training set file cannot be opened for writing."""

    def __init__(self, path: Path, cause: OSError):
        super().__init__(f"Cannot open training set file {path}: {cause}")
        self.path = path


class StreamWriteError(OSError):
    """Raised when writing to a training set file fails."""

    def __init__(self, path: Path, cause: OSError):
        super().__init__(f"Cannot write training set file {path}: {cause}")
        self.path = path


def trainingset_path(unlabelled_dir: Path | str, word: str) -> Path:
    """Get path to the unlabelled training set file for a canonical word."""
    return Path(unlabelled_dir) / f"{word}{TEMPLATE_TRAININGSET}"


@dataclass
class _OutputStream:
    path: Path
    handle: TextIO
    bytes_written: int = 0


class TrainingSetWriter:
    """Registry of open per-word training set files.

    Files are opened (truncating) on the first write for a word and closed
    once by close(). Bytes written per word are tracked for the size cap.

    Args:
        unlabelled_dir: Directory for ``<word>-trainingset.csv`` files.
    """

    def __init__(self, unlabelled_dir: Path | str):
        self.unlabelled_dir = Path(unlabelled_dir)
        self._streams: Dict[str, _OutputStream] = {}
        self._closed = False

    def __enter__(self) -> "TrainingSetWriter":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def words(self) -> list[str]:
        return list(self._streams)

    def bytes_written(self, word: str) -> int:
        stream = self._streams.get(word)
        return stream.bytes_written if stream else 0

    def write(self, word: str, context: Sequence[str]) -> int:
        """Append one context line for a canonical word.

        Args:
            word: Canonical singular, used as the file key.
            context: Lower-cased token texts.

        Returns:
            Number of bytes written, including the newline.

        Raises:
            StreamOpenError: If the file cannot be opened.
            StreamWriteError: If the write fails.
        """
        if self._closed:
            raise ValueError("TrainingSetWriter is closed")

        stream = self._streams.get(word)
        if stream is None:
            stream = self._open(word)

        line = CONTEXT_SEPARATOR.join(context) + "\n"
        try:
            stream.handle.write(line)
        except OSError as exc:
            raise StreamWriteError(stream.path, exc) from exc

        size = len(line.encode(ENCODING_UTF8))
        stream.bytes_written += size
        return size

    def _open(self, word: str) -> _OutputStream:
        path = trainingset_path(self.unlabelled_dir, word)
        try:
            handle = open(path, "w", encoding=ENCODING_UTF8, newline="\n")
        except OSError as exc:
            raise StreamOpenError(path, exc) from exc

        logger.debug(f"Opened {path}")
        stream = _OutputStream(path=path, handle=handle)
        self._streams[word] = stream
        return stream

    def close(self) -> None:
        """Flush and close every open stream; safe to call more than once.

        Every stream is closed even if one fails.

        Raises:
            StreamWriteError: For the first stream whose final flush failed.
        """
        if self._closed:
            return
        self._closed = True

        failure: StreamWriteError | None = None
        for stream in self._streams.values():
            try:
                stream.handle.close()
            except OSError as exc:
                logger.error(f"Failed to close {stream.path}: {exc}")
                if failure is None:
                    failure = StreamWriteError(stream.path, exc)
                    failure.__cause__ = exc
        if failure is not None:
            raise failure
