"""Gzip corpus reader: each decompressed line is an independent chunk."""

from __future__ import annotations

import gzip
import zlib
from pathlib import Path
from typing import Iterator

from . import ChunkReader, CorpusReadError
from ..constants import ENCODING_UTF8, EXT_GZ
from ..models import Chunk


class GzipChunkReader(ChunkReader):
    """Reader for ``.gz`` files, streamed line by line."""

    def iter_chunks(self, path: Path, *, encoding: str = ENCODING_UTF8) -> Iterator[Chunk]:
        source = str(path)
        try:
            with gzip.open(path, "rt", encoding=encoding) as fh:
                for line in fh:
                    yield Chunk(source=source, text=line.rstrip("\r\n"))
        except (OSError, EOFError, zlib.error, UnicodeDecodeError) as exc:
            raise CorpusReadError(f"Failed to read gzip file {path}: {exc}") from exc

    def supports(self, path: Path) -> bool:
        return path.suffix.lower() == EXT_GZ
