"""Reader for pretagged ``.parsed`` files (``word1:tag word2:tag ...`` per line)."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

from . import ChunkReader, CorpusReadError
from ..constants import ENCODING_UTF8, EXT_PARSED
from ..models import Chunk


class ParsedChunkReader(ChunkReader):
    """Reader for ``.parsed`` files; each line is a pretagged chunk."""

    def iter_chunks(self, path: Path, *, encoding: str = ENCODING_UTF8) -> Iterator[Chunk]:
        source = str(path)
        try:
            with open(path, encoding=encoding) as fh:
                for line in fh:
                    yield Chunk(source=source, text=line.rstrip("\r\n"), pretagged=True)
        except (OSError, UnicodeDecodeError) as exc:
            raise CorpusReadError(f"Failed to read parsed file {path}: {exc}") from exc

    def supports(self, path: Path) -> bool:
        return path.suffix.lower() == EXT_PARSED
