"""Plain text corpus reader: one chunk per file."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

from . import ChunkReader, CorpusReadError
from ..constants import ENCODING_UTF8, EXT_TXT
from ..models import Chunk


class TextChunkReader(ChunkReader):
    """Reader for ``.txt`` files; the whole file is one chunk."""

    def iter_chunks(self, path: Path, *, encoding: str = ENCODING_UTF8) -> Iterator[Chunk]:
        try:
            text = path.read_text(encoding=encoding)
        except UnicodeDecodeError as exc:
            raise CorpusReadError(f"Failed to decode file {path} with encoding {encoding}") from exc
        except OSError as exc:
            raise CorpusReadError(f"Failed to read file {path}: {exc}") from exc

        yield Chunk(source=str(path), text=text)

    def supports(self, path: Path) -> bool:
        return path.suffix.lower() == EXT_TXT
