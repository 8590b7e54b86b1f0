"""
Character sources for training.

A CharacterSource is a forward-only stream of single characters. It can be
consumed with a plain ``for`` loop or with the pull-style ``has_next`` /
``next_char`` pair.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator

logger = logging.getLogger(__name__)


def _iter_chars(chunks: Iterable[str]) -> Iterator[str]:
    for chunk in chunks:
        yield from chunk


def _read_chunks(path: Path, encoding: str, errors: str, chunk_size: int) -> Iterator[str]:
    with open(path, "r", encoding=encoding, errors=errors, newline="") as f:
        while True:
            chunk = f.read(chunk_size)
            if not chunk:
                return
            yield chunk


class CharacterSource:
    """Lazy, finite sequence of characters.

    ``chunks`` may be a string or any iterable of strings; multi-character
    strings are split into their characters.
    """

    def __init__(self, chunks: Iterable[str], name: str = "<text>"):
        self.name = name
        self.chars_read = 0
        self._chars = _iter_chars(chunks)
        self._pending: str | None = None

    @classmethod
    def from_text(cls, text: str) -> CharacterSource:
        return cls(text)

    @classmethod
    def from_file(
        cls,
        path: str | Path,
        *,
        encoding: str = "utf-8",
        errors: str = "strict",
        chunk_size: int = 8192,
    ) -> CharacterSource:
        """Stream a corpus file in chunks.

        A missing corpus fails here with ``FileNotFoundError``; the file
        itself is only opened once iteration starts.
        """

        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"corpus file not found: {path}")
        logger.info("Reading corpus from %s", path)
        return cls(_read_chunks(path, encoding, errors, chunk_size), name=str(path))

    def has_next(self) -> bool:
        if self._pending is None:
            self._pending = next(self._chars, None)
        return self._pending is not None

    def next_char(self) -> str:
        if not self.has_next():
            raise EOFError(f"no more characters in {self.name}")
        c = self._pending
        self._pending = None
        self.chars_read += 1
        return c

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        if not self.has_next():
            raise StopIteration
        return self.next_char()
