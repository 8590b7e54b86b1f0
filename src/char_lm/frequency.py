from __future__ import annotations

import logging
from collections import Counter, deque
from typing import Iterable, Iterator

logger = logging.getLogger(__name__)


class FrequencyTable:
    """Counts of the character that followed each window in the corpus.

    Windows and, within a window, following characters are kept in the
    order they were first observed.
    """

    def __init__(self, window_length: int):
        if window_length < 1:
            raise ValueError("window_length must be >= 1")
        self.window_length = window_length
        self._counts: dict[str, Counter] = {}

    def observe(self, window: str, char: str) -> None:
        if len(window) != self.window_length:
            raise ValueError(
                f"window {window!r} has length {len(window)}, expected {self.window_length}"
            )
        counts = self._counts.get(window)
        if counts is None:
            counts = self._counts[window] = Counter()
        counts[char] += 1

    def total(self, window: str) -> int:
        return sum(self._counts[window].values())

    def windows(self) -> list[str]:
        return list(self._counts)

    def items(self):
        return self._counts.items()

    def __getitem__(self, window: str) -> Counter:
        return self._counts[window]

    def __contains__(self, window: object) -> bool:
        return window in self._counts

    def __iter__(self) -> Iterator[str]:
        return iter(self._counts)

    def __len__(self) -> int:
        return len(self._counts)


def build_frequency_table(source: Iterable[str], window_length: int) -> FrequencyTable:
    """Slide a window over ``source`` and count what follows each window.

    The first ``window_length`` characters only fill the window. Every later
    character is recorded against the current window, which then slides
    forward by that character.
    """

    table = FrequencyTable(window_length)
    window: deque[str] = deque(maxlen=window_length)
    n_chars = 0

    for c in source:
        n_chars += 1
        if len(window) == window_length:
            table.observe("".join(window), c)
        window.append(c)

    if n_chars < window_length:
        logger.warning(
            "Source %s has %d characters, fewer than the window length %d; nothing learned",
            getattr(source, "name", "<iterable>"),
            n_chars,
            window_length,
        )
    logger.info("Counted %d characters into %d windows", n_chars, len(table))
    return table
