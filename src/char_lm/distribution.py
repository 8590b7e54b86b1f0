"""Compiled per-window distributions of the next character."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Mapping, Sequence, Union

import numpy as np


@dataclass(frozen=True)
class CharacterCount:
    char: str
    count: int
    probability: float
    cumulative_probability: float

    def __str__(self) -> str:
        return f"({self.char} {self.count} {self.probability} {self.cumulative_probability})"


class Distribution:
    """Ordered, read-only sequence of CharacterCount entries for one window.

    Entry order is the order in which characters were first observed, and
    cumulative probabilities are accumulated in that order.
    """

    __slots__ = ("_entries", "_cumulative")

    def __init__(self, entries: Sequence[CharacterCount]):
        if not entries:
            raise ValueError("a distribution needs at least one entry")
        self._entries = tuple(entries)
        cumulative = np.array([e.cumulative_probability for e in self._entries], dtype=float)
        cumulative.setflags(write=False)
        self._cumulative = cumulative

    @property
    def chars(self) -> list[str]:
        return [e.char for e in self._entries]

    @property
    def counts(self) -> dict[str, int]:
        return {e.char: e.count for e in self._entries}

    @property
    def probabilities(self) -> np.ndarray:
        return np.array([e.probability for e in self._entries], dtype=float)

    @property
    def cumulative(self) -> np.ndarray:
        return self._cumulative

    @property
    def total(self) -> int:
        return sum(e.count for e in self._entries)

    def get(self, char: str) -> CharacterCount | None:
        for entry in self._entries:
            if entry.char == char:
                return entry
        return None

    def __getitem__(self, index: int) -> CharacterCount:
        return self._entries[index]

    def __iter__(self) -> Iterator[CharacterCount]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Distribution):
            return NotImplemented
        return self._entries == other._entries

    def __hash__(self) -> int:
        return hash(self._entries)

    def __repr__(self) -> str:
        return f"Distribution({list(self._entries)!r})"

    def __str__(self) -> str:
        return "(" + " ".join(str(e) for e in self._entries) + ")"


def compile_distribution(counts: Union[Mapping[str, int], Distribution]) -> Distribution:
    """Turn observed counts into probabilities and cumulative probabilities.

    Values are kept at full float precision; the cumulative value is a running
    sum in entry order, so the last one may differ from 1.0 by rounding error.
    Passing a compiled Distribution recompiles it from its counts.
    """

    if isinstance(counts, Distribution):
        counts = counts.counts
    if not counts:
        raise ValueError("cannot compile an empty distribution")

    chars = list(counts)
    values = np.array([counts[c] for c in chars], dtype=np.int64)
    if (values <= 0).any():
        raise ValueError("counts must be positive")

    probabilities = values / values.sum()
    cumulative = np.cumsum(probabilities)

    return Distribution([
        CharacterCount(c, int(n), float(p), float(cp))
        for c, n, p, cp in zip(chars, values, probabilities, cumulative)
    ])
