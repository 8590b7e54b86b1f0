"""The trained model: window -> compiled next-character distribution."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

import pandas as pd

from .distribution import Distribution, compile_distribution
from .frequency import FrequencyTable, build_frequency_table

logger = logging.getLogger(__name__)

FRAME_COLUMNS = ["window", "char", "count", "probability", "cumulative_probability"]


class Model(Mapping[str, Distribution]):
    """Read-only mapping from window to Distribution.

    Every distribution is compiled before the model is handed out, so a
    lookup never sees counts without probabilities.
    """

    def __init__(self, window_length: int, distributions: Mapping[str, Distribution]):
        self.window_length = window_length
        self._distributions = MappingProxyType(dict(distributions))

    @classmethod
    def from_table(cls, table: FrequencyTable) -> Model:
        compiled = {window: compile_distribution(counts) for window, counts in table.items()}
        return cls(table.window_length, compiled)

    def __getitem__(self, window: str) -> Distribution:
        return self._distributions[window]

    def __iter__(self) -> Iterator[str]:
        return iter(self._distributions)

    def __len__(self) -> int:
        return len(self._distributions)

    def to_frame(self) -> pd.DataFrame:
        """One row per (window, char) entry, in model order."""
        rows = [
            (window, e.char, e.count, e.probability, e.cumulative_probability)
            for window, dist in self._distributions.items()
            for e in dist
        ]
        return pd.DataFrame(rows, columns=FRAME_COLUMNS)

    def __repr__(self) -> str:
        return f"Model(window_length={self.window_length}, windows={len(self)})"

    def __str__(self) -> str:
        return "".join(f"{window} : {dist}\n" for window, dist in self._distributions.items())


def train(source: Iterable[str], window_length: int) -> Model:
    """Count windows in ``source`` and compile them into a Model."""
    table = build_frequency_table(source, window_length)
    model = Model.from_table(table)
    logger.debug("Compiled %d distributions", len(model))
    return model
