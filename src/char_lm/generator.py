"""
Text Generation Module

Extends a prompt one character at a time by sampling from a trained Model,
and provides the LanguageModel class that bundles a model with its own
random source.

Usage:
    lm = LanguageModel(window_length=3, seed=20)
    lm.train_file("corpus.txt")
    text = lm.generate("The", 200)
"""

import logging
from pathlib import Path
from typing import Iterable, Optional, Union

import numpy as np

from .config import Config, make_rng
from .corpus import CharacterSource
from .model import Model, train
from .sampler import sample_with

logger = logging.getLogger(__name__)


def generate(
    model: Model,
    initial_text: str,
    text_length: int,
    rng: np.random.Generator
) -> str:
    """
    Extend ``initial_text`` until it is ``text_length`` characters long.

    ``text_length`` counts the whole output, prompt included. Generation
    stops early, without error, when the current window was never seen in
    training. A prompt shorter than the window, or already at least
    ``text_length`` long, is returned unchanged.

    Args:
        model: Trained and compiled model
        initial_text: Prompt to extend
        text_length: Desired total length of the returned text
        rng: Random source; one draw is consumed per generated character

    Returns:
        The prompt followed by the generated characters
    """
    window_length = model.window_length
    if len(initial_text) < window_length:
        return initial_text

    generated = list(initial_text)
    window = initial_text[-window_length:]

    while len(generated) < text_length:
        distribution = model.get(window)
        if distribution is None:
            logger.debug("Window %r not in model; stopping at %d characters", window, len(generated))
            break
        next_char = sample_with(distribution, rng)
        generated.append(next_char)
        window = window[1:] + next_char

    return "".join(generated)


class LanguageModel:
    """
    Character-level n-gram language model.

    Each instance owns its random source. Two instances built with the same
    seed and trained on the same corpus generate identical text for the same
    sequence of calls; with ``seed=None`` every instance differs.

    Attributes:
        window_length: Number of context characters
        rng: The instance's random source
    """

    def __init__(
        self,
        window_length: int,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None
    ):
        """
        Initialize an untrained model.

        Args:
            window_length: Number of context characters, at least 1
            seed: Seed for a new random source (ignored if ``rng`` is given)
            rng: Random source to use instead of a freshly seeded one
        """
        if window_length < 1:
            raise ValueError(f"window_length must be >= 1, got {window_length}")
        self.window_length = window_length
        self.rng = rng if rng is not None else make_rng(seed)
        self._model: Optional[Model] = None

    @classmethod
    def from_config(cls, config: Config) -> 'LanguageModel':
        return cls(config.window_length, seed=config.seed)

    @property
    def model(self) -> Model:
        if self._model is None:
            raise RuntimeError("LanguageModel has not been trained")
        return self._model

    @property
    def is_trained(self) -> bool:
        return self._model is not None

    def train(self, source: Union[CharacterSource, Iterable[str]]) -> Model:
        """Build the model from a character source, a string or any iterable of characters."""
        self._model = train(source, self.window_length)
        logger.info(
            "Trained window length %d model with %d windows",
            self.window_length, len(self._model)
        )
        return self._model

    def train_file(
        self,
        path: Union[str, Path],
        encoding: str = "utf-8",
        errors: str = "strict",
        chunk_size: int = 8192
    ) -> Model:
        """Build the model from a corpus file."""
        source = CharacterSource.from_file(
            path, encoding=encoding, errors=errors, chunk_size=chunk_size
        )
        model = self.train(source)
        logger.info("Read %d characters from %s", source.chars_read, source.name)
        return model

    def generate(self, initial_text: str, text_length: int) -> str:
        """Generate text from the trained model; see :func:`generate`."""
        return generate(self.model, initial_text, text_length, self.rng)

    def __str__(self) -> str:
        return str(self.model)
