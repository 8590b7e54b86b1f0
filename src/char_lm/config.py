"""
Configuration Module for the character-level language model.

Holds the settings shared by training, generation and the command line:
window length, random seed and how the corpus file is decoded.
"""

from dataclasses import dataclass
from typing import Dict, Optional

import numpy as np


# Seed used by the "deterministic" command-line mode.
DETERMINISTIC_SEED = 20

GENERATION_MODES = ("random", "deterministic")


@dataclass
class Config:
    """
    Configuration class for training and generation.

    Attributes:
        window_length: Number of preceding characters used as context
        seed: Seed for the random source; None draws fresh entropy
        encoding: Text encoding of corpus files
        errors: Decoding error policy passed to open()
        chunk_size: Number of characters read from a corpus file at a time
    """

    window_length: int = 3
    seed: Optional[int] = None
    encoding: str = "utf-8"
    errors: str = "strict"
    chunk_size: int = 8192

    def __post_init__(self):
        """Reject settings that would make training meaningless."""
        if self.window_length < 1:
            raise ValueError(f"window_length must be >= 1, got {self.window_length}")
        if self.chunk_size < 1:
            raise ValueError(f"chunk_size must be >= 1, got {self.chunk_size}")

    @classmethod
    def for_mode(cls, window_length: int, mode: str, **overrides) -> 'Config':
        """Create a Config for the "random" or "deterministic" generation mode."""
        if mode not in GENERATION_MODES:
            raise ValueError(f"mode must be one of {GENERATION_MODES}, got {mode!r}")
        seed = DETERMINISTIC_SEED if mode == "deterministic" else None
        return cls(window_length=window_length, seed=seed, **overrides)

    @classmethod
    def from_dict(cls, config_dict: Dict) -> 'Config':
        """Create Config instance from dictionary."""
        return cls(**{k: v for k, v in config_dict.items() if k in cls.__annotations__})

    def to_dict(self) -> Dict:
        """Convert Config to dictionary."""
        return {
            'window_length': self.window_length,
            'seed': self.seed,
            'encoding': self.encoding,
            'errors': self.errors,
            'chunk_size': self.chunk_size
        }


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Build an instance-scoped random source; equal seeds give equal draws."""
    return np.random.default_rng(seed)
