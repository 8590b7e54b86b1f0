"""
Character-level n-gram language model.

Learns, from a text corpus, how often each character follows each
fixed-length window of characters, and generates new text by sampling
from those frequencies:

1. Corpus: streaming the training text one character at a time
2. Frequency table: counting the character that follows each window
3. Distributions: probabilities and cumulative probabilities per window
4. Sampling: inverse-CDF lookup of a uniform draw
5. Generation: extending a prompt until it reaches the requested length
"""

__version__ = "1.0.0"

from .config import Config, DETERMINISTIC_SEED
from .corpus import CharacterSource
from .frequency import FrequencyTable, build_frequency_table
from .distribution import CharacterCount, Distribution, compile_distribution
from .sampler import sample
from .model import Model, train
from .generator import LanguageModel, generate

__all__ = [
    'Config',
    'DETERMINISTIC_SEED',
    'CharacterSource',
    'FrequencyTable',
    'build_frequency_table',
    'CharacterCount',
    'Distribution',
    'compile_distribution',
    'sample',
    'Model',
    'train',
    'LanguageModel',
    'generate'
]
