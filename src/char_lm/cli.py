#!/usr/bin/env python3
"""
Command-line entry point.

Usage:
    char-lm WINDOW_LENGTH INITIAL_TEXT TEXT_LENGTH {random,deterministic} CORPUS

Trains a model on CORPUS and prints the generated text to stdout. Log
messages go to stderr.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import GENERATION_MODES, Config
from .generator import LanguageModel

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    number = _non_negative_int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value!r}")
    return number


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {value!r}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="char-lm",
        description="Train a character-level n-gram model on a corpus and generate text"
    )
    parser.add_argument(
        "window_length",
        type=_positive_int,
        help="Number of preceding characters used as context"
    )
    parser.add_argument(
        "initial_text",
        help="Prompt to extend; must be at least WINDOW_LENGTH characters to generate anything"
    )
    parser.add_argument(
        "text_length",
        type=_non_negative_int,
        help="Total length of the generated text, prompt included"
    )
    parser.add_argument(
        "mode",
        choices=GENERATION_MODES,
        help="'random' for fresh output on each run, 'deterministic' for a fixed seed"
    )
    parser.add_argument(
        "corpus",
        help="Path to the training text"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    config = Config.for_mode(args.window_length, args.mode)
    lm = LanguageModel.from_config(config)

    try:
        lm.train_file(
            args.corpus,
            encoding=config.encoding,
            errors=config.errors,
            chunk_size=config.chunk_size
        )
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Could not read corpus %s: %s", args.corpus, e)
        return 1

    print(lm.generate(args.initial_text, args.text_length))
    return 0


if __name__ == "__main__":
    sys.exit(main())
