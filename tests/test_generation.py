"""
Tests for sampling, generation and the command line.
"""

import contextlib
import io
import os
import tempfile
import unittest
import sys
from pathlib import Path

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from char_lm.cli import main
from char_lm.config import Config, make_rng
from char_lm.distribution import CharacterCount, Distribution, compile_distribution
from char_lm.generator import LanguageModel, generate
from char_lm.model import train
from char_lm.sampler import sample


CORPUS = (
    "she sells sea shells by the sea shore. "
    "the shells she sells are surely sea shells. "
    "so if she sells shells on the sea shore, "
    "i'm sure she sells sea shore shells."
)


class FixedDraws:
    """Random source returning a preset sequence of draws."""

    def __init__(self, draws):
        self._draws = iter(draws)
        self.calls = 0

    def random(self):
        self.calls += 1
        return next(self._draws)


class TestSampler(unittest.TestCase):
    """Tests for inverse-CDF sampling."""

    def setUp(self):
        self.dist = compile_distribution({"a": 1, "b": 1})

    def test_first_entry_strictly_greater(self):
        self.assertEqual(sample(self.dist, 0.0), "a")
        self.assertEqual(sample(self.dist, 0.4999), "a")
        self.assertEqual(sample(self.dist, 0.5), "b")
        self.assertEqual(sample(self.dist, 0.9999), "b")

    def test_rounding_fallback_returns_last_entry(self):
        dist = Distribution([
            CharacterCount("x", 1, 0.33, 0.33),
            CharacterCount("y", 2, 0.66, 0.99),
        ])
        self.assertEqual(sample(dist, 0.99), "y")
        self.assertEqual(sample(dist, 0.995), "y")

    def test_degenerate_distribution_ignores_draw(self):
        dist = compile_distribution({"q": 4})
        for draw in (0.0, 0.3, 0.999999):
            self.assertEqual(sample(dist, draw), "q")

    def test_draw_out_of_range(self):
        with self.assertRaises(ValueError):
            sample(self.dist, 1.0)
        with self.assertRaises(ValueError):
            sample(self.dist, -0.1)


class TestGenerate(unittest.TestCase):
    """Tests for the generation loop."""

    def test_repeating_corpus(self):
        model = train("abcabcabcabc", 3)
        for seed in (0, 1, 20):
            rng = make_rng(seed)
            self.assertEqual(generate(model, "abc", 7, rng), "abcabca")
            self.assertEqual(generate(model, "abc", 12, rng), "abcabcabcabc")

    def test_length_counts_prompt(self):
        model = train(CORPUS, 2)
        text = generate(model, "the", 40, make_rng(3))
        self.assertTrue(text.startswith("the"))
        self.assertLessEqual(len(text), 40)

    def test_prompt_shorter_than_window(self):
        model = train(CORPUS, 4)
        for n in (0, 2, 100):
            self.assertEqual(generate(model, "she", n, make_rng(1)), "she")

    def test_prompt_already_long_enough(self):
        model = train("abcabcabcabc", 3)
        self.assertEqual(generate(model, "abcab", 3, make_rng(1)), "abcab")

    def test_unseen_window_stops(self):
        model = train("aaab", 3)
        self.assertEqual(generate(model, "aaa", 10, make_rng(1)), "aaab")
        self.assertEqual(generate(model, "zzz", 10, make_rng(1)), "zzz")

    def test_one_draw_per_character(self):
        model = train("abac", 1)
        draws = FixedDraws([0.1, 0.7, 0.9])
        self.assertEqual(generate(model, "a", 5, draws), "abac")
        self.assertEqual(draws.calls, 3)

    def test_uses_last_window_of_prompt(self):
        model = train("xyzxyw", 2)
        draws = FixedDraws([0.0])
        self.assertEqual(generate(model, "zzzzxy", 7, draws), "zzzzxyz")


class TestLanguageModel(unittest.TestCase):
    """Tests for the LanguageModel class."""

    def test_same_seed_same_output(self):
        first = LanguageModel(3, seed=42)
        second = LanguageModel(3, seed=42)
        first.train(CORPUS)
        second.train(CORPUS)
        self.assertEqual(
            [first.generate("she", 80), first.generate("sea", 80)],
            [second.generate("she", 80), second.generate("sea", 80)]
        )

    def test_from_config(self):
        lm = LanguageModel.from_config(Config.for_mode(2, "deterministic"))
        self.assertEqual(lm.window_length, 2)
        lm.train(CORPUS)
        again = LanguageModel.from_config(Config.for_mode(2, "deterministic"))
        again.train(CORPUS)
        self.assertEqual(lm.generate("sh", 60), again.generate("sh", 60))

    def test_injected_random_source(self):
        lm = LanguageModel(1, rng=FixedDraws([0.9]))
        lm.train("abac")
        self.assertEqual(lm.generate("a", 2), "ac")

    def test_untrained(self):
        lm = LanguageModel(3)
        self.assertFalse(lm.is_trained)
        with self.assertRaises(RuntimeError):
            lm.generate("abc", 10)

    def test_invalid_window_length(self):
        with self.assertRaises(ValueError):
            LanguageModel(0)

    def test_train_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "corpus.txt")
            with open(path, "w", encoding="utf-8") as f:
                f.write("abcabcabcabc")
            lm = LanguageModel(3, seed=1)
            model = lm.train_file(path, chunk_size=5)
            self.assertEqual(len(model), 3)
            self.assertIn("abc : ", str(lm))


class TestCommandLine(unittest.TestCase):
    """Tests for the command-line entry point."""

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.corpus = os.path.join(self.tmp.name, "corpus.txt")
        with open(self.corpus, "w", encoding="utf-8") as f:
            f.write("abcabcabcabc")

    def tearDown(self):
        self.tmp.cleanup()

    def run_main(self, argv):
        out, err = io.StringIO(), io.StringIO()
        with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
            try:
                code = main(argv)
            except SystemExit as e:
                code = e.code
        return code, out.getvalue()

    def test_generates_to_stdout(self):
        code, out = self.run_main(["3", "abc", "7", "deterministic", self.corpus])
        self.assertEqual(code, 0)
        self.assertEqual(out, "abcabca\n")

    def test_random_mode(self):
        code, out = self.run_main(["3", "bca", "9", "random", self.corpus])
        self.assertEqual(code, 0)
        self.assertEqual(out, "bcabcabca\n")

    def test_deterministic_mode_is_reproducible(self):
        with open(self.corpus, "w", encoding="utf-8") as f:
            f.write(CORPUS)
        argv = ["2", "sh", "50", "deterministic", self.corpus]
        self.assertEqual(self.run_main(argv), self.run_main(argv))

    def test_missing_corpus(self):
        code, out = self.run_main(["3", "abc", "7", "random", os.path.join(self.tmp.name, "none.txt")])
        self.assertEqual(code, 1)
        self.assertEqual(out, "")

    def test_invalid_arguments(self):
        for argv in (
            ["x", "abc", "7", "random", self.corpus],
            ["0", "abc", "7", "random", self.corpus],
            ["3", "abc", "-1", "random", self.corpus],
            ["3", "abc", "7", "sometimes", self.corpus],
            ["3", "abc", "7", "random"],
        ):
            code, out = self.run_main(argv)
            self.assertEqual(code, 2, argv)
            self.assertEqual(out, "")


if __name__ == '__main__':
    unittest.main()
