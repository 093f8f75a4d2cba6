import os
import sys
import unittest

# ---------------- Import shim (works from dev_tests/) ----------------
THIS_DIR = os.path.dirname(os.path.abspath(__file__))
ROOT_DIR = os.path.abspath(os.path.join(THIS_DIR, os.pardir))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from components.benchmark import run_benchmark, time_build, time_lookups
from components.noun_generator import MID_WORD_NOUNS, NOUNS, SUFFIXES, gen_nouns_with_suffix_freq, generate_random_nouns
from components.work_loads import WorkLoad
from pattern_tries import DEFAULT_PLURALS, PairedMapping

# Nouns whose only inflecting suffix (if any) is at the end.
REGULAR_NOUNS = [n for n in NOUNS if n not in MID_WORD_NOUNS]


def suffix_share(words):
    if not words:
        return 0.0
    return sum(1 for w in words if w.endswith(SUFFIXES)) / len(words)


class TestGenerateRandomNouns(unittest.TestCase):
    def test_length_and_types_nonunique(self):
        words = generate_random_nouns(5_000, seed=123, unique=False)
        self.assertEqual(len(words), 5_000)
        self.assertTrue(all(w in NOUNS for w in words))

    def test_reproducibility(self):
        a = generate_random_nouns(1_000, seed=999)
        b = generate_random_nouns(1_000, seed=999)
        c = generate_random_nouns(1_000, seed=1000)
        self.assertEqual(a, b)
        self.assertNotEqual(a, c)

    def test_uniqueness(self):
        words = generate_random_nouns(50, seed=42, unique=True)
        self.assertEqual(len(set(words)), 50)

    def test_invalid_sizes_raise(self):
        with self.assertRaises(ValueError):
            generate_random_nouns(0)
        with self.assertRaises(ValueError):
            generate_random_nouns(len(NOUNS) + 1, unique=True)


class TestSuffixFrequencyGenerator(unittest.TestCase):
    def test_higher_frequency_means_more_suffixes(self):
        low = gen_nouns_with_suffix_freq(5_000, suffix_freq=0.0, seed=7)
        high = gen_nouns_with_suffix_freq(5_000, suffix_freq=0.9, seed=7)
        self.assertGreater(suffix_share(high), suffix_share(low) + 0.2)

    def test_invalid_arguments_raise(self):
        with self.assertRaises(ValueError):
            gen_nouns_with_suffix_freq(10, suffix_freq=1.5)
        with self.assertRaises(ValueError):
            gen_nouns_with_suffix_freq(0, suffix_freq=0.5)


class TestWorkLoad(unittest.TestCase):
    def test_every_regular_noun_round_trips_through_default_plurals(self):
        plurals = PairedMapping(DEFAULT_PLURALS)
        for noun in REGULAR_NOUNS:
            plural = plurals.value_for(noun)
            self.assertIsNotNone(plural, noun)
            self.assertEqual(plurals.key_for(plural), noun)

    def test_mid_word_nouns_are_in_the_pool_and_miss(self):
        plurals = PairedMapping(DEFAULT_PLURALS)
        for noun in MID_WORD_NOUNS:
            self.assertIn(noun, NOUNS)
            self.assertIsNone(plurals.value_for(noun), noun)

    def test_plurals_workload(self):
        plurals = PairedMapping(DEFAULT_PLURALS)
        load = WorkLoad(seed=5)
        nouns = load.nouns(200, s_freq=0.5)
        out = load.plurals(plurals, 200, s_freq=0.5)
        self.assertEqual(len(out), sum(1 for n in nouns if n not in MID_WORD_NOUNS))
        self.assertTrue(all(plurals.key_for(p) is not None for p in out))


class TestBenchmark(unittest.TestCase):
    def setUp(self):
        self.plurals = PairedMapping(DEFAULT_PLURALS)

    def test_time_lookups(self):
        row = time_lookups(self.plurals, ["ferry", "bus", ""], "value")
        self.assertEqual(row["words"], 3)
        self.assertAlmostEqual(row["hit_rate"], 2 / 3)
        self.assertGreaterEqual(row["p95_us"], 0.0)
        with self.assertRaises(ValueError):
            time_lookups(self.plurals, ["ferry"], "sideways")

    def test_hit_rate_over_curated_sets(self):
        self.assertEqual(time_lookups(self.plurals, REGULAR_NOUNS, "value")["hit_rate"], 1.0)
        self.assertEqual(time_lookups(self.plurals, MID_WORD_NOUNS, "value")["hit_rate"], 0.0)

    def test_time_build(self):
        row = time_build(DEFAULT_PLURALS, repeat=3)
        self.assertEqual(row["pairs"], len(DEFAULT_PLURALS))
        self.assertGreater(row["nodes"], 2)
        with self.assertRaises(ValueError):
            time_build(DEFAULT_PLURALS, repeat=0)

    def test_run_benchmark_frame(self):
        df = run_benchmark(self.plurals, [50, 100], s_freq=0.3, seed=1)
        self.assertEqual(len(df), 4)
        self.assertEqual(sorted(df["direction"].unique()), ["key", "value"])
        for n in (50, 100):
            nouns = WorkLoad(seed=1).nouns(n, s_freq=0.3)
            expected = sum(1 for w in nouns if w not in MID_WORD_NOUNS) / n
            row = df[(df["size"] == n) & (df["direction"] == "value")].iloc[0]
            self.assertAlmostEqual(row["hit_rate"], expected)
        # Reverse lookups only see plurals the table produced.
        self.assertTrue((df[df["direction"] == "key"]["hit_rate"] == 1.0).all())


if __name__ == "__main__":
    unittest.main(verbosity=2)
