import argparse
import sys
import os
import csv
import io
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from benchmark_runner import DEFAULT_SIZE, main, non_negative_int, parse_size, run_benchmark
from performance_tracker import PerformanceTracker


class TestParseSize(unittest.TestCase):

    def test_missing_size_uses_default(self):
        self.assertEqual(parse_size(None), DEFAULT_SIZE)

    def test_valid_size(self):
        self.assertEqual(parse_size("250"), 250)

    def test_invalid_size_falls_back(self):
        out = io.StringIO()
        with redirect_stdout(out):
            self.assertEqual(parse_size("lots"), DEFAULT_SIZE)
        self.assertIn("Invalid input size, using default 10000", out.getvalue())

    def test_non_positive_size_falls_back(self):
        with redirect_stdout(io.StringIO()):
            self.assertEqual(parse_size("0"), DEFAULT_SIZE)
            self.assertEqual(parse_size("-5"), DEFAULT_SIZE)


class TestNonNegativeInt(unittest.TestCase):

    def test_accepts_zero_and_positive(self):
        self.assertEqual(non_negative_int("0"), 0)
        self.assertEqual(non_negative_int("12"), 12)

    def test_rejects_negative(self):
        with self.assertRaises(argparse.ArgumentTypeError):
            non_negative_int("-3")

    def test_rejects_non_integer(self):
        with self.assertRaises(argparse.ArgumentTypeError):
            non_negative_int("ten")


class TestRunBenchmark(unittest.TestCase):

    def test_result_fields(self):
        result = run_benchmark(100, seed=0)
        self.assertEqual(result["n"], 100)
        self.assertGreaterEqual(result["elapsed_ms"], 0.0)
        self.assertEqual(result["swaps"], 0)
        self.assertGreater(result["array_accesses"], 0)

    def test_presized_heap_has_no_growth_cost(self):
        # each insert costs 3 accesses plus one per shifted parent
        tracker = PerformanceTracker()
        result = run_benchmark(200, seed=1, tracker=tracker)
        shifts = tracker.array_accesses - 3 * 200
        self.assertGreaterEqual(shifts, 0)
        self.assertLessEqual(shifts, tracker.comparisons)
        self.assertEqual(result["array_accesses"], tracker.array_accesses)

    def test_growth_adds_copy_accesses(self):
        presized = run_benchmark(64, seed=3)
        grown = run_benchmark(64, seed=3, capacity=0)
        # capacities 0 -> 1 -> 3 -> 7 -> 15 -> 31 -> 63 -> 127
        self.assertEqual(grown["array_accesses"] - presized["array_accesses"],
                         0 + 1 + 3 + 7 + 15 + 31 + 63)
        self.assertEqual(grown["comparisons"], presized["comparisons"])

    def test_same_seed_is_reproducible(self):
        a = run_benchmark(300, seed=7)
        b = run_benchmark(300, seed=7)
        self.assertEqual(a["comparisons"], b["comparisons"])
        self.assertEqual(a["array_accesses"], b["array_accesses"])


class TestMain(unittest.TestCase):

    def test_prints_report(self):
        out = io.StringIO()
        with redirect_stdout(out):
            status = main(["50", "--seed", "0"])
        self.assertEqual(status, 0)
        text = out.getvalue()
        self.assertIn("Inserted 50 elements.", text)
        self.assertIn("Time elapsed:", text)
        self.assertIn("Comparisons:", text)
        self.assertIn("Swaps: 0", text)
        self.assertIn("Array accesses:", text)

    def test_exports_csv(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "out.csv")
            with redirect_stdout(io.StringIO()):
                main(["20", "--seed", "0", "--csv", path])
            with open(path, newline="") as f:
                rows = list(csv.reader(f))
        self.assertEqual(rows[0], ["Comparisons", "Swaps", "ArrayAccesses"])
        self.assertEqual(len(rows), 2)
        self.assertEqual(rows[1][1], "0")

    def test_negative_capacity_is_usage_error(self):
        err = io.StringIO()
        with redirect_stderr(err), redirect_stdout(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                main(["10", "--capacity", "-1"])
        self.assertEqual(ctx.exception.code, 2)
        self.assertIn("must be non-negative", err.getvalue())

    def test_zero_capacity_grows(self):
        out = io.StringIO()
        with redirect_stdout(out):
            status = main(["10", "--seed", "0", "--capacity", "0"])
        self.assertEqual(status, 0)
        self.assertIn("Inserted 10 elements.", out.getvalue())

    def test_invalid_size_uses_default(self):
        out = io.StringIO()
        with redirect_stdout(out):
            main(["abc", "--seed", "0"])
        self.assertIn(f"Inserted {DEFAULT_SIZE} elements.", out.getvalue())


if __name__ == "__main__":
    unittest.main()
