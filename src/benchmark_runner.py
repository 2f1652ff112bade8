"""
Benchmark runner -- insert n random integers into a MaxHeap and report the
elapsed time together with the tracker's comparison, swap and array-access
totals.

Usage:
    python -m benchmark_runner [n] [--seed S] [--capacity C] [--csv PATH]
"""

import argparse
import sys
import time
from typing import Dict, List, Optional

import numpy as np

from max_heap import MaxHeap
from performance_tracker import PerformanceTracker

DEFAULT_SIZE = 10000


def parse_size(text: Optional[str]) -> int:
    """Parse the input size, falling back to DEFAULT_SIZE on bad input."""
    if text is None:
        return DEFAULT_SIZE
    try:
        n = int(text)
    except ValueError:
        n = 0
    if n <= 0:
        print(f"Invalid input size, using default {DEFAULT_SIZE}")
        return DEFAULT_SIZE
    return n


def run_benchmark(
    n: int,
    seed: Optional[int] = None,
    capacity: Optional[int] = None,
    tracker: Optional[PerformanceTracker] = None,
) -> Dict[str, float]:
    """
    Args:
        n: Number of elements to insert
        seed: Seed for the NumPy generator; None draws fresh entropy
        capacity: Initial heap capacity; defaults to n (no growth)
        tracker: Tracker to report into; a new one is created if None

    Returns:
        Dict with n, elapsed_ms and the three counter totals
    """
    tracker = tracker if tracker is not None else PerformanceTracker()
    heap: MaxHeap[int] = MaxHeap(n if capacity is None else capacity, tracker)
    rng = np.random.default_rng(seed)
    values = rng.integers(0, n * 10, size=n).tolist()

    t0 = time.perf_counter()
    for v in values:
        heap.insert(v)
    elapsed_ms = (time.perf_counter() - t0) * 1000

    return {"n": n, "elapsed_ms": elapsed_ms, **tracker.snapshot()}


def non_negative_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative: {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="benchmark_runner",
        description="Benchmark MaxHeap insertion with operation counters.",
    )
    parser.add_argument("size", nargs="?", default=None,
                        help=f"number of elements to insert (default {DEFAULT_SIZE})")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--capacity", type=non_negative_int, default=None,
                        help="initial heap capacity (default: size)")
    parser.add_argument("--csv", default=None, help="export counter totals to this CSV file")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    n = parse_size(args.size)

    tracker = PerformanceTracker()
    result = run_benchmark(n, seed=args.seed, capacity=args.capacity, tracker=tracker)

    print(f"Inserted {n} elements.")
    print(f"Time elapsed: {result['elapsed_ms']:.3f} ms")
    print(f"Comparisons: {tracker.comparisons}")
    print(f"Swaps: {tracker.swaps}")
    print(f"Array accesses: {tracker.array_accesses}")

    if args.csv is not None:
        tracker.export_to_csv(args.csv)
        print(f"Counters saved: {args.csv}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
