import csv
from pathlib import Path
from typing import Dict, Union

CSV_HEADER = ("Comparisons", "Swaps", "ArrayAccesses")


class PerformanceTracker:
    """Running totals of comparisons, swaps and array accesses.

    A tracker is handed to one or more heaps at construction; the heaps
    report into it after every primitive step and the caller reads or
    resets the totals. Not synchronized.
    """

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        self._comparisons = 0
        self._swaps = 0
        self._array_accesses = 0

    def report_comparisons(self, count: int = 1) -> None:
        self._comparisons += count

    def report_swaps(self, count: int = 1) -> None:
        self._swaps += count

    def report_array_accesses(self, count: int = 1) -> None:
        self._array_accesses += count

    @property
    def comparisons(self) -> int:
        return self._comparisons

    @property
    def swaps(self) -> int:
        return self._swaps

    @property
    def array_accesses(self) -> int:
        return self._array_accesses

    def snapshot(self) -> Dict[str, int]:
        return {
            "comparisons": self._comparisons,
            "swaps": self._swaps,
            "array_accesses": self._array_accesses,
        }

    def export_to_csv(self, path: Union[str, Path]) -> None:
        """Write a header row and one row with the current totals."""
        with open(path, "w", newline="") as f:
            writer = csv.writer(f)
            writer.writerow(CSV_HEADER)
            writer.writerow([self._comparisons, self._swaps, self._array_accesses])

    def __repr__(self) -> str:
        return (
            f"PerformanceTracker(comparisons={self._comparisons}, "
            f"swaps={self._swaps}, array_accesses={self._array_accesses})"
        )
