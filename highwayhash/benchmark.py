"""Throughput measurements of HighwayHash for various input sizes."""

from __future__ import annotations

import math
import statistics
import sys
import time
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

from highwayhash.cat import HighwayHashCat
from highwayhash.core import hash64
from highwayhash.targets import Target, nominal_clock_rate, target_name

__all__ = ["Measurements", "measure", "main"]

MAX_INPUT_SIZE = 1024
_KEY = (0, 1, 2, 3)
_TARGET_NAME = target_name(Target.PORTABLE)


@dataclass(frozen=True)
class _Result:
    caption: str
    in_size: int
    cpb: float


class Measurements:
    """Collects benchmark results and renders them as a LaTeX table or plot data."""

    def __init__(self) -> None:
        self._results: list[_Result] = []

    def add(self, caption: str, size: int, cycles: float) -> None:
        """Record that hashing ``size`` bytes took ``cycles`` cycles."""
        cpb = cycles / size if size else math.inf
        self._results.append(_Result(caption, int(size), cpb))

    def _by_caption(self, sizes: Iterable[int] | None = None) -> dict[str, list[float]]:
        wanted = None if sizes is None else list(sizes)
        grouped: dict[str, list[float]] = {}
        for result in self._results:
            if wanted is None:
                grouped.setdefault(result.caption, []).append(result.cpb)
                continue
            for size in wanted:
                if result.in_size == size:
                    grouped.setdefault(result.caption, []).append(result.cpb)
        return dict(sorted(grouped.items()))

    def _unique_sizes(self) -> list[int]:
        return sorted({result.in_size for result in self._results})

    def table(self, sizes: Iterable[int]) -> str:
        """Return a LaTeX table of cycles per byte, restricted to ``sizes``."""
        unique = sorted(set(sizes))
        columns = "|".join("r" * (len(unique) + 1))
        lines = [f"\\begin{{tabular}}{{{columns}}}", "\\toprule"]
        header = "Algorithm" + "".join(f" & {size}" for size in unique)
        lines.append(header + "\\\\")
        lines.append("\\midrule")
        for caption, speeds in self._by_caption(unique).items():
            row = f"{caption:>22}" + "".join(f" & {cpb:5.2f}" for cpb in speeds)
            lines.append(row + "\\\\")
        return "\n".join(lines) + "\n"

    def plots(self) -> str:
        """Return bytes-per-cycle columns for each caption, one row per size."""
        by_caption = self._by_caption()
        if not by_caption:
            raise ValueError("no measurements to plot")
        sizes = self._unique_sizes()
        for caption, speeds in by_caption.items():
            if len(speeds) != len(sizes):
                raise ValueError(
                    f"{caption} has {len(speeds)} results but there are {len(sizes)} sizes"
                )
        lines = ["Size " + "".join(f"{caption:>21} " for caption in by_caption)]
        columns = list(by_caption.values())
        for row, size in enumerate(sizes):
            cells = "".join(f"{1.0 / speeds[row]:5.2f} " for speeds in columns)
            lines.append(f"{size} " + cells)
        return "\n".join(lines) + "\n"


def measure(
    func: Callable[[int], object], sizes: Iterable[int], repetitions: int = 40
) -> dict[int, list[float]]:
    """Time ``func(size)`` ``repetitions`` times per size; durations are in nanoseconds."""
    if repetitions < 1:
        raise ValueError("repetitions must be at least 1")
    durations: dict[int, list[float]] = {}
    for size in sizes:
        if size < 0:
            raise ValueError(f"input size must not be negative, got {size}")
        samples = durations.setdefault(size, [])
        for _ in range(repetitions):
            start = time.perf_counter_ns()
            func(size)
            samples.append(float(time.perf_counter_ns() - start))
    return durations


def _input_for(size: int) -> bytearray:
    data = bytearray(MAX_INPUT_SIZE)
    data[0] = size & 0xFF
    return data


def _run_highway(size: int) -> int:
    data = _input_for(size)
    return hash64(memoryview(data)[:size], _KEY)


def _run_highway_cat(size: int) -> int:
    data = memoryview(_input_for(size))
    half = size // 2
    cat = HighwayHashCat(_KEY)
    cat.append(data[:half])
    cat.append(data[half:size])
    return cat.finish64()


def _ticks_to_cycles(nanoseconds: float) -> float:
    rate = nominal_clock_rate()
    return nanoseconds * 1e-9 * rate if rate else nanoseconds


def _add_measurements(
    durations: dict[int, list[float]], caption: str, measurements: Measurements
) -> None:
    for size, samples in durations.items():
        median = statistics.median(samples)
        variability = statistics.median(abs(x - median) for x in samples)
        print(
            f"{caption} {size:4d}: median={median:6.1f} ticks; "
            f"median L1 norm ={variability:4.1f} ticks"
        )
        measurements.add(caption, size, _ticks_to_cycles(median))


def _collect(sizes: Sequence[int]) -> Measurements:
    measurements = Measurements()
    for prefix, func in (("HighwayHash", _run_highway), ("HighwayHashCat", _run_highway_cat)):
        _add_measurements(measure(func, sizes, 40), prefix + _TARGET_NAME, measurements)
    return measurements


def _table_sizes() -> list[int]:
    return [7, 8, 31, 32, 63, 64, MAX_INPUT_SIZE]


def _plot_sizes() -> list[int]:
    return [vectors * 32 + rest for vectors in range(12) for rest in (0, 9, 18, 27)]


def main(argv: Sequence[str] | None = None) -> int:
    """Print a table (no argument or 't...') or plot data ('p...')."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or args[0].startswith("t"):
        sizes = _table_sizes()
        print(_collect(sizes).table(sizes), end="")
    elif args[0].startswith("p"):
        print(_collect(_plot_sizes()).plots(), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())