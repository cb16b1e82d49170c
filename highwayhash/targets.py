"""Instruction-set target identifiers and CPU clock-rate detection."""

from __future__ import annotations

import enum
import functools
import platform
import re
from collections.abc import Iterator

__all__ = ["Target", "target_name", "iter_targets", "nominal_clock_rate"]


class Target(enum.IntFlag):
    """Bits naming one implementation target; several may be combined."""

    PORTABLE = 1
    SSE41 = 2
    AVX2 = 4
    VSX = 8
    NEON = 16


_NAMES = {
    Target.PORTABLE: "Portable",
    Target.SSE41: "SSE41",
    Target.AVX2: "AVX2",
    Target.VSX: "VSX",
    Target.NEON: "NEON",
}

_UNITS = (("MHz", 1e6), ("GHz", 1e9), ("THz", 1e12))
_LEADING_NUMBER = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_CPUINFO = "/proc/cpuinfo"


def target_name(bits: int) -> str | None:
    """Return the short name of a single target bit, or None for zero, several or unknown bits."""
    return _NAMES.get(int(bits))


def iter_targets(bits: int) -> Iterator[int]:
    """Yield every set bit of ``bits``, lowest first."""
    bits = int(bits)
    if bits < 0:
        raise ValueError("target bits must not be negative")
    while bits:
        lowest = bits & -bits
        yield lowest
        bits &= ~lowest


def _leading_float(text: str) -> float | None:
    match = _LEADING_NUMBER.match(text)
    return float(match.group()) if match else None


def _clock_rate_from_brand(brand: str) -> float:
    """Return the frequency stated in a CPU brand string [Hz], or 0.0 if none."""
    for unit, multiplier in _UNITS:
        pos_unit = brand.find(unit)
        if pos_unit == -1:
            continue
        pos_space = brand.rfind(" ", 0, pos_unit)
        if pos_space == -1:
            continue
        value = _leading_float(brand[pos_space + 1 : pos_unit])
        if value is not None:
            return value * multiplier
    return 0.0


def _clock_rate_from_cpuinfo(text: str) -> float:
    """Return the clock rate [Hz] described by the contents of a cpuinfo listing."""
    brand = ""
    for line in text.splitlines():
        name, sep, value = line.partition(":")
        if not sep:
            continue
        name = name.strip().lower()
        value = value.strip()
        if name.startswith("clock"):
            mhz = _leading_float(value)
            if mhz is not None:
                return mhz * 1e6
        elif name == "model name" and not brand:
            brand = value
    return _clock_rate_from_brand(brand) if brand else 0.0


@functools.lru_cache(maxsize=None)
def nominal_clock_rate() -> float:
    """Return the nominal CPU clock rate [Hz], or 0.0 if it cannot be determined."""
    try:
        with open(_CPUINFO, encoding="utf-8", errors="replace") as cpuinfo:
            rate = _clock_rate_from_cpuinfo(cpuinfo.read())
    except OSError:
        rate = 0.0
    if rate == 0.0:
        rate = _clock_rate_from_brand(platform.processor())
    return rate