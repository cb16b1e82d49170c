"""Portable HighwayHash: keyed 64-, 128- and 256-bit hashes of byte strings."""

from __future__ import annotations

import struct
from collections.abc import Iterable, Sequence

__all__ = ["HighwayHashState", "hash64", "hash128", "hash256"]

_MASK64 = 0xFFFFFFFFFFFFFFFF
_MASK32 = 0xFFFFFFFF
_PACKET_SIZE = 32
_LANES = struct.Struct("<4Q")

_INIT0 = (
    0xDBE6D5D5FE4CCE2F,
    0xA4093822299F31D0,
    0x13198A2E03707344,
    0x243F6A8885A308D3,
)
_INIT1 = (
    0x3BD39E10CB0EF593,
    0xC0ACF169B5F18A8C,
    0xBE5466CF34E90C6C,
    0x452821E638D01377,
)

Key = Sequence[int]


def _as_bytes(data) -> bytes:
    """Return the contents of a bytes-like object as bytes."""
    if isinstance(data, str):
        raise TypeError("data must be bytes-like, not str")
    return memoryview(data).cast("B").tobytes()


def _check_key(key: Iterable[int]) -> tuple[int, int, int, int]:
    lanes = tuple(key)
    if len(lanes) != 4:
        raise ValueError(f"key must hold 4 integers, got {len(lanes)}")
    for lane in lanes:
        if not isinstance(lane, int) or isinstance(lane, bool):
            raise TypeError("key lanes must be integers")
        if not 0 <= lane <= _MASK64:
            raise ValueError(f"key lane {lane:#x} is not an unsigned 64-bit value")
    return lanes  # type: ignore[return-value]


def _rotate64_by32(x: int) -> int:
    return ((x >> 32) | (x << 32)) & _MASK64


def _rotate32_by(x: int, count: int) -> int:
    """Rotate both 32-bit halves of a 64-bit lane left by ``count`` (1..31) bits."""
    low = x & _MASK32
    high = x >> 32
    low = ((low << count) | (low >> (32 - count))) & _MASK32
    high = ((high << count) | (high >> (32 - count))) & _MASK32
    return (high << 32) | low


def _zipper_merge(v1: int, v0: int) -> tuple[int, int]:
    """Return the byte shuffles of (v1, v0) to add to (add1, add0)."""
    add0 = (
        (((v0 & 0xFF000000) | (v1 & 0xFF00000000)) >> 24)
        | (((v0 & 0xFF0000000000) | (v1 & 0xFF000000000000)) >> 16)
        | (v0 & 0xFF0000)
        | ((v0 & 0xFF00) << 32)
        | ((v1 & 0xFF00000000000000) >> 8)
        | ((v0 << 56) & _MASK64)
    )
    add1 = (
        (((v1 & 0xFF000000) | (v0 & 0xFF00000000)) >> 24)
        | (v1 & 0xFF0000)
        | ((v1 & 0xFF0000000000) >> 16)
        | ((v1 & 0xFF00) << 24)
        | ((v0 & 0xFF000000000000) >> 8)
        | ((v1 & 0xFF) << 48)
        | (v0 & 0xFF00000000000000)
    )
    return add1, add0


def _modular_reduction(a3_unmasked: int, a2: int, a1: int, a0: int) -> tuple[int, int]:
    """Reduce a 256-bit value modulo x^128 + x^2 + x; returns (m1, m0)."""
    a3 = (a3_unmasked & _MASK64) & 0x3FFFFFFFFFFFFFFF
    a2 &= _MASK64
    a1 &= _MASK64
    a0 &= _MASK64
    m1 = a1 ^ (((a3 << 1) | (a2 >> 63)) & _MASK64) ^ (((a3 << 2) | (a2 >> 62)) & _MASK64)
    m0 = a0 ^ ((a2 << 1) & _MASK64) ^ ((a2 << 2) & _MASK64)
    return m1, m0


class HighwayHashState:
    """Internal HighwayHash state of four 64-bit lanes per vector."""

    __slots__ = ("v0", "v1", "mul0", "mul1")

    def __init__(self, key: Key) -> None:
        self.reset(key)

    def reset(self, key: Key) -> None:
        """Initialize the state from a key of four unsigned 64-bit integers."""
        lanes = _check_key(key)
        self.mul0 = list(_INIT0)
        self.mul1 = list(_INIT1)
        self.v0 = [init ^ k for init, k in zip(_INIT0, lanes)]
        self.v1 = [init ^ _rotate64_by32(k) for init, k in zip(_INIT1, lanes)]

    def copy(self) -> HighwayHashState:
        """Return an independent copy of this state."""
        clone = object.__new__(HighwayHashState)
        clone.v0 = list(self.v0)
        clone.v1 = list(self.v1)
        clone.mul0 = list(self.mul0)
        clone.mul1 = list(self.mul1)
        return clone

    def _update(self, lanes: Sequence[int]) -> None:
        v1 = [(a + m + p) & _MASK64 for a, m, p in zip(self.v1, self.mul0, lanes)]
        mul0 = [m ^ ((a & _MASK32) * (b >> 32)) for m, a, b in zip(self.mul0, v1, self.v0)]
        v0 = [(a + m) & _MASK64 for a, m in zip(self.v0, self.mul1)]
        mul1 = [m ^ ((a & _MASK32) * (b >> 32)) for m, a, b in zip(self.mul1, v0, v1)]

        add1, add0 = _zipper_merge(v1[1], v1[0])
        v0[0] = (v0[0] + add0) & _MASK64
        v0[1] = (v0[1] + add1) & _MASK64
        add1, add0 = _zipper_merge(v1[3], v1[2])
        v0[2] = (v0[2] + add0) & _MASK64
        v0[3] = (v0[3] + add1) & _MASK64

        add1, add0 = _zipper_merge(v0[1], v0[0])
        v1[0] = (v1[0] + add0) & _MASK64
        v1[1] = (v1[1] + add1) & _MASK64
        add1, add0 = _zipper_merge(v0[3], v0[2])
        v1[2] = (v1[2] + add0) & _MASK64
        v1[3] = (v1[3] + add1) & _MASK64

        self.v0, self.v1, self.mul0, self.mul1 = v0, v1, mul0, mul1

    def update_packet(self, packet) -> None:
        """Absorb exactly 32 bytes."""
        raw = _as_bytes(packet)
        if len(raw) != _PACKET_SIZE:
            raise ValueError(f"packet must be {_PACKET_SIZE} bytes, got {len(raw)}")
        self._update(_LANES.unpack(raw))

    def update_remainder(self, data) -> None:
        """Absorb the final 1..31 bytes of the input."""
        raw = _as_bytes(data)
        size = len(raw)
        if not 0 < size < _PACKET_SIZE:
            raise ValueError(f"remainder must be 1..31 bytes, got {size}")

        pair = (size << 32) + size
        self.v0 = [(lane + pair) & _MASK64 for lane in self.v0]
        self.v1 = [_rotate32_by(lane, size) for lane in self.v1]

        size_mod4 = size & 3
        whole = size & ~3
        packet = bytearray(_PACKET_SIZE)
        packet[:whole] = raw[:whole]
        if size & 16:
            packet[28:32] = raw[size - 4 : size]
        elif size_mod4:
            tail = raw[whole:]
            packet[16] = tail[0]
            packet[17] = tail[size_mod4 >> 1]
            packet[18] = tail[size_mod4 - 1]
        self._update(_LANES.unpack(packet))

    def _permute_and_update(self) -> None:
        v0 = self.v0
        self._update(
            (
                _rotate64_by32(v0[2]),
                _rotate64_by32(v0[3]),
                _rotate64_by32(v0[0]),
                _rotate64_by32(v0[1]),
            )
        )

    def finalize64(self) -> int:
        """Return the 64-bit hash. The state is consumed."""
        for _ in range(4):
            self._permute_and_update()
        return (self.v0[0] + self.v1[0] + self.mul0[0] + self.mul1[0]) & _MASK64

    def finalize128(self) -> tuple[int, int]:
        """Return the 128-bit hash as two 64-bit integers. The state is consumed."""
        for _ in range(6):
            self._permute_and_update()
        v0, v1, mul0, mul1 = self.v0, self.v1, self.mul0, self.mul1
        return (
            (v0[0] + mul0[0] + v1[2] + mul1[2]) & _MASK64,
            (v0[1] + mul0[1] + v1[3] + mul1[3]) & _MASK64,
        )

    def finalize256(self) -> tuple[int, int, int, int]:
        """Return the 256-bit hash as four 64-bit integers. The state is consumed."""
        for _ in range(10):
            self._permute_and_update()
        v0, v1, mul0, mul1 = self.v0, self.v1, self.mul0, self.mul1
        m1, m0 = _modular_reduction(
            v1[1] + mul1[1], v1[0] + mul1[0], v0[1] + mul0[1], v0[0] + mul0[0]
        )
        m3, m2 = _modular_reduction(
            v1[3] + mul1[3], v1[2] + mul1[2], v0[3] + mul0[3], v0[2] + mul0[2]
        )
        return m0, m1, m2, m3


def _process_all(data, key: Key) -> HighwayHashState:
    raw = _as_bytes(data)
    state = HighwayHashState(key)
    full = len(raw) - len(raw) % _PACKET_SIZE
    for lanes in _LANES.iter_unpack(raw[:full]):
        state._update(lanes)
    if full != len(raw):
        state.update_remainder(raw[full:])
    return state


def hash64(data, key: Key) -> int:
    """Return the 64-bit HighwayHash of ``data`` under ``key``."""
    return _process_all(data, key).finalize64()


def hash128(data, key: Key) -> tuple[int, int]:
    """Return the 128-bit HighwayHash of ``data`` as two 64-bit integers."""
    return _process_all(data, key).finalize128()


def hash256(data, key: Key) -> tuple[int, int, int, int]:
    """Return the 256-bit HighwayHash of ``data`` as four 64-bit integers."""
    return _process_all(data, key).finalize256()