"""Streaming HighwayHash: hash data handed over in several pieces."""

from __future__ import annotations

from collections.abc import Iterable

from highwayhash.core import HighwayHashState, Key, _as_bytes

__all__ = [
    "HighwayHashCat",
    "hash_fragments64",
    "hash_fragments128",
    "hash_fragments256",
]

_PACKET_SIZE = 32


class HighwayHashCat:
    """Incremental hasher whose result equals the one-shot hash of all appended data."""

    __slots__ = ("_state", "_buffer")

    def __init__(self, key: Key) -> None:
        self._state = HighwayHashState(key)
        self._buffer = bytearray()

    def append(self, data) -> HighwayHashCat:
        """Add bytes to the input; returns the hasher so calls can be chained."""
        raw = _as_bytes(data)
        pos = 0
        if self._buffer:
            take = min(len(raw), _PACKET_SIZE - len(self._buffer))
            self._buffer += raw[:take]
            pos = take
            if len(self._buffer) == _PACKET_SIZE:
                self._state.update_packet(self._buffer)
                self._buffer.clear()

        end = pos + (len(raw) - pos) // _PACKET_SIZE * _PACKET_SIZE
        for offset in range(pos, end, _PACKET_SIZE):
            self._state.update_packet(raw[offset : offset + _PACKET_SIZE])
        self._buffer += raw[end:]
        return self

    def _final_state(self) -> HighwayHashState:
        state = self._state.copy()
        if self._buffer:
            state.update_remainder(bytes(self._buffer))
        return state

    def finish64(self) -> int:
        """Return the 64-bit hash of everything appended so far."""
        return self._final_state().finalize64()

    def finish128(self) -> tuple[int, int]:
        """Return the 128-bit hash of everything appended so far."""
        return self._final_state().finalize128()

    def finish256(self) -> tuple[int, int, int, int]:
        """Return the 256-bit hash of everything appended so far."""
        return self._final_state().finalize256()


def _cat(key: Key, fragments: Iterable) -> HighwayHashCat:
    cat = HighwayHashCat(key)
    for fragment in fragments:
        cat.append(fragment)
    return cat


def hash_fragments64(key: Key, fragments: Iterable) -> int:
    """Return the 64-bit hash of the concatenation of ``fragments``."""
    return _cat(key, fragments).finish64()


def hash_fragments128(key: Key, fragments: Iterable) -> tuple[int, int]:
    """Return the 128-bit hash of the concatenation of ``fragments``."""
    return _cat(key, fragments).finish128()


def hash_fragments256(key: Key, fragments: Iterable) -> tuple[int, int, int, int]:
    """Return the 256-bit hash of the concatenation of ``fragments``."""
    return _cat(key, fragments).finish256()