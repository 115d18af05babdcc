"""Deterministic xorshift generator for feeding test data to hashers."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Protocol

_MASK = 0xFFFF_FFFF
_FILL_WORDS = 256
_FEED_ROUNDS = 16 * (1 << 20) // (_FILL_WORDS * 4)


class _Updatable(Protocol):
    def update(self, data: bytes) -> None: ...


@dataclass
class XorShiftRng:
    """Xorshift128 generator; the defaults give the fixed initial state."""

    x: int = 0x0787_3B4A
    y: int = 0xFAAB_8FFE
    z: int = 0x1745_980F
    w: int = 0xB0AD_B4F3

    def next_u32(self) -> int:
        """Advance the state and return the next 32-bit value."""
        x = self.x
        t = (x ^ (x << 11)) & _MASK
        self.x, self.y, self.z = self.y, self.z, self.w
        w = self.w
        self.w = (w ^ (w >> 19) ^ (t ^ (t >> 8))) & _MASK
        return self.w

    def fill(self) -> bytes:
        """Return 1024 bytes made of 256 little-endian 32-bit values."""
        words = [self.next_u32() for _ in range(_FILL_WORDS)]
        return struct.pack(f"<{_FILL_WORDS}I", *words)


def feed_rand_16mib(hasher: _Updatable) -> None:
    """Feed about 16 MiB of pseudorandom data to ``hasher``.

    After each 1024-byte chunk one extra byte (42) is fed so that the total
    length is not a multiple of common block sizes.
    """
    rng = XorShiftRng()
    extra = bytes([42])
    for _ in range(_FEED_ROUNDS):
        hasher.update(rng.fill())
        hasher.update(extra)