"""Seeded pseudo-random stream: Mulberry32 keyed by a string seed.

The seed string is hashed with a 31-multiplier polynomial rolling hash over
its UTF-16 code units, and the resulting 32-bit value is the generator's
initial state. Each draw advances the state by 0x6D2B79F5 and scrambles it:

    t = imul(t ^ (t >>> 15), t | 1)
    t ^= t + imul(t ^ (t >>> 7), t | 61)
    out = (t ^ (t >>> 14)) / 2**32

All arithmetic is modulo 2**32, so a given seed reproduces the same stream
bit-for-bit on any platform. Period is 2**32 draws.
"""
from __future__ import annotations

_MASK32 = 0xFFFFFFFF
_HASH_MULTIPLIER = 31
_STATE_INCREMENT = 0x6D2B79F5
_TWO_POW_32 = 4294967296.0


def _imul(a: int, b: int) -> int:
    """Low 32 bits of a * b (unsigned)."""
    return (a * b) & _MASK32


def hash_seed(seed: str) -> int:
    """Polynomial rolling hash of a seed string to an unsigned 32-bit int."""
    h = 0
    data = seed.encode("utf-16-le")
    for i in range(0, len(data), 2):
        unit = data[i] | (data[i + 1] << 8)
        h = (_HASH_MULTIPLIER * h + unit) & _MASK32
    return h


class Mulberry32:
    """Deterministic float stream in [0, 1).

    Restartable only by constructing a new instance from the same seed.
    """

    __slots__ = ("_state",)

    def __init__(self, state: int):
        self._state = state & _MASK32

    @classmethod
    def from_seed(cls, seed: str) -> Mulberry32:
        return cls(hash_seed(seed))

    def random(self) -> float:
        self._state = (self._state + _STATE_INCREMENT) & _MASK32
        t = self._state
        t = _imul(t ^ (t >> 15), t | 1)
        t = (t ^ ((t + _imul(t ^ (t >> 7), t | 61)) & _MASK32)) & _MASK32
        return (t ^ (t >> 14)) / _TWO_POW_32

    __call__ = random


def create_rng(seed: str) -> Mulberry32:
    """Return a fresh generator for ``seed``."""
    return Mulberry32.from_seed(seed)
