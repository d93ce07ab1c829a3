"""
Deterministic Random Helpers

String-seeded hash (xmur3) feeding a small 32-bit generator (mulberry32).
Every function is a pure function of its seed string, and all arithmetic is
32-bit unsigned wraparound so the outputs match the JavaScript client bit for
bit. Puzzles already shared by players depend on that.
"""

from typing import Callable, Iterator

from ..config.game_settings import ALPHABET

MASK32 = 0xFFFFFFFF


def _imul(a: int, b: int) -> int:
    """32-bit multiply keeping the low 32 bits, like ``Math.imul``."""
    return (a * b) & MASK32


def _utf16_units(text: str) -> Iterator[int]:
    # charCodeAt() walks UTF-16 code units, not code points
    data = text.encode('utf-16-le')
    for i in range(0, len(data), 2):
        yield data[i] | (data[i + 1] << 8)


def xmur3(seed: str) -> Callable[[], int]:
    """
    Hash ``seed`` into a 32-bit state and return a function yielding successive
    unsigned 32-bit integers derived from it.
    """
    units = list(_utf16_units(seed))
    h = (1779033703 ^ len(units)) & MASK32
    for unit in units:
        h = _imul(h ^ unit, 3432918353)
        h = ((h << 13) | (h >> 19)) & MASK32

    def next_hash() -> int:
        nonlocal h
        h = _imul(h ^ (h >> 16), 2246822507)
        h = _imul(h ^ (h >> 13), 3266489909)
        h ^= h >> 16
        return h

    return next_hash


def mulberry32(seed: int) -> Callable[[], float]:
    """Return a generator of floats in ``[0, 1)`` seeded by a 32-bit integer."""
    state = seed & MASK32

    def next_float() -> float:
        nonlocal state
        state = (state + 0x6D2B79F5) & MASK32
        t = _imul(state ^ (state >> 15), state | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & MASK32
        return ((t ^ (t >> 14)) & MASK32) / 4294967296

    return next_float


def seeded_int(seed: str, max_exclusive: int) -> int:
    """Uniform integer in ``[0, max_exclusive)`` determined entirely by ``seed``."""
    if max_exclusive <= 0:
        raise ValueError(f"max_exclusive must be positive, got {max_exclusive}")
    return int(mulberry32(xmur3(seed)())() * max_exclusive)


def seeded_letter(seed: str) -> str:
    """One uppercase letter A-Z determined by ``seed``."""
    return ALPHABET[seeded_int(seed, len(ALPHABET))]
