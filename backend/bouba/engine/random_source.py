"""Seeded uniform random source.

Every draw made by the generator goes through one of these, so the same seed
and the same draw order reproduce the same shape.
"""

from __future__ import annotations

import hashlib
from collections.abc import Sequence
from typing import Protocol, TypeVar

import numpy as np

T = TypeVar("T")


class UniformSource(Protocol):
    def random(self) -> float: ...


def seed_to_int(seed: int | str) -> int:
    """Stable non-negative integer for a string or integer seed.

    Integers are reduced modulo 2**64, so negative seeds are accepted. Strings
    are hashed with SHA-256 rather than ``hash()``, which varies per process.
    """
    if isinstance(seed, int):
        return seed % 2**64
    digest = hashlib.sha256(seed.encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "big")


class RandomSource:
    """Uniform draws in [0, 1) from a seeded numpy Generator."""

    def __init__(self, seed: int | str | None = None, rng: np.random.Generator | None = None) -> None:
        self._rng = rng if rng is not None else np.random.default_rng(
            None if seed is None else seed_to_int(seed)
        )

    def random(self) -> float:
        return float(self._rng.random())

    def uniform(self, low: float, high: float) -> float:
        """Draw from [min, max); bounds given in either order."""
        return uniform(self, low, high)

    def choice(self, items: Sequence[T]) -> T:
        return choice(self, items)


def uniform(source: UniformSource, low: float, high: float) -> float:
    lo, hi = (high, low) if low > high else (low, high)
    return source.random() * (hi - lo) + lo


def choice(source: UniformSource, items: Sequence[T]) -> T:
    if not items:
        raise IndexError("choice from empty sequence")
    return items[int(source.random() * len(items))]
