"""Integer 2D vectors, Euclid's gcd and a small xorshift random generator."""

from __future__ import annotations

import math
from dataclasses import dataclass

_MASK32 = 0xFFFFFFFF


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


@dataclass(frozen=True)
class Vector:
    """A 2D vector (or point) with integer components."""

    x: int
    y: int

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y)

    def norm(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def scaled(self, factor: float) -> Vector:
        """Multiply both components by ``factor``, rounding the results."""
        return Vector(_round_half_away(self.x * factor), _round_half_away(self.y * factor))


def vector_between(start: Vector, end: Vector) -> Vector:
    """Vector that goes from ``start`` to ``end``."""
    return end - start


def _c_remainder(a: int, b: int) -> int:
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm."""
    while b != 0:
        a, b = b, _c_remainder(a, b)
    return a


class XorShift32:
    """Marsaglia's 32-bit xorshift generator."""

    def __init__(self, seed: int) -> None:
        self.state = seed & _MASK32

    def next(self) -> int:
        """Advance the generator and return the new 32-bit state."""
        x = self.state
        x ^= (x << 13) & _MASK32
        x ^= x >> 17
        x ^= (x << 5) & _MASK32
        self.state = x
        return x

    def between(self, low: int, high: int) -> int:
        """Return a pseudo-random integer in the closed range [low, high]."""
        if high < low:
            raise ValueError(f"empty range: {low}..{high}")
        if self.state == 0:
            self.state = 1
        if low == high:
            return low
        return self.next() % (high - low + 1) + low