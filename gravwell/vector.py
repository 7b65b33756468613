"""Two-dimensional vector type and small collection helpers."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import ClassVar, TypeVar

K = TypeVar("K")
V = TypeVar("V")

#: Golden angle used to spread points along a Fermat spiral.
GOLDEN_ANGLE = 137.5077640500378546463487


def _rem_euclid(value: float, rhs: float) -> float:
    """Least nonnegative remainder of ``value`` modulo ``rhs``."""
    remainder = math.fmod(value, rhs)
    if remainder < 0.0:
        remainder += abs(rhs)
    return remainder


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    ZERO: ClassVar[Vec2]

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec2:
        return Vec2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def normalize(self) -> Vec2:
        """Return a unit vector in the same direction; the zero vector has none."""
        length = self.length()
        if length == 0.0 or not math.isfinite(length):
            raise ValueError(f"cannot normalize vector {self!r}")
        return Vec2(self.x / length, self.y / length)

    def to_angle(self) -> float:
        """Angle of this vector from the positive X axis, in radians."""
        return math.atan2(self.y, self.x)

    @classmethod
    def from_angle(cls, angle: float) -> Vec2:
        """Unit vector pointing at ``angle`` radians."""
        return cls(math.cos(angle), math.sin(angle))

    def rotate(self, other: Vec2) -> Vec2:
        """Rotate ``other`` by the angle of this vector, scaling by its length."""
        return Vec2(
            self.x * other.x - self.y * other.y,
            self.y * other.x + self.x * other.y,
        )

    def rem_euclid_scalar(self, rhs: float) -> Vec2:
        """Least nonnegative remainder of each element modulo ``rhs``."""
        return Vec2(_rem_euclid(self.x, rhs), _rem_euclid(self.y, rhs))

    def clamp_max_length_squared(self, max_length_squared: float) -> Vec2:
        """Shorten this vector so its squared length is at most the given value."""
        len_sq = self.length_squared()
        if len_sq > max_length_squared:
            return self * math.sqrt(max_length_squared / len_sq)
        return self

    @classmethod
    def spiral_spread(cls, n: int) -> Vec2:
        """The ``n``th point of a Fermat spiral around the origin.

        Points placed this way are spread about evenly however many there are.
        """
        radius = math.sqrt(n)
        angle = n * GOLDEN_ANGLE
        return cls(radius * math.cos(angle), radius * math.sin(angle))


Vec2.ZERO = Vec2(0.0, 0.0)


def group_by(items: Iterable[V], key: Callable[[V], K]) -> dict[K, list[V]]:
    """Group ``items`` by ``key``; keys come out sorted, items keep their order."""
    grouped: dict[K, list[V]] = {}
    for item in items:
        grouped.setdefault(key(item), []).append(item)
    return dict(sorted(grouped.items(), key=lambda entry: entry[0]))