"""Core physical quantities, spawn descriptions and player intent."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field
from typing import ClassVar

from gravwell.vector import Vec2

TAU = math.tau


def _rem_euclid(value: float, rhs: float) -> float:
    remainder = math.fmod(value, rhs)
    if remainder < 0.0:
        remainder += abs(rhs)
    return remainder


@dataclass(frozen=True)
class FacingAngle:
    """Direction an object faces, in radians; 0 points to positive X."""

    value: float = 0.0

    RIGHT: ClassVar[FacingAngle]
    UP: ClassVar[FacingAngle]
    LEFT: ClassVar[FacingAngle]
    DOWN: ClassVar[FacingAngle]

    def __float__(self) -> float:
        return self.value

    @classmethod
    def normalized(cls, angle: float) -> FacingAngle:
        """Angle wrapped into ``[0, 2π)``."""
        return cls(_rem_euclid(angle, TAU))

    def as_vec(self, magnitude: float) -> Vec2:
        if math.copysign(1.0, magnitude) < 0.0:
            return -Vec2.from_angle(self.value) * -magnitude
        return Vec2.from_angle(self.value) * magnitude

    def to_velocity(self, magnitude: float) -> Velocity:
        return Velocity(self.as_vec(magnitude))

    def flip(self) -> FacingAngle:
        """The opposite direction."""
        return FacingAngle.normalized(self.value + math.pi)

    def rotate(self, vec: Vec2) -> Vec2:
        """Rotate ``vec`` by this angle."""
        return self.as_vec(1.0).rotate(vec)

    def angle_diff(self, angle: float) -> float:
        """Shortest signed difference to ``angle``, within ``[-π, π]``."""
        a1 = angle - self.value
        a2 = angle - (self.value + TAU)
        diff = a1 if abs(a1) <= abs(a2) else a2
        if diff < -math.pi:
            return diff + TAU
        if diff > math.pi:
            return diff - TAU
        return diff

    def rotate_towards(self, target_angle: float, rotation_amount: float) -> FacingAngle:
        """Turn towards ``target_angle`` by at most ``rotation_amount`` radians."""
        diff = self.angle_diff(target_angle)
        amount = min(abs(diff), rotation_amount)
        return FacingAngle(self.value + math.copysign(amount, diff))

    def __add__(self, rhs: float) -> FacingAngle:
        return FacingAngle.normalized(self.value + rhs)

    def __sub__(self, rhs: float) -> FacingAngle:
        return FacingAngle.normalized(self.value - rhs)


FacingAngle.RIGHT = FacingAngle(0.0)
FacingAngle.UP = FacingAngle(math.pi / 2)
FacingAngle.LEFT = FacingAngle(math.pi)
FacingAngle.DOWN = FacingAngle(math.pi + math.pi / 2)


@dataclass(frozen=True, order=True)
class Mass:
    """Mass in kilograms; determines how gravity affects an object."""

    value: float

    @classmethod
    def tons(cls, tons: float) -> Mass:
        return cls(tons * 1_000.0)

    @classmethod
    def kg(cls, kilos: float) -> Mass:
        return cls(kilos)


@dataclass(frozen=True)
class MaxVelocity:
    """Upper bound on an object's speed, stored squared."""

    squared: float

    @classmethod
    def of(cls, max_velocity: float) -> MaxVelocity:
        return cls(max_velocity * max_velocity)


@dataclass(frozen=True)
class Thrust:
    """Engine thrust along the facing direction; negative pushes backwards."""

    value: float = 0.0

    ZERO: ClassVar[Thrust]

    def has_thrust(self) -> bool:
        return self.value != 0.0


Thrust.ZERO = Thrust(0.0)


@dataclass(frozen=True)
class Velocity:
    """Velocity in world units per second."""

    vec: Vec2 = Vec2.ZERO

    ZERO: ClassVar[Velocity]

    def angle(self) -> FacingAngle | None:
        """Direction of motion, or None when standing still."""
        if self.vec == Vec2.ZERO:
            return None
        return FacingAngle.normalized(self.vec.to_angle())

    def __add__(self, other: Velocity | Vec2) -> Velocity:
        other_vec = other.vec if isinstance(other, Velocity) else other
        return Velocity(self.vec + other_vec)


Velocity.ZERO = Velocity(Vec2.ZERO)


class Rotation(enum.Enum):
    CLOCKWISE = "clockwise"
    ANTICLOCKWISE = "anticlockwise"


@dataclass
class SpawnInfo:
    """Where and facing which way an object enters the world."""

    x: float = 0.0
    y: float = 0.0
    angle: FacingAngle = field(default_factory=FacingAngle)

    def __post_init__(self) -> None:
        if not isinstance(self.angle, FacingAngle):
            self.angle = FacingAngle(float(self.angle))

    def as_location(self) -> Vec2:
        return Vec2(self.x, self.y)


@dataclass
class PlayerActions:
    """What the player asks for during the current frame."""

    rotate: Rotation | None = None
    thrust: bool | None = None
    fire: bool = False
    quit: bool = False


@dataclass
class Transform:
    """Placement of a drawn object: position, depth, rotation about Z and scale."""

    translation: Vec2 = Vec2.ZERO
    z: float = 0.0
    rotation: float = 0.0
    scale: float = 1.0