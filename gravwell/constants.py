"""Tuning values for ships, gravity and projectiles."""

import math

from gravwell.physics import Mass, MaxVelocity
from gravwell.vector import GOLDEN_ANGLE

__all__ = [
    "GOLDEN_ANGLE",
    "PLAYER_ROTATION_SPEED",
    "PLAYER_FORWARD_THRUST",
    "PLAYER_BACKWARD_THRUST",
    "ENEMY_SHIP_1_MAX_THRUST",
    "PLAYER_SHIP_MASS",
    "ENEMY_SHIP_1_MASS",
    "BLACK_HOLE_MASS",
    "PROJECTILE_BLASTER_MASS",
    "PLAYER_SHIP_MAX_VELOCITY",
    "ENEMY_SHIP_1_MAX_VELOCITY",
    "MIN_DISTANCE_SQ",
    "GRAVITATIONAL_CONSTANT",
    "MAX_GRAVITY_FORCE",
]

# Radians per second.
PLAYER_ROTATION_SPEED = math.pi + math.pi / 2
PLAYER_FORWARD_THRUST = 350.0
PLAYER_BACKWARD_THRUST = -250.0

ENEMY_SHIP_1_MAX_THRUST = 800.0

PLAYER_SHIP_MASS = Mass.tons(3_000.0)
ENEMY_SHIP_1_MASS = Mass.tons(4_500.0)
BLACK_HOLE_MASS = Mass.tons(2_000_000_000.0)
PROJECTILE_BLASTER_MASS = Mass.kg(100.0)

PLAYER_SHIP_MAX_VELOCITY = MaxVelocity.of(1000.0)
ENEMY_SHIP_1_MAX_VELOCITY = MaxVelocity.of(800.0)

MIN_DISTANCE_SQ = 0.00000001
GRAVITATIONAL_CONSTANT = 1.0e-5
MAX_GRAVITY_FORCE = 1000.0