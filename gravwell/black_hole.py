"""Black holes and the gravity they exert on massive objects."""

from __future__ import annotations

from gravwell.assets import GameSprite
from gravwell.constants import (
    BLACK_HOLE_MASS,
    GRAVITATIONAL_CONSTANT,
    MAX_GRAVITY_FORCE,
    MIN_DISTANCE_SQ,
)
from gravwell.physics import FacingAngle
from gravwell.vector import Vec2
from gravwell.world import Entity, EntityKind, World


def spawn_black_hole(world: World, position: Vec2) -> Entity:
    """Add a black hole at ``position``."""
    sprite = GameSprite.BLACK_HOLE
    return world.spawn(
        Entity(
            EntityKind.BLACK_HOLE,
            sprite=sprite,
            transform=sprite.initial_transform(position, FacingAngle.UP),
            mass=BLACK_HOLE_MASS,
        )
    )


def apply_gravity(world: World, delta_secs: float) -> None:
    """Pull every moving object that has mass towards every black hole."""
    holes = [
        hole
        for hole in world.of_kind(EntityKind.BLACK_HOLE)
        if hole.transform is not None and hole.mass is not None
    ]
    objects = [
        entity
        for entity in world.with_components("velocity", "mass", "transform")
        if entity.kind is not EntityKind.BLACK_HOLE
    ]
    for hole in holes:
        for entity in objects:
            direction = hole.transform.translation - entity.transform.translation
            if direction == Vec2.ZERO:
                # No direction to pull in.
                continue
            distance_squared = max(direction.length_squared(), MIN_DISTANCE_SQ)
            # The object's own mass cancels out.
            force = min(
                GRAVITATIONAL_CONSTANT * hole.mass.value / distance_squared,
                MAX_GRAVITY_FORCE,
            )
            acceleration = direction.normalize() * force
            entity.velocity = entity.velocity + acceleration * delta_secs