"""Clouds of darts spread out in a spiral."""

from __future__ import annotations

from gravwell.assets import GameSprite
from gravwell.physics import FacingAngle, SpawnInfo, Velocity
from gravwell.vector import Vec2
from gravwell.world import Entity, EntityKind, World

_SPACING = 25.0


def spawn_dart_cloud(world: World, spawn_info: SpawnInfo, cloud_size: int) -> list[Entity]:
    """Add ``cloud_size`` darts spread evenly around the spawn location."""
    sprite = GameSprite.DART
    centre = spawn_info.as_location()
    darts = []
    for n in range(cloud_size):
        spiral_pos = Vec2.spiral_spread(n)
        pos = centre + spiral_pos * _SPACING
        if spiral_pos == Vec2.ZERO:
            angle = FacingAngle.UP
        else:
            angle = FacingAngle(spiral_pos.to_angle())
        darts.append(
            world.spawn(
                Entity(
                    EntityKind.DART,
                    sprite=sprite,
                    velocity=Velocity(),
                    facing_angle=angle,
                    transform=sprite.initial_transform(pos, angle),
                )
            )
        )
    return darts