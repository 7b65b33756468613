"""Projectiles fired by ships, and the system that ages them out."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from gravwell.assets import GameSprite
from gravwell.constants import PROJECTILE_BLASTER_MASS
from gravwell.physics import FacingAngle, Mass, Velocity
from gravwell.vector import Vec2
from gravwell.world import Entity, EntityKind, World


@dataclass
class Projectile:
    """A live projectile with the seconds it has left."""

    lifetime: float

    def age(self, delta_secs: float) -> None:
        """Use up ``delta_secs`` of the remaining lifetime."""
        self.lifetime -= delta_secs

    def is_dead(self) -> bool:
        return self.lifetime <= 0.0


class ProjectileType(enum.Enum):
    """Kinds of projectile that can be fired."""

    #: Basic player ship blaster fire (blue electric bolt).
    PLAYER_BLASTER = "player_blaster"

    def create_projectile(self) -> Projectile:
        return Projectile(lifetime=self.lifetime())

    def lifetime(self) -> float:
        """Seconds a projectile of this type lives."""
        return _LIFETIMES[self]

    def sprite(self) -> GameSprite:
        return _SPRITES[self]

    def speed(self) -> float:
        """Muzzle speed, added to the shooter's velocity."""
        return _SPEEDS[self]

    def mass(self) -> Mass:
        return _MASSES[self]


_LIFETIMES = {ProjectileType.PLAYER_BLASTER: 2.0}
_SPRITES = {ProjectileType.PLAYER_BLASTER: GameSprite.SHOT_BLUE_BLASTER}
_SPEEDS = {ProjectileType.PLAYER_BLASTER: 1200.0}
_MASSES = {ProjectileType.PLAYER_BLASTER: PROJECTILE_BLASTER_MASS}


def spawn_projectile(
    world: World,
    projectile_type: ProjectileType,
    position: Vec2,
    velocity: Velocity,
    facing_angle: FacingAngle,
) -> Entity:
    """Fire a projectile from ``position``, inheriting the shooter's ``velocity``."""
    sprite = projectile_type.sprite()
    return world.spawn(
        Entity(
            EntityKind.PROJECTILE,
            projectile=projectile_type.create_projectile(),
            sprite=sprite,
            velocity=velocity + facing_angle.to_velocity(projectile_type.speed()),
            facing_angle=facing_angle,
            angle_follows_velocity=True,
            transform=sprite.initial_transform(position, facing_angle),
            mass=projectile_type.mass(),
        )
    )


def age_projectiles(world: World, delta_secs: float) -> None:
    """Age every projectile and remove those whose time is up."""
    for entity in world.with_components("projectile"):
        entity.projectile.age(delta_secs)
        if entity.projectile.is_dead():
            world.despawn(entity)