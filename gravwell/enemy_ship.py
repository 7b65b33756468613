"""Enemy ships that turn towards the player and thrust at them."""

from __future__ import annotations

import enum
import math

from gravwell.assets import GameSprite
from gravwell.constants import (
    ENEMY_SHIP_1_MASS,
    ENEMY_SHIP_1_MAX_THRUST,
    ENEMY_SHIP_1_MAX_VELOCITY,
)
from gravwell.physics import Mass, MaxVelocity, SpawnInfo, Thrust, Velocity
from gravwell.vector import Vec2
from gravwell.world import Entity, EntityKind, World

_TURN_RATE = 3.0


class EnemyShipType(enum.Enum):
    """Kinds of enemy ship."""

    ENEMY1 = "enemy1"

    def sprite(self) -> GameSprite:
        return _SPRITES[self]

    def mass(self) -> Mass:
        return _MASSES[self]

    def max_velocity(self) -> MaxVelocity:
        return _MAX_VELOCITIES[self]


_SPRITES = {EnemyShipType.ENEMY1: GameSprite.ENEMY_SHIP_1}
_MASSES = {EnemyShipType.ENEMY1: ENEMY_SHIP_1_MASS}
_MAX_VELOCITIES = {EnemyShipType.ENEMY1: ENEMY_SHIP_1_MAX_VELOCITY}


def spawn_enemy_ship(
    world: World, enemy_type: EnemyShipType, spawn_info: SpawnInfo
) -> Entity:
    """Add an enemy ship of ``enemy_type`` where ``spawn_info`` says."""
    sprite = enemy_type.sprite()
    return world.spawn(
        Entity(
            EntityKind.ENEMY_SHIP,
            enemy_type=enemy_type,
            sprite=sprite,
            velocity=Velocity(),
            facing_angle=spawn_info.angle,
            transform=sprite.initial_transform(spawn_info.as_location(), spawn_info.angle),
            thrust=Thrust.ZERO,
            mass=enemy_type.mass(),
            max_velocity=enemy_type.max_velocity(),
        )
    )


def move_enemy_ships(world: World, delta_secs: float) -> None:
    """Turn each enemy towards the player and thrust when roughly facing them."""
    player_pos = world.player().transform.translation
    for enemy in world.of_kind(EntityKind.ENEMY_SHIP):
        to_player = player_pos - enemy.transform.translation
        if to_player == Vec2.ZERO:
            continue
        target = to_player.normalize().to_angle()

        enemy.facing_angle = enemy.facing_angle.rotate_towards(
            target, _TURN_RATE * delta_secs
        )

        angle_diff = abs(enemy.facing_angle.angle_diff(target))
        if angle_diff < math.pi / 4:
            enemy.thrust = Thrust((math.pi / 4 - angle_diff) * ENEMY_SHIP_1_MAX_THRUST)
        else:
            enemy.thrust = Thrust(0.0)