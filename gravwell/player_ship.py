"""The player's ship: spawning, steering, firing and engine trail."""

from __future__ import annotations

from gravwell.assets import DrawingOrder, GameSprite
from gravwell.constants import (
    PLAYER_BACKWARD_THRUST,
    PLAYER_FORWARD_THRUST,
    PLAYER_ROTATION_SPEED,
    PLAYER_SHIP_MASS,
    PLAYER_SHIP_MAX_VELOCITY,
)
from gravwell.physics import (
    FacingAngle,
    PlayerActions,
    Rotation,
    Thrust,
    Transform,
    Velocity,
)
from gravwell.projectile import ProjectileType, spawn_projectile
from gravwell.vector import Vec2
from gravwell.world import Entity, EntityKind, World

PARTICLE_LIFETIME_SECS = 1.0
_TRAIL_SPEED = 200.0
_GUN_OFFSET = 13.0


def spawn_player_ship(world: World, starting_pos: Vec2, facing_angle: FacingAngle) -> Entity:
    """Add the player ship at ``starting_pos``."""
    sprite = GameSprite.PLAYER_SHIP
    return world.spawn(
        Entity(
            EntityKind.PLAYER_SHIP,
            sprite=sprite,
            transform=sprite.initial_transform(starting_pos, facing_angle),
            facing_angle=facing_angle,
            thrust=Thrust.ZERO,
            velocity=Velocity.ZERO,
            mass=PLAYER_SHIP_MASS,
            max_velocity=PLAYER_SHIP_MAX_VELOCITY,
        )
    )


def update_player_movement(world: World, actions: PlayerActions, delta_secs: float) -> None:
    """Set the ship's thrust and turn it as the player asks."""
    player = world.player()
    if actions.thrust is True:
        player.thrust = Thrust(PLAYER_FORWARD_THRUST)
    elif actions.thrust is False:
        player.thrust = Thrust(PLAYER_BACKWARD_THRUST)
    else:
        player.thrust = Thrust.ZERO

    turn = PLAYER_ROTATION_SPEED * delta_secs
    if actions.rotate is Rotation.CLOCKWISE:
        player.facing_angle = player.facing_angle - turn
    elif actions.rotate is Rotation.ANTICLOCKWISE:
        player.facing_angle = player.facing_angle + turn


def fire_player_weapons(world: World, actions: PlayerActions) -> list[Entity]:
    """Fire the ship's blasters if requested; returns the new projectiles."""
    if not actions.fire:
        return []
    player = world.player()
    return fire_blaster(
        world, player.transform.translation, player.velocity, player.facing_angle
    )


def fire_blaster(
    world: World, position: Vec2, velocity: Velocity, facing_angle: FacingAngle
) -> list[Entity]:
    """Fire a pair of blaster shots from either side of ``position``."""
    return [
        spawn_projectile(
            world,
            ProjectileType.PLAYER_BLASTER,
            position + facing_angle.rotate(Vec2(0.0, side * _GUN_OFFSET)),
            velocity,
            facing_angle,
        )
        for side in (-1.0, 1.0)
    ]


def spawn_trail_particles(world: World, actions: PlayerActions) -> Entity | None:
    """Emit an exhaust ring behind the ship while it thrusts forward."""
    if actions.thrust is not True:
        return None
    player = world.player()
    trail_angle = player.facing_angle.flip()
    sprite = GameSprite.EXHAUST_RING
    return world.spawn(
        Entity(
            EntityKind.TRAIL_PARTICLE,
            trail_lifetime=PARTICLE_LIFETIME_SECS,
            sprite=sprite,
            transform=Transform(
                translation=player.transform.translation,
                z=DrawingOrder.ENGINE_TRAIL.z_order(),
                scale=sprite.scale(),
            ),
            facing_angle=trail_angle,
            velocity=trail_angle.to_velocity(_TRAIL_SPEED) + player.velocity,
        )
    )


def fade_particles(world: World, delta_secs: float) -> None:
    """Fade and grow trail particles, removing those that have expired."""
    for entity in world.with_components("trail_lifetime"):
        entity.trail_lifetime -= delta_secs
        entity.alpha = 0.2 * entity.trail_lifetime / PARTICLE_LIFETIME_SECS
        entity.transform.scale *= 1.0 + delta_secs * 2.5
        if entity.trail_lifetime <= 0.0:
            world.despawn(entity)