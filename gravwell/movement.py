"""Systems that move, turn and speed-limit objects, and keep the camera on the player."""

from __future__ import annotations

from gravwell.assets import sprite_rotation
from gravwell.vector import Vec2
from gravwell.world import World

#: Fraction of the window, centred on the camera, in which the ship moves freely.
_DEADZONE_FRACTION = 0.6


def accelerate_objects(world: World, delta_secs: float) -> None:
    """Push every thrusting object along the direction it faces."""
    for entity in world.with_components("velocity", "thrust", "facing_angle"):
        if entity.thrust.has_thrust():
            entity.velocity = entity.velocity + entity.facing_angle.as_vec(
                entity.thrust.value * delta_secs
            )


def move_all_objects(world: World, delta_secs: float) -> None:
    """Advance every moving object by its velocity."""
    for entity in world.with_components("transform", "velocity"):
        transform = entity.transform
        transform.translation = transform.translation + entity.velocity.vec * delta_secs


def rotate_all_objects(world: World) -> None:
    """Turn each object's drawn sprite to match the way it faces."""
    for entity in world.with_components("transform", "facing_angle"):
        entity.transform.rotation = sprite_rotation(entity.facing_angle)


def rotate_to_match_velocity(world: World) -> None:
    """Point objects that follow their velocity in the direction they move."""
    for entity in world.with_components(
        "angle_follows_velocity", "facing_angle", "velocity"
    ):
        angle = entity.velocity.angle()
        if angle is not None:
            entity.facing_angle = angle


def limit_velocity(world: World) -> None:
    """Clamp the speed of objects that have a maximum velocity."""
    for entity in world.with_components("velocity", "max_velocity"):
        clamped = entity.velocity.vec.clamp_max_length_squared(
            entity.max_velocity.squared
        )
        entity.velocity = type(entity.velocity)(clamped)


def camera_deadzone_follow(world: World, window_size: Vec2) -> None:
    """Move the camera only as far as needed to keep the ship inside the dead zone."""
    ship_pos = world.player().transform.translation
    camera_transform = world.camera().transform
    half = window_size * _DEADZONE_FRACTION / 2.0
    cam_pos = camera_transform.translation
    delta = ship_pos - cam_pos

    dx = 0.0
    dy = 0.0
    if abs(delta.x) > half.x:
        dx = delta.x - half.x * (1.0 if delta.x > 0 else -1.0)
    if abs(delta.y) > half.y:
        dy = delta.y - half.y * (1.0 if delta.y > 0 else -1.0)
    if dx or dy:
        camera_transform.translation = cam_pos + Vec2(dx, dy)