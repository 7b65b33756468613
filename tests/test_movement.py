import math

import pytest

from gravwell.assets import sprite_rotation
from gravwell.movement import (
    accelerate_objects,
    camera_deadzone_follow,
    limit_velocity,
    move_all_objects,
    rotate_all_objects,
    rotate_to_match_velocity,
)
from gravwell.physics import FacingAngle, MaxVelocity, Thrust, Transform, Velocity
from gravwell.vector import Vec2
from gravwell.world import Entity, EntityKind, World


def _world(*entities):
    world = World()
    for entity in entities:
        world.spawn(entity)
    return world


def _ship(thrust, angle):
    return Entity(
        EntityKind.PLAYER_SHIP,
        velocity=Velocity.ZERO,
        thrust=Thrust(thrust),
        facing_angle=angle,
    )


def test_accelerate_forward_along_facing():
    ship = _ship(350.0, FacingAngle.UP)
    accelerate_objects(_world(ship), 0.5)
    assert ship.velocity.vec.x == pytest.approx(0.0, abs=1e-9)
    assert ship.velocity.vec.y == pytest.approx(350.0 * 0.5)


def test_accelerate_backwards_thrust():
    ship = _ship(-250.0, FacingAngle.RIGHT)
    accelerate_objects(_world(ship), 0.5)
    assert ship.velocity.vec.x == pytest.approx(-250.0 * 0.5)
    assert ship.velocity.vec.y == pytest.approx(0.0, abs=1e-9)


def test_no_thrust_keeps_velocity():
    ship = _ship(0.0, FacingAngle.UP)
    ship.velocity = Velocity(Vec2(3.0, 4.0))
    accelerate_objects(_world(ship), 1.0)
    assert ship.velocity == Velocity(Vec2(3.0, 4.0))


def test_move_all_objects_uses_velocity():
    entity = Entity(
        EntityKind.DART,
        transform=Transform(translation=Vec2(1.0, 1.0)),
        velocity=Velocity(Vec2(10.0, -4.0)),
    )
    move_all_objects(_world(entity), 0.5)
    assert entity.transform.translation == Vec2(1.0, 1.0) + Vec2(10.0, -4.0) * 0.5


def test_move_ignores_objects_without_velocity():
    camera = Entity(EntityKind.CAMERA, transform=Transform(translation=Vec2(7.0, 8.0)))
    move_all_objects(_world(camera), 1.0)
    assert camera.transform.translation == Vec2(7.0, 8.0)


def test_rotate_all_objects_matches_sprite_rotation():
    entity = Entity(
        EntityKind.ENEMY_SHIP, transform=Transform(), facing_angle=FacingAngle.LEFT
    )
    plain = Entity(EntityKind.BACKGROUND_TILE, transform=Transform())
    rotate_all_objects(_world(entity, plain))
    assert entity.transform.rotation == sprite_rotation(FacingAngle.LEFT)
    assert plain.transform.rotation == Transform().rotation


def test_rotate_to_match_velocity():
    entity = Entity(
        EntityKind.PROJECTILE,
        facing_angle=FacingAngle.RIGHT,
        velocity=Velocity(Vec2(0.0, 5.0)),
        angle_follows_velocity=True,
    )
    rotate_to_match_velocity(_world(entity))
    assert entity.facing_angle.value == pytest.approx(FacingAngle.UP.value)


def test_rotate_to_match_velocity_keeps_angle_when_still():
    entity = Entity(
        EntityKind.PROJECTILE,
        facing_angle=FacingAngle.RIGHT,
        velocity=Velocity.ZERO,
        angle_follows_velocity=True,
    )
    rotate_to_match_velocity(_world(entity))
    assert entity.facing_angle == FacingAngle.RIGHT


def test_rotate_to_match_velocity_needs_flag():
    entity = Entity(
        EntityKind.DART,
        facing_angle=FacingAngle.RIGHT,
        velocity=Velocity(Vec2(0.0, 5.0)),
    )
    rotate_to_match_velocity(_world(entity))
    assert entity.facing_angle == FacingAngle.RIGHT


def test_limit_velocity_clamps_length_and_keeps_direction():
    before = Vec2(3000.0, 4000.0)
    entity = Entity(
        EntityKind.PLAYER_SHIP,
        velocity=Velocity(before),
        max_velocity=MaxVelocity.of(1000.0),
    )
    limit_velocity(_world(entity))
    assert entity.velocity.vec.length() == pytest.approx(1000.0)
    assert entity.velocity.vec.to_angle() == pytest.approx(before.to_angle())


def test_limit_velocity_leaves_slow_objects():
    entity = Entity(
        EntityKind.PLAYER_SHIP,
        velocity=Velocity(Vec2(3.0, 4.0)),
        max_velocity=MaxVelocity.of(1000.0),
    )
    limit_velocity(_world(entity))
    assert entity.velocity == Velocity(Vec2(3.0, 4.0))


def _camera_world(ship_pos):
    camera = Entity(EntityKind.CAMERA, transform=Transform())
    ship = Entity(EntityKind.PLAYER_SHIP, transform=Transform(translation=ship_pos))
    return _world(camera, ship), camera


def test_camera_stays_inside_deadzone():
    world, camera = _camera_world(Vec2(100.0, 100.0))
    camera_deadzone_follow(world, Vec2(1000.0, 1000.0))
    assert camera.transform.translation == Vec2.ZERO


def test_camera_follows_past_deadzone_right():
    world, camera = _camera_world(Vec2(500.0, 0.0))
    camera_deadzone_follow(world, Vec2(1000.0, 1000.0))
    assert camera.transform.translation.x == pytest.approx(200.0)
    assert camera.transform.translation.y == Vec2.ZERO.y


def test_camera_follows_past_deadzone_down():
    world, camera = _camera_world(Vec2(0.0, -500.0))
    camera_deadzone_follow(world, Vec2(1000.0, 1000.0))
    assert camera.transform.translation.y == pytest.approx(-200.0)
    assert math.isclose(camera.transform.translation.x, Vec2.ZERO.x)


def test_camera_follow_requires_camera():
    world = _world(Entity(EntityKind.PLAYER_SHIP, transform=Transform()))
    with pytest.raises(LookupError):
        camera_deadzone_follow(world, Vec2(1000.0, 1000.0))