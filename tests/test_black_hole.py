import pytest

from gravwell.assets import DrawingOrder, GameSprite
from gravwell.black_hole import apply_gravity, spawn_black_hole
from gravwell.constants import BLACK_HOLE_MASS, MAX_GRAVITY_FORCE
from gravwell.physics import Mass, Transform, Velocity
from gravwell.vector import Vec2
from gravwell.world import Entity, EntityKind, World


def _ship(world, x, y):
    return world.spawn(
        Entity(
            EntityKind.ENEMY_SHIP,
            transform=Transform(translation=Vec2(x, y)),
            velocity=Velocity.ZERO,
            mass=Mass.kg(10.0),
        )
    )


def test_spawn_black_hole():
    world = World()
    hole = spawn_black_hole(world, Vec2(300.0, 20.0))
    assert world.of_kind(EntityKind.BLACK_HOLE) == [hole]
    assert hole.mass == BLACK_HOLE_MASS
    assert hole.sprite is GameSprite.BLACK_HOLE
    assert hole.transform.translation == Vec2(300.0, 20.0)
    assert hole.transform.z == DrawingOrder.BLACK_HOLE.z_order()


def test_close_object_pulled_at_max_force():
    world = World()
    spawn_black_hole(world, Vec2.ZERO)
    ship = _ship(world, 100.0, 0.0)
    apply_gravity(world, 0.5)
    assert ship.velocity.vec.x == pytest.approx(-MAX_GRAVITY_FORCE * 0.5)
    assert ship.velocity.vec.y == pytest.approx(0.0)


def test_distant_object_pulled_weakly_towards_hole():
    world = World()
    spawn_black_hole(world, Vec2.ZERO)
    ship = _ship(world, 0.0, 100_000.0)
    apply_gravity(world, 1.0)
    assert ship.velocity.vec.y < 0.0
    assert abs(ship.velocity.vec.y) < MAX_GRAVITY_FORCE
    assert ship.velocity.vec.x == pytest.approx(0.0)


def test_object_without_mass_unaffected():
    world = World()
    spawn_black_hole(world, Vec2.ZERO)
    dart = world.spawn(
        Entity(
            EntityKind.DART,
            transform=Transform(translation=Vec2(50.0, 0.0)),
            velocity=Velocity.ZERO,
        )
    )
    apply_gravity(world, 1.0)
    assert dart.velocity == Velocity.ZERO


def test_two_holes_add_up():
    world = World()
    spawn_black_hole(world, Vec2(-100.0, 0.0))
    spawn_black_hole(world, Vec2(100.0, 0.0))
    ship = _ship(world, 0.0, 0.0)
    apply_gravity(world, 1.0)
    assert ship.velocity.vec.x == pytest.approx(0.0)
    assert ship.velocity.vec.y == pytest.approx(0.0)