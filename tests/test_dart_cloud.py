import math

import pytest

from gravwell.assets import GameSprite
from gravwell.dart_cloud import spawn_dart_cloud
from gravwell.physics import FacingAngle, SpawnInfo, Velocity
from gravwell.vector import Vec2
from gravwell.world import EntityKind, World


def test_spawns_requested_number_of_darts():
    world = World()
    darts = spawn_dart_cloud(world, SpawnInfo(-200.0, 50.0), 50)
    assert len(darts) == 50
    assert world.of_kind(EntityKind.DART) == darts
    assert all(d.sprite is GameSprite.DART for d in darts)
    assert all(d.velocity == Velocity.ZERO for d in darts)


def test_empty_cloud():
    world = World()
    assert spawn_dart_cloud(world, SpawnInfo(0.0, 0.0), 0) == []
    assert len(world) == 0


def test_first_dart_at_centre_facing_up():
    world = World()
    first = spawn_dart_cloud(world, SpawnInfo(-200.0, 50.0), 3)[0]
    assert first.transform.translation == Vec2(-200.0, 50.0)
    assert first.facing_angle == FacingAngle.UP


def test_darts_spread_on_spiral_and_face_outwards():
    centre = Vec2(10.0, -20.0)
    world = World()
    darts = spawn_dart_cloud(world, SpawnInfo(centre.x, centre.y), 10)
    for n, dart in enumerate(darts[1:], start=1):
        offset = dart.transform.translation - centre
        assert offset.length() == pytest.approx(25.0 * math.sqrt(n))
        heading = Vec2.from_angle(dart.facing_angle.value)
        assert heading.x == pytest.approx(offset.normalize().x, abs=1e-9)
        assert heading.y == pytest.approx(offset.normalize().y, abs=1e-9)


def test_darts_have_distinct_positions():
    world = World()
    darts = spawn_dart_cloud(world, SpawnInfo(0.0, 0.0), 30)
    positions = {d.transform.translation for d in darts}
    assert len(positions) == len(darts)