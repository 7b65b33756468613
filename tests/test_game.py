import pytest

from gravwell.constants import PLAYER_FORWARD_THRUST
from gravwell.controls import Key
from gravwell.game import Game, main
from gravwell.physics import Thrust
from gravwell.world import EntityKind

FRAME = 1.0 / 60.0


def _tile_counts(game):
    tiles = game.world.of_kind(EntityKind.BACKGROUND_TILE)
    return {
        bg.background.id: sum(1 for t in tiles if t.layer_id == bg.background.id)
        for bg in game.world.of_kind(EntityKind.BACKGROUND)
    }


def _required(game, width, height):
    result = {}
    for entity in game.world.of_kind(EntityKind.BACKGROUND):
        columns, rows = entity.background.required_tiles(width, height)
        result[entity.background.id] = columns * rows
    return result


def test_new_game_has_camera_player_and_level():
    game = Game(1280.0, 720.0)
    assert game.world.camera().kind is EntityKind.CAMERA
    assert game.world.player().kind is EntityKind.PLAYER_SHIP
    assert len(game.world.of_kind(EntityKind.BLACK_HOLE)) == 1


def test_initial_tiles_cover_window():
    game = Game(1280.0, 720.0)
    assert _tile_counts(game) == _required(game, 1280.0, 720.0)


def test_resize_larger_adds_tiles():
    game = Game(640.0, 480.0)
    game.resize(3000.0, 2000.0)
    assert _tile_counts(game) == _required(game, 3000.0, 2000.0)


def test_resize_smaller_keeps_tiles():
    game = Game(1280.0, 720.0)
    before = _tile_counts(game)
    game.resize(100.0, 100.0)
    assert _tile_counts(game) == before


def test_update_continues_without_quit():
    assert Game().update(FRAME) is True


def test_escape_ends_game():
    assert Game().update(FRAME, just_pressed={Key.ESCAPE}) is False


def test_gravity_pulls_player_towards_black_hole():
    game = Game()
    hole = game.world.of_kind(EntityKind.BLACK_HOLE)[0].transform.translation
    before = (hole - game.world.player().transform.translation).length()
    for _ in range(10):
        game.update(FRAME)
    after = (hole - game.world.player().transform.translation).length()
    assert after < before


def test_firing_spawns_two_projectiles_that_expire():
    game = Game()
    game.update(FRAME, just_pressed={Key.SPACE})
    assert len(game.world.of_kind(EntityKind.PROJECTILE)) == 2
    game.update(2.5)
    assert game.world.of_kind(EntityKind.PROJECTILE) == []


def test_forward_thrust_emits_trail():
    game = Game()
    game.update(FRAME, pressed={Key.ARROW_UP})
    assert game.world.player().thrust == Thrust(PLAYER_FORWARD_THRUST)
    assert len(game.world.of_kind(EntityKind.TRAIL_PARTICLE)) == 1


def test_main_help_exits_cleanly():
    with pytest.raises(SystemExit) as exc:
        main(["--help"])
    assert exc.value.code == 0