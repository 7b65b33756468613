"""Level layouts and spawning them into the world."""

from __future__ import annotations

from dataclasses import dataclass, field

from gravwell.background import ParallaxBackground, spawn_parallax_background
from gravwell.black_hole import spawn_black_hole
from gravwell.dart_cloud import spawn_dart_cloud
from gravwell.enemy_ship import EnemyShipType, spawn_enemy_ship
from gravwell.physics import FacingAngle, SpawnInfo
from gravwell.player_ship import spawn_player_ship
from gravwell.world import World


@dataclass
class LevelData:
    """Everything placed in the world when a level starts."""

    player_start: SpawnInfo
    background: list[ParallaxBackground] = field(default_factory=list)
    black_holes: list[SpawnInfo] = field(default_factory=list)
    enemies: list[tuple[EnemyShipType, SpawnInfo]] = field(default_factory=list)
    dart_clouds: list[tuple[SpawnInfo, int]] = field(default_factory=list)

    def spawn(self, world: World) -> None:
        """Place the level's backgrounds, player, black holes, enemies and darts."""
        for bg in self.background:
            spawn_parallax_background(world, bg)

        spawn_player_ship(
            world, self.player_start.as_location(), self.player_start.angle
        )

        for spawn_info in self.black_holes:
            spawn_black_hole(world, spawn_info.as_location())

        for enemy_type, spawn_info in self.enemies:
            spawn_enemy_ship(world, enemy_type, spawn_info)

        for spawn_info, size in self.dart_clouds:
            spawn_dart_cloud(world, spawn_info, size)


def level1() -> LevelData:
    """The first level."""
    return LevelData(
        background=ParallaxBackground.default_bg(),
        player_start=SpawnInfo(-400.0, -100.0, FacingAngle.UP),
        black_holes=[SpawnInfo(300.0, 20.0, FacingAngle())],
        enemies=[(EnemyShipType.ENEMY1, SpawnInfo(100.0, 100.0, FacingAngle.DOWN))],
        dart_clouds=[(SpawnInfo(-200.0, 50.0, FacingAngle()), 50)],
    )