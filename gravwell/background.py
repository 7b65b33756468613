"""Repeating star backgrounds that scroll with a parallax effect."""

from __future__ import annotations

import itertools
import math
from dataclasses import dataclass, field

from gravwell.assets import GameSprite
from gravwell.physics import FacingAngle
from gravwell.vector import Vec2, group_by
from gravwell.world import Entity, EntityKind, World

_layer_ids = itertools.count()


def next_layer_id() -> int:
    """A fresh id for grouping the tiles of one background layer."""
    return next(_layer_ids)


@dataclass(frozen=True, order=True)
class BackgroundTile:
    """Position of a tile within its layer's tiling grid."""

    x: int
    y: int


@dataclass
class ParallaxBackground:
    """A tiled layer drawn with a parallax effect against the camera."""

    id: int = field(default_factory=next_layer_id)
    sprite: GameSprite = GameSprite.STARS_SPARSE
    #: Gap between tiles in screen pixels; not scaled with the sprite.
    gap: float = 0.0
    speed: float = 1.0
    offset: Vec2 = Vec2.ZERO

    @classmethod
    def default_bg(cls) -> list[ParallaxBackground]:
        return [
            cls(sprite=GameSprite.STARS_SPARSE, speed=0.37),
            cls(sprite=GameSprite.STARS_LARGE, speed=0.69),
        ]

    def required_tiles(self, screen_width: float, screen_height: float) -> tuple[int, int]:
        """Number of ``(horizontal, vertical)`` tiles that cover a screen this size."""
        return (
            self.required_tiles_for_side(screen_width),
            self.required_tiles_for_side(screen_height),
        )

    def required_tiles_for_side(self, dimension: float) -> int:
        if dimension <= 0.0:
            return 0
        if dimension <= self.gap:
            return 1
        return math.ceil(2.0 * dimension / self.tile_size())

    def tile_size(self) -> float:
        return self.sprite.scaled_size() + self.gap

    def get_tile_position(
        self, camera_pos: Vec2, screen_size: Vec2, tile: BackgroundTile
    ) -> Vec2:
        return (
            self.bottom_left_tile_position(camera_pos, screen_size)
            + Vec2(float(tile.x), float(tile.y)) * self.tile_size()
        )

    def bottom_left_point(self, camera_pos: Vec2, screen_size: Vec2) -> Vec2:
        """Point within one tile that shows in the bottom-left corner of the screen."""
        return (
            camera_pos * self.speed - screen_size / 2.0 + self.offset
        ).rem_euclid_scalar(self.tile_size())

    def bottom_left_tile_position(self, camera_pos: Vec2, screen_size: Vec2) -> Vec2:
        shown_point = self.bottom_left_point(camera_pos, screen_size)
        half_tile = self.tile_size() / 2.0
        return camera_pos - screen_size / 2.0 - shown_point + Vec2(half_tile, half_tile)


def spawn_parallax_background(world: World, background: ParallaxBackground) -> Entity:
    """Add a background layer and its first tile; returns the layer entity."""
    spawn_tile(world, background, 0, 0)
    return world.spawn(Entity(EntityKind.BACKGROUND, background=background))


def spawn_tile(world: World, background: ParallaxBackground, x: int, y: int) -> Entity:
    """Add one tile at the origin; relocation moves it into place every frame."""
    return world.spawn(
        Entity(
            EntityKind.BACKGROUND_TILE,
            tile=BackgroundTile(x, y),
            sprite=background.sprite,
            layer_id=background.id,
            transform=background.sprite.initial_transform(Vec2.ZERO, FacingAngle.UP),
        )
    )


def _backgrounds(world: World) -> list[ParallaxBackground]:
    return [entity.background for entity in world.of_kind(EntityKind.BACKGROUND)]


def relocate_parallax_background(world: World, screen_size: Vec2) -> None:
    """Move every tile to where the camera should see it."""
    camera_pos = world.camera().transform.translation
    by_id = {bg.id: bg for bg in _backgrounds(world)}
    for entity in world.of_kind(EntityKind.BACKGROUND_TILE):
        bg = by_id[entity.layer_id]
        entity.transform.translation = bg.get_tile_position(
            camera_pos, screen_size, entity.tile
        )


def on_resize_window(world: World, width: float, height: float) -> None:
    """Add the tiles each layer lacks to cover a window of the new size."""
    tiles_by_layer = group_by(
        world.of_kind(EntityKind.BACKGROUND_TILE), lambda entity: entity.layer_id
    )
    for bg in _backgrounds(world):
        columns, rows = bg.required_tiles(width, height)
        seen = {(e.tile.x, e.tile.y) for e in tiles_by_layer.get(bg.id, [])}
        for x, y in itertools.product(range(columns), range(rows)):
            if (x, y) not in seen:
                spawn_tile(world, bg, x, y)