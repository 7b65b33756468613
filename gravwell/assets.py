"""Sprites used by the game and the order in which they are drawn."""

from __future__ import annotations

import enum
import math

from gravwell.physics import FacingAngle, Transform
from gravwell.vector import Vec2

#: Rotation to add to an in-game angle so the texture faces the right way.
#: Textures point up, while angle 0 points to positive X.
INHERENT_TEXTURE_ROTATION = -math.pi / 2


class DrawingOrder(enum.Enum):
    """Layers the game draws, each with its z-coordinate."""

    STARS_BG = 0.0
    STARS_FG = 1.0
    BLACK_HOLE = 5.0
    ENGINE_TRAIL = 10.0
    PROJECTILE = 30.0
    DART = 35.0
    ENEMY_SHIP = 40.0
    PLAYER_SHIP = 50.0

    def z_order(self) -> float:
        """Depth at which this layer is drawn; higher is in front."""
        return self.value

    def to_vec_3d(self, pos: Vec2) -> tuple[float, float, float]:
        """Place a 2D position at this layer's depth."""
        return (pos.x, pos.y, self.z_order())

    def relocate_to_z(
        self, pos: tuple[float, float, float]
    ) -> tuple[float, float, float]:
        """Move a 3D position to this layer's depth, keeping X and Y."""
        x, y, _ = pos
        return (x, y, self.z_order())


class GameSprite(enum.Enum):
    """A square game sprite whose side is a power of two."""

    STARS_SPARSE = "stars-sparse"
    STARS_LARGE = "stars-large"
    BLACK_HOLE = "black-hole"
    SHOT_BLUE_BLASTER = "shot-blue-blaster"
    EXHAUST_RING = "exhaust"
    DART = "dart"
    ENEMY_SHIP_1 = "enemy-ship-1"
    PLAYER_SHIP = "player-ship"

    def filename(self) -> str:
        return self.value

    def scale(self) -> float:
        """Scale at which the sprite is drawn by default."""
        return _SCALES[self]

    def size(self) -> int:
        """Side length of the square texture, in pixels."""
        return _SIZES[self]

    def scaled_size(self) -> float:
        """Side length on screen after scaling."""
        return self.size() * self.scale()

    def path(self) -> str:
        """Asset path of the texture."""
        return f"sprites/{self.filename()}.png"

    def drawing_order(self) -> DrawingOrder:
        return _DRAWING_ORDERS[self]

    def initial_transform(self, starting_pos: Vec2, rotation: FacingAngle) -> Transform:
        """Transform that shows this sprite at ``starting_pos`` facing ``rotation``."""
        return Transform(
            translation=starting_pos,
            z=self.drawing_order().z_order(),
            rotation=sprite_rotation(rotation),
            scale=self.scale(),
        )


_SCALES = {
    GameSprite.STARS_SPARSE: 1.0,
    GameSprite.STARS_LARGE: 1.0,
    GameSprite.SHOT_BLUE_BLASTER: 0.2,
    GameSprite.PLAYER_SHIP: 0.2,
    GameSprite.ENEMY_SHIP_1: 0.2,
    GameSprite.EXHAUST_RING: 0.05,
    GameSprite.DART: 0.2,
    GameSprite.BLACK_HOLE: 0.3,
}

_SIZES = {
    GameSprite.EXHAUST_RING: 128,
    GameSprite.SHOT_BLUE_BLASTER: 128,
    GameSprite.DART: 128,
    GameSprite.PLAYER_SHIP: 256,
    GameSprite.ENEMY_SHIP_1: 256,
    GameSprite.BLACK_HOLE: 256,
    GameSprite.STARS_SPARSE: 1024,
    GameSprite.STARS_LARGE: 1024,
}

_DRAWING_ORDERS = {
    GameSprite.STARS_SPARSE: DrawingOrder.STARS_BG,
    GameSprite.STARS_LARGE: DrawingOrder.STARS_FG,
    GameSprite.SHOT_BLUE_BLASTER: DrawingOrder.PROJECTILE,
    GameSprite.PLAYER_SHIP: DrawingOrder.PLAYER_SHIP,
    GameSprite.ENEMY_SHIP_1: DrawingOrder.ENEMY_SHIP,
    GameSprite.DART: DrawingOrder.DART,
    GameSprite.EXHAUST_RING: DrawingOrder.ENGINE_TRAIL,
    GameSprite.BLACK_HOLE: DrawingOrder.BLACK_HOLE,
}


def sprite_rotation(facing_angle: FacingAngle) -> float:
    """Rotation about Z, in radians, that shows a texture facing ``facing_angle``."""
    return (facing_angle + INHERENT_TEXTURE_ROTATION).value