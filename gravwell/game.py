"""The game loop: per-frame update of the world and drawing it with pygame."""

from __future__ import annotations

import argparse
import math
from collections.abc import Collection
from pathlib import Path

import pygame

from gravwell.assets import GameSprite
from gravwell.background import on_resize_window, relocate_parallax_background
from gravwell.black_hole import apply_gravity
from gravwell.controls import Key, map_input_to_player_actions, quit_requested
from gravwell.enemy_ship import move_enemy_ships
from gravwell.level import LevelData, level1
from gravwell.movement import (
    accelerate_objects,
    camera_deadzone_follow,
    limit_velocity,
    move_all_objects,
    rotate_all_objects,
    rotate_to_match_velocity,
)
from gravwell.physics import PlayerActions, Transform
from gravwell.player_ship import (
    fade_particles,
    fire_player_weapons,
    spawn_trail_particles,
    update_player_movement,
)
from gravwell.projectile import age_projectiles
from gravwell.vector import Vec2
from gravwell.world import Entity, EntityKind, World


class Game:
    """A running game: the world, the player's intent and the window size."""

    def __init__(
        self,
        width: float = 1280.0,
        height: float = 720.0,
        level: LevelData | None = None,
    ) -> None:
        self.world = World()
        self.actions = PlayerActions()
        self.window_size = Vec2(float(width), float(height))
        self.world.spawn(Entity(EntityKind.CAMERA, transform=Transform()))
        (level if level is not None else level1()).spawn(self.world)
        self.resize(width, height)

    def resize(self, width: float, height: float) -> None:
        """React to the window taking a new size."""
        self.window_size = Vec2(float(width), float(height))
        on_resize_window(self.world, float(width), float(height))

    def update(
        self,
        delta_secs: float,
        pressed: Collection[Key] = (),
        just_pressed: Collection[Key] = (),
    ) -> bool:
        """Advance one frame; returns False once the player asks to quit."""
        world = self.world
        actions = self.actions
        map_input_to_player_actions(actions, pressed, just_pressed)

        update_player_movement(world, actions, delta_secs)
        fire_player_weapons(world, actions)
        spawn_trail_particles(world, actions)
        fade_particles(world, delta_secs)
        move_enemy_ships(world, delta_secs)
        apply_gravity(world, delta_secs)
        age_projectiles(world, delta_secs)

        rotate_to_match_velocity(world)
        accelerate_objects(world, delta_secs)
        limit_velocity(world)
        move_all_objects(world, delta_secs)
        rotate_all_objects(world)

        camera_deadzone_follow(world, self.window_size)
        relocate_parallax_background(world, self.window_size)
        return not quit_requested(actions)


_KEYMAP = {
    pygame.K_LEFT: Key.ARROW_LEFT,
    pygame.K_RIGHT: Key.ARROW_RIGHT,
    pygame.K_UP: Key.ARROW_UP,
    pygame.K_DOWN: Key.ARROW_DOWN,
    pygame.K_a: Key.KEY_A,
    pygame.K_d: Key.KEY_D,
    pygame.K_SPACE: Key.SPACE,
    pygame.K_ESCAPE: Key.ESCAPE,
}

_FALLBACK_COLOURS = {
    EntityKind.PLAYER_SHIP: (80, 160, 255),
    EntityKind.ENEMY_SHIP: (255, 80, 80),
    EntityKind.BLACK_HOLE: (90, 40, 120),
    EntityKind.DART: (255, 200, 60),
    EntityKind.PROJECTILE: (120, 220, 255),
    EntityKind.TRAIL_PARTICLE: (200, 120, 40),
}


class _Renderer:
    """Draws the world to a pygame surface, loading sprites on first use."""

    def __init__(self, assets_dir: Path) -> None:
        self._assets_dir = assets_dir
        self._images: dict[GameSprite, pygame.Surface | None] = {}

    def _image(self, sprite: GameSprite) -> pygame.Surface | None:
        if sprite not in self._images:
            path = self._assets_dir / sprite.path()
            try:
                self._images[sprite] = pygame.image.load(str(path)).convert_alpha()
            except (pygame.error, FileNotFoundError):
                self._images[sprite] = None
        return self._images[sprite]

    def draw(self, surface: pygame.Surface, world: World) -> None:
        surface.fill((0, 0, 0))
        camera = world.camera().transform.translation
        width, height = surface.get_size()
        drawables = sorted(
            world.with_components("sprite", "transform"),
            key=lambda entity: entity.transform.z,
        )
        for entity in drawables:
            transform = entity.transform
            screen_x = transform.translation.x - camera.x + width / 2
            screen_y = height / 2 - (transform.translation.y - camera.y)
            image = self._image(entity.sprite)
            if image is None:
                colour = _FALLBACK_COLOURS.get(entity.kind)
                if colour is not None:
                    radius = max(1, int(entity.sprite.size() * transform.scale / 2))
                    pygame.draw.circle(
                        surface, colour, (int(screen_x), int(screen_y)), radius
                    )
                continue
            drawn = pygame.transform.rotozoom(
                image, math.degrees(transform.rotation), transform.scale
            )
            if entity.alpha < 1.0:
                drawn.set_alpha(int(max(0.0, min(1.0, entity.alpha)) * 255))
            surface.blit(drawn, drawn.get_rect(center=(screen_x, screen_y)))


def _pressed_keys() -> set[Key]:
    state = pygame.key.get_pressed()
    return {key for code, key in _KEYMAP.items() if state[code]}


def main(argv: list[str] | None = None) -> int:
    """Open a window and play the first level."""
    parser = argparse.ArgumentParser(
        prog="gravwell", description="Fly a ship around a black hole."
    )
    parser.add_argument("--width", type=int, default=1280, help="window width")
    parser.add_argument("--height", type=int, default=720, help="window height")
    parser.add_argument(
        "--assets", type=Path, default=Path("assets"), help="directory holding sprites/"
    )
    parser.add_argument("--fps", type=int, default=60, help="frame rate cap")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        pygame.display.set_mode((args.width, args.height), pygame.RESIZABLE)
        pygame.display.set_caption("gravwell")
        clock = pygame.time.Clock()
        game = Game(args.width, args.height)
        renderer = _Renderer(args.assets)
        running = True
        while running:
            delta_secs = clock.tick(args.fps) / 1000.0
            just_pressed: set[Key] = set()
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key in _KEYMAP:
                    just_pressed.add(_KEYMAP[event.key])
                elif event.type == pygame.VIDEORESIZE:
                    game.resize(event.w, event.h)
            if not game.update(delta_secs, _pressed_keys(), just_pressed):
                running = False
            renderer.draw(pygame.display.get_surface(), game.world)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0