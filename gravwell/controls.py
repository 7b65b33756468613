"""Keyboard keys and how they map to what the player asks for."""

from __future__ import annotations

import enum
from collections.abc import Collection

from gravwell.physics import PlayerActions, Rotation


class Key(enum.Enum):
    """Keys the game listens to."""

    ARROW_LEFT = "arrow_left"
    ARROW_RIGHT = "arrow_right"
    ARROW_UP = "arrow_up"
    ARROW_DOWN = "arrow_down"
    KEY_A = "a"
    KEY_D = "d"
    SPACE = "space"
    ESCAPE = "escape"


def map_input_to_player_actions(
    actions: PlayerActions,
    pressed: Collection[Key],
    just_pressed: Collection[Key],
) -> None:
    """Update ``actions`` from the keys held down and those pressed this frame."""
    rotate_left = Key.ARROW_LEFT in pressed or Key.KEY_A in pressed
    rotate_right = Key.ARROW_RIGHT in pressed or Key.KEY_D in pressed
    if rotate_left and not rotate_right:
        actions.rotate = Rotation.ANTICLOCKWISE
    elif rotate_right and not rotate_left:
        actions.rotate = Rotation.CLOCKWISE
    else:
        actions.rotate = None

    forward = Key.ARROW_UP in pressed
    backward = Key.ARROW_DOWN in pressed
    if forward and not backward:
        actions.thrust = True
    elif backward and not forward:
        actions.thrust = False
    else:
        actions.thrust = None

    actions.fire = Key.SPACE in just_pressed
    actions.quit = Key.ESCAPE in just_pressed


def quit_requested(actions: PlayerActions) -> bool:
    """Whether the player asked to leave the game."""
    return actions.quit