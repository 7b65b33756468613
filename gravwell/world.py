"""Container of game entities and their components."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any

from gravwell.assets import GameSprite
from gravwell.physics import (
    FacingAngle,
    Mass,
    MaxVelocity,
    Thrust,
    Transform,
    Velocity,
)

if TYPE_CHECKING:
    from gravwell.background import BackgroundTile, ParallaxBackground


class EntityKind(enum.Enum):
    """What an entity is; the markers that tell one kind of object from another."""

    CAMERA = "camera"
    PLAYER_SHIP = "player_ship"
    ENEMY_SHIP = "enemy_ship"
    BLACK_HOLE = "black_hole"
    DART = "dart"
    PROJECTILE = "projectile"
    TRAIL_PARTICLE = "trail_particle"
    BACKGROUND = "background"
    BACKGROUND_TILE = "background_tile"


@dataclass(eq=False)
class Entity:
    """One object in the world; unset components are None."""

    kind: EntityKind
    transform: Transform | None = None
    sprite: GameSprite | None = None
    velocity: Velocity | None = None
    facing_angle: FacingAngle | None = None
    thrust: Thrust | None = None
    mass: Mass | None = None
    max_velocity: MaxVelocity | None = None
    angle_follows_velocity: bool = False
    trail_lifetime: float | None = None
    alpha: float = 1.0
    projectile: Any = None
    enemy_type: Any = None
    layer_id: int | None = None
    tile: BackgroundTile | None = None
    background: ParallaxBackground | None = None


_COMPONENT_NAMES = frozenset(f.name for f in fields(Entity)) - {"kind", "alpha"}


def _has(entity: Entity, name: str) -> bool:
    value = getattr(entity, name)
    return value is not None and value is not False


class World:
    """All live entities, in the order they were spawned."""

    def __init__(self) -> None:
        self._entities: dict[int, Entity] = {}

    def __iter__(self) -> Iterator[Entity]:
        return iter(list(self._entities.values()))

    def __len__(self) -> int:
        return len(self._entities)

    def __contains__(self, entity: object) -> bool:
        return self._entities.get(id(entity)) is entity

    def spawn(self, entity: Entity) -> Entity:
        """Add ``entity`` to the world and return it."""
        self._entities[id(entity)] = entity
        return entity

    def despawn(self, entity: Entity) -> None:
        """Remove ``entity``; raise KeyError if it is not in the world."""
        if entity not in self:
            raise KeyError(f"entity not in world: {entity!r}")
        del self._entities[id(entity)]

    def of_kind(self, kind: EntityKind) -> list[Entity]:
        return [entity for entity in self._entities.values() if entity.kind is kind]

    def with_components(self, *args: str) -> list[Entity]:
        """Entities that carry every named component."""
        unknown = set(args) - _COMPONENT_NAMES
        if unknown:
            raise ValueError(f"unknown components: {', '.join(sorted(unknown))}")
        return [
            entity
            for entity in self._entities.values()
            if all(_has(entity, name) for name in args)
        ]

    def _single(self, kind: EntityKind) -> Entity:
        matches = self.of_kind(kind)
        if len(matches) != 1:
            raise LookupError(f"expected exactly one {kind.value}, found {len(matches)}")
        return matches[0]

    def player(self) -> Entity:
        """The one player ship; LookupError if there is not exactly one."""
        return self._single(EntityKind.PLAYER_SHIP)

    def camera(self) -> Entity:
        """The one camera; LookupError if there is not exactly one."""
        return self._single(EntityKind.CAMERA)