"""
physics_core.py: Hitboxes and the per-frame collision and bounds checks.
"""

from dataclasses import dataclass
from typing import Iterable

from .constants import (
    CEILING_Y, FLOOR_Y, PIPE_HEIGHT, PIPE_WIDTH, PLAYER_HEIGHT, PLAYER_WIDTH
)
from .data_models import Entity, EntityKind, Player


@dataclass(frozen=True)
class Hitbox:
    """Axis-aligned rectangle. Rectangles that only share an edge do not intersect."""
    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def intersects(self, other: "Hitbox") -> bool:
        return (max(self.left, other.left) < min(self.right, other.right)
                and max(self.top, other.top) < min(self.bottom, other.bottom))


def player_hitbox(player: Player) -> Hitbox:
    return Hitbox(player.x, player.y, PLAYER_WIDTH, PLAYER_HEIGHT)


def entity_hitbox(entity: Entity) -> Hitbox:
    """
    The inverted pipe is the upright sprite rotated 180 degrees about its
    anchor, so its hitbox lies up and to the left of (x, y).
    """
    if entity.kind is EntityKind.INVERTED:
        return Hitbox(entity.x - PIPE_WIDTH, entity.y - PIPE_HEIGHT, PIPE_WIDTH, PIPE_HEIGHT)
    return Hitbox(entity.x, entity.y, PIPE_WIDTH, PIPE_HEIGHT)


def check_collision(entity: Entity, player: Player) -> bool:
    """Ground never collides; leaving the play field is handled by the bounds check."""
    if not entity.is_obstacle:
        return False
    return entity_hitbox(entity).intersects(player_hitbox(player))


class PhysicsCore:
    """
    Read-only queries the game loop runs once per frame, after the player moved.
    """

    FLOOR_Y = FLOOR_Y
    CEILING_Y = CEILING_Y

    def is_out_of_bounds(self, player: Player) -> bool:
        return player.y > self.FLOOR_Y or player.y < self.CEILING_Y

    def hits_obstacle(self, player: Player, obstacles: Iterable[Entity]) -> bool:
        return any(check_collision(obstacle, player) for obstacle in obstacles)

    def has_failed(self, player: Player, obstacles: Iterable[Entity]) -> bool:
        """Checks for collisions with pipes, the floor bound or the ceiling bound."""
        return self.hits_obstacle(player, obstacles) or self.is_out_of_bounds(player)
