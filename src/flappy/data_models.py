"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from .constants import (
    GRAVITY_DECAY, INITIAL_FORCE, JUMP_FORCE,
    PLAYER_SPAWN_X, PLAYER_SPAWN_Y, TERRAIN_SPEED, TEXTURE_SCALE
)


class EntityKind(Enum):
    GROUND = "ground"
    UPRIGHT = "pipe"
    INVERTED = "inverted_pipe"


@dataclass
class Entity:
    """A piece of drifting terrain: a ground segment or one pipe."""
    kind: EntityKind
    x: float
    y: float
    speed: float = TERRAIN_SPEED

    def update(self, delta_time: float):
        """Drifts left by a fixed rate; y never changes."""
        self.x -= self.speed * delta_time

    @property
    def is_obstacle(self) -> bool:
        return self.kind is not EntityKind.GROUND

    def to_drawable(self) -> "Drawable":
        if self.kind is EntityKind.GROUND:
            return Drawable("ground", self.x, self.y)
        rotation = 180.0 if self.kind is EntityKind.INVERTED else 0.0
        return Drawable("pipe", self.x, self.y, rotation=rotation)


@dataclass
class Player:
    """The bird. `force` is its only motion term: it decays and is reset by a jump."""
    x: float = PLAYER_SPAWN_X
    y: float = PLAYER_SPAWN_Y
    force: float = INITIAL_FORCE

    def update(self, delta_time: float):
        """
        Decays the lift force, then moves by the decayed value.
        A negative force means falling, and it grows each frame.
        """
        self.force -= delta_time * GRAVITY_DECAY
        self.y -= self.force

    def jump(self):
        # Overwrite, never accumulate
        self.force = JUMP_FORCE

    def reset_position(self):
        self.force = INITIAL_FORCE
        self.x = PLAYER_SPAWN_X
        self.y = PLAYER_SPAWN_Y

    def to_drawable(self) -> "Drawable":
        return Drawable("bird", self.x, self.y)


@dataclass(frozen=True)
class InputSnapshot:
    """Polled input for one frame."""
    jump_held: bool = False


@dataclass(frozen=True)
class Drawable:
    """What the render surface needs to draw one sprite."""
    sprite: str
    x: float
    y: float
    rotation: float = 0.0
    scale: float = TEXTURE_SCALE


@dataclass
class FrameState:
    """Everything the renderer draws for one frame, in draw order."""
    background: Drawable
    player: Drawable
    obstacles: List[Drawable] = field(default_factory=list)
    grounds: List[Drawable] = field(default_factory=list)
    score_text: str = "0"

    @property
    def sprites(self) -> List[Drawable]:
        return [self.background, *self.obstacles, *self.grounds, self.player]
