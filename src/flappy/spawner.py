"""
spawner.py: Procedural pipe pairs, the scrolling ground strip and the purge pass.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import List, Tuple

from .constants import (
    GROUND_RESPAWN_X, GROUND_SPACING, GROUND_START_X, GROUND_Y,
    INVERTED_PIPE_X, PIPE_ANCHOR_MAX, PIPE_ANCHOR_MIN, PIPE_GAP, PIPE_X, PURGE_X
)
from .data_models import Entity, EntityKind

logger = logging.getLogger(__name__)


@dataclass
class TerrainSpawner:
    """
    Owns the live pipe and ground collections.
    Pipes are created in pairs on a timer; ground segments are appended as the
    newest one scrolls past a threshold. Both are purged once far off-screen.
    """
    rng: random.Random = field(default_factory=random.Random)
    pipes: List[Entity] = field(default_factory=list)
    grounds: List[Entity] = field(default_factory=list)

    def __post_init__(self):
        if not self.grounds:
            self.grounds.append(Entity(EntityKind.GROUND, GROUND_START_X, GROUND_Y))

    def spawn_pipe_pair(self) -> Tuple[Entity, Entity]:
        """Adds an upright and an inverted pipe around one random gap, then purges."""
        anchor = float(self.rng.randint(PIPE_ANCHOR_MIN, PIPE_ANCHOR_MAX))
        upright = Entity(EntityKind.UPRIGHT, PIPE_X, anchor)
        inverted = Entity(EntityKind.INVERTED, INVERTED_PIPE_X, anchor - PIPE_GAP)
        self.pipes.extend((upright, inverted))
        logger.debug("Spawned pipe pair at anchor y=%d", anchor)

        self.purge()
        return upright, inverted

    def purge(self):
        """Removes every pipe and ground segment left of the purge line."""
        pipe_count, ground_count = len(self.pipes), len(self.grounds)
        self.pipes = [p for p in self.pipes if p.x >= PURGE_X]
        self.grounds = [g for g in self.grounds if g.x >= PURGE_X]

        removed = (pipe_count - len(self.pipes), ground_count - len(self.grounds))
        if any(removed):
            logger.debug("Purged %d pipes and %d ground segments", *removed)

    def extend_ground(self):
        """Appends a segment to the right once the newest one has crossed the threshold."""
        if self.grounds[-1].x < GROUND_RESPAWN_X:
            self.grounds.append(Entity(EntityKind.GROUND, GROUND_SPACING, GROUND_Y))

    def clear_pipes(self):
        self.pipes = []
