"""
game.py: The per-frame game loop. Owns the player, score, timers and terrain.
"""

import logging
import random
from typing import Optional

from .constants import PIPE_SPAWN_INTERVAL, SCORE_INTERVAL
from .data_models import Drawable, FrameState, InputSnapshot, Player
from .physics_core import PhysicsCore
from .spawner import TerrainSpawner
from .timers import Stopwatch

logger = logging.getLogger(__name__)


class GameLoop:
    """
    One fixed sequence per frame:
    input, player physics, collision, reset-or-continue, ground, pipes,
    spawn and score timers, then the frame state for the renderer.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.core = PhysicsCore()
        self.spawner = TerrainSpawner(rng=rng or random.Random())
        self.player = Player()
        self.score = 0

        self.spawn_timer = Stopwatch()
        self.score_timer = Stopwatch()
        self.holding_jump = False

        self.player.reset_position()

    @property
    def pipes(self):
        return self.spawner.pipes

    @property
    def grounds(self):
        return self.spawner.grounds

    def step(self, delta_ms: float, snapshot: InputSnapshot) -> FrameState:
        """Advances the game by one frame of `delta_ms` milliseconds."""
        if delta_ms < 0:
            raise ValueError(f"Negative frame delta: {delta_ms}")
        self.spawn_timer.advance(delta_ms)
        self.score_timer.advance(delta_ms)

        # 1. Edge-triggered jump: only on the press, not while held
        if snapshot.jump_held:
            if not self.holding_jump:
                self.holding_jump = True
                self.player.jump()
        else:
            self.holding_jump = False

        # 2. Player physics
        self.player.update(delta_ms)

        # 3-4. Collision check, reset applied in the same frame
        if self.core.has_failed(self.player, self.pipes):
            self.reset_run()

        # 5. Ground scrolls and grows to the right
        for ground in self.grounds:
            ground.update(delta_ms)
        self.spawner.extend_ground()

        # 6. Pipes
        for pipe in self.pipes:
            pipe.update(delta_ms)

        # 7. Spawn and score
        if self.spawn_timer.elapsed_seconds > PIPE_SPAWN_INTERVAL:
            self.spawn_timer.restart()
            self.spawner.spawn_pipe_pair()

            if self.score_timer.elapsed_seconds > SCORE_INTERVAL:
                self.score += 1

        # 8. Hand off to the renderer
        return self.frame_state()

    def reset_run(self):
        """Failure transition. The ground strip is kept so scrolling stays continuous."""
        self.player.reset_position()
        self.spawner.clear_pipes()
        self.spawn_timer.restart()
        run_ms = self.score_timer.restart()
        logger.info("Run over after %.1f s. Final score: %d", run_ms / 1000.0, self.score)
        self.score = 0

    def frame_state(self) -> FrameState:
        return FrameState(
            background=Drawable("background", 0.0, 0.0),
            player=self.player.to_drawable(),
            obstacles=[pipe.to_drawable() for pipe in self.pipes],
            grounds=[ground.to_drawable() for ground in self.grounds],
            score_text=str(self.score),
        )
