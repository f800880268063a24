"""
timers.py: Game-time stopwatches driven by the frame delta.
"""


class Stopwatch:
    """Accumulates frame deltas (ms) until restarted."""

    def __init__(self):
        self.elapsed_ms = 0.0

    @property
    def elapsed_seconds(self) -> float:
        return self.elapsed_ms / 1000.0

    def advance(self, delta_ms: float):
        if delta_ms < 0:
            raise ValueError(f"Negative frame delta: {delta_ms}")
        self.elapsed_ms += delta_ms

    def restart(self) -> float:
        """Resets to zero and returns the time that had elapsed."""
        elapsed, self.elapsed_ms = self.elapsed_ms, 0.0
        return elapsed
