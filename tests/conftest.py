import os
import random

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from flappy.game import GameLoop  # noqa: E402


@pytest.fixture
def game():
    return GameLoop(rng=random.Random(1234))
