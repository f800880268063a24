import copy

import pytest

from flappy.constants import INITIAL_FORCE, JUMP_FORCE, PLAYER_SPAWN_X, PLAYER_SPAWN_Y
from flappy.data_models import Player


def test_new_player_starts_at_spawn():
    player = Player()
    assert (player.x, player.y) == (PLAYER_SPAWN_X, PLAYER_SPAWN_Y)
    assert player.force == INITIAL_FORCE


def test_update_moves_by_decayed_force():
    player = Player()
    player.update(16)
    assert player.force == pytest.approx(2.84)
    assert player.y == pytest.approx(100 - 2.84)


@pytest.mark.parametrize("delta", [0, 1, 8, 16, 33])
def test_force_decays_and_fall_accelerates(delta):
    player = Player(force=0.0)
    forces, heights = [player.force], [player.y]
    for _ in range(60):
        player.update(delta)
        forces.append(player.force)
        heights.append(player.y)

    if delta:
        assert all(a > b for a, b in zip(forces, forces[1:]))
    assert all(a <= b for a, b in zip(heights, heights[1:]))


def test_default_force_rises_then_falls():
    player = Player()
    lowest = player.y
    for _ in range(200):
        player.update(16)
        lowest = min(lowest, player.y)
    assert lowest < PLAYER_SPAWN_Y
    assert player.y > PLAYER_SPAWN_Y


@pytest.mark.parametrize("force", [-5.0, -1.0, 0.0, 2.0, 3.9])
@pytest.mark.parametrize("delta", [1, 8, 16, 33])
def test_jump_never_falls_further(force, delta):
    plain = Player(force=force)
    jumped = copy.copy(plain)
    jumped.jump()

    plain.update(delta)
    jumped.update(delta)
    assert jumped.y <= plain.y


def test_jump_sets_constant_force():
    player = Player(force=-7.5)
    player.jump()
    assert player.force == JUMP_FORCE
    player.jump()
    assert player.force == JUMP_FORCE


def test_reset_position():
    player = Player(x=3.0, y=600.0, force=-12.0)
    player.reset_position()
    assert (player.x, player.y, player.force) == (PLAYER_SPAWN_X, PLAYER_SPAWN_Y, INITIAL_FORCE)
