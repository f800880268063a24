import pygame
import pytest

import flappy.app as app_module
from flappy.__main__ import main
from flappy.app import AssetLoadError, PygameInput, PygameSurface, asset_path, load_font
from flappy.data_models import Drawable

RED = (255, 0, 0)
BLACK = (0, 0, 0)


@pytest.fixture
def screen():
    pygame.init()
    surface = pygame.display.set_mode((100, 100))
    surface.fill(BLACK)
    yield surface
    pygame.quit()


@pytest.fixture
def red_square():
    texture = pygame.Surface((10, 10))
    texture.fill(RED)
    return texture


@pytest.fixture
def quit_calls(monkeypatch):
    calls = []
    real_quit = pygame.quit

    def recording_quit():
        calls.append(True)
        real_quit()

    monkeypatch.setattr(pygame, "quit", recording_quit)
    return calls


def color_at(surface, position):
    return tuple(surface.get_at(position))[:3]


def test_missing_asset_is_fatal(tmp_path):
    with pytest.raises(AssetLoadError, match="bird.png"):
        asset_path("bird.png", str(tmp_path))


def test_present_asset_resolves(tmp_path):
    (tmp_path / "bird.png").write_bytes(b"")
    assert asset_path("bird.png", str(tmp_path)) == str(tmp_path / "bird.png")


def test_missing_font_is_fatal(tmp_path):
    with pytest.raises(AssetLoadError):
        load_font(str(tmp_path))


def test_inverted_sprite_is_drawn_up_left_of_anchor(screen, red_square):
    surface = PygameSurface(screen, {"pipe": red_square}, font=None)
    surface.draw(Drawable("pipe", 50.0, 50.0, rotation=180.0, scale=1.0))

    assert color_at(screen, (40, 40)) == RED
    assert color_at(screen, (49, 49)) == RED
    assert color_at(screen, (50, 50)) == BLACK
    assert color_at(screen, (39, 39)) == BLACK


def test_sprite_is_drawn_at_its_scale(screen, red_square):
    surface = PygameSurface(screen, {"pipe": red_square}, font=None)
    surface.draw(Drawable("pipe", 10.0, 10.0, scale=2.0))

    assert color_at(screen, (10, 10)) == RED
    assert color_at(screen, (29, 29)) == RED
    assert color_at(screen, (30, 30)) == BLACK
    assert color_at(screen, (9, 9)) == BLACK


def test_window_close_and_escape_end_the_loop(screen):
    source = PygameInput()
    pygame.event.clear()
    assert not source.poll_close()

    pygame.event.post(pygame.event.Event(pygame.QUIT))
    assert source.poll_close()

    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
    assert source.poll_close()

    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE))
    assert not source.poll_close()


def test_main_exits_with_error_on_missing_assets(tmp_path, monkeypatch, quit_calls):
    monkeypatch.setattr(app_module, "ASSETS_DIR", str(tmp_path))
    assert main() == 1
    assert quit_calls == [True]


def test_main_exits_with_error_when_window_fails(monkeypatch, quit_calls):
    def broken_set_mode(*args, **kwargs):
        raise pygame.error("No available video device")

    monkeypatch.setattr(pygame.display, "set_mode", broken_set_mode)
    assert main() == 1
    assert quit_calls == [True]
