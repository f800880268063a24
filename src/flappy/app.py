#!/usr/bin/env python3
"""
app.py

The pygame shell around the game loop: window, asset loading, rendering,
keyboard polling and the frame-rate cap.
"""

import logging
import os
from typing import Dict, Optional, Tuple

import pygame

from .constants import (
    ASSETS_DIR, BACKGROUND_FILE, BIRD_FILE, CLEAR_COLOR, FONT_FILE,
    FRAME_RATE_LIMIT, GROUND_FILE, PIPE_FILE, SCORE_COLOR, SCORE_FONT_SIZE,
    SCORE_POSITION, SCREEN_HEIGHT, SCREEN_WIDTH, WINDOW_TITLE
)
from .data_models import Drawable, FrameState, InputSnapshot
from .game import GameLoop

logger = logging.getLogger(__name__)

SPRITE_FILES = {
    "background": BACKGROUND_FILE,
    "bird": BIRD_FILE,
    "pipe": PIPE_FILE,
    "ground": GROUND_FILE,
}


class AssetLoadError(RuntimeError):
    """A texture or font could not be loaded at startup."""


class WindowError(RuntimeError):
    """The display window could not be created."""


# ----------------- Assets -----------------

def asset_path(filename: str, assets_dir: str = ASSETS_DIR) -> str:
    path = os.path.join(assets_dir, filename)
    if not os.path.isfile(path):
        raise AssetLoadError(f"Missing asset: {path}")
    return path


def load_textures(assets_dir: str = ASSETS_DIR) -> Dict[str, pygame.Surface]:
    """Loads every sprite at its native size. Requires an open display."""
    textures = {}
    for name, filename in SPRITE_FILES.items():
        path = asset_path(filename, assets_dir)
        try:
            image = pygame.image.load(path).convert_alpha()
        except pygame.error as e:
            raise AssetLoadError(f"Could not load {path}: {e}") from e
        textures[name] = image
    return textures


def load_font(assets_dir: str = ASSETS_DIR, size: int = SCORE_FONT_SIZE) -> pygame.font.Font:
    path = asset_path(FONT_FILE, assets_dir)
    try:
        return pygame.font.Font(path, size)
    except (pygame.error, OSError) as e:
        raise AssetLoadError(f"Could not load {path}: {e}") from e


# ----------------- Render surface / input -----------------

class PygameSurface:
    """Draws frame states onto the display window."""

    def __init__(self, screen: pygame.Surface, textures: Dict[str, pygame.Surface], font: pygame.font.Font):
        self.screen = screen
        self.textures = textures
        self.font = font
        self._transformed: Dict[Tuple[str, float, float], pygame.Surface] = {}

    def clear(self):
        self.screen.fill(CLEAR_COLOR)

    def _texture(self, drawable: Drawable) -> pygame.Surface:
        """The sprite scaled by the drawable's scale, then rotated. Cached per combination."""
        key = (drawable.sprite, drawable.scale, drawable.rotation)
        if key not in self._transformed:
            texture = self.textures[drawable.sprite]
            size = (round(texture.get_width() * drawable.scale), round(texture.get_height() * drawable.scale))
            texture = pygame.transform.scale(texture, size)
            if drawable.rotation:
                texture = pygame.transform.rotate(texture, drawable.rotation)
            self._transformed[key] = texture
        return self._transformed[key]

    def draw(self, drawable: Drawable):
        texture = self._texture(drawable)
        x, y = drawable.x, drawable.y
        if drawable.rotation == 180.0:
            # Rotated about its anchor, so the image extends up and to the left
            x -= texture.get_width()
            y -= texture.get_height()
        self.screen.blit(texture, (round(x), round(y)))

    def draw_text(self, text: str, position: Tuple[int, int] = SCORE_POSITION):
        surface = self.font.render(text, True, SCORE_COLOR)
        self.screen.blit(surface, position)

    def display(self):
        pygame.display.flip()

    def render(self, frame: FrameState):
        self.clear()
        for drawable in frame.sprites:
            self.draw(drawable)
        self.draw_text(frame.score_text)
        self.display()


class PygameInput:
    """Polled keyboard state plus the window close signal."""

    JUMP_KEY = pygame.K_SPACE

    def is_key_held(self, key: int) -> bool:
        return bool(pygame.key.get_pressed()[key])

    def snapshot(self) -> InputSnapshot:
        return InputSnapshot(jump_held=self.is_key_held(self.JUMP_KEY))

    def poll_close(self) -> bool:
        close = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                close = True
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                close = True
        return close


# ----------------- Application -----------------

class FlappyApp:
    def __init__(self, assets_dir: Optional[str] = None):
        self.assets_dir = assets_dir or ASSETS_DIR
        self.game = GameLoop()
        self.clock = pygame.time.Clock()
        self.input = PygameInput()
        self.surface = None

    def setup(self):
        """Opens the window and loads assets. Raises WindowError or AssetLoadError."""
        pygame.init()
        try:
            screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT), 0, 32)
        except pygame.error as e:
            raise WindowError(f"Could not open a {SCREEN_WIDTH}x{SCREEN_HEIGHT} window: {e}") from e
        pygame.display.set_caption(WINDOW_TITLE)
        logger.info("Window %dx%d opened. Loading assets from %s",
                    SCREEN_WIDTH, SCREEN_HEIGHT, self.assets_dir)
        self.surface = PygameSurface(screen, load_textures(self.assets_dir), load_font(self.assets_dir))

    def run(self):
        """The main frame loop; returns when the window is closed."""
        self.clock.tick(FRAME_RATE_LIMIT)
        while not self.input.poll_close():
            delta_ms = self.clock.tick(FRAME_RATE_LIMIT)
            frame = self.game.step(delta_ms, self.input.snapshot())
            self.surface.render(frame)
        logger.info("Window closed. Last score: %d", self.game.score)
