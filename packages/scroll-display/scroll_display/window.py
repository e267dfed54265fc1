"""Wallpaper windows - one borderless SDL window per screen."""
from __future__ import annotations

import logging

import pygame
from pygame._sdl2.video import Renderer, Texture, Window

from scroll import ConfigError, FrameContext, Point, ScalingMode
from scroll_display.constants import BG_COLOR, IMAGE_DEPTH, TITLE
from scroll_display.scaling import scaled_size
from scroll_display.screens import ScreenGeometry, viewport_offset

logger = logging.getLogger(__name__)


def load_image(path: str) -> pygame.Surface:
    """Load an image file as a 32-bit surface, without needing a display."""
    try:
        loaded = pygame.image.load(path)
    except (pygame.error, OSError) as e:
        raise ConfigError(f"Can't load image {path!r}: {e}") from e
    image = pygame.Surface(loaded.get_size(), depth=IMAGE_DEPTH)
    image.blit(loaded, (0, 0))
    return image


class Viewport:
    """The image pre-scaled for one screen, drawn shifted by the scroll position."""

    def __init__(
        self,
        screen: ScreenGeometry,
        image: pygame.Surface,
        mode: ScalingMode,
        scale: float,
    ) -> None:
        self.screen = screen
        self.image_size = scaled_size(mode, screen.size, image.get_size(), scale)
        self.image = pygame.transform.smoothscale(image, self.image_size)

    def offset(self, position: Point) -> tuple[int, int]:
        return viewport_offset(position, self.image_size, self.screen)

    def rect(self, position: Point) -> pygame.Rect:
        """Screen-space rectangle the scaled image covers at ``position``."""
        return pygame.Rect(self.offset(position), self.image_size)


class WallpaperWindow:
    """Borderless window covering one screen behind everything else."""

    def __init__(self, viewport: Viewport) -> None:
        screen = viewport.screen
        logger.debug(
            "Creating screen with size (%d; %d) at (%d; %d)",
            screen.width, screen.height, screen.x, screen.y,
        )
        self.viewport = viewport
        self.win = Window(TITLE, size=screen.size, position=(screen.x, screen.y), borderless=True)
        self.renderer = Renderer(self.win)
        self.renderer.draw_color = (*BG_COLOR, 255)
        self.texture = Texture.from_surface(self.renderer, viewport.image)

    def draw(self, position: Point) -> None:
        self.renderer.clear()
        self.texture.draw(dstrect=self.viewport.rect(position))
        self.renderer.present()

    def close(self) -> None:
        # texture and renderer must go before the window that owns them
        self.texture = None
        self.renderer = None
        self.win.destroy()


def handle_events(ctx: FrameContext) -> None:
    """Frame hook: stop on window close or Escape."""
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            ctx.request_stop()
        elif event.type == pygame.WINDOWCLOSE:
            ctx.request_stop()
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            ctx.request_stop()
