"""Screen geometry and viewport offsets."""
from __future__ import annotations

import logging
from dataclasses import dataclass

import pygame

from scroll import Point
from scroll_display.scaling import Size

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ScreenGeometry:
    x: int
    y: int
    width: int
    height: int

    @property
    def size(self) -> Size:
        return (self.width, self.height)


def viewport_offset(position: Point, image_size: Size, screen: ScreenGeometry) -> tuple[int, int]:
    """Where the image's top-left corner goes for a normalized ``position``.

    The image slides by the part of it that does not fit on the screen,
    so the same position works for screens of any size.
    """
    image_w, image_h = image_size
    return (
        int(-(image_w - screen.width) * position[0]),
        int(-(image_h - screen.height) * position[1]),
    )


def discover_screens() -> list[ScreenGeometry]:
    """One geometry per desktop, placed side by side from the left."""
    screens: list[ScreenGeometry] = []
    x = 0
    for width, height in pygame.display.get_desktop_sizes():
        logger.debug("Found screen with size (%d; %d) at (%d; %d)", width, height, x, 0)
        screens.append(ScreenGeometry(x, 0, width, height))
        x += width
    return screens
