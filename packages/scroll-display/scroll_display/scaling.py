"""Mapping of the source image onto a screen."""
from __future__ import annotations

from scroll import ScalingMode

Size = tuple[int, int]


def scaled_size(mode: ScalingMode, screen_size: Size, image_size: Size, scale: float) -> Size:
    """Pixel size the image is rendered at for one screen.

    ``stretch`` ignores the image's aspect ratio and covers ``scale`` times
    the screen in both directions. ``fit-width`` and ``fit-height`` scale
    one axis to ``scale`` times the screen and keep the aspect ratio.
    """
    screen_w, screen_h = screen_size
    image_w, image_h = image_size

    if mode == ScalingMode.FIT_HEIGHT:
        height = int(screen_h * scale)
        factor = height / image_h
        return int(image_w * factor), height
    if mode == ScalingMode.FIT_WIDTH:
        width = int(screen_w * scale)
        factor = width / image_w
        return width, int(image_h * factor)
    return int(screen_w * scale), int(screen_h * scale)
