"""scroll-display - pygame front end for scroll."""
from __future__ import annotations

from scroll_display.scaling import scaled_size
from scroll_display.screens import ScreenGeometry, discover_screens, viewport_offset
from scroll_display.window import Viewport, WallpaperWindow, handle_events, load_image

__all__ = [
    "ScreenGeometry",
    "Viewport",
    "WallpaperWindow",
    "discover_screens",
    "handle_events",
    "load_image",
    "scaled_size",
    "viewport_offset",
]
