"""scroll - Waypoint-driven scrolling of a background image."""

from scroll.config import ScrollConfig, effective_speed, parse_points, parse_scaling_mode
from scroll.engine import Scroller
from scroll.path import bezier_point, build_path
from scroll.playback import Playback
from scroll.types import (
    ConfigError,
    FrameContext,
    OnSegment,
    Path,
    PlaybackState,
    ScalingMode,
    Uninitialized,
)
from scroll.vec import Point

__version__ = "0.1.0"

__all__ = [
    "Scroller",
    "Playback",
    "ScrollConfig",
    "ScalingMode",
    "ConfigError",
    "FrameContext",
    "OnSegment",
    "Uninitialized",
    "PlaybackState",
    "Path",
    "Point",
    "build_path",
    "bezier_point",
    "effective_speed",
    "parse_points",
    "parse_scaling_mode",
]
