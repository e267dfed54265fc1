"""Run configuration and parsing of user-supplied values."""
from __future__ import annotations

import math
from dataclasses import dataclass, field

from scroll.types import ConfigError, ScalingMode
from scroll.vec import Point

DEFAULT_SCALE = 1.0
DEFAULT_SPEED = 0.1 / 1000  # units per millisecond
DEFAULT_RESOLUTION = 15
DEFAULT_FPS = 60


def effective_speed(speed: float, scale: float) -> float:
    """Traversal speed in path units per millisecond once the image is scaled."""
    return speed / scale


def parse_points(text: str) -> tuple[Point, ...]:
    """Parse ``"x0,y0;x1,y1;..."`` into a tuple of points."""
    chunks = text.split(";")
    if chunks and not chunks[-1].strip():
        chunks.pop()

    points: list[Point] = []
    for n, chunk in enumerate(chunks):
        parts = chunk.split(",")
        if len(parts) != 2:
            raise ConfigError(
                f"Point string {text!r} is invalid: point {n} needs two dimensions"
            )
        try:
            x, y = float(parts[0]), float(parts[1])
        except ValueError:
            raise ConfigError(
                f"Point string {text!r} is invalid: invalid number format in {chunk!r}"
            ) from None
        points.append((x, y))

    if len(points) < 2:
        raise ConfigError("Need at least two points")
    return tuple(points)


def parse_scaling_mode(text: str) -> ScalingMode:
    """Accept a mode's number (``0``-``2``) or its name (``fit-width``)."""
    key = text.strip().lower()
    for mode in ScalingMode:
        if key in (str(mode.value), mode.label, mode.name.lower()):
            return mode
    choices = ", ".join(f"{m.value} ({m.label})" for m in ScalingMode)
    raise ConfigError(f"Scaling mode must be one of {choices}")


@dataclass(frozen=True, slots=True)
class ScrollConfig:
    """Everything a run needs, validated once at startup.

    ``speed`` is the configured speed in units per millisecond;
    ``effective_speed`` is derived from it and ``scale`` on construction.
    """

    image: str
    waypoints: tuple[Point, ...]
    scale: float = DEFAULT_SCALE
    scaling_mode: ScalingMode = ScalingMode.STRETCH
    speed: float = DEFAULT_SPEED
    smoothing: bool = False
    resolution: int = DEFAULT_RESOLUTION
    fps: int = DEFAULT_FPS
    effective_speed: float = field(init=False)

    def __post_init__(self) -> None:
        if not self.image:
            raise ConfigError("Need an image")
        if len(self.waypoints) < 2:
            raise ConfigError("Need at least two points")
        if not all(math.isfinite(c) for pt in self.waypoints for c in pt):
            raise ConfigError("Point coordinates must be finite numbers")
        if not math.isfinite(self.scale) or self.scale < 1:
            raise ConfigError("Scale must be a finite number greater than or equal to 1")
        if not isinstance(self.scaling_mode, ScalingMode):
            try:
                mode = ScalingMode(self.scaling_mode)
            except ValueError:
                raise ConfigError(
                    f"Scaling mode must be between 0 and {len(ScalingMode) - 1}"
                ) from None
            object.__setattr__(self, "scaling_mode", mode)
        if not math.isfinite(self.speed) or self.speed <= 0:
            raise ConfigError("Velocity must be a finite number greater than zero")
        if self.resolution <= 1:
            raise ConfigError("Bezier resolution must be greater than one")
        if self.fps <= 0:
            raise ConfigError("FPS must be greater than zero")
        object.__setattr__(self, "waypoints", tuple(self.waypoints))
        speed = effective_speed(self.speed, self.scale)
        if not speed > 0:
            raise ConfigError("Velocity is too small for the given scale")
        object.__setattr__(self, "effective_speed", speed)
