"""Shared types for the scroll core."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Callable

from scroll.vec import Point

Path = tuple[Point, ...]


class ScalingMode(IntEnum):
    """How the source image is mapped onto a screen."""

    STRETCH = 0
    FIT_WIDTH = 1
    FIT_HEIGHT = 2

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", "-")


class ConfigError(ValueError):
    """Raised when user-supplied configuration is invalid."""


@dataclass(frozen=True, slots=True)
class Uninitialized:
    """Playback has not entered its first segment yet."""


@dataclass(frozen=True, slots=True)
class OnSegment:
    index: int
    vector: Point
    elapsed: float
    duration: float


PlaybackState = Uninitialized | OnSegment


@dataclass(frozen=True, slots=True)
class FrameContext:
    frame_number: int
    delta: float
    position: Point
    request_stop: Callable[[], None]


FrameHook = Callable[[FrameContext], None]
