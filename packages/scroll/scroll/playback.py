"""Playback - time-based traversal of a cyclic path."""
from __future__ import annotations

import logging
from typing import Sequence

from scroll.types import OnSegment, Path, PlaybackState, Uninitialized
from scroll.vec import ORIGIN, Point, lerp, magnitude, sub

logger = logging.getLogger(__name__)


class Playback:
    """Moves a position along ``path`` at ``speed`` units per millisecond.

    The path is a closed loop: after the last point the position heads back
    to the first one. A tick that completes a segment only switches to the
    next segment; the time past the segment's end is dropped and the
    position is left where it was for that tick.
    """

    def __init__(self, path: Sequence[Point], speed: float) -> None:
        if len(path) < 2:
            raise ValueError("path must contain at least two points")
        if speed <= 0:
            raise ValueError("speed must be positive")
        self._path: Path = tuple(path)
        self._speed = speed
        self._state: PlaybackState = Uninitialized()
        self._position: Point = ORIGIN
        self._loops = 0

    @property
    def path(self) -> Path:
        return self._path

    @property
    def speed(self) -> float:
        return self._speed

    @property
    def state(self) -> PlaybackState:
        return self._state

    @property
    def position(self) -> Point:
        return self._position

    @property
    def index(self) -> int:
        if isinstance(self._state, OnSegment):
            return self._state.index
        return -1

    @property
    def loops(self) -> int:
        """Number of times the path has been traversed completely."""
        return self._loops

    def tick(self, delta: float) -> Point:
        if delta == 0:
            return self._position
        if delta < 0:
            raise ValueError("delta must not be negative")

        state = self._state
        if isinstance(state, Uninitialized):
            self._enter(0)
            return self._position

        elapsed = state.elapsed + delta
        if elapsed >= state.duration:
            nxt = (state.index + 1) % len(self._path)
            if nxt == 0:
                self._loops += 1
            self._enter(nxt)
            return self._position

        start = self._path[state.index]
        self._position = lerp(start, state.vector, elapsed / state.duration)
        self._state = OnSegment(state.index, state.vector, elapsed, state.duration)
        return self._position

    def _enter(self, index: int) -> None:
        start = self._path[index]
        end = self._path[(index + 1) % len(self._path)]
        vector = sub(end, start)
        duration = magnitude(vector) / self._speed
        overshoot = sub(start, self._position)
        logger.debug("Overshoot: %f, %f", overshoot[0], overshoot[1])
        logger.debug(
            "Moving to point %d at (%f,%f) via vector (%f,%f) in %f millis",
            (index + 1) % len(self._path), end[0], end[1], vector[0], vector[1], duration,
        )
        self._state = OnSegment(index, vector, 0.0, duration)
