"""Scroller - frame loop, pacing, and lifecycle hooks."""

import logging
import time

from scroll.config import ScrollConfig
from scroll.path import build_path
from scroll.playback import Playback
from scroll.types import FrameContext, FrameHook
from scroll.vec import Point

logger = logging.getLogger(__name__)

# Delta fed to the very first paced frame, so playback enters its first
# segment right away.
FIRST_FRAME_DELTA = 1000


class Scroller:
    def __init__(self, config: ScrollConfig) -> None:
        self._config = config
        path = build_path(config.waypoints, config.smoothing, config.resolution)
        logger.debug("Path has %d points", len(path))
        for x, y in path:
            logger.debug("(%f, %f)", x, y)
        self._playback = Playback(path, config.effective_speed)
        self._frame_ms = max(1, 1000 // config.fps)
        self._frame_number = 0
        self._frame_hooks: list[FrameHook] = []
        self._start_hooks: list[FrameHook] = []
        self._stop_hooks: list[FrameHook] = []
        self._stop_requested: bool = False

    @property
    def config(self) -> ScrollConfig:
        return self._config

    @property
    def playback(self) -> Playback:
        return self._playback

    @property
    def frame_ms(self) -> int:
        """Whole milliseconds budgeted per frame."""
        return self._frame_ms

    @property
    def frame_number(self) -> int:
        return self._frame_number

    @property
    def position(self) -> Point:
        return self._playback.position

    def on_frame(self, hook: FrameHook) -> None:
        self._frame_hooks.append(hook)

    def on_start(self, hook: FrameHook) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: FrameHook) -> None:
        self._stop_hooks.append(hook)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def _context(self, delta: float) -> FrameContext:
        return FrameContext(
            frame_number=self._frame_number,
            delta=delta,
            position=self._playback.position,
            request_stop=self._request_stop,
        )

    def _frame(self, delta: float) -> None:
        self._frame_number += 1
        self._playback.tick(delta)
        ctx = self._context(delta)
        for hook in self._frame_hooks:
            hook(ctx)
            if self._stop_requested:
                break

    def _lifecycle(self, hooks: list[FrameHook]) -> None:
        ctx = self._context(0)
        for hook in hooks:
            hook(ctx)

    def step(self, delta: float) -> Point:
        self._stop_requested = False
        self._frame(delta)
        return self._playback.position

    def run(self, n: int) -> None:
        """Run ``n`` frames, each advancing playback by exactly one frame budget."""
        self._stop_requested = False
        self._lifecycle(self._start_hooks)

        for _ in range(n):
            self._frame(self._frame_ms)
            if self._stop_requested:
                break

        self._lifecycle(self._stop_hooks)

    def run_forever(self) -> None:
        """Run paced frames in real time until a hook requests a stop."""
        self._stop_requested = False
        self._lifecycle(self._start_hooks)

        frame_ms = self._frame_ms
        delta = FIRST_FRAME_DELTA
        while not self._stop_requested:
            last = _millis()
            self._frame(delta)
            if self._stop_requested:
                break
            delta = _millis() - last
            while delta < frame_ms:
                time.sleep((frame_ms - delta) / 1000)
                delta = _millis() - last

        self._lifecycle(self._stop_hooks)


def _millis() -> int:
    return int(time.monotonic() * 1000)
