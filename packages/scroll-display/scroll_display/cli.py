"""Command line entry point."""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

import scroll
from scroll import (
    ConfigError,
    FrameContext,
    Scroller,
    ScrollConfig,
    parse_points,
    parse_scaling_mode,
)
from scroll.config import DEFAULT_FPS, DEFAULT_RESOLUTION, DEFAULT_SCALE, DEFAULT_SPEED
from scroll_display.screens import discover_screens
from scroll_display.window import Viewport, WallpaperWindow, handle_events, load_image

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="scroll",
        description="Scroll a background image along a path of waypoints.",
    )
    p.add_argument("-v", "--version", action="version",
                   version=f"%(prog)s {scroll.__version__}")
    p.add_argument("-i", "--image", required=True, help="Image to scroll")
    p.add_argument("-s", "--scale", type=float, default=DEFAULT_SCALE,
                   help="Image size relative to the screen, >= 1 (default: 1)")
    p.add_argument("-m", "--mode", default="stretch",
                   help="Scaling mode: 0/stretch, 1/fit-width, 2/fit-height (default: stretch)")
    p.add_argument("-V", "--velocity", type=float, default=DEFAULT_SPEED * 1000,
                   help="Traversal speed in path units per second (default: 0.1)")
    p.add_argument("-p", "--points", required=True, metavar="x0,y0;x1,y1;...",
                   help="Waypoints, at least two")
    p.add_argument("-f", "--fps", type=int, default=DEFAULT_FPS,
                   help="Frames per second (default: 60)")
    p.add_argument("-b", "--bezier", action="store_true",
                   help="Smooth the path with quadratic Bezier curves")
    p.add_argument("-r", "--resolution", type=int, default=DEFAULT_RESOLUTION,
                   help="Samples per smoothed waypoint, > 1 (default: 15)")
    p.add_argument("--debug", action="store_true", help="Verbose logging")
    return p


def build_config(args: argparse.Namespace) -> ScrollConfig:
    return ScrollConfig(
        image=args.image,
        waypoints=parse_points(args.points),
        scale=args.scale,
        scaling_mode=parse_scaling_mode(args.mode),
        speed=args.velocity / 1000.0,
        smoothing=args.bezier,
        resolution=args.resolution,
        fps=args.fps,
    )


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(levelname)s: %(message)s",
    )


def run(config: ScrollConfig) -> None:
    pygame.init()
    try:
        image = load_image(config.image)
        screens = discover_screens()
        windows = [
            WallpaperWindow(Viewport(screen, image, config.scaling_mode, config.scale))
            for screen in screens
        ]
        logger.info("Scrolling %s on %d screen(s)", config.image, len(windows))

        def draw(ctx: FrameContext) -> None:
            for window in windows:
                window.draw(ctx.position)

        def close(ctx: FrameContext) -> None:
            for window in windows:
                window.close()

        scroller = Scroller(config)
        scroller.on_frame(handle_events)
        scroller.on_frame(draw)
        scroller.on_stop(close)
        scroller.run_forever()
    finally:
        pygame.quit()


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.debug)

    try:
        config = build_config(args)
        run(config)
    except ConfigError as e:
        logger.error("%s", e)
        return 1
    except pygame.error as e:
        logger.error("Display error: %s", e)
        return 1
    except KeyboardInterrupt:
        return 0
    return 0
