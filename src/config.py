# config.py
import argparse
import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from core.errors import ConfigError
from renderer.raytracer import MAX_BOUNCES

DEFAULT_WIDTH = 400
DEFAULT_HEIGHT = 300


@dataclass(frozen=True)
class RenderSettings:
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    max_depth: int = MAX_BOUNCES
    seed: Optional[int] = None
    output: Optional[str] = None
    log_level: str = "INFO"
    move_step: float = 0.1

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ConfigError(f"image size must be positive, got {self.width}x{self.height}")
        if self.max_depth < 0:
            raise ConfigError(f"max depth must not be negative, got {self.max_depth}")
        if self.move_step <= 0:
            raise ConfigError(f"move step must be positive, got {self.move_step}")
        level = self.log_level.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ConfigError(f"unknown log level: {self.log_level}")
        object.__setattr__(self, "log_level", level)

    @property
    def headless(self) -> bool:
        return self.output is not None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Render a small scene with a recursive pinhole ray tracer.",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=DEFAULT_WIDTH,
        help=f"Image width in pixels (default: {DEFAULT_WIDTH})",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=DEFAULT_HEIGHT,
        help=f"Image height in pixels (default: {DEFAULT_HEIGHT})",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=MAX_BOUNCES,
        help=f"Maximum number of bounces per primary ray (default: {MAX_BOUNCES})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the scatter random source (default: unseeded)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Save the frame as a PNG to this path instead of opening a window",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (default: INFO)",
    )
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> RenderSettings:
    """Parse command-line arguments into validated RenderSettings."""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return RenderSettings(
            width=args.width,
            height=args.height,
            max_depth=args.max_depth,
            seed=args.seed,
            output=args.output,
            log_level=args.log_level.upper(),
        )
    except ConfigError as exc:
        parser.error(str(exc))
