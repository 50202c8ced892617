# renderer/framebuffer.py
from pathlib import Path
from typing import Callable, Optional, Union

import numpy as np
from PIL import Image

from core.color import Color


class Framebuffer:
    """
    An in-memory RGBA8 pixel buffer.

    Pixels are stored row-major in a (height, width, 4) uint8 array, so the
    flat byte offset of (x, y) is 4 * (y * width + x). present() hands the
    buffer to the on_present callback, which is where a window blits it.
    """

    def __init__(self, width: int, height: int,
                 on_present: Optional[Callable[["Framebuffer"], None]] = None):
        if width <= 0 or height <= 0:
            raise ValueError(f"framebuffer size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width, 4), dtype=np.uint8)
        self.on_present = on_present
        self.frames_presented = 0

    def set_pixel(self, x: int, y: int, color: Color):
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} buffer")
        rgb = np.clip(color.as_tuple(), 0, 255).astype(np.uint8)
        self.pixels[y, x, :3] = rgb
        self.pixels[y, x, 3] = 255

    def get_pixel(self, x: int, y: int):
        return tuple(int(c) for c in self.pixels[y, x])

    def present(self):
        self.frames_presented += 1
        if self.on_present is not None:
            self.on_present(self)

    def to_image(self) -> Image.Image:
        return Image.fromarray(self.pixels)

    def save(self, path: Union[str, Path]) -> Path:
        path = Path(path)
        self.to_image().save(path)
        return path
