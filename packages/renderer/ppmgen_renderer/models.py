"""Typed renderer models."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np


@dataclass(eq=False)
class FrameBuffer:
    """Row-major buffer of packed RGBA pixels, origin top-left."""

    width: int
    height: int
    pixels: np.ndarray = field(repr=False)

    @classmethod
    def allocate(cls, width: int, height: int) -> FrameBuffer:
        if width <= 0 or height <= 0:
            raise ValueError("Framebuffer dimensions must be positive")
        return cls(width=width, height=height, pixels=np.zeros(width * height, dtype=np.uint32))

    def __len__(self) -> int:
        return len(self.pixels)

    def index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} buffer")
        return x + y * self.width

    def get(self, x: int, y: int) -> int:
        return int(self.pixels[self.index(x, y)])

    def set(self, x: int, y: int, pixel: int) -> None:
        self.pixels[self.index(x, y)] = pixel
