"""RGBA packing helpers for 32-bit framebuffer pixels."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np


OPAQUE = 255


def _check_channel(name: str, value: int) -> None:
    if not 0 <= value <= 255:
        raise ValueError(f"Channel {name} must be in 0..255, got {value}")


@dataclass(frozen=True)
class Color:
    r: int
    g: int
    b: int
    a: int = OPAQUE

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            _check_channel(name, getattr(self, name))

    def pack(self) -> int:
        return self.r | (self.g << 8) | (self.b << 16) | (self.a << 24)

    @classmethod
    def unpack(cls, pixel: int) -> Color:
        return cls(*unpack_color(pixel))


def pack_color(r: int, g: int, b: int, a: int | None = None) -> int:
    """Pack channels into a u32, red in the low byte. Alpha defaults to opaque."""
    return Color(r, g, b, OPAQUE if a is None else a).pack()


def unpack_color(pixel: int) -> tuple[int, int, int, int]:
    return (
        pixel & 0xFF,
        (pixel >> 8) & 0xFF,
        (pixel >> 16) & 0xFF,
        (pixel >> 24) & 0xFF,
    )


def pixels_to_rgb_bytes(pixels: Sequence[int] | np.ndarray) -> bytes:
    """Decode packed pixels into interleaved RGB888 bytes, dropping alpha."""
    arr = np.asarray(pixels, dtype=np.uint32).reshape(-1)
    rgb = np.empty((arr.size, 3), dtype=np.uint8)
    rgb[:, 0] = arr & 0xFF
    rgb[:, 1] = (arr >> 8) & 0xFF
    rgb[:, 2] = (arr >> 16) & 0xFF
    return rgb.tobytes()
