"""Red/green gradient fill."""

from __future__ import annotations

from .color import Color
from .models import FrameBuffer


def gradient_color(x: int, y: int, width: int, height: int) -> Color:
    # Red sweeps top to bottom, green sweeps left to right.
    return Color(r=255 * y // height, g=255 * x // width, b=0)


def render_gradient(width: int, height: int) -> FrameBuffer:
    frame = FrameBuffer.allocate(width, height)
    pixels = frame.pixels

    for h in range(height):
        for w in range(width):
            c = gradient_color(w, h, width, height)
            pixels[w + h * width] = c.pack()
    return frame
