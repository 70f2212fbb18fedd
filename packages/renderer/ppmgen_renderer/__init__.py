"""Renderer package for framebuffer fill and PPM output."""

from .color import Color, pack_color, pixels_to_rgb_bytes, unpack_color
from .gradient import gradient_color, render_gradient
from .models import FrameBuffer
from .ppm import encode_ppm, ppm_header, write_ppm

__all__ = [
    "Color",
    "FrameBuffer",
    "encode_ppm",
    "gradient_color",
    "pack_color",
    "pixels_to_rgb_bytes",
    "ppm_header",
    "render_gradient",
    "unpack_color",
    "write_ppm",
]
