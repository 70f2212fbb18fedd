"""Binary PPM (P6) serialization.

Format reference: https://netpbm.sourceforge.net/doc/ppm.html
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

import numpy as np

from .color import pixels_to_rgb_bytes


MAGIC = "P6"
MAX_VALUE = 255

logger = logging.getLogger("ppmgen.ppm")


def ppm_header(width: int, height: int) -> bytes:
    return f"{MAGIC}\n{width} {height}\n{MAX_VALUE}\n".encode("ascii")


def _check_frame(pixels: Sequence[int] | np.ndarray, width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        raise ValueError("Image dimensions must be positive")
    if len(pixels) != width * height:
        raise ValueError(f"Pixel count must be {width * height}, got {len(pixels)}")


def encode_ppm(pixels: Sequence[int] | np.ndarray, width: int, height: int) -> bytes:
    _check_frame(pixels, width, height)
    return ppm_header(width, height) + pixels_to_rgb_bytes(pixels)


def write_ppm(path: str | Path, pixels: Sequence[int] | np.ndarray, width: int, height: int) -> int:
    """Write ``pixels`` as a P6 file at ``path`` and return the byte count.

    The file is created or truncated. Alpha is not stored. ``OSError`` from
    opening or writing propagates and may leave a partial file behind.
    """
    _check_frame(pixels, width, height)
    header = ppm_header(width, height)
    body = pixels_to_rgb_bytes(pixels)

    with open(path, "wb") as fh:
        fh.write(header)
        fh.write(body)

    written = len(header) + len(body)
    logger.debug("wrote %d bytes to %s", written, path)
    return written
