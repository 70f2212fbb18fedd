"""Fixed render settings shared by the driver and tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ppmgen_renderer.ppm import ppm_header


WIDTH = 512
HEIGHT = 512
OUTPUT_PATH = Path("./out.ppm")


@dataclass(frozen=True)
class RenderConfig:
    width: int = WIDTH
    height: int = HEIGHT
    output_path: Path = field(default=OUTPUT_PATH)

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    @property
    def expected_file_size(self) -> int:
        return len(ppm_header(self.width, self.height)) + self.pixel_count * 3


DEFAULT_CONFIG = RenderConfig()
