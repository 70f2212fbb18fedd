import sys
import tempfile
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from ppmgen_core.config import DEFAULT_CONFIG, RenderConfig
from ppmgen_renderer.ppm import write_ppm


class ConfigTests(unittest.TestCase):
    def test_fixed_defaults(self):
        self.assertEqual((DEFAULT_CONFIG.width, DEFAULT_CONFIG.height), (512, 512))
        self.assertEqual(DEFAULT_CONFIG.output_path, Path("./out.ppm"))

    def test_expected_file_size(self):
        # "P6\n512 512\n255\n" is a 15 byte header.
        self.assertEqual(DEFAULT_CONFIG.expected_file_size, 15 + 512 * 512 * 3)
        self.assertEqual(DEFAULT_CONFIG.expected_file_size, 786447)
        self.assertEqual(RenderConfig(width=2, height=3).expected_file_size, 11 + 18)

    def test_expected_size_matches_writer(self):
        cfg = RenderConfig(width=120, height=7)
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "img.ppm"
            written = write_ppm(path, [0] * cfg.pixel_count, cfg.width, cfg.height)
            self.assertEqual(written, cfg.expected_file_size)
            self.assertEqual(path.stat().st_size, cfg.expected_file_size)

    def test_frozen(self):
        with self.assertRaises(AttributeError):
            DEFAULT_CONFIG.width = 10  # type: ignore[misc]


if __name__ == "__main__":
    unittest.main()
