from __future__ import annotations

import runpy
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "apps" / "cli"))
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

import ppmgen_app.__main__ as app_main
from ppmgen_core.logging_setup import get_logger
from ppmgen_renderer.ppm import ppm_header


def test_main_passes_through_args(monkeypatch) -> None:
    calls: list[list[str]] = []
    monkeypatch.setattr(app_main, "_cli_main", lambda argv=None: calls.append(list(argv or [])) or 0)

    rc = app_main.main([])
    assert rc == 0
    assert calls == [[]]


def test_main_writes_out_ppm_in_cwd(monkeypatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)

    logger = get_logger()
    try:
        rc = app_main.main([])
    finally:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
    assert rc == 0
    data = (tmp_path / "out.ppm").read_bytes()
    assert data.startswith(b"P6\n512 512\n255\n")
    assert len(data) == len(ppm_header(512, 512)) + 512 * 512 * 3 == 786447


def test_main_module_runpath_without_package_context() -> None:
    main_path = ROOT / "apps" / "cli" / "ppmgen_app" / "__main__.py"
    result = runpy.run_path(str(main_path))
    assert "main" in result
