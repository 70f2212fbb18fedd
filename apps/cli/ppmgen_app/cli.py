"""CLI entrypoint: render the gradient and write it as a PPM file."""

from __future__ import annotations

import argparse

from ppmgen_core import DEFAULT_CONFIG, RenderConfig, configure_logging, get_logger, install_crash_hooks
from ppmgen_renderer import render_gradient, write_ppm


def run(cfg: RenderConfig = DEFAULT_CONFIG) -> int:
    logger = get_logger()
    frame = render_gradient(cfg.width, cfg.height)
    logger.info(
        "rendered %dx%d gradient",
        frame.width,
        frame.height,
        extra={"event": "gradient_rendered"},
    )

    try:
        written = write_ppm(cfg.output_path, frame.pixels, frame.width, frame.height)
    except OSError as exc:
        logger.error(
            f"failed to write {cfg.output_path}: {exc}",
            extra={"event": "write_failed"},
        )
        return 1

    logger.info(
        "wrote %s (%d bytes)",
        cfg.output_path,
        written,
        extra={"event": "image_written"},
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog="ppmgen",
        description=f"Write a {DEFAULT_CONFIG.width}x{DEFAULT_CONFIG.height} red/green gradient to {DEFAULT_CONFIG.output_path}",
    )


def main(argv: list[str] | None = None) -> int:
    build_parser().parse_args(argv)
    configure_logging()
    install_crash_hooks()
    return run()


if __name__ == "__main__":
    raise SystemExit(main())
