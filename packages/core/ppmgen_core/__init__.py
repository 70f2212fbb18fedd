"""Core services: fixed render settings and logging."""

from .config import DEFAULT_CONFIG, RenderConfig
from .logging_setup import JsonFormatter, configure_logging, get_logger, install_crash_hooks

__all__ = [
    "DEFAULT_CONFIG",
    "JsonFormatter",
    "RenderConfig",
    "configure_logging",
    "get_logger",
    "install_crash_hooks",
]
