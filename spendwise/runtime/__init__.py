"""Runtime infrastructure for spendwise.

This package provides process/runtime services including:
- Logging setup via get_logger()
- Path resolution via get_paths(), ProjectPaths
- Settings loading via load_settings()

Usage:
    from spendwise.runtime import get_logger, get_paths, load_settings

    logger = get_logger(__name__)
    settings = load_settings()
    print(settings.default_currency)
"""

from spendwise.runtime.logging import (
    DEFAULT_LOG_LEVEL,
    LOG_FORMAT,
    LOG_FORMAT_DEBUG,
    configure_logging,
    get_logger,
    set_log_level,
)
from spendwise.runtime.paths import ProjectPaths, get_paths, reset_paths
from spendwise.runtime.settings import Settings, build_settings, load_settings

__all__ = [
    # Logging
    "get_logger",
    "configure_logging",
    "set_log_level",
    "DEFAULT_LOG_LEVEL",
    "LOG_FORMAT",
    "LOG_FORMAT_DEBUG",
    # Paths
    "get_paths",
    "reset_paths",
    "ProjectPaths",
    # Settings
    "Settings",
    "build_settings",
    "load_settings",
]
