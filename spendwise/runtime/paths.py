"""Centralized path management for spendwise.

All configuration paths hang off a single project root so that the CLI,
the server and tests agree on where settings live.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path


def _get_project_root() -> Path:
    """Determine the project root directory (SPENDWISE_ROOT or the current directory)."""
    env_root = os.environ.get("SPENDWISE_ROOT", "").strip()
    if env_root:
        return Path(env_root).expanduser()
    return Path.cwd()


@dataclass
class ProjectPaths:
    """Container for project-related paths."""

    root: Path = field(default_factory=_get_project_root)

    def __post_init__(self) -> None:
        self.root = self.root.resolve()

    # --- Configuration paths ---
    @property
    def config(self) -> Path:
        """Configuration directory (config/)."""
        return self.root / "config"

    @property
    def settings(self) -> Path:
        """Parser/OCR/keyword settings TOML file."""
        return self.config / "spendwise.toml"


_paths: ProjectPaths | None = None


def get_paths() -> ProjectPaths:
    """Get the global ProjectPaths instance."""
    global _paths
    if _paths is None:
        _paths = ProjectPaths()
    return _paths


def reset_paths() -> None:
    """Forget the cached ProjectPaths so SPENDWISE_ROOT is re-read. Useful for testing."""
    global _paths
    _paths = None
