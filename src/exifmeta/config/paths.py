"""Shared path utilities for configuration locations.

This module centralizes how the package discovers its config file.

Policy (portable by default):
- Config: the file named by ``EXIFMETA_CONFIG`` when set, otherwise
  ``<repo_root>/config/exifmeta.toml``. The file name is namespaced so a host
  project's own ``config/config.toml`` is never read.
"""

from __future__ import annotations

import os
from pathlib import Path
from collections.abc import Mapping
from typing import Callable, Final


_ENV_CONFIG_FILE: Final[str] = "EXIFMETA_CONFIG"
CONFIG_FILE_NAME: Final[str] = "exifmeta.toml"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a configuration path honoring explicit and environment overrides."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = mapping.get(env_var) or ""
        candidate = candidate.strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    default_path = default_factory()
    return default_path.expanduser().resolve()


def _detect_repo_root(start: Path | None = None) -> Path:
    """Detect the repository root by walking up parents.

    Looks for markers like ``pyproject.toml`` or ``.git``.

    Args:
        start: Starting path. Defaults to this file's directory.

    Returns:
        Path: Detected repository root, or the current working directory
        if no marker is found.
    """
    here = (start or Path(__file__).resolve()).parent
    for p in [here, *here.parents]:
        if (p / "pyproject.toml").exists() or (p / ".git").exists():
            return p
    return Path.cwd()


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the path to the package's TOML config file.

    Portable layout: ``<repo_root>/config/exifmeta.toml``. The
    ``EXIFMETA_CONFIG`` environment variable takes precedence.
    """
    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=_ENV_CONFIG_FILE,
        default_factory=lambda: _detect_repo_root() / "config" / CONFIG_FILE_NAME,
    )


__all__ = [
    "CONFIG_FILE_NAME",
    "default_config_path",
    "resolve_overridable_path",
]
