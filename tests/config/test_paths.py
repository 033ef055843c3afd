"""Tests for configuration path resolution helpers."""

from pathlib import Path

import pytest

from exifmeta.config.paths import (
    CONFIG_FILE_NAME,
    default_config_path,
    resolve_overridable_path,
)


def test_default_config_path(portable_repo_root: Path) -> None:
    assert default_config_path() == portable_repo_root / "config" / "exifmeta.toml"


def test_config_path_env_override(
    portable_repo_root: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    override = portable_repo_root / "elsewhere" / "exifmeta.toml"
    monkeypatch.setenv("EXIFMETA_CONFIG", str(override))

    assert default_config_path() == override


def test_blank_env_value_falls_back_to_default(portable_repo_root: Path) -> None:
    resolved = default_config_path(env={"EXIFMETA_CONFIG": "   "})

    assert resolved == portable_repo_root / "config" / "exifmeta.toml"


def test_explicit_path_wins(tmp_path: Path) -> None:
    resolved = resolve_overridable_path(
        explicit_path=tmp_path / "explicit.toml",
        env={"VAR": str(tmp_path / "env.toml")},
        env_var="VAR",
        default_factory=lambda: tmp_path / "default.toml",
    )

    assert resolved == (tmp_path / "explicit.toml").resolve()


def test_config_file_name_is_namespaced(portable_repo_root: Path) -> None:
    """A host project's own config/config.toml must not be picked up."""

    (portable_repo_root / "config").mkdir()
    _ = (portable_repo_root / "config" / "config.toml").write_text("max_buffer_size = 1\n")

    resolved = default_config_path()

    assert CONFIG_FILE_NAME == "exifmeta.toml"
    assert resolved.name == CONFIG_FILE_NAME
    assert not resolved.exists()
