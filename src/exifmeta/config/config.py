"""Configuration management for exifmeta."""
import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from exifmeta.config.file_ops import write_text_file
from exifmeta.config.paths import default_config_path
from exifmeta.platform.logging import logger

EXIFTOOL_PATH_DEFAULT = "exiftool"
USE_BUFFER_LIMIT_DEFAULT = True
MAX_BUFFER_SIZE_DEFAULT = 10000


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Runtime configuration for the ExifTool binding."""

    # Executable name or absolute path of the exiftool binary
    exiftool_path: str = EXIFTOOL_PATH_DEFAULT

    # Default buffer handling for in-memory sources
    use_buffer_limit: bool = USE_BUFFER_LIMIT_DEFAULT
    max_buffer_size: int = MAX_BUFFER_SIZE_DEFAULT

    # Log file path
    log_file: Path | None = _path_field()

    # Singleton instance
    _instance: ClassVar["Config | None"] = None

    def __post_init__(self) -> None:
        """Normalize path fields and reject values the runner cannot use.

        Raises:
            ValueError: If ``exiftool_path`` is empty or ``max_buffer_size``
                is not a non-negative integer.
        """
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value else None)

        if not isinstance(self.exiftool_path, str) or not self.exiftool_path.strip():
            raise ValueError("exiftool_path must be a non-empty string")
        if (
            isinstance(self.max_buffer_size, bool)
            or not isinstance(self.max_buffer_size, int)
            or self.max_buffer_size < 0
        ):
            raise ValueError(
                f"max_buffer_size must be a non-negative integer, got {self.max_buffer_size!r}"
            )
        self.use_buffer_limit = bool(self.use_buffer_limit)

    def save(self) -> Path:
        """Save configuration to the default config location.

        Returns:
            Path: File the configuration was written to.
        """
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        target = default_config_path()
        try:
            write_text_file(target, self._render_toml(config_dict))
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        logger.info("Configuration saved to %s", target)
        return target

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# exifmeta configuration file")
        lines.append("")

        lines.append("# ExifTool executable (name on PATH or absolute path)")
        lines.append(f"exiftool_path = {self._format_toml_value(config['exiftool_path'])}")
        lines.append("")

        lines.append("# Truncate in-memory sources before piping them to exiftool")
        lines.append(
            f"use_buffer_limit = {self._format_toml_value(config['use_buffer_limit'])}"
        )
        lines.append("# Number of bytes piped when the limit is active")
        lines.append(f"max_buffer_size = {self._format_toml_value(config['max_buffer_size'])}")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/exifmeta.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a scalar value for TOML serialization."""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file, falling back to defaults.

        Returns:
            Config: Loaded configuration object.

        Raises:
            tomllib.TOMLDecodeError: If the config file is not valid TOML.
            ValueError: If a configured value is out of range.
        """
        if cls._instance is not None:
            return cls._instance

        config_file = default_config_path()

        if not config_file.exists():
            logger.debug("No configuration at %s; using defaults", config_file)
            instance = cls()
        else:
            try:
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)
                known = {f.name for f in fields(cls)}
                unknown = sorted(set(config_dict) - known)
                if unknown:
                    logger.warning(
                        "Ignoring unknown configuration keys in %s: %s",
                        config_file,
                        ", ".join(unknown),
                    )
                instance = cls(**{k: v for k, v in config_dict.items() if k in known})
            except (tomllib.TOMLDecodeError, ValueError, TypeError) as e:
                logger.error("Failed to load configuration from %s: %s", config_file, e)
                raise
            logger.debug("Configuration loaded from %s", config_file)

        cls._instance = instance
        return instance


# Global configuration instance
config = Config.load()
