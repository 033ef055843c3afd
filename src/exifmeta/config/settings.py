"""Where: src/exifmeta/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated constants to feature layers without file I/O.
"""

from __future__ import annotations

from exifmeta.config.config import (
    EXIFTOOL_PATH_DEFAULT,
    MAX_BUFFER_SIZE_DEFAULT,
    config as app_config,
)

# Process invocation ----------------------------------------------------------

EXIFTOOL_PATH: str = app_config.exiftool_path.strip() or EXIFTOOL_PATH_DEFAULT

# Flag selecting JSON output, and the source placeholder meaning "read stdin".
JSON_OUTPUT_FLAG: str = "-j"
STDIN_PLACEHOLDER: str = "-"
CONFIG_FLAG: str = "-config"

# Buffer sources --------------------------------------------------------------

USE_BUFFER_LIMIT: bool = bool(getattr(app_config, "use_buffer_limit", True))

_max_buffer_size = getattr(app_config, "max_buffer_size", MAX_BUFFER_SIZE_DEFAULT)
MAX_BUFFER_SIZE: int = (
    _max_buffer_size
    if isinstance(_max_buffer_size, int) and _max_buffer_size >= 0
    else MAX_BUFFER_SIZE_DEFAULT
)

# Size of each read from the child's stdout/stderr pipes in the async runner.
READ_CHUNK_SIZE: int = 64 * 1024


__all__ = [
    "CONFIG_FLAG",
    "EXIFTOOL_PATH",
    "JSON_OUTPUT_FLAG",
    "MAX_BUFFER_SIZE",
    "READ_CHUNK_SIZE",
    "STDIN_PLACEHOLDER",
    "USE_BUFFER_LIMIT",
]
