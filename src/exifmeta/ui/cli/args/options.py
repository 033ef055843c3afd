"""Command line argument options."""

from dataclasses import dataclass
from typing import final


@final
@dataclass(slots=True)
class ExtractArgs:
    """Parsed command line arguments for one extraction run."""

    sources: tuple[str, ...]
    read_stdin: bool
    tags: tuple[str, ...]
    config: str | None
    use_buffer_limit: bool | None
    max_buffer_size: int | None
    verbose: bool
    quiet: bool


__all__ = ["ExtractArgs"]
