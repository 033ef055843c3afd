"""Summary: Validated request describing one extraction call.
Why: Reject unusable sources and options before any process is spawned."""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, TypeAlias

from exifmeta.config import settings

from .errors import SourceTypeError

Buffer: TypeAlias = bytes | bytearray | memoryview
PathArg: TypeAlias = str | os.PathLike[str]
Source: TypeAlias = PathArg | Sequence[PathArg] | Buffer

Record: TypeAlias = dict[str, Any]
Result: TypeAlias = Record | list[Any]


class SourceKind(StrEnum):
    """Shape of a request source."""

    BUFFER = "buffer"
    PATH = "path"
    PATHS = "paths"


def _is_path_like(value: object) -> bool:
    return isinstance(value, (str, os.PathLike))


def classify_source(source: object) -> SourceKind:
    """Return the shape of ``source``.

    Raises:
        SourceTypeError: If ``source`` is falsy or has no supported shape.
    """
    if not source:
        raise SourceTypeError()
    if isinstance(source, (bytes, bytearray, memoryview)):
        return SourceKind.BUFFER
    if _is_path_like(source):
        return SourceKind.PATH
    if isinstance(source, Sequence) and all(_is_path_like(item) for item in source):
        return SourceKind.PATHS
    raise SourceTypeError()


def _normalize_tags(tags: Iterable[str] | None) -> tuple[str, ...]:
    if tags is None:
        return ()
    if isinstance(tags, str):
        raise TypeError("tags must be a sequence of tag names, not a single string")
    normalized = tuple(tags)
    for tag in normalized:
        if not isinstance(tag, str):
            raise TypeError(f"tag names must be strings, got {type(tag).__name__}")
    return normalized


@dataclass(frozen=True, slots=True)
class ExtractRequest:
    """One extraction call: what to read and how to invoke exiftool.

    Attributes:
        source: A path, an ordered sequence of paths, or a byte buffer piped
            to exiftool's stdin.
        tags: Tag names to request; a leading ``-`` excludes the tag instead.
        use_buffer_limit: Truncate buffer sources to ``max_buffer_size``.
        max_buffer_size: Number of bytes piped when the limit is active.
        config: Custom exiftool config file passed with ``-config``.
        kind: Shape of ``source``, derived at construction.
    """

    source: Source
    tags: tuple[str, ...] = ()
    use_buffer_limit: bool = field(default_factory=lambda: settings.USE_BUFFER_LIMIT)
    max_buffer_size: int = field(default_factory=lambda: settings.MAX_BUFFER_SIZE)
    config: str | None = None
    kind: SourceKind = field(init=False)

    def __post_init__(self) -> None:
        kind = classify_source(self.source)
        object.__setattr__(self, "kind", kind)

        if kind is SourceKind.BUFFER:
            object.__setattr__(self, "source", bytes(self.source))  # pyright: ignore[reportArgumentType]
        elif kind is SourceKind.PATH:
            object.__setattr__(self, "source", os.fspath(self.source))  # pyright: ignore[reportArgumentType]
        else:
            paths = tuple(os.fspath(item) for item in self.source)  # pyright: ignore[reportGeneralTypeIssues]
            object.__setattr__(self, "source", paths)

        object.__setattr__(self, "tags", _normalize_tags(self.tags))

        if (
            isinstance(self.max_buffer_size, bool)
            or not isinstance(self.max_buffer_size, int)
            or self.max_buffer_size < 0
        ):
            raise ValueError(
                f"max_buffer_size must be a non-negative integer, got {self.max_buffer_size!r}"
            )
        object.__setattr__(self, "use_buffer_limit", bool(self.use_buffer_limit))

        if self.config is not None:
            object.__setattr__(self, "config", os.fspath(self.config))

    @property
    def stdin_data(self) -> bytes | None:
        """Bytes to pipe into exiftool, or None when stdin is left alone."""
        if self.kind is not SourceKind.BUFFER:
            return None
        assert isinstance(self.source, bytes)
        if self.use_buffer_limit:
            return self.source[: self.max_buffer_size]
        return self.source

    @property
    def subjects(self) -> str | tuple[str, ...] | int:
        """Log-friendly view of the source: path(s), or buffer length."""
        if self.kind is SourceKind.BUFFER:
            assert isinstance(self.source, bytes)
            return len(self.source)
        return self.source  # pyright: ignore[reportReturnType]


__all__ = [
    "Buffer",
    "ExtractRequest",
    "PathArg",
    "Record",
    "Result",
    "Source",
    "SourceKind",
    "classify_source",
]
