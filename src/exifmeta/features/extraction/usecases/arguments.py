"""Summary: Build exiftool's argument list from an extraction request.
Why: Keep argv construction pure so async and blocking calls cannot drift."""

from __future__ import annotations

from collections.abc import Iterable

from exifmeta.config import settings

from ..domain.request import ExtractRequest, SourceKind


def prepare_tags(tags: Iterable[str] | None) -> list[str]:
    """Turn tag names into exiftool flags.

    Every name gains one leading ``-``; an already-prefixed exclusion such as
    ``-ThumbnailImage`` therefore becomes ``--ThumbnailImage``.
    """
    if not tags:
        return []
    return [f"-{tag}" for tag in tags]


def build_arguments(request: ExtractRequest) -> list[str]:
    """Return the arguments passed to exiftool for ``request``.

    Order: ``-config <path>`` (when set), tag flags, ``-j``, then either the
    stdin placeholder or the source path(s).
    """
    args = prepare_tags(request.tags)
    args.append(settings.JSON_OUTPUT_FLAG)

    if request.kind is SourceKind.BUFFER:
        args.append(settings.STDIN_PLACEHOLDER)
    elif request.kind is SourceKind.PATH:
        assert isinstance(request.source, str)
        args.append(request.source)
    else:
        assert isinstance(request.source, tuple)
        args.extend(request.source)

    if request.config is not None:
        args[:0] = [settings.CONFIG_FLAG, request.config]

    return args


__all__ = ["build_arguments", "prepare_tags"]
