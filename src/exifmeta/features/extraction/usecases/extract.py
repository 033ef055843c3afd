"""Metadata extraction entry points.

Where: src/exifmeta/features/extraction/usecases/extract.py
What: Async and blocking calls that run exiftool for one request.
Why: Both call styles share argument building and output parsing; only the
     process runner call differs.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable
from typing import Any, TypeAlias

from exifmeta.platform.exiftool import DEFAULT_RUNNER
from exifmeta.platform.logging import logger

from ..domain.errors import OutputError
from ..domain.request import ExtractRequest, Result, Source
from .arguments import build_arguments
from .parsing import record_count, resolve_output
from .ports import ProcessRunnerPort

Callback: TypeAlias = Callable[[BaseException | None, Any], object]


def _try_callback(
    callback: Callback | None, error: BaseException | None, result: Any = None
) -> None:
    if callback is not None:
        _ = callback(error, result)


def _notify_failure(callback: Callback | None, error: BaseException) -> None:
    # The caller re-raises ``error``; an exception from the callback is only logged.
    try:
        _try_callback(callback, error)
    except Exception:
        logger.exception("Extraction callback raised while reporting %s", type(error).__name__)


def _make_request(
    source: Source,
    tags: Iterable[str] | None,
    use_buffer_limit: bool | None,
    max_buffer_size: int | None,
    config: str | None,
) -> ExtractRequest:
    options: dict[str, Any] = {"tags": tags, "config": config}
    if use_buffer_limit is not None:
        options["use_buffer_limit"] = use_buffer_limit
    if max_buffer_size is not None:
        options["max_buffer_size"] = max_buffer_size
    return ExtractRequest(source, **options)


def _log_start(request: ExtractRequest, args: list[str], mode: str) -> float:
    logger.debug(
        "Running exiftool %s",
        " ".join(args),
        extra={
            "extraction_event": "extraction.start",
            "mode": mode,
            "subjects": request.subjects,
            "argument_count": len(args),
        },
    )
    return time.perf_counter()


def _log_complete(request: ExtractRequest, result: Result, mode: str, started: float) -> None:
    logger.info(
        "Extracted %d record(s)",
        record_count(result),
        extra={
            "extraction_event": "extraction.complete",
            "mode": mode,
            "subjects": request.subjects,
            "record_count": record_count(result),
            "duration_ms": (time.perf_counter() - started) * 1000,
        },
    )


def _log_failure(request: ExtractRequest, error: Exception, mode: str, started: float) -> None:
    logger.error(
        "exiftool extraction failed: %s",
        error,
        extra={
            "extraction_event": "extraction.error",
            "mode": mode,
            "subjects": request.subjects,
            "error_message": str(error),
            "exit_code": error.exit_code if isinstance(error, OutputError) else None,
            "duration_ms": (time.perf_counter() - started) * 1000,
        },
    )


async def extract(
    request: ExtractRequest,
    *,
    callback: Callback | None = None,
    runner: ProcessRunnerPort | None = None,
) -> Result:
    """Extract metadata for ``request`` without blocking the event loop.

    Args:
        request: Validated extraction request.
        callback: Optional ``callback(error, result)`` invoked once, with the
            result on success or the error on failure, before the coroutine
            returns or raises.
        runner: Process runner; defaults to the configured exiftool.

    Returns:
        Result: The single record when one subject was reported, otherwise
        the list of records.

    Raises:
        OSError: If exiftool cannot be started.
        ExiftoolFailedError: If output is not JSON and stderr is non-empty.
        UnparsableOutputError: If output is not JSON and stderr is empty.
    """
    active_runner = runner or DEFAULT_RUNNER
    args = build_arguments(request)
    started = _log_start(request, args, "async")

    try:
        output = await active_runner.run_async(args, request.stdin_data)
        result = resolve_output(output)
    except (OSError, OutputError) as error:
        _log_failure(request, error, "async", started)
        _notify_failure(callback, error)
        raise

    _log_complete(request, result, "async", started)
    _try_callback(callback, None, result)
    return result


def extract_sync(request: ExtractRequest, *, runner: ProcessRunnerPort | None = None) -> Result:
    """Blocking counterpart of :func:`extract`.

    The ``-config`` pair is part of the argument list here exactly as in the
    async form.
    """
    active_runner = runner or DEFAULT_RUNNER
    args = build_arguments(request)
    started = _log_start(request, args, "sync")

    try:
        output = active_runner.run(args, request.stdin_data)
        result = resolve_output(output)
    except (OSError, OutputError) as error:
        _log_failure(request, error, "sync", started)
        raise

    _log_complete(request, result, "sync", started)
    return result


async def metadata(
    source: Source,
    *,
    tags: Iterable[str] | None = None,
    use_buffer_limit: bool | None = None,
    max_buffer_size: int | None = None,
    config: str | None = None,
    callback: Callback | None = None,
    runner: ProcessRunnerPort | None = None,
) -> Result:
    """Return the metadata of ``source``, optionally also through ``callback``.

    Args:
        source: A path, a sequence of paths, or a byte buffer.
        tags: Tag names to whitelist, or to blacklist with a leading ``-``.
        use_buffer_limit: Truncate buffer sources; defaults to the configured value.
        max_buffer_size: Bytes piped when truncating; defaults to the configured value.
        config: Custom exiftool config file.
        callback: Optional ``callback(error, result)``.
        runner: Process runner; defaults to the configured exiftool.

    Raises:
        SourceTypeError: If ``source`` is missing or has an unsupported shape.
            The callback receives the same error first.
    """
    try:
        request = _make_request(source, tags, use_buffer_limit, max_buffer_size, config)
    except (TypeError, ValueError) as error:
        logger.error("Invalid extraction request: %s", error)
        _notify_failure(callback, error)
        raise

    return await extract(request, callback=callback, runner=runner)


def metadata_sync(
    source: Source,
    *,
    tags: Iterable[str] | None = None,
    use_buffer_limit: bool | None = None,
    max_buffer_size: int | None = None,
    config: str | None = None,
    runner: ProcessRunnerPort | None = None,
) -> Result:
    """Blocking counterpart of :func:`metadata`."""
    request = _make_request(source, tags, use_buffer_limit, max_buffer_size, config)
    return extract_sync(request, runner=runner)


__all__ = ["Callback", "extract", "extract_sync", "metadata", "metadata_sync"]
