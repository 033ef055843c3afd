"""Summary: Turn captured exiftool output into records or a structured error.
Why: Share one resolution rule between the async and blocking entry points."""

from __future__ import annotations

import json
from typing import Any

from exifmeta.platform.exiftool import ProcessOutput
from exifmeta.platform.logging import logger

from ..domain.errors import ExiftoolFailedError, OutputError, UnparsableOutputError
from ..domain.request import Result


def unwrap_single(parsed: Any) -> Any:
    """Return the only record of a one-element array, else ``parsed`` unchanged."""
    if isinstance(parsed, list) and len(parsed) == 1:
        return parsed[0]
    return parsed


def resolve_output(output: ProcessOutput) -> Result:
    """Parse exiftool's stdout.

    Parseable output is a success whatever the exit code. Otherwise the error
    raised depends on whether exiftool wrote diagnostics to stderr.

    Raises:
        ExiftoolFailedError: stdout is not JSON and stderr is non-empty.
        UnparsableOutputError: stdout is not JSON and stderr is empty.
    """
    try:
        parsed = json.loads(output.stdout)
    except ValueError:
        stdout = output.stdout_text
        stderr = output.stderr_text
        error: OutputError
        if stderr:
            error = ExiftoolFailedError(
                exit_code=output.exit_code, stdout=stdout, stderr=stderr
            )
        else:
            error = UnparsableOutputError(
                exit_code=output.exit_code, stdout=stdout, stderr=stderr
            )
        raise error from None

    if output.exit_code != 0:
        logger.warning(
            "exiftool exited with code %s but produced valid JSON: %s",
            output.exit_code,
            output.stderr_text.strip() or "<no diagnostics>",
        )
    return unwrap_single(parsed)


def record_count(result: Result) -> int:
    """Number of records in a resolved result."""
    if isinstance(result, list):
        return len(result)
    return 1


__all__ = ["record_count", "resolve_output", "unwrap_single"]
