"""Summary: Error hierarchy raised by metadata extraction.
Why: Give callers one base class plus stream and exit-code details for inspection."""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    """Tag identifying which stage of an extraction failed."""

    INVALID_REQUEST = "invalid_request"
    LAUNCH_FAILED = "launch_failed"
    TOOL_FAILED = "tool_failed"
    UNPARSABLE_OUTPUT = "unparsable_output"


class ExtractionError(Exception):
    """Base class for errors raised by this package."""

    kind: ErrorKind


class SourceTypeError(ExtractionError, TypeError):
    """The request source is missing or not a path, path sequence or buffer."""

    kind = ErrorKind.INVALID_REQUEST

    def __init__(self, message: str = '"source" must be a string, [string] or Buffer') -> None:
        super().__init__(message)


class OutputError(ExtractionError):
    """exiftool ran but its stdout could not be parsed as JSON."""

    def __init__(self, message: str, *, exit_code: int, stdout: str, stderr: str) -> None:
        super().__init__(message)
        self.exit_code: int = exit_code
        self.stdout: str = stdout
        self.stderr: str = stderr


class ExiftoolFailedError(OutputError):
    """Unparseable output accompanied by diagnostics on stderr."""

    kind = ErrorKind.TOOL_FAILED

    def __init__(self, *, exit_code: int, stdout: str, stderr: str) -> None:
        super().__init__(
            f"Exiftool failed with exit code {exit_code}:\n {stderr}",
            exit_code=exit_code,
            stdout=stdout,
            stderr=stderr,
        )


class UnparsableOutputError(OutputError):
    """Unparseable output with an empty stderr."""

    kind = ErrorKind.UNPARSABLE_OUTPUT

    def __init__(self, *, exit_code: int, stdout: str, stderr: str) -> None:
        super().__init__(
            "Could not parse exiftool output!",
            exit_code=exit_code,
            stdout=stdout,
            stderr=stderr,
        )


def error_kind(error: BaseException) -> ErrorKind | None:
    """Classify any failure surfaced by an extraction call.

    Launch failures are plain ``OSError`` instances from the runtime and are
    reported as ``LAUNCH_FAILED``.
    """
    if isinstance(error, ExtractionError):
        return error.kind
    if isinstance(error, OSError):
        return ErrorKind.LAUNCH_FAILED
    return None


__all__ = [
    "ErrorKind",
    "ExiftoolFailedError",
    "ExtractionError",
    "OutputError",
    "SourceTypeError",
    "UnparsableOutputError",
    "error_kind",
]
