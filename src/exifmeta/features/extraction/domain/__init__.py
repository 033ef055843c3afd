"""Summary: Domain types for metadata extraction.
Why: Expose requests and errors without pulling in process execution."""

from .errors import (
    ErrorKind,
    ExiftoolFailedError,
    ExtractionError,
    OutputError,
    SourceTypeError,
    UnparsableOutputError,
    error_kind,
)
from .request import ExtractRequest, Record, Result, Source, SourceKind, classify_source

__all__ = [
    "ErrorKind",
    "ExiftoolFailedError",
    "ExtractRequest",
    "ExtractionError",
    "OutputError",
    "Record",
    "Result",
    "Source",
    "SourceKind",
    "SourceTypeError",
    "UnparsableOutputError",
    "classify_source",
    "error_kind",
]
