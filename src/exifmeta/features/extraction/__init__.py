"""Extraction feature public API."""

from .domain import (
    ErrorKind,
    ExiftoolFailedError,
    ExtractRequest,
    ExtractionError,
    OutputError,
    Record,
    Result,
    Source,
    SourceKind,
    SourceTypeError,
    UnparsableOutputError,
    error_kind,
)
from .usecases import (
    Callback,
    ProcessRunnerPort,
    build_arguments,
    extract,
    extract_sync,
    metadata,
    metadata_sync,
    resolve_output,
)

__all__ = [
    "Callback",
    "ErrorKind",
    "ExiftoolFailedError",
    "ExtractRequest",
    "ExtractionError",
    "OutputError",
    "ProcessRunnerPort",
    "Record",
    "Result",
    "Source",
    "SourceKind",
    "SourceTypeError",
    "UnparsableOutputError",
    "build_arguments",
    "error_kind",
    "extract",
    "extract_sync",
    "metadata",
    "metadata_sync",
    "resolve_output",
]
