"""exifmeta: asyncio and blocking bindings for the ExifTool metadata extractor.

Quick start:
    >>> from exifmeta import metadata, metadata_sync
    >>> record = metadata_sync("photo.jpg", tags=["Model", "-ThumbnailImage"])
    >>> records = await metadata(["a.jpg", "b.jpg"])
"""

__version__ = "0.1.0"

from exifmeta.features.extraction import (
    ErrorKind,
    ExiftoolFailedError,
    ExtractRequest,
    ExtractionError,
    SourceTypeError,
    UnparsableOutputError,
    extract,
    extract_sync,
    metadata,
    metadata_sync,
)
from exifmeta.platform.exiftool import ExiftoolRunner, ProcessOutput

__all__ = [
    "__version__",
    "ErrorKind",
    "ExiftoolFailedError",
    "ExiftoolRunner",
    "ExtractRequest",
    "ExtractionError",
    "ProcessOutput",
    "SourceTypeError",
    "UnparsableOutputError",
    "extract",
    "extract_sync",
    "metadata",
    "metadata_sync",
]
