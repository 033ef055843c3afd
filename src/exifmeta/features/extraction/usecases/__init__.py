"""Summary: Use cases for running exiftool and resolving its output.
Why: Group the pure helpers with the entry points that compose them."""

from .arguments import build_arguments, prepare_tags
from .extract import Callback, extract, extract_sync, metadata, metadata_sync
from .parsing import record_count, resolve_output, unwrap_single
from .ports import ProcessRunnerPort

__all__ = [
    "Callback",
    "ProcessRunnerPort",
    "build_arguments",
    "extract",
    "extract_sync",
    "metadata",
    "metadata_sync",
    "prepare_tags",
    "record_count",
    "resolve_output",
    "unwrap_single",
]
