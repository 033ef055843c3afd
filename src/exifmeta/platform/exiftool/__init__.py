"""ExifTool process infrastructure.

This package owns spawning the external ``exiftool`` binary and collecting
its raw output. It knows nothing about argument meaning or JSON parsing.
"""

from .runner import DEFAULT_RUNNER, ExiftoolRunner, ProcessOutput

__all__ = ["DEFAULT_RUNNER", "ExiftoolRunner", "ProcessOutput"]
