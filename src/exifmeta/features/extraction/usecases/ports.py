"""Summary: Ports defining extraction use case dependencies.
Why: Decouple use cases from the concrete process adapter so tests and swaps stay simple."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from exifmeta.platform.exiftool import ProcessOutput


@runtime_checkable
class ProcessRunnerPort(Protocol):
    """Port for running exiftool with a prepared argument list."""

    def run(self, args: Sequence[str], stdin_data: bytes | None = None) -> ProcessOutput:
        """Run to completion, blocking the caller."""
        ...

    async def run_async(
        self, args: Sequence[str], stdin_data: bytes | None = None
    ) -> ProcessOutput:
        """Run without blocking the event loop."""
        ...


__all__ = ["ProcessRunnerPort"]
