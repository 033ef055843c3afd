"""Where: src/exifmeta/platform/exiftool/runner.py
What: Process adapter that runs exiftool in blocking or asyncio mode.
Why: Decouple process I/O from argument building and output parsing.
"""

from __future__ import annotations

import asyncio
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass

from exifmeta.config import settings
from exifmeta.platform.logging import logger


@dataclass(frozen=True, slots=True)
class ProcessOutput:
    """Raw streams and exit status of one finished exiftool process."""

    stdout: bytes
    stderr: bytes
    exit_code: int

    @property
    def stdout_text(self) -> str:
        return self.stdout.decode("utf-8", errors="replace")

    @property
    def stderr_text(self) -> str:
        return self.stderr.decode("utf-8", errors="replace")


class ExiftoolRunner:
    """Spawn exiftool with a prepared argument list.

    ``command`` is the executable, optionally with leading arguments (for
    example an interpreter and a script path). It defaults to the configured
    ``exiftool_path``.
    """

    def __init__(
        self,
        command: str | Sequence[str] | None = None,
        *,
        chunk_size: int = settings.READ_CHUNK_SIZE,
    ) -> None:
        if command is None:
            command = settings.EXIFTOOL_PATH
        self.command: tuple[str, ...] = (
            (command,) if isinstance(command, str) else tuple(command)
        )
        if not self.command:
            raise ValueError("command must name an executable")
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self.chunk_size: int = chunk_size

    def run(self, args: Sequence[str], stdin_data: bytes | None = None) -> ProcessOutput:
        """Run exiftool to completion, blocking the calling thread.

        Args:
            args: Arguments following the executable.
            stdin_data: Bytes written to stdin before it is closed. When None,
                stdin is inherited and never written.

        Returns:
            ProcessOutput: Captured streams and exit code.

        Raises:
            OSError: If the process cannot be started.
        """
        completed = subprocess.run(
            [*self.command, *args],
            input=stdin_data,
            capture_output=True,
            check=False,
        )
        return ProcessOutput(
            stdout=completed.stdout or b"",
            stderr=completed.stderr or b"",
            exit_code=completed.returncode,
        )

    async def run_async(
        self, args: Sequence[str], stdin_data: bytes | None = None
    ) -> ProcessOutput:
        """Run exiftool without blocking the event loop.

        Output and error streams are drained chunk by chunk while stdin is fed,
        and the call resolves once the process has exited.

        Args:
            args: Arguments following the executable.
            stdin_data: Bytes written to stdin before it is closed. When None,
                stdin is inherited and never written.

        Returns:
            ProcessOutput: Captured streams and exit code.

        Raises:
            OSError: If the process cannot be started.
        """
        process = await asyncio.create_subprocess_exec(
            *self.command,
            *args,
            stdin=asyncio.subprocess.PIPE if stdin_data is not None else None,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )

        stdout = bytearray()
        stderr = bytearray()
        assert process.stdout is not None and process.stderr is not None

        pending = [
            self._drain(process.stdout, stdout),
            self._drain(process.stderr, stderr),
        ]
        if stdin_data is not None:
            assert process.stdin is not None
            pending.append(self._feed(process.stdin, stdin_data))

        try:
            _ = await asyncio.gather(*pending)
            exit_code = await process.wait()
        except asyncio.CancelledError:
            if process.returncode is None:
                process.kill()
                _ = await process.wait()
            raise

        return ProcessOutput(stdout=bytes(stdout), stderr=bytes(stderr), exit_code=exit_code)

    async def _drain(self, stream: asyncio.StreamReader, sink: bytearray) -> None:
        while True:
            chunk = await stream.read(self.chunk_size)
            if not chunk:
                return
            sink.extend(chunk)

    @staticmethod
    async def _feed(stream: asyncio.StreamWriter, data: bytes) -> None:
        try:
            stream.write(data)
            await stream.drain()
        except (BrokenPipeError, ConnectionResetError) as exc:
            # exiftool may exit before consuming the whole buffer
            logger.debug("exiftool closed stdin early: %s", exc)
        finally:
            stream.close()
            try:
                await stream.wait_closed()
            except (BrokenPipeError, ConnectionResetError) as exc:
                logger.debug("exiftool closed stdin early: %s", exc)


DEFAULT_RUNNER = ExiftoolRunner()


__all__ = ["DEFAULT_RUNNER", "ExiftoolRunner", "ProcessOutput"]
