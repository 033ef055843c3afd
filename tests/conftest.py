"""Shared pytest fixtures: an in-memory runner and a fake exiftool script."""

from __future__ import annotations

import json
import sys
import textwrap
from collections.abc import Callable, Sequence
from pathlib import Path

import pytest

from exifmeta.platform.exiftool import ExiftoolRunner, ProcessOutput


class FakeRunner:
    """Runner double that records calls and replays a canned outcome."""

    def __init__(self, outcome: ProcessOutput | BaseException) -> None:
        self.outcome: ProcessOutput | BaseException = outcome
        self.calls: list[tuple[list[str], bytes | None]] = []
        self.async_calls: list[tuple[list[str], bytes | None]] = []

    def _replay(self) -> ProcessOutput:
        if isinstance(self.outcome, BaseException):
            raise self.outcome
        return self.outcome

    def run(self, args: Sequence[str], stdin_data: bytes | None = None) -> ProcessOutput:
        self.calls.append((list(args), stdin_data))
        return self._replay()

    async def run_async(
        self, args: Sequence[str], stdin_data: bytes | None = None
    ) -> ProcessOutput:
        self.async_calls.append((list(args), stdin_data))
        return self._replay()


def json_output(records: object, *, exit_code: int = 0, stderr: bytes = b"") -> ProcessOutput:
    """Build a ProcessOutput whose stdout is ``records`` serialized as JSON."""
    return ProcessOutput(
        stdout=json.dumps(records).encode("utf-8"),
        stderr=stderr,
        exit_code=exit_code,
    )


_FAKE_EXIFTOOL = textwrap.dedent(
    """
    import json
    import os
    import sys

    args = sys.argv[1:]
    mode = os.environ.get("FAKE_EXIFTOOL_MODE", "ok")
    if mode == "early":
        # answer without consuming stdin, then exit
        sys.stdout.write(json.dumps([{"SourceFile": "-", "StdinBytes": 0}]))
        sys.stdout.flush()
        os._exit(0)
    data = sys.stdin.buffer.read() if "-" in args else b""

    log_path = os.environ.get("FAKE_EXIFTOOL_LOG")
    if log_path:
        with open(log_path, "w", encoding="utf-8") as fh:
            json.dump({"args": args, "stdin_len": len(data)}, fh)

    if mode == "garbage":
        sys.stdout.write("this is not json")
        sys.stderr.write("Error: File not found - missing.jpg")
        sys.exit(1)
    if mode == "silent":
        sys.stdout.write("this is not json")
        sys.exit(0)

    subjects = args[args.index("-j") + 1:]
    records = []
    for subject in subjects:
        if subject == "-":
            records.append({"SourceFile": "-", "StdinBytes": len(data)})
        else:
            records.append({"SourceFile": subject, "Model": "Fake Camera"})
    sys.stdout.write(json.dumps(records))
    if mode == "warn":
        sys.stderr.write("Warning: minor issue")
        sys.exit(1)
    """
)


@pytest.fixture
def fake_exiftool(tmp_path: Path) -> Path:
    """Write a stand-in exiftool script that echoes its inputs as records."""

    script = tmp_path / "fake_exiftool.py"
    _ = script.write_text(_FAKE_EXIFTOOL, encoding="utf-8")
    return script


@pytest.fixture
def fake_runner(fake_exiftool: Path) -> ExiftoolRunner:
    """Real runner pointed at the fake exiftool script."""

    return ExiftoolRunner([sys.executable, str(fake_exiftool)], chunk_size=16)


@pytest.fixture
def invocation_log(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Ask the fake exiftool to record its argv and stdin size."""

    log_path = tmp_path / "invocation.json"
    monkeypatch.setenv("FAKE_EXIFTOOL_LOG", str(log_path))
    return log_path


@pytest.fixture
def make_runner() -> type[FakeRunner]:
    """Factory for runner doubles: ``make_runner(outcome)``."""

    return FakeRunner


@pytest.fixture
def make_output() -> Callable[..., ProcessOutput]:
    """Factory for JSON process outputs: ``make_output(records, exit_code=0)``."""

    return json_output
