"""Tests for the ``ExtractionRichHandler`` rendering of extraction events."""

from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.text import Text

from exifmeta.platform.logging import ExtractionRichHandler, setup_logger


def _make_handler() -> ExtractionRichHandler:
    """Create a handler instance with an in-memory console."""

    console = Console(file=StringIO(), force_terminal=True, soft_wrap=True)
    return ExtractionRichHandler(console=console)


def _build_record(level: int = logging.INFO, **extras: Any) -> logging.LogRecord:
    """Create a ``LogRecord`` populated with extraction extras for testing."""

    record = logging.LogRecord(
        name="exifmeta",
        level=level,
        pathname="test",
        lineno=0,
        msg="",
        args=(),
        exc_info=None,
    )
    for key, value in extras.items():
        setattr(record, key, value)
    return record


def test_render_start_truncates_long_paths() -> None:
    handler = _make_handler()
    record = _build_record(
        extraction_event="extraction.start",
        mode="async",
        subjects="/home/user/pictures/2024/holiday/beach/IMG_0001.JPG",
        argument_count=4,
    )

    rendered = handler.render_message(record, "")
    assert isinstance(rendered, Text)

    plain = rendered.plain
    assert "[async] Extracting " in plain
    assert "…/holiday/beach/IMG_0001.JPG" in plain
    assert "/home/user" not in plain
    assert "args=4" in plain


def test_render_complete_previews_multiple_subjects() -> None:
    handler = _make_handler()
    record = _build_record(
        extraction_event="extraction.complete",
        mode="sync",
        subjects=("a.jpg", "b.jpg", "c.jpg", "d.jpg"),
        record_count=4,
        duration_ms=12.5,
    )

    rendered = handler.render_message(record, "")
    assert isinstance(rendered, Text)

    plain = rendered.plain
    assert "a.jpg, b.jpg (+2 more)" in plain
    assert "records=4" in plain
    assert "12.50 ms" in plain


def test_render_error_shows_buffer_and_first_error_line() -> None:
    handler = _make_handler()
    record = _build_record(
        level=logging.ERROR,
        extraction_event="extraction.error",
        subjects=2048,
        error_message="Exiftool failed with exit code 1:\n Error: Unknown file type",
        exit_code=1,
    )

    rendered = handler.render_message(record, "")
    assert isinstance(rendered, Text)

    plain = rendered.plain
    assert "<buffer 2048 bytes>" in plain
    assert "Exiftool failed with exit code 1:" in plain
    assert "Unknown file type" not in plain
    assert "exit=1" in plain


def test_render_windows_paths_keep_backslashes() -> None:
    handler = _make_handler()
    record = _build_record(
        extraction_event="extraction.start",
        subjects="C:\\Users\\me\\Pictures\\Trip\\Day1\\IMG.JPG",
    )

    rendered = handler.render_message(record, "")
    assert isinstance(rendered, Text)
    assert "…\\Trip\\Day1\\IMG.JPG" in rendered.plain


def test_plain_messages_fall_back_to_rich_rendering() -> None:
    handler = _make_handler()
    record = _build_record(msg="Configuration saved")

    rendered = handler.render_message(record, "Configuration saved")

    assert isinstance(rendered, Text)
    assert rendered.plain == "Configuration saved"


def test_setup_logger_adds_rotating_file_handler(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "exifmeta.log"

    logger = setup_logger(log_file=log_file, console_level=logging.ERROR)
    try:
        logger.info("hello file")
        for handler in logger.handlers:
            handler.flush()

        assert len(logger.handlers) == 2
        assert "hello file" in log_file.read_text(encoding="utf-8")
    finally:
        _ = setup_logger()
