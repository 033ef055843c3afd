"""Rich console handler for extraction logging.

Where: platform/logging/handlers.py
What: Render structured extraction events with icons, colours and compact paths.
Why: Keep per-call log lines short when subjects live in deep directories.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class ExtractionRichHandler(RichHandler):
    """Rich handler that renders ``extraction_event`` records compactly."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "extraction.start": ("🔎", "cyan"),
        "extraction.complete": ("✅", "green"),
        "extraction.error": ("⛔", "red"),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 3
    _SUBJECT_PREVIEW_LIMIT: ClassVar[int] = 2

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str) -> Text:
        """Format a path keeping only its trailing segments.

        Args:
            path: Absolute or relative path string to format.

        Returns:
            Text: Path with coloured separators and ellipsis truncation.
        """
        pure_path = self._to_pure_path(path)
        separator = "\\" if isinstance(pure_path, PureWindowsPath) else "/"
        anchor = pure_path.anchor
        body_parts = [part for part in pure_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]
            display_string = "…" + separator + separator.join(body_parts)
        else:
            display_string = str(pure_path) if body_parts or anchor else "."

        return self._style_path_string(display_string, separator)

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        """Return a platform-aware ``PurePath`` for the given raw string."""

        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    @staticmethod
    def _style_path_string(path_string: str, separator: str) -> Text:
        """Apply Rich styling to the rendered path string."""

        text = Text()
        for char in path_string:
            if char == separator or char == "…":
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _format_subjects(self, subjects: object) -> Text:
        """Render the subjects of a call: paths, or a byte-count for buffers."""

        if isinstance(subjects, int):
            return Text(f"<buffer {subjects} bytes>", style=Style(color="white"))
        if isinstance(subjects, str):
            return self._format_path(subjects)
        if not isinstance(subjects, Sequence) or not subjects:
            return Text("<no subjects>")

        text = Text()
        preview = [str(s) for s in subjects[: self._SUBJECT_PREVIEW_LIMIT]]
        for index, subject in enumerate(preview):
            if index:
                _ = text.append(", ")
            _ = text.append_text(self._format_path(subject))
        remaining = len(subjects) - len(preview)
        if remaining > 0:
            _ = text.append(f" (+{remaining} more)")
        return text

    def _render_extraction_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured extraction events with dedicated styling."""

        event = getattr(record, "extraction_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        mode = getattr(record, "mode", None)
        if isinstance(mode, str):
            _ = body.append(f"[{mode}] ")

        prefix = {
            "extraction.start": "Extracting ",
            "extraction.complete": "Extracted ",
            "extraction.error": "Failed ",
        }.get(event, "")
        _ = body.append(prefix)
        _ = body.append_text(self._format_subjects(getattr(record, "subjects", None)))

        details: list[str] = []
        if event == "extraction.start":
            argument_count = getattr(record, "argument_count", None)
            if isinstance(argument_count, int):
                details.append(f"args={argument_count}")
        elif event == "extraction.complete":
            record_count = getattr(record, "record_count", None)
            if isinstance(record_count, int):
                details.append(f"records={record_count}")
        else:
            error_message = getattr(record, "error_message", None)
            if error_message:
                details.append(str(error_message).strip().splitlines()[0])

        exit_code = getattr(record, "exit_code", None)
        if isinstance(exit_code, int):
            details.append(f"exit={exit_code}")
        duration_ms = getattr(record, "duration_ms", None)
        if isinstance(duration_ms, (int, float)):
            details.append(f"{duration_ms:.2f} ms")
        if details:
            _ = body.append(" (" + ", ".join(details) + ")")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for extraction events."""

        extraction_text = self._render_extraction_message(record)
        if extraction_text is not None:
            return extraction_text

        return super().render_message(record, message)


__all__ = ["ExtractionRichHandler"]
