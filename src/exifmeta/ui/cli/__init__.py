"""Command line interface package."""

from exifmeta.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
