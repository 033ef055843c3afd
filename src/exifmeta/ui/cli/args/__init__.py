"""Command line argument handling package."""

from exifmeta.ui.cli.args.parser import ArgumentParser
from exifmeta.ui.cli.args.options import ExtractArgs

__all__ = ["ArgumentParser", "ExtractArgs"]
