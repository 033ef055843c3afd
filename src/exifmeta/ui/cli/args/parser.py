"""Command line argument parser."""

import argparse
import logging
from collections.abc import Sequence
from typing import final

from exifmeta.config.config import Config
from exifmeta.platform.logging import setup_logger
from exifmeta.ui.cli.args.options import ExtractArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="exifmeta",
            description="Extract file metadata with exiftool and print it as JSON.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument(
            "sources",
            nargs="*",
            help="Files to read metadata from",
            metavar="SOURCE",
        )
        _ = parser.add_argument(
            "-t",
            "--tag",
            dest="tags",
            action="append",
            default=[],
            metavar="TAG",
            help="Tag to extract (repeatable); use --tag=-NAME to exclude a tag",
        )
        _ = parser.add_argument(
            "--config",
            type=str,
            metavar="CONFIG_PATH",
            help="Custom exiftool config file",
        )
        _ = parser.add_argument(
            "--stdin",
            action="store_true",
            help="Read the subject from standard input instead of SOURCE paths",
        )
        _ = parser.add_argument(
            "--no-buffer-limit",
            action="store_true",
            help="Pipe the whole standard input to exiftool instead of a prefix",
        )
        _ = parser.add_argument(
            "--max-buffer-size",
            type=int,
            metavar="BYTES",
            help="Number of bytes piped to exiftool when the buffer limit is active",
        )
        verbosity = parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed extraction information",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all log output except errors",
        )
        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> ExtractArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            ExtractArgs: Processed command line arguments.

        Raises:
            SystemExit: If the arguments are inconsistent.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        if parsed_args.stdin and parsed_args.sources:
            parser.error("--stdin cannot be combined with SOURCE paths")
        if not parsed_args.stdin and not parsed_args.sources:
            parser.error("at least one SOURCE path (or --stdin) is required")
        if parsed_args.max_buffer_size is not None and parsed_args.max_buffer_size < 0:
            parser.error("--max-buffer-size must not be negative")

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        _ = setup_logger(log_file=configuration.log_file, console_level=log_level)

        return ExtractArgs(
            sources=tuple(parsed_args.sources),
            read_stdin=parsed_args.stdin,
            tags=tuple(parsed_args.tags),
            config=parsed_args.config,
            use_buffer_limit=False if parsed_args.no_buffer_limit else None,
            max_buffer_size=parsed_args.max_buffer_size,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )


__all__ = ["ArgumentParser"]
