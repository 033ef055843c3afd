"""Command line interface for exifmeta."""

import sys
from typing import BinaryIO, final

from exifmeta.features.extraction import ExtractionError, Source, metadata_sync
from exifmeta.platform.logging import logger
from exifmeta.ui.cli.args import ArgumentParser, ExtractArgs
from exifmeta.ui.cli.display import ResultDisplay


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(
        args_list: list[str] | None = None,
        stdin: BinaryIO | None = None,
        display: ResultDisplay | None = None,
    ) -> None:
        """Process command line arguments and print the extracted metadata.

        Args:
            args_list: List of command line arguments (for testing).
            stdin: Binary stream read for ``--stdin`` (defaults to sys.stdin).
            display: Output renderer (for testing).
        """
        args: ExtractArgs = ArgumentParser.process_args(args_list)
        output = display or ResultDisplay()

        try:
            result = metadata_sync(
                CommandProcessor._resolve_source(args, stdin),
                tags=args.tags,
                use_buffer_limit=args.use_buffer_limit,
                max_buffer_size=args.max_buffer_size,
                config=args.config,
            )
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            sys.exit(130)
        except (ExtractionError, OSError) as e:
            output.show_error(e, verbose=args.verbose)
            sys.exit(1)

        output.show_result(result)

    @staticmethod
    def _resolve_source(args: ExtractArgs, stdin: BinaryIO | None) -> Source:
        if args.read_stdin:
            stream = stdin if stdin is not None else sys.stdin.buffer
            return stream.read()
        if len(args.sources) == 1:
            return args.sources[0]
        return list(args.sources)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit(...)`` inside command processing.
    """
    CommandProcessor.process_command()
    return 0
