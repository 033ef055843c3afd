"""src/exifmeta/ui/cli/display/result.py
What: Render extracted records and failures for the CLI.
Why: Keep console output formatting in one place.
"""

from __future__ import annotations

import json
from typing import final

from rich.console import Console
from rich.text import Text

from exifmeta.features.extraction import OutputError, Result


@final
class ResultDisplay:
    """Handles result display in CLI."""

    console: Console
    error_console: Console

    def __init__(
        self,
        console: Console | None = None,
        error_console: Console | None = None,
    ) -> None:
        self.console = console or Console()
        self.error_console = error_console or Console(stderr=True)

    def show_result(self, result: Result) -> None:
        """Print the result as pretty JSON on stdout."""
        self.console.print_json(json.dumps(result, ensure_ascii=False, default=str))

    def show_error(self, error: BaseException, *, verbose: bool = False) -> None:
        """Print a failure summary, including the captured stdout when verbose."""
        self.error_console.print(Text.assemble(("Error: ", "bold red"), str(error)))
        if not verbose or not isinstance(error, OutputError):
            return
        self.error_console.print(Text.assemble(("exit code: ", "dim"), str(error.exit_code)))
        if error.stdout:
            self.error_console.print(Text("stdout:", style="dim"))
            self.error_console.print(Text(error.stdout))
