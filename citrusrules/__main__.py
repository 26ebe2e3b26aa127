"""
Console entry point. Typer handles usage errors and exit codes; anything that
escapes the command is shown as an error panel.
"""

import logging
import os
import sys

from rich.console import Console

from citrusrules.cli.app import app
from citrusrules.cli.formatters import format_error_with_suggestions


def main() -> None:
    if os.name == "nt":
        try:
            sys.stdout.reconfigure(encoding="utf-8")
            sys.stderr.reconfigure(encoding="utf-8")
        except (TypeError, AttributeError):
            pass

    try:
        app()
    except Exception as e:
        console = Console()
        console.print()
        console.print(format_error_with_suggestions(e, {"type": "Unexpected"}))
        logging.getLogger("citrusrules").debug("Full traceback:", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
