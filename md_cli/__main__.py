"""
Main entry point for md.
This module handles top-level exception handling and CLI invocation.
"""

import logging
import sys

from rich.console import Console

from md_cli.cli.app import run
from md_cli.cli.formatters import format_error_with_suggestions
from md_cli.exceptions import MdCliError


def main() -> None:
    """Main entry point function."""
    log = logging.getLogger("md_cli")
    console = Console(stderr=True)

    try:
        run()
    except KeyboardInterrupt:
        console.print("\n[yellow]⚠️  Operation cancelled by user.[/yellow]")
        sys.exit(130)
    except MdCliError as e:
        console.print()
        console.print(format_error_with_suggestions(e))
        sys.exit(e.exit_code)
    except Exception as e:
        console.print()
        console.print(format_error_with_suggestions(e))
        log.debug("Full traceback:", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
