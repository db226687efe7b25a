"""
Terminal prompts backed by Rich.
"""

import sys
from collections.abc import Sequence
from typing import TextIO

from rich.console import Console
from rich.prompt import Confirm, IntPrompt, Prompt

from md_cli.exceptions import InputError

from .formatters import format_options_table


class RichPrompter:
    """Asks questions on the terminal; refuses to run without one."""

    def __init__(self, console: Console, stream: TextIO | None = None):
        self.console = console
        self.stream = stream or sys.stdin

    def ensure_interactive(self) -> None:
        if not self.stream.isatty():
            raise InputError(
                "Standard input is not interactive; md needs a terminal to ask"
                " for the download options."
            )

    def choose(self, message: str, options: Sequence[str], default: int = 0) -> int:
        self.ensure_interactive()
        self.console.print(f"[bold]{message}[/bold]")
        self.console.print(format_options_table(list(options), default))
        answer = IntPrompt.ask(
            "Select",
            console=self.console,
            choices=[str(i) for i in range(1, len(options) + 1)],
            default=default + 1,
            show_choices=False,
        )
        return answer - 1

    def confirm(self, message: str, default: bool) -> bool:
        self.ensure_interactive()
        return Confirm.ask(message, console=self.console, default=default)

    def text(self, message: str, default: str = "", hint: str | None = None) -> str:
        self.ensure_interactive()
        if hint:
            self.console.print(f"[dim]{hint}[/dim]")
        return Prompt.ask(
            message, console=self.console, default=default, show_default=bool(default)
        )
