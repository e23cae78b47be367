"""Masked terminal prompt (Typer + Rich)."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape

from core.interfaces.prompt import Validator


class TerminalSecretPrompt:
    """`SecretPrompt` backed by `typer.prompt(hide_input=True)`.

    Click's own retry loop hides the error text for hidden input and skips
    empty answers silently, so the loop lives here instead.
    """

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(stderr=True, highlight=False, soft_wrap=True)

    def ask(self, message: str, validate: Validator) -> str:
        while True:
            value = typer.prompt(message, default="", show_default=False, hide_input=True)
            error = validate(value)
            if error is None:
                return value
            self._console.print(f"[red]{escape(error)}[/red]")
