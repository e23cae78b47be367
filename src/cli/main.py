"""ado-npm-auth command line.

Writes an Azure DevOps session token for one or more npm feeds into a
user-level .npmrc.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer

from adapters.terminal_prompt import TerminalSecretPrompt
from cli.ui_components import (
    build_consoles,
    configure_logging,
    print_error,
    print_result,
    print_token_help,
)
from core.config import AppSettings, expand_path
from core.errors import FeedAuthError
from core.services.feed_auth import AuthRequest, authenticate

app = typer.Typer(
    add_completion=False,
    help="Authenticate npm against Azure DevOps Artifacts feeds.",
)


def build_request(
    settings: AppSettings,
    *,
    pat: str | None,
    urls: list[str] | None,
    npmrc: Path | None,
    target: Path | None,
) -> AuthRequest:
    """Merge flags over settings into the one request used for the run."""

    return AuthRequest(
        pat=pat if pat is not None else settings.pat,
        urls=list(urls or []),
        project_npmrc=expand_path(npmrc if npmrc is not None else settings.project_npmrc),
        target_npmrc=expand_path(target if target is not None else settings.target_npmrc),
    )


@app.command(context_settings={"allow_extra_args": True})
def main(
    ctx: typer.Context,
    pat: Optional[str] = typer.Option(
        None,
        "--pat",
        help='Azure DevOps Personal Access Token with "Packaging (Read & Write)" permissions.',
        show_default=False,
    ),
    url: Optional[List[str]] = typer.Option(
        None,
        "--url",
        help="Azure DevOps feed URL. Accepts multiple URLs (--url A B or --url A --url B).",
        show_default=False,
    ),
    npmrc: Optional[Path] = typer.Option(
        None,
        "--npmrc",
        help="Path to the .npmrc file that specifies the Azure DevOps feed.",
        show_default="./.npmrc",
    ),
    target: Optional[Path] = typer.Option(
        None,
        "--target",
        help="Path to the .npmrc file that will receive the authentication token.",
        show_default="~/.npmrc",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging."),
) -> None:
    """Authenticate the feeds of a project (or the given --url feeds) in a global .npmrc."""

    if ctx.args and not url:
        raise typer.BadParameter(f"Unexpected arguments: {' '.join(ctx.args)}", param_hint="'--url'")
    urls = [*(url or []), *ctx.args]

    out, err = build_consoles()
    configure_logging(err, verbose=verbose)

    request = build_request(AppSettings(), pat=pat, urls=urls, npmrc=npmrc, target=target)

    try:
        result = authenticate(
            request,
            TerminalSecretPrompt(err),
            on_prompt=lambda help_: print_token_help(out, help_),
        )
    except FeedAuthError as exc:
        print_error(err, str(exc))
        raise typer.Exit(code=1) from exc

    print_result(out, err, result)


def run() -> None:
    app()
