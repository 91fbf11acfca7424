from __future__ import annotations

import os
import sys
from dataclasses import replace
from pathlib import Path
from typing import Annotated

import structlog
import typer
from rich.console import Console
from rich.markup import escape
from result import Err

from treepeek.config.defaults import default_config
from treepeek.config.loader import load_config, sample_config_json
from treepeek.logging_config import configure_logging
from treepeek.models.value import NOTHING
from treepeek.services.data import FORMATS, STDIN_PATH, load_document
from treepeek.services.formatting import to_json
from treepeek.services.modes import duplicate_bindings
from treepeek.ui.app import SessionError, explore

# stdout carries the peeked value, everything else goes to stderr.
console = Console(stderr=True)
logger = structlog.get_logger(__name__)

DEBUG_LOG_PATH = Path("treepeek_debug.log")


def _reattach_tty() -> None:
    """Point fd 0 at the controlling terminal when stdin is a pipe."""
    fd = os.open("/dev/tty", os.O_RDONLY)
    try:
        os.dup2(fd, 0)
    finally:
        os.close(fd)


def run(
    path: Annotated[str, typer.Argument(help="File to explore, or - for stdin.")] = STDIN_PATH,
    fmt: Annotated[str, typer.Option("--format", "-f", help="Input format: auto, json, toml.")] = "auto",
    no_cell_path: Annotated[bool, typer.Option("--no-cell-path", help="Hide the cell path in the status bar.")] = False,
    sample_config: Annotated[bool, typer.Option("--sample-config", help="Print sample config JSON.")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
    log_file: Annotated[Path | None, typer.Option("--log-file", help="Write logs to this file.")] = None,
) -> None:
    if sample_config:
        typer.echo(sample_config_json())
        raise typer.Exit(0)

    if verbose and log_file is None:
        # textual draws on stderr, so debug lines would land inside the UI.
        log_file = DEBUG_LOG_PATH
        console.print(f"[yellow]Debug logs go to {escape(str(log_file))}.[/]")
    configure_logging(verbose=verbose, log_file=log_file)

    if fmt not in FORMATS:
        console.print(f"[red]Unknown format: {escape(fmt)}. Use: {', '.join(FORMATS)}.[/]")
        raise typer.Exit(1)

    config_result = load_config()
    if isinstance(config_result, Err):
        console.print(f"[yellow]{escape(config_result.unwrap_err())} Using defaults.[/]")
        config = default_config()
    else:
        config = config_result.unwrap()
    if no_cell_path:
        config = replace(config, show_cell_path=False)

    for key, actions in duplicate_bindings(config.keybindings).items():
        names = ", ".join(action.value for action in actions)
        console.print(f"[yellow]Key '{escape(key)}' is bound to {names}; '{actions[0].value}' wins.[/]")

    if path == STDIN_PATH and sys.stdin.isatty():
        console.print("[red]No input: pass a file or pipe data into treepeek.[/]")
        raise typer.Exit(1)

    document = load_document(path, fmt)
    if isinstance(document, Err):
        console.print(f"[red]{escape(document.unwrap_err())}[/]")
        raise typer.Exit(1)

    if not sys.stdin.isatty():
        try:
            _reattach_tty()
        except OSError as exc:
            console.print(f"[red]Cannot open the terminal for input: {escape(str(exc))}[/]")
            raise typer.Exit(1) from exc

    logger.debug("session start", path=path, format=fmt)
    try:
        outcome = explore(document.unwrap(), config)
    except SessionError as exc:
        console.print(f"[red]{escape(str(exc))}[/]")
        raise typer.Exit(1) from exc
    if isinstance(outcome, Err):
        console.print(f"[red]Navigation failed: {escape(outcome.unwrap_err().describe())}[/]")
        raise typer.Exit(1)

    value = outcome.unwrap()
    if value is NOTHING:
        raise typer.Exit(0)
    typer.echo(to_json(value))


def cli() -> None:
    typer.run(run)


if __name__ == "__main__":
    cli()
