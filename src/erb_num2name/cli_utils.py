"""Shared CLI helpers: exit codes, console output and logging setup."""

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_CONFIG_ERROR = 2

console = Console(soft_wrap=True)

__all__ = [
    "EXIT_SUCCESS",
    "EXIT_ERROR",
    "EXIT_CONFIG_ERROR",
    "console",
    "_setup_logging",
    "_validate_target_path",
    "_error",
    "_warning",
    "_success",
]


def _setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure root logging with a rich handler.

    Args:
        verbose: DEBUG level.
        quiet: ERROR level only. Ignored when verbose is set.

    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=verbose, rich_tracebacks=True)],
        force=True,
    )


def _validate_target_path(target: Path) -> Path:
    """Resolve target and exit with EXIT_CONFIG_ERROR if it is not a directory."""
    target_path = target.resolve()
    if not target_path.exists():
        _error(f"Target directory does not exist: {target_path}")
        raise typer.Exit(code=EXIT_CONFIG_ERROR)
    if not target_path.is_dir():
        _error(f"Not a directory: {target_path}")
        raise typer.Exit(code=EXIT_CONFIG_ERROR)
    return target_path


def _error(message: str) -> None:
    console.print(f"[red]Error:[/red] {message}")


def _warning(message: str) -> None:
    console.print(f"[yellow]Warning:[/yellow] {message}")


def _success(message: str) -> None:
    console.print(f"[green]{message}[/green]")
