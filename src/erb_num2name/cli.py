"""Command-line entry point for erb-num2name.

Usage:
    $ erb-num2name convert -t ./game
    $ python -m erb_num2name convert -t ./game
"""

import typer

from erb_num2name import __version__
from erb_num2name.commands.convert import convert_command

app = typer.Typer(
    name="erb-num2name",
    help="Convert ERB variable numbers to CSV names",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"erb-num2name {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Convert ERB variable numbers to CSV names."""


app.command(name="convert")(convert_command)
