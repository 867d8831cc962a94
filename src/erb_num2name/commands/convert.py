"""Convert command for erb-num2name.

Rewrites numeric variable references in <target>/ERB/**/*.ERB into names
taken from <target>/CSV/*.CSV.

Example:
    $ erb-num2name convert -t ./game
    $ erb-num2name convert -t ./game -i ITEM -e CSTR --normalize
    $ erb-num2name convert -t ./game --erb-regex-path erb-regex.yaml --strict
    $ erb-num2name convert --config erb-num2name.yaml
"""

import logging
from pathlib import Path

import typer

from erb_num2name.cli_utils import (
    EXIT_CONFIG_ERROR,
    EXIT_ERROR,
    EXIT_SUCCESS,
    _error,
    _setup_logging,
    _success,
    _validate_target_path,
    _warning,
    console,
)
from erb_num2name.core.config import SpacePolicy, build_config
from erb_num2name.core.exceptions import ConfigError
from erb_num2name.pipeline import ConversionReport, convert

logger = logging.getLogger(__name__)


def _print_report(report: ConversionReport) -> None:
    for family, message in sorted(report.tables_failed.items()):
        _warning(f"Table {family} not loaded: {message}")
    for path, message in sorted(report.failed.items()):
        _error(f"{path}: {message}")

    console.print(
        f"Tables loaded: {len(report.tables_loaded)}, "
        f"converted: {len(report.converted)}, "
        f"skipped: {len(report.skipped)}, "
        f"failed: {len(report.failed)}"
    )


def convert_command(
    target: Path = typer.Option(
        None,
        "--target",
        "-t",
        help="Game root containing CSV/ and ERB/ directories",
    ),
    includes: list[str] = typer.Option(
        None,
        "--include",
        "-i",
        help="Always load this CSV family (repeatable)",
    ),
    excludes: list[str] = typer.Option(
        None,
        "--exclude",
        "-e",
        help="Never load this CSV family unless included (repeatable)",
    ),
    erb_regex_path: Path = typer.Option(
        None,
        "--erb-regex-path",
        help="YAML list of {regex, replace} rewrites applied after conversion",
    ),
    normalize: bool = typer.Option(
        None,
        "--normalize/--no-normalize",
        help="Normalize CSV names (half-width, spaces, parentheses)",
    ),
    space_policy: SpacePolicy = typer.Option(
        None,
        "--space-policy",
        case_sensitive=False,
        help="How normalization treats spaces: drop or underscore",
    ),
    explicit_target: bool = typer.Option(
        None,
        "--explicit-target/--no-explicit-target",
        help="Insert :TARGET into unscoped per-character references",
    ),
    workers: int = typer.Option(
        None,
        "--workers",
        "-w",
        min=1,
        max=32,
        help="Worker threads (default: CPU count)",
    ),
    config: Path = typer.Option(
        None,
        "--config",
        "-c",
        help="YAML file with the same settings; command-line options win",
    ),
    strict: bool = typer.Option(
        None,
        "--strict/--lenient",
        help="Exit with an error if any table or ERB file failed",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log errors",
    ),
) -> None:
    """Convert ERB variable numbers to CSV names.

    Exit codes:
        0 = success (per-file failures are reported, not fatal, unless --strict)
        1 = --strict and at least one table or ERB file failed
        2 = configuration error

    """
    _setup_logging(verbose=verbose, quiet=quiet)

    if target is not None:
        target = _validate_target_path(target)
    elif config is None:
        _error("Missing option '--target' / '-t' (or a --config file providing target)")
        raise typer.Exit(code=EXIT_CONFIG_ERROR)

    try:
        run_config = build_config(
            config,
            target=target,
            includes=includes or None,
            excludes=excludes or None,
            erb_regex_path=erb_regex_path,
            normalize=normalize,
            space_policy=space_policy,
            explicit_target=explicit_target,
            workers=workers,
            strict=strict,
        )
        report = convert(run_config)
    except ConfigError as e:
        _error(str(e))
        raise typer.Exit(code=EXIT_CONFIG_ERROR) from None

    _print_report(report)

    if run_config.strict and report.has_failures:
        raise typer.Exit(code=EXIT_ERROR)

    _success("Done")
    raise typer.Exit(code=EXIT_SUCCESS)
