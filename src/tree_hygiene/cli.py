"""tree-hygiene CLI entry point."""

from __future__ import annotations

import dataclasses
import logging
import sys
from pathlib import Path

import click

from tree_hygiene import __version__
from tree_hygiene.config import (
    AGGREGATION_COLLECT_ALL,
    CONFIG_FILENAME,
    load_config,
)
from tree_hygiene.errors import ConfigError
from tree_hygiene.runner import CHECK_NAMES, EXIT_CONFIG_ERROR


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@click.command(
    context_settings={"ignore_unknown_options": True, "allow_extra_args": True},
)
@click.version_option(version=__version__, prog_name="tree-hygiene")
@click.option(
    "--root",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Repository root (default: current directory).",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help=f"Configuration file (default: <root>/{CONFIG_FILENAME} if present).",
)
@click.option(
    "--keep-going",
    is_flag=True,
    help="Run every check and report all failures instead of stopping at the first.",
)
@click.option(
    "--no-minimums",
    is_flag=True,
    help="Do not require the minimum file counts (for partial checkouts).",
)
@click.option(
    "--skip",
    multiple=True,
    type=click.Choice(CHECK_NAMES),
    help="Skip a check by name. Repeatable.",
)
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["rich", "json", "porcelain"]),
    default=None,
    help="Report format (default: rich if TTY, porcelain if piped).",
)
@click.option("--verbose", "-v", is_flag=True, help="Verbose (debug) logging.")
@click.argument("analyzer_args", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def main(
    ctx: click.Context,
    *,
    root: Path | None,
    config_path: Path | None,
    keep_going: bool,
    no_minimums: bool,
    skip: tuple[str, ...],
    fmt: str | None,
    verbose: bool,
    analyzer_args: tuple[str, ...],
) -> None:
    """Check the repository for hygiene problems, then run the Dart analyzer.

    Extra arguments and unknown options are passed through to every
    analyzer invocation. Exit codes: 0 = clean, 1 = violations or a failed
    tool, 2 = configuration error.
    """
    from rich.console import Console

    from tree_hygiene.report import format_json, format_text, print_progress, print_run
    from tree_hygiene.runner import run

    _configure_logging(verbose)

    if not __debug__:
        click.echo(
            "Error: tree-hygiene must not run with Python optimizations (-O) enabled.",
            err=True,
        )
        sys.exit(EXIT_CONFIG_ERROR)

    # Resolve output format: explicit flag > TTY detection.
    if fmt is None:
        fmt = "rich" if sys.stdout.isatty() else "porcelain"

    project_root = (root or Path.cwd()).resolve()
    console = Console()

    try:
        config = load_config(config_path or project_root / CONFIG_FILENAME)
        overrides: dict[str, object] = {"skip": config.skip | frozenset(skip)}
        if keep_going:
            overrides["aggregation"] = AGGREGATION_COLLECT_ALL
        if no_minimums:
            overrides["check_minimums"] = False
        config = dataclasses.replace(config, **overrides)  # type: ignore[arg-type]

        progress = (lambda title: print_progress(console, title)) if fmt == "rich" else None
        result = run(
            project_root,
            config,
            analyzer_args=[*analyzer_args, *ctx.args],
            progress=progress,
        )
    except ConfigError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(EXIT_CONFIG_ERROR)

    if fmt == "json":
        click.echo(format_json(result))
    elif fmt == "porcelain":
        click.echo(format_text(result))
    else:
        print_run(console, result)

    sys.exit(result.exit_code)
