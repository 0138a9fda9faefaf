"""CLI command implementations"""

from typing import Annotated, Optional

import typer
from pydantic import ValidationError

from hunkdiff.config import Settings, load_config
from hunkdiff.core.pipeline import run_diff, run_stat
from hunkdiff.core.utils.log import setup_logger


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValidationError as e:
        _fail("Invalid configuration", e)
    except ValueError as e:
        _fail(str(e))


def diff_cmd(
    path_1: Annotated[str, typer.Argument(metavar="PATH_1", help="The first file to compare")],
    path_2: Annotated[str, typer.Argument(metavar="PATH_2", help="The second file to compare")],
    context: Annotated[Optional[int], typer.Option("--context", "-c", min=0, metavar="NUMBER", help="The unidiff context radius")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug details to stderr")] = False,
    ):
    """Print the unified diff of two files."""
    settings = _settings(overrides={"context_radius": context, "log_level": "DEBUG" if verbose else None})
    setup_logger(settings.log_level)

    try:
        lines = run_diff(path_1, path_2, settings.context_radius, settings.encoding)
    except RuntimeError as e:
        _fail(str(e))
    for line in lines:
        typer.echo(line)


def stat_cmd(
    path_1: Annotated[str, typer.Argument(metavar="PATH_1", help="The first file to compare")],
    path_2: Annotated[str, typer.Argument(metavar="PATH_2", help="The second file to compare")],
    ):
    """Print added/deleted/unchanged line counts between two files."""
    settings = _settings()
    setup_logger(settings.log_level)

    try:
        counts = run_stat(path_1, path_2, settings.encoding)
    except RuntimeError as e:
        _fail(str(e))
    typer.echo(f"added={counts['added']} deleted={counts['deleted']} unchanged={counts['unchanged']}")
