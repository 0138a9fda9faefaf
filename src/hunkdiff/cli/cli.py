"""CLI entrypoint: Typer app definition and command registration"""

import typer

from hunkdiff.cli.commands import diff_cmd, stat_cmd


app = typer.Typer(name="hunkdiff", no_args_is_help=True, help="Unified diffs of two text files")

app.command(name="diff")(diff_cmd)
app.command(name="stat")(stat_cmd)
