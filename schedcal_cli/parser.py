"""Typer application and command routing."""

from pathlib import Path

import typer
from typing_extensions import Annotated

from schedcal.config import ScheduleConfig
from schedcal_cli import setup_logging
from schedcal_cli.commands import add, delete, init, ls
from schedcal_cli.context import CLIContext

app = typer.Typer(
    help="Keep a personal schedule in a JSON file without overlapping entries.",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def main_callback(
    ctx: typer.Context,
    schedule_file: Annotated[
        Path | None,
        typer.Option(
            "--file",
            "-f",
            help="Schedule file (default: SCHEDULE_FILE or schedule.json)",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show info logging"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Only show errors"),
    ] = False,
) -> None:
    """Keep a personal schedule in a JSON file without overlapping entries."""
    config = ScheduleConfig.from_env()
    if schedule_file is not None:
        config = config.model_copy(update={"schedule_file": schedule_file})

    setup_logging(verbose=verbose, quiet=quiet, config=config)
    ctx.obj = CLIContext(config=config, verbose=verbose, quiet=quiet)


app.command("list")(ls)
app.command("add")(add)
app.command("delete")(delete)
app.command("init")(init)
