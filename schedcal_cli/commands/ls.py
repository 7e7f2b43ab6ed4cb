"""List schedules."""

import typer
from typing_extensions import Annotated

from schedcal_cli.context import get_context
from schedcal_cli.display.table_renderer import TableRenderer
from schedcal_cli.utils import exit_on_error


def ls(
    pretty: Annotated[
        bool,
        typer.Option("--pretty", "-p", help="Render a formatted table with durations"),
    ] = False,
) -> None:
    """List all schedules in the order they were added.

    Prints a tab-separated table with columns ID, START, END and SUBJECT.
    """
    ctx = get_context()
    renderer = TableRenderer()

    with exit_on_error():
        schedules = ctx.service.list_schedules()

    if pretty:
        renderer.render_table(schedules)
    else:
        renderer.render_tsv(schedules)
