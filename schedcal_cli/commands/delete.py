"""Delete a schedule."""

import typer
from rich.markup import escape
from typing_extensions import Annotated

from schedcal_cli.context import get_context
from schedcal_cli.display import console
from schedcal_cli.utils import exit_on_error


def delete(
    schedule_id: Annotated[
        int,
        typer.Argument(help="Id of the schedule to delete"),
    ],
) -> None:
    """Delete a schedule by id."""
    ctx = get_context()

    with exit_on_error():
        removed = ctx.service.delete_schedule(schedule_id)

    console.print(
        f"[bold green]✓[/bold green] Deleted schedule {removed.id}: "
        f"{escape(removed.subject)}"
    )
