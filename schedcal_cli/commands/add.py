"""Add a schedule."""

from datetime import datetime

import typer
from rich.markup import escape
from typing_extensions import Annotated

from schedcal_cli.context import get_context
from schedcal_cli.display import console
from schedcal_cli.utils import DATETIME_FORMATS, exit_on_error


def add(
    subject: Annotated[
        str,
        typer.Argument(help="What the schedule is for"),
    ],
    start: Annotated[
        datetime,
        typer.Argument(
            help="Start time, e.g. 2024-01-01T19:00", formats=DATETIME_FORMATS
        ),
    ],
    end: Annotated[
        datetime,
        typer.Argument(
            help="End time, e.g. 2024-01-01T20:00", formats=DATETIME_FORMATS
        ),
    ],
) -> None:
    """Add a schedule.

    The schedule is rejected if it overlaps any existing schedule. A
    schedule that starts exactly when another ends does not overlap.

    Example:
        schedcal add "Dentist" 2024-01-01T19:00 2024-01-01T20:00
    """
    ctx = get_context()

    with exit_on_error():
        schedule = ctx.service.add_schedule(subject, start, end)

    console.print(
        f"[bold green]✓[/bold green] Added schedule {schedule.id}: "
        f"{escape(schedule.subject)} ({schedule.start} - {schedule.end})"
    )
