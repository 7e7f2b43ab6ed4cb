"""Table renderer for schedule listings."""

import typer
from rich.markup import escape
from rich.table import Table

from schedcal.models.schedule import Schedule
from schedcal_cli.display.console import console
from schedcal_cli.display.formatters import format_datetime, format_duration

TSV_HEADER = ("ID", "START", "END", "SUBJECT")


class TableRenderer:
    """Render schedule lists as plain tab-separated rows or a Rich table."""

    def render_tsv(self, schedules: list[Schedule]) -> None:
        """Render a header row and one tab-separated row per schedule.

        Args:
            schedules: Schedules in store order.
        """
        typer.echo("\t".join(TSV_HEADER))
        for schedule in schedules:
            typer.echo(
                "\t".join(
                    [
                        str(schedule.id),
                        format_datetime(schedule.start),
                        format_datetime(schedule.end),
                        schedule.subject,
                    ]
                )
            )

    def render_table(self, schedules: list[Schedule]) -> None:
        """Render schedules as a Rich table with durations.

        Args:
            schedules: Schedules in store order.
        """
        if not schedules:
            console.print("No schedules found")
            return

        table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
        table.add_column("ID", justify="right", style="dim")
        table.add_column("START")
        table.add_column("END")
        table.add_column("DURATION", style="dim")
        table.add_column("SUBJECT", style="cyan")

        for schedule in schedules:
            table.add_row(
                str(schedule.id),
                format_datetime(schedule.start),
                format_datetime(schedule.end),
                format_duration(schedule.duration),
                escape(schedule.subject),
            )

        console.print(table)
