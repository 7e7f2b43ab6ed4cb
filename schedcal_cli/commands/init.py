"""Create an empty schedule file."""

from schedcal_cli.context import get_context
from schedcal_cli.display import console
from schedcal_cli.utils import exit_on_error


def init() -> None:
    """Create an empty schedule file.

    Fails if the schedule file already exists.
    """
    ctx = get_context()

    with exit_on_error():
        ctx.service.initialize()

    console.print(
        f"[bold green]✓[/bold green] Created schedule file {ctx.store.path}"
    )
