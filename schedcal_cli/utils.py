"""CLI helpers for turning schedule errors into exit codes."""

import logging
from contextlib import contextmanager

import typer
from rich.markup import escape

from schedcal.exceptions import ScheduleValidationError, StoreError
from schedcal_cli.display.console import console

logger = logging.getLogger(__name__)

# Accepted formats for naive timestamps on the command line
DATETIME_FORMATS = [
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%dT%H:%M",
    "%Y-%m-%d %H:%M",
]


@contextmanager
def exit_on_error():
    """Report schedule errors and exit with status 1.

    Rejected changes get a user-facing message on stdout. Store failures are
    logged as errors.
    """
    try:
        yield
    except ScheduleValidationError as e:
        logger.info(f"Rejected: {e}")
        console.print(f"[red]✗[/red] {escape(str(e))}")
        raise typer.Exit(1)
    except StoreError as e:
        logger.error(str(e))
        raise typer.Exit(1)
