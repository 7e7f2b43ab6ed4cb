"""Display module for rendering schedule output.

- TableRenderer: schedule listings (tab-separated or Rich table)
- console: Shared Rich console instance
- Formatting functions for timestamps and durations
"""

from schedcal_cli.display.console import console
from schedcal_cli.display.formatters import format_datetime, format_duration
from schedcal_cli.display.table_renderer import TableRenderer

__all__ = [
    "console",
    "TableRenderer",
    "format_datetime",
    "format_duration",
]
