"""CLI commands package."""

from schedcal_cli.commands.add import add
from schedcal_cli.commands.delete import delete
from schedcal_cli.commands.init import init
from schedcal_cli.commands.ls import ls

__all__ = [
    "add",
    "delete",
    "init",
    "ls",
]
