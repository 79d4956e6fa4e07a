
"""
CLI command modules for keyvalues_parser.

Each command module defines a single Typer-compatible command function.
"""

from keyvalues_parser.cli.commands.export import export_command
from keyvalues_parser.cli.commands.get import get_command
from keyvalues_parser.cli.commands.stats import stats_command

__all__ = [
    "export_command",
    "get_command",
    "stats_command",
]
