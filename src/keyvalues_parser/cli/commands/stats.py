
from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from keyvalues_parser.cli.utils import load_tree
from keyvalues_parser.loader.nodes import Section

console = Console()


def stats_command(
    source: Path = typer.Argument(..., exists=True, readable=True),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Show summary statistics for a key-value file.
    """
    root = load_tree(source, verbose=verbose)

    sections = 0
    values = 0
    for _, node in root.walk():
        if isinstance(node, Section):
            sections += 1
        else:
            values += 1

    table = Table(title="Key-Value Statistics")
    table.add_column("Measure", style="bold")
    table.add_column("Count", justify="right")

    table.add_row("Top-level entries", str(len(root)))
    table.add_row("Sections", str(sections))
    table.add_row("Values", str(values))
    table.add_row("Max depth", str(root.depth()))

    console.print(table)
