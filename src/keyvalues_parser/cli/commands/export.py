from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from keyvalues_parser.cli.utils import load_tree, write_json

console = Console()


def export_command(
    source: Path = typer.Argument(..., exists=True, readable=True),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write output to file instead of stdout",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Pretty-print JSON",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Export a parsed key-value file as JSON (stdout by default).
    """
    root = load_tree(source, verbose=verbose)

    if verbose:
        console.log("Exporting JSON")

    write_json(root.to_dict(), out=out, pretty=pretty)

    if verbose:
        console.log("Export complete")
