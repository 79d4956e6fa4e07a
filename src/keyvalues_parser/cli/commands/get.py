from __future__ import annotations

from pathlib import Path
from typing import List

import typer
from rich.console import Console
from rich.markup import escape

from keyvalues_parser.cli.utils import load_tree, to_json
from keyvalues_parser.core.exceptions import ResolveError
from keyvalues_parser.loader.nodes import Section
from keyvalues_parser.resolve import resolve

console = Console()
err_console = Console(stderr=True)


def get_command(
    source: Path = typer.Argument(..., exists=True, readable=True),
    keys: List[str] = typer.Argument(..., help="Keys to follow, outermost first"),
):
    """
    Print the value, or the section as JSON, found at a key path.
    """
    root = load_tree(source)

    try:
        node = resolve(root, *keys)
    except ResolveError as exc:
        err_console.print(f"[red]Lookup failed:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    if isinstance(node, Section):
        print(to_json(node.to_dict(), pretty=True))
    else:
        print(node.text)
