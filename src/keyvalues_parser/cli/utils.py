
from __future__ import annotations

import json
import time
from pathlib import Path
from typing import Any

import typer
from rich.console import Console
from rich.markup import escape

from keyvalues_parser.core.exceptions import KeyValuesError
from keyvalues_parser.loader.nodes import Section
from keyvalues_parser.parser_core import parse

console = Console()
err_console = Console(stderr=True)


def load_tree(path: Path, *, verbose: bool = False) -> Section:
    """
    Parse ``path``, turning parser errors into a red message and exit code 1.
    """
    t0 = time.perf_counter()

    try:
        root = parse(path)
    except KeyValuesError as exc:
        err_console.print(f"[red]{type(exc).__name__} ({exc.kind}):[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    elapsed = time.perf_counter() - t0

    if verbose:
        console.log(f"Parsed {path} in {elapsed:.2f}s")

    return root


def to_json(data: Any, *, pretty: bool) -> str:
    if pretty:
        return json.dumps(data, indent=2, ensure_ascii=False)
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


def write_json(
    data: Any,
    *,
    out: Path | None,
    pretty: bool,
):
    """
    Write JSON to stdout or file.
    """
    payload = to_json(data, pretty=pretty)

    if out:
        out.write_text(payload, encoding="utf-8")
    else:
        print(payload)
