
from __future__ import annotations

import typer

from keyvalues_parser.cli.commands.export import export_command
from keyvalues_parser.cli.commands.get import get_command
from keyvalues_parser.cli.commands.stats import stats_command

app = typer.Typer(
    name="kvparse",
    help="Key-value file parser and inspector",
    add_completion=False,
)

app.command("export")(export_command)
app.command("get")(get_command)
app.command("stats")(stats_command)


def main():
    app()


if __name__ == "__main__":
    main()
