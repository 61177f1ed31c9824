#!/usr/bin/env python3
"""
Tuplelog CLI

Main entrypoint for the tuplelog command-line tool.
"""

import json
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from tuplelog.logging_config import setup_logging
from tuplelog_cli.commands import action, log, replay, table
from tuplelog_cli.common import json_option

app = typer.Typer(
    name="tuplelog",
    help="Schema-inferring tuple store with a replayable action log",
    add_completion=False,
)

console = Console()

app.add_typer(table.app, name="table", help="Table metadata")
app.add_typer(log.app, name="log", help="Action log operations")

app.command("action")(action.action_command)
app.command("replay")(replay.replay_command)


@app.callback()
def configure(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Override TUPLELOG_LOG_LEVEL"
    ),
):
    """Configure logging before any command runs."""
    setup_logging(level=log_level)


@app.command()
def version(json_output: bool = json_option()):
    """Show version information."""
    from tuplelog import __version__ as core_version
    from tuplelog_cli import __version__

    if json_output:
        print(json.dumps({"cli": __version__, "core": core_version}))
        return

    grid = Table(show_header=False, box=None)
    grid.add_row("[bold]Tuplelog CLI[/bold]", f"v{__version__}")
    grid.add_row("Core", f"v{core_version}")

    console.print(grid)


def main():
    """Main entrypoint."""
    app()


if __name__ == "__main__":
    main()
