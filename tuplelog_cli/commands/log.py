"""
Action log commands: show
"""

import json
from typing import Optional

import typer
from rich.table import Table

from tuplelog.core import TupleLogError
from tuplelog_cli.common import console, db_option, fail, json_option, load_db

app = typer.Typer()


@app.command()
def show(
    space: Optional[str] = typer.Option(None, "--space", "-s", help="Only this space (default: all)"),
    table: Optional[str] = typer.Option(None, "--table", "-t", help="Filter by table name"),
    lines: Optional[int] = typer.Option(None, "--lines", "-n", help="Number of entries to show"),
    db_path: str = db_option(),
    json_output: bool = json_option(),
):
    """
    Show the action log, accepted and rejected attempts alike.

    Examples:
        tuplelog log show
        tuplelog log show --space default --table Expenses
        tuplelog log show --lines 10 --json
    """
    try:
        db = load_db(db_path)
    except (TupleLogError, OSError) as e:
        fail(str(e), json_output, path=db_path)

    entries = []
    spaces = [space] if space is not None else db.space_names()
    for space_name in spaces:
        for seq, act in enumerate(db.get_actions(space_name)):
            if table is None or act[0] == table:
                entries.append({"space": space_name, "seq": seq, "action": list(act)})

    if lines:
        entries = entries[-lines:]

    if json_output:
        print(json.dumps({"entries": entries, "count": len(entries)}, indent=2, default=str))
        return

    if not entries:
        console.print("[yellow]Action log is empty[/yellow]")
        return

    grid = Table(title=f"Action Log: {db_path}")
    grid.add_column("Space", style="cyan")
    grid.add_column("Seq", style="cyan", justify="right")
    grid.add_column("Table", style="green")
    grid.add_column("Values", style="yellow")
    for entry in entries:
        act = entry["action"]
        grid.add_row(entry["space"], str(entry["seq"]), act[0], ", ".join(repr(v) for v in act[1:]))

    console.print(grid)
    console.print(f"\n[bold]Total actions:[/bold] {len(entries)}")
