"""
Replay command: rebuild a database from its serialized log and summarise it
"""

import json

import typer
from rich.table import Table

from tuplelog.core import Database, TupleLogError
from tuplelog_cli.common import console, db_option, fail, json_option, load_db


def replay_command(
    db_path: str = db_option(),
    json_output: bool = json_option(),
):
    """
    Replay the action log of a serialized database and verify it.

    Checks that serializing the rebuilt database and reading it back yields
    an equal database.

    Examples:
        tuplelog replay
        tuplelog replay --db expenses.json --json
    """
    try:
        db = load_db(db_path)
        stable = Database.deserialize(db.serialize()) == db
    except (TupleLogError, OSError) as e:
        fail(str(e), json_output, path=db_path)

    tables = []
    for space_name in db.space_names():
        for table_name in db.table_names(space_name):
            types = db.get_table_info(table_name, space_name).types
            tables.append({
                "space": space_name,
                "table": table_name,
                "actions": sum(1 for a in db.get_actions(space_name) if a[0] == table_name),
                "tuples": len(db.get_values(table_name, space_name)),
                "types": [t.value for t in types] if types is not None else None,
            })

    if json_output:
        output = {
            "success": stable,
            "fingerprint": db.fingerprint(),
            "tables": tables,
        }
        print(json.dumps(output, indent=2))
    else:
        if stable:
            console.print("[green]✓ Replay is stable[/green]")
        else:
            console.print("[red]✗ Round-trip produced a different database[/red]")
        console.print(f"  Fingerprint: [yellow]{db.fingerprint()}[/yellow]")

        grid = Table(title="Tables")
        grid.add_column("Space", style="cyan")
        grid.add_column("Table", style="green")
        grid.add_column("Actions", justify="right")
        grid.add_column("Tuples", justify="right")
        grid.add_column("Types", style="yellow")
        for t in tables:
            grid.add_row(
                t["space"],
                t["table"],
                str(t["actions"]),
                str(t["tuples"]),
                ", ".join(t["types"]) if t["types"] is not None else "-",
            )
        console.print(grid)

    raise typer.Exit(0 if stable else 1)
