"""
Action command: submit one action to a table.
"""

import json
from typing import List, Optional

import typer

from tuplelog.core import TupleLogError
from tuplelog_cli.common import (
    console,
    db_option,
    fail,
    json_option,
    load_db,
    parse_value,
    save_db,
    space_option,
)


def action_command(
    table: str = typer.Argument(..., help="Target table name"),
    values: Optional[List[str]] = typer.Argument(None, help="Tuple values (JSON literals or text)"),
    space: str = space_option(),
    db_path: str = db_option(),
    json_output: bool = json_option(),
):
    """
    Submit an action. The attempt is logged even when the tuple is rejected.

    Examples:
        tuplelog action Expenses meal 600
        tuplelog action Expenses meal 300 "eat out"
        tuplelog action --space work Trips Berlin true
    """
    parsed = [parse_value(v) for v in values or []]
    try:
        db = load_db(db_path)
        accepted = db.action([table, *parsed], space)
        save_db(db, db_path)
    except (TupleLogError, OSError) as e:
        fail(str(e), json_output, path=db_path)

    if json_output:
        print(json.dumps({"accepted": accepted, "table": table, "space": space, "values": parsed}))
    elif accepted:
        console.print(f"[green]✓ Stored tuple in {space}:{table}[/green]")
    else:
        console.print(f"[yellow]✗ Tuple rejected by {space}:{table} (action logged)[/yellow]")

    raise typer.Exit(0 if accepted else 1)
