"""
Table commands: header, min-len, info, infer
"""

import json
from typing import List

import typer
from rich.table import Table

from tuplelog.core import TupleLogError
from tuplelog_cli.common import console, db_option, fail, json_option, load_db, save_db, space_option

app = typer.Typer()


@app.command()
def header(
    table: str = typer.Argument(..., help="Table name"),
    columns: List[str] = typer.Argument(..., help="Column names"),
    space: str = space_option(),
    db_path: str = db_option(),
    json_output: bool = json_option(),
):
    """
    Define a table's header (display metadata only).

    Examples:
        tuplelog table header Expenses destination sum comment
    """
    try:
        db = load_db(db_path)
        db.define_header(table, columns, space)
        save_db(db, db_path)
    except (TupleLogError, OSError) as e:
        fail(str(e), json_output, path=db_path)
    if json_output:
        print(json.dumps({"space": space, "table": table, "header": list(columns)}))
    else:
        console.print(f"[green]✓ Header set for {space}:{table}[/green]")


@app.command("min-len")
def min_len(
    table: str = typer.Argument(..., help="Table name"),
    length: int = typer.Argument(..., min=0, help="Minimum tuple length"),
    space: str = space_option(),
    db_path: str = db_option(),
    json_output: bool = json_option(),
):
    """
    Reject future tuples shorter than LENGTH.

    Examples:
        tuplelog table min-len Expenses 2
    """
    try:
        db = load_db(db_path)
        db.define_min_tuple_len(table, length, space)
        save_db(db, db_path)
    except (TupleLogError, OSError) as e:
        fail(str(e), json_output, path=db_path)
    if json_output:
        print(json.dumps({"space": space, "table": table, "minTupleLen": length}))
    else:
        console.print(f"[green]✓ Minimum tuple length for {space}:{table} is {length}[/green]")


@app.command()
def info(
    table: str = typer.Argument(..., help="Table name"),
    space: str = space_option(),
    db_path: str = db_option(),
    json_output: bool = json_option(),
):
    """
    Show header, inferred types and stored tuples of a table.

    Every command reloads the database file through replay, so the types
    shown come from the longest stored tuple.

    Examples:
        tuplelog table info Expenses
        tuplelog table info Expenses --json
    """
    try:
        db = load_db(db_path)
    except (TupleLogError, OSError) as e:
        fail(str(e), json_output, path=db_path)

    # Read-only: the empty table get_table_info may create is not saved.
    table_info = db.get_table_info(table, space)
    rows = db.get_values(table, space)
    types = [t.value for t in table_info.types] if table_info.types is not None else None

    if json_output:
        output = {
            "space": space,
            "table": table,
            "header": table_info.header,
            "types": types,
            "values": [list(r) for r in rows],
        }
        print(json.dumps(output, indent=2, default=str))
        return

    console.print(f"[bold]{space}:{table}[/bold]")
    console.print(f"  Header: [cyan]{', '.join(table_info.header) or '-'}[/cyan]")
    console.print(f"  Types: [yellow]{', '.join(types) if types is not None else 'not inferred'}[/yellow]")

    width = max([len(table_info.header)] + [len(r) for r in rows])
    grid = Table(title=f"{len(rows)} tuple(s)")
    for i in range(width):
        grid.add_column(table_info.header[i] if i < len(table_info.header) else f"#{i}", style="green")
    for r in rows:
        grid.add_row(*[repr(v) for v in r], *[""] * (width - len(r)))
    if width:
        console.print(grid)


@app.command()
def infer(
    table: str = typer.Argument(..., help="Table name"),
    space: str = space_option(),
    db_path: str = db_option(),
    json_output: bool = json_option(),
):
    """
    Re-infer a table's types from its longest stored tuple.

    Examples:
        tuplelog table infer Expenses
    """
    try:
        db = load_db(db_path)
        types = db.infer_types_for(table, space)
        save_db(db, db_path)
    except (TupleLogError, OSError) as e:
        fail(str(e), json_output, path=db_path)

    tags = [t.value for t in types]
    if json_output:
        print(json.dumps({"space": space, "table": table, "types": tags}))
    elif tags:
        console.print(f"[green]✓ Types for {space}:{table}:[/green] {', '.join(tags)}")
    else:
        console.print(f"[yellow]No stored tuples in {space}:{table}[/yellow]")
