"""
Shared CLI helpers: database file I/O, value parsing, error output.
"""

import json
from pathlib import Path
from typing import Any, NoReturn

import typer
from rich.console import Console

from tuplelog.core import Database, FormatError
from tuplelog.logging_config import get_logger

DEFAULT_DB_PATH = "tuplelog.json"

console = Console()
logger = get_logger(__name__)


def db_option() -> Any:
    return typer.Option(
        DEFAULT_DB_PATH,
        "--db",
        "-d",
        envvar="TUPLELOG_DB",
        help="Path to serialized database file",
    )


def space_option() -> Any:
    return typer.Option("default", "--space", "-s", help="Space name")


def json_option() -> Any:
    return typer.Option(False, "--json", help="Output as JSON")


def load_db(path: str) -> Database:
    """
    Read a serialized database. A missing file yields a fresh Database.

    Raises:
        FormatError: If the file content is not a serialized database
        MissingDescriptorError: If a replayed table has no descriptor
    """
    p = Path(path)
    if not p.exists():
        logger.info("No database at %s, starting empty", path)
        return Database()
    try:
        source = p.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise FormatError(f"Database file is not UTF-8 text: {path}") from e
    return Database.deserialize(source)


def save_db(db: Database, path: str) -> None:
    p = Path(path)
    if p.parent and not p.parent.exists():
        p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(db.serialize(), encoding="utf-8")


def parse_value(raw: str) -> Any:
    """
    Parse a command-line value as a JSON literal, falling back to text.

    NaN and Infinity stay text: they would never compare equal after replay.

    Examples:
        "600" -> 600, "true" -> True, "null" -> None, "meal" -> "meal"
    """
    try:
        return json.loads(raw, parse_constant=_reject_constant)
    except ValueError:
        return raw


def _reject_constant(name: str) -> NoReturn:
    raise ValueError(f"Unsupported JSON constant: {name}")


def fail(message: str, json_output: bool, **details: Any) -> NoReturn:
    """Report a fatal error and exit with code 2."""
    if json_output:
        print(json.dumps({"error": message, **details}))
    else:
        console.print(f"[red]Error:[/red] {message}")
    raise typer.Exit(2)
