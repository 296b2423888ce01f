"""Parse CREATE TABLE statements into the schema cache."""

from datetime import datetime
from typing import Union

from ..errors import SqlTableParserError
from ..extractors import parse_create_tables
from ..storage import SQLiteCache, ingest_tables


async def ingest_sql(
    sql: str,
    synced_at: Union[str, datetime],
    clear: bool = False,
) -> dict:
    """Parse `sql` and store the tables for later lookups.

    Args:
        sql: One or more CREATE TABLE statements.
        synced_at: Sync timestamp (ISO string or datetime).
        clear: Remove previously ingested tables first.

    Returns:
        Dictionary with the ingested counts, or an error.
    """
    if isinstance(synced_at, str):
        try:
            synced_at = datetime.fromisoformat(synced_at)
        except ValueError:
            return {
                "success": False,
                "error": f"Invalid synced_at timestamp: {synced_at!r}",
                "suggestion": "Use an ISO timestamp such as 2024-01-31T12:00:00.",
            }

    try:
        tables = parse_create_tables(sql)
    except SqlTableParserError as e:
        return e.to_dict()

    counts = ingest_tables(SQLiteCache(), tables, synced_at, clear=clear)
    return {
        "success": True,
        "table_names": [t.name for t in tables],
        **counts,
    }
