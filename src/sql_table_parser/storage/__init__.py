"""Storage layer for the SQL table parser."""

from .ingest import ingest_tables
from .sqlite_cache import SQLiteCache

__all__ = [
    "SQLiteCache",
    "ingest_tables",
]
