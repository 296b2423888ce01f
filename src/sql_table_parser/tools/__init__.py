"""MCP tools for the SQL table parser."""

from .parse_tables import parse_sql_tables
from .generate_entities import generate_entities
from .ingest import ingest_sql
from .get_table import get_table_schema
from .get_enum import get_enum_values
from .search_columns import search_columns

__all__ = [
    "parse_sql_tables",
    "generate_entities",
    "ingest_sql",
    "get_table_schema",
    "get_enum_values",
    "search_columns",
]
