"""Load parsed tables into the SQLite cache."""

import logging
from datetime import datetime

from ..extractors.schema import Table
from .sqlite_cache import SQLiteCache

logger = logging.getLogger(__name__)


def ingest_tables(
    cache: SQLiteCache,
    tables: list[Table],
    synced_at: datetime,
    clear: bool = False,
) -> dict:
    """Store tables and their comment enums in `cache`.

    Args:
        cache: Target cache.
        tables: Parsed tables.
        synced_at: Timestamp recorded on every row written.
        clear: Delete existing data first.

    Returns:
        Counts of tables and enums written.
    """
    if clear:
        cache.clear_all()

    enum_count = 0
    for table in tables:
        cache.upsert_table(table.to_dict(), synced_at)

        for column in table.columns:
            if column.enum_values is None:
                continue
            cache.upsert_enum({
                "table_name": table.name,
                "column_name": column.name,
                "values": [v.to_dict() for v in column.enum_values],
                "source": "comment",
            }, synced_at)
            enum_count += 1

    cache.update_last_sync_time(synced_at)
    logger.info("Ingested %d table(s) and %d enum(s)", len(tables), enum_count)
    return {"tables": len(tables), "enums": enum_count}
