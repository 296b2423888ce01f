"""Simplified per-table schema document and its JSON export."""

import json
from pathlib import Path
from typing import Optional

from ..config import DEFAULT_EXPORT_FILE_NAME
from ..extractors.schema import Table
from .emitter import FileEmitter


def simplify_schema(tables: list[Table]) -> dict:
    """Reduce tables to name, type and comment per field.

    Returns:
        `{table_name: {"comment": ..., "fields": [{name, type, comment}]}}`
    """
    schema = {}
    for table in tables:
        schema[table.name] = {
            "comment": table.comment,
            "fields": [
                {
                    "name": c.name,
                    "type": c.type.original_type,
                    "comment": c.comment,
                }
                for c in table.columns
            ],
        }
    return schema


def export_schema_json(
    tables: list[Table],
    file_name: str = DEFAULT_EXPORT_FILE_NAME,
    export_path: str = "",
    emitter: Optional[FileEmitter] = None,
) -> Path:
    """Write the simplified schema to `<export_path>/<file_name>.json`.

    Args:
        tables: Parsed tables.
        file_name: File name without extension.
        export_path: Target directory; the emitter root if empty.
        emitter: FileEmitter to write with.

    Returns:
        Path of the written file.
    """
    emitter = emitter or FileEmitter()
    content = json.dumps(simplify_schema(tables), indent=2, ensure_ascii=False)
    return emitter.emit(export_path or ".", f"{file_name}.json", content)
