"""Parse CREATE TABLE statements and optionally export the schema as JSON."""

import logging

from ..codegen import FileEmitter, export_schema_json, simplify_schema
from ..config import DEFAULT_EXPORT_FILE_NAME
from ..errors import SqlTableParserError
from ..extractors import parse_create_tables

logger = logging.getLogger(__name__)


async def parse_sql_tables(
    sql: str,
    include_comments: bool = True,
    parse_enums: bool = True,
    export_to_file: bool = False,
    file_name: str = DEFAULT_EXPORT_FILE_NAME,
    export_path: str = "",
) -> dict:
    """Parse table structure, column attributes and comment enums.

    Args:
        sql: One or more CREATE TABLE statements.
        include_comments: Keep column comments.
        parse_enums: Extract enumerations from column comments.
        export_to_file: Also write the simplified schema to a JSON file.
        file_name: JSON file name without extension.
        export_path: Directory for the JSON file (working directory if empty).

    Returns:
        Dictionary with the simplified schema, a summary and the full
        per-column data, or an error with a suggestion.
    """
    logger.info("Parsing SQL (%d chars), export_to_file=%s", len(sql), export_to_file)

    try:
        tables = parse_create_tables(
            sql,
            include_comments=include_comments,
            parse_enums=parse_enums,
        )
        exported_file = None
        if export_to_file:
            path = export_schema_json(tables, file_name, export_path, FileEmitter())
            exported_file = str(path)
    except SqlTableParserError as e:
        logger.error("Parsing failed: %s", e)
        return e.to_dict()

    return {
        "success": True,
        "data": {
            "tables": simplify_schema(tables),
            "summary": {
                "table_count": len(tables),
                "total_fields": sum(len(t.columns) for t in tables),
                "exported_file": exported_file,
            },
            "full_data": [t.to_dict() for t in tables],
        },
    }
