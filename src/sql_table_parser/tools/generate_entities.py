"""Generate Java entity classes from CREATE TABLE statements."""

import logging
from datetime import date
from typing import Union

from ..codegen import EntityGenerator, FileEmitter, TypeMapper
from ..config import DEFAULT_BASE_PACKAGE, DEFAULT_OUTPUT_PATH
from ..errors import SqlTableParserError
from ..extractors import parse_create_tables

logger = logging.getLogger(__name__)


async def generate_entities(
    sql: str,
    generated_at: Union[str, date],
    base_package: str = DEFAULT_BASE_PACKAGE,
    output_path: str = DEFAULT_OUTPUT_PATH,
) -> dict:
    """Write one entity class per table under `<output_path>/entity/`.

    Args:
        sql: One or more CREATE TABLE statements.
        generated_at: Date for the `@since` tag (ISO date string or date).
        base_package: Java package prefix.
        output_path: Output directory, relative to the working directory.

    Returns:
        Dictionary with the files written per table, or an error.
    """
    if isinstance(generated_at, str):
        try:
            generated_at = date.fromisoformat(generated_at)
        except ValueError:
            return {
                "success": False,
                "error": f"Invalid generated_at date: {generated_at!r}",
                "suggestion": "Use an ISO date such as 2024-01-31.",
            }

    try:
        tables = parse_create_tables(sql)
        generator = EntityGenerator(
            generated_at=generated_at,
            base_package=base_package,
            type_mapper=TypeMapper.from_yaml(),
        )
        paths = generator.write_all(tables, output_path, FileEmitter())
    except SqlTableParserError as e:
        logger.error("Entity generation failed: %s", e)
        return e.to_dict()

    return {
        "success": True,
        "message": f"Generated {len(tables)} entity class(es)",
        "output_path": output_path,
        "results": [
            {
                "table_name": table.name,
                "class_name": generator.class_name(table),
                "file": str(path),
            }
            for table, path in zip(tables, paths)
        ],
    }
