"""Get valid values for enum columns declared in column comments."""

from ..config import ENUM_MARKERS
from ..storage import SQLiteCache


async def get_enum_values(
    table_name: str,
    column_name: str,
) -> dict:
    """Get the value/label pairs of an enum column.

    Args:
        table_name: Table containing the column.
        column_name: Column name to get values for.

    Returns:
        Dictionary with valid values and their labels.
    """
    cache = SQLiteCache()

    enum = cache.get_enum(table_name, column_name)
    if enum:
        return {
            "success": True,
            "table_name": enum["table_name"],
            "column_name": enum["column_name"],
            "source": enum["source"],
            "values": enum["values"],
            "usage_hint": f"Use these exact values when filtering by {table_name}.{column_name}",
        }

    # Check if the table exists
    table = cache.get_table(table_name)
    if not table:
        return {
            "success": False,
            "error": f"Table '{table_name}' not found.",
        }

    # Check if the column exists
    column = None
    for col in table["columns"]:
        if col["name"].lower() == column_name.lower():
            column = col
            break

    if not column:
        available_columns = [c["name"] for c in table["columns"]]
        return {
            "success": False,
            "error": f"Column '{column_name}' not found in table '{table_name}'.",
            "available_columns": available_columns[:20],
        }

    # Column exists but no enum defined
    return {
        "success": False,
        "table_name": table["table_name"],
        "column_name": column["name"],
        "column_type": column["type"]["original_type"],
        "message": "No enum values are defined for this column.",
        "suggestions": [
            f"Declare values in the column comment, e.g. '状态{ENUM_MARKERS[0]}：1-启用，2-禁用'",
            "Items must look like '<number>-<label>'",
            "This may not be an enum column - values might be free-form",
        ],
    }
