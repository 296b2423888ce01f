"""MCP Server for the SQL table parser - exposes DDL parsing tools to AI assistants."""

import asyncio
from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Tool, TextContent
import json

from .tools import (
    parse_sql_tables,
    generate_entities,
    ingest_sql,
    get_table_schema,
    get_enum_values,
    search_columns,
)
from .config import (
    DEFAULT_BASE_PACKAGE,
    DEFAULT_EXPORT_FILE_NAME,
    DEFAULT_OUTPUT_PATH,
    DEFAULT_SEARCH_LIMIT,
)

# Initialize MCP Server
app = Server("sql-table-parser")


# Tool definitions with schemas
TOOLS = [
    Tool(
        name="parse_sql_tables",
        description="""Parse MySQL CREATE TABLE statements into table structure.
Returns columns with type, nullability, default, auto-increment, primary key,
comment and enum values declared in comments (e.g. '状态【枚举】：1-启用，2-禁用').""",
        inputSchema={
            "type": "object",
            "properties": {
                "sql": {
                    "type": "string",
                    "description": "One or more CREATE TABLE statements",
                    "minLength": 10,
                },
                "include_comments": {
                    "type": "boolean",
                    "description": "Whether to include column comments",
                    "default": True,
                },
                "parse_enums": {
                    "type": "boolean",
                    "description": "Whether to parse enum values from comments",
                    "default": True,
                },
                "export_to_file": {
                    "type": "boolean",
                    "description": "Whether to export the schema as a JSON file",
                    "default": False,
                },
                "file_name": {
                    "type": "string",
                    "description": f"JSON file name without extension (default: {DEFAULT_EXPORT_FILE_NAME})",
                    "default": DEFAULT_EXPORT_FILE_NAME,
                },
                "export_path": {
                    "type": "string",
                    "description": "Absolute export directory; working directory if empty",
                    "default": "",
                },
            },
            "required": ["sql"],
        },
    ),
    Tool(
        name="generate_entities",
        description="""Generate Lombok/MyBatis-Plus Java entity classes from CREATE TABLE statements.
Writes one <ClassName>.java per table under <output_path>/entity/.""",
        inputSchema={
            "type": "object",
            "properties": {
                "sql": {
                    "type": "string",
                    "description": "One or more CREATE TABLE statements",
                },
                "generated_at": {
                    "type": "string",
                    "description": "ISO date written into the @since tag (e.g. 2024-01-31)",
                },
                "base_package": {
                    "type": "string",
                    "description": f"Java package prefix (default: {DEFAULT_BASE_PACKAGE})",
                    "default": DEFAULT_BASE_PACKAGE,
                },
                "output_path": {
                    "type": "string",
                    "description": "Output directory relative to the working directory",
                    "default": DEFAULT_OUTPUT_PATH,
                },
            },
            "required": ["sql", "generated_at"],
        },
    ),
    Tool(
        name="ingest_sql",
        description="""Parse CREATE TABLE statements and store them for get_table_schema,
get_enum_values and search_columns.""",
        inputSchema={
            "type": "object",
            "properties": {
                "sql": {
                    "type": "string",
                    "description": "One or more CREATE TABLE statements",
                },
                "synced_at": {
                    "type": "string",
                    "description": "ISO timestamp recorded for this ingest",
                },
                "clear": {
                    "type": "boolean",
                    "description": "Remove previously ingested tables first",
                    "default": False,
                },
            },
            "required": ["sql", "synced_at"],
        },
    ),
    Tool(
        name="get_table_schema",
        description="""Get complete schema for an ingested table.
Use this to get detailed column information BEFORE writing SQL that uses specific columns.""",
        inputSchema={
            "type": "object",
            "properties": {
                "table_name": {
                    "type": "string",
                    "description": "Exact table name (case-insensitive)",
                },
            },
            "required": ["table_name"],
        },
    ),
    Tool(
        name="get_enum_values",
        description="""Get valid values for STATUS/TYPE columns declared in column comments.
ALWAYS USE THIS before filtering by status, type, or any enum-like column.""",
        inputSchema={
            "type": "object",
            "properties": {
                "table_name": {
                    "type": "string",
                    "description": "Table containing the column",
                },
                "column_name": {
                    "type": "string",
                    "description": "Column name (e.g., status, type)",
                },
            },
            "required": ["table_name", "column_name"],
        },
    ),
    Tool(
        name="search_columns",
        description="""Search for columns across all ingested tables by name or comment.
Use this when looking for specific data fields without knowing which table contains them.""",
        inputSchema={
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "description": "Substring of a column name or comment (e.g., 'email', '时间')",
                },
                "data_type": {
                    "type": "string",
                    "description": "Optional filter by type name (e.g., VARCHAR, BIGINT, DATETIME)",
                },
                "limit": {
                    "type": "integer",
                    "description": f"Maximum results (default: {DEFAULT_SEARCH_LIMIT})",
                    "default": DEFAULT_SEARCH_LIMIT,
                },
            },
            "required": ["query"],
        },
    ),
]


@app.list_tools()
async def list_tools() -> list[Tool]:
    """Return list of available tools."""
    return TOOLS


@app.call_tool()
async def call_tool(name: str, arguments: dict) -> list[TextContent]:
    """Handle tool calls from MCP clients."""

    # Map tool names to handlers
    handlers = {
        "parse_sql_tables": lambda args: parse_sql_tables(
            sql=args["sql"],
            include_comments=args.get("include_comments", True),
            parse_enums=args.get("parse_enums", True),
            export_to_file=args.get("export_to_file", False),
            file_name=args.get("file_name", DEFAULT_EXPORT_FILE_NAME),
            export_path=args.get("export_path", ""),
        ),
        "generate_entities": lambda args: generate_entities(
            sql=args["sql"],
            generated_at=args["generated_at"],
            base_package=args.get("base_package", DEFAULT_BASE_PACKAGE),
            output_path=args.get("output_path", DEFAULT_OUTPUT_PATH),
        ),
        "ingest_sql": lambda args: ingest_sql(
            sql=args["sql"],
            synced_at=args["synced_at"],
            clear=args.get("clear", False),
        ),
        "get_table_schema": lambda args: get_table_schema(
            table_name=args["table_name"],
        ),
        "get_enum_values": lambda args: get_enum_values(
            table_name=args["table_name"],
            column_name=args["column_name"],
        ),
        "search_columns": lambda args: search_columns(
            query=args["query"],
            data_type=args.get("data_type"),
            limit=args.get("limit", DEFAULT_SEARCH_LIMIT),
        ),
    }

    handler = handlers.get(name)
    if not handler:
        return [TextContent(
            type="text",
            text=json.dumps({"error": f"Unknown tool: {name}"}, indent=2),
        )]

    try:
        result = await handler(arguments)
        return [TextContent(
            type="text",
            text=json.dumps(result, indent=2, ensure_ascii=False),
        )]
    except Exception as e:
        return [TextContent(
            type="text",
            text=json.dumps({
                "error": str(e),
                "tool": name,
                "arguments": arguments,
            }, indent=2, ensure_ascii=False),
        )]


def main():
    """Entry point for the MCP server."""
    async def run():
        async with stdio_server() as (read_stream, write_stream):
            await app.run(
                read_stream,
                write_stream,
                app.create_initialization_options(),
            )

    asyncio.run(run())


if __name__ == "__main__":
    main()
