import json

import pytest

from sql_table_parser.server import TOOLS, call_tool
from sql_table_parser.tools import (
    generate_entities,
    get_enum_values,
    get_table_schema,
    ingest_sql,
    parse_sql_tables,
    search_columns,
)


async def test_parse_sql_tables(user_sql):
    result = await parse_sql_tables(user_sql)

    assert result["success"] is True
    assert result["data"]["summary"] == {
        "table_count": 1,
        "total_fields": 3,
        "exported_file": None,
    }
    assert list(result["data"]["tables"]) == ["user"]
    status = result["data"]["full_data"][0]["columns"][1]
    assert status["enum_values"] == [{"value": 1, "label": "启用"}, {"value": 2, "label": "禁用"}]


async def test_parse_sql_tables_leaves_cache_untouched(cache_path, user_sql):
    result = await parse_sql_tables(user_sql)
    assert result["success"] is True
    assert not cache_path.exists()


async def test_parse_sql_tables_export(tmp_path, user_sql):
    result = await parse_sql_tables(
        user_sql, export_to_file=True, file_name="users", export_path=str(tmp_path),
    )
    exported = result["data"]["summary"]["exported_file"]
    assert exported.endswith("users.json")
    assert json.loads((tmp_path / "users.json").read_text(encoding="utf-8"))["user"]["comment"] == "用户表"


async def test_parse_sql_tables_without_table():
    result = await parse_sql_tables("SELECT * FROM t;")
    assert result["success"] is False
    assert "CREATE TABLE" in result["error"]
    assert result["suggestion"]


async def test_generate_entities(tmp_path, monkeypatch, user_sql):
    monkeypatch.chdir(tmp_path)
    result = await generate_entities(user_sql, generated_at="2024-01-31", output_path="out")

    assert result["success"] is True
    [item] = result["results"]
    assert item["class_name"] == "User"
    source = (tmp_path / "out" / "entity" / "User.java").read_text(encoding="utf-8")
    assert "@since 2024-01-31" in source


async def test_generate_entities_rejects_bad_date(user_sql):
    result = await generate_entities(user_sql, generated_at="yesterday")
    assert result["success"] is False
    assert "suggestion" in result


async def test_generate_entities_reports_write_failure(tmp_path, monkeypatch, user_sql):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "out").write_text("", encoding="utf-8")
    result = await generate_entities(user_sql, generated_at="2024-01-31", output_path="out")
    assert result["success"] is False
    assert "User.java" in result["error"]


async def test_ingest_and_query_tools(cache_path, order_sql):
    ingested = await ingest_sql(order_sql, synced_at="2024-01-31T12:00:00")
    assert ingested == {
        "success": True,
        "table_names": ["orders", "order_item"],
        "tables": 2,
        "enums": 1,
    }

    table = await get_table_schema("orders")
    assert table["success"] is True
    assert table["description"] == "订单表"
    create_time = next(c for c in table["columns"] if c["name"] == "create_time")
    assert create_time["default"] == "CURRENT_TIMESTAMP"

    enum = await get_enum_values("orders", "pay_status")
    assert enum["success"] is True
    assert [v["value"] for v in enum["values"]] == [0, 1, 2]

    no_enum = await get_enum_values("orders", "remark")
    assert no_enum["success"] is False
    assert no_enum["column_type"] == "varchar(255)"

    missing_column = await get_enum_values("orders", "nope")
    assert "available_columns" in missing_column

    missing_table = await get_table_schema("order")
    assert missing_table["success"] is False
    assert set(missing_table["suggestions"]) == {"orders", "order_item"}

    found = await search_columns("订单")
    assert found["result_count"] == 1

    nothing = await search_columns("zzz", data_type="INT")
    assert nothing["results"] == []
    assert "INT" in nothing["message"]


async def test_ingest_sql_rejects_bad_timestamp(cache_path, user_sql):
    result = await ingest_sql(user_sql, synced_at="not-a-time")
    assert result["success"] is False


def test_tool_names():
    assert [t.name for t in TOOLS] == [
        "parse_sql_tables",
        "generate_entities",
        "ingest_sql",
        "get_table_schema",
        "get_enum_values",
        "search_columns",
    ]


async def test_call_tool_round_trip(user_sql):
    [content] = await call_tool("parse_sql_tables", {"sql": user_sql})
    payload = json.loads(content.text)
    assert payload["data"]["summary"]["table_count"] == 1


async def test_call_tool_unknown():
    [content] = await call_tool("nope", {})
    assert json.loads(content.text) == {"error": "Unknown tool: nope"}


async def test_call_tool_missing_argument():
    [content] = await call_tool("parse_sql_tables", {})
    payload = json.loads(content.text)
    assert payload["tool"] == "parse_sql_tables"
    assert "error" in payload
