from datetime import datetime

import pytest

from sql_table_parser.extractors import parse_create_tables
from sql_table_parser.storage import SQLiteCache, ingest_tables

SYNCED_AT = datetime(2024, 1, 31, 12, 0, 0)


@pytest.fixture
def cache(tmp_path):
    return SQLiteCache(path=str(tmp_path / "cache.db"))


def test_ingest_and_lookup(cache, order_sql):
    counts = ingest_tables(cache, parse_create_tables(order_sql), SYNCED_AT)
    assert counts == {"tables": 2, "enums": 1}

    table = cache.get_table("ORDERS")
    assert table["table_name"] == "orders"
    assert table["comment"] == "订单表"
    assert [c["name"] for c in table["columns"]][:3] == ["id", "order_no", "amount"]

    enum = cache.get_enum("Orders", "PAY_STATUS")
    assert enum["column_name"] == "pay_status"
    assert enum["source"] == "comment"
    assert enum["values"][2] == {"value": 2, "label": "已退款"}

    assert cache.get_last_sync_time() == SYNCED_AT


def test_upsert_replaces_existing(cache):
    ingest_tables(cache, parse_create_tables("CREATE TABLE t (a INT);"), SYNCED_AT)
    ingest_tables(cache, parse_create_tables("CREATE TABLE t (a INT, b INT);"), SYNCED_AT)
    assert [c["name"] for c in cache.get_table("t")["columns"]] == ["a", "b"]
    assert cache.get_stats()["tables"] == 1


def test_clear(cache, order_sql, user_sql):
    ingest_tables(cache, parse_create_tables(order_sql), SYNCED_AT)
    ingest_tables(cache, parse_create_tables(user_sql), SYNCED_AT, clear=True)
    assert [t["table_name"] for t in cache.get_all_tables()] == ["user"]
    assert cache.get_enum("orders", "pay_status") is None


def test_search_columns(cache, order_sql):
    ingest_tables(cache, parse_create_tables(order_sql), SYNCED_AT)

    by_comment = cache.search_columns("时间")
    assert [(r["table_name"], r["column_name"]) for r in by_comment] == [("orders", "create_time")]

    by_name = cache.search_columns("ORDER")
    assert {r["column_name"] for r in by_name} == {"order_no", "order_id"}

    typed = cache.search_columns("id", data_type="bigint")
    assert all(r["data_type"].upper().startswith("BIGINT") for r in typed)

    assert len(cache.search_columns("", limit=3)) == 3
