#!/usr/bin/env python
"""
離線結構注入腳本。

此腳本解析 SQL 檔案中的 CREATE TABLE 語句，並將資料表、欄位及
註解中的列舉值寫入 MCP 伺服器的 SQLite 快取。

使用方式：
    uv run scripts/ingest_schema.py --sql-file schema.sql
    uv run scripts/ingest_schema.py --sql-file schema.sql --export-json out/
"""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path

# 將 src 加入路徑以供匯入
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sql_table_parser.codegen import FileEmitter, export_schema_json
from sql_table_parser.config import DATA_DIR, DEFAULT_EXPORT_FILE_NAME
from sql_table_parser.errors import SqlTableParserError
from sql_table_parser.extractors import parse_create_tables
from sql_table_parser.storage import SQLiteCache, ingest_tables


def main():
    parser = argparse.ArgumentParser(
        description="為 SQL 建表語句解析 MCP 伺服器注入結構中繼資料"
    )
    parser.add_argument(
        "--sql-file",
        required=True,
        type=Path,
        help="含 CREATE TABLE 語句的 SQL 檔案",
    )
    parser.add_argument(
        "--clear",
        action="store_true",
        help="注入前清除現有資料",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="遇到無法解析的欄位定義時中止，而非略過",
    )
    parser.add_argument(
        "--synced-at",
        type=datetime.fromisoformat,
        default=None,
        help="記錄的同步時間（ISO 格式，預設為現在）",
    )
    parser.add_argument(
        "--export-json",
        metavar="DIR",
        default=None,
        help=f"同時將簡化結構匯出為 DIR/{DEFAULT_EXPORT_FILE_NAME}.json",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="輸出除錯日誌",
    )
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    synced_at = args.synced_at or datetime.now()

    print("=" * 60)
    print("SQL 建表語句解析 - 結構注入")
    print("=" * 60)
    print(f"\n來源檔案：{args.sql_file}")

    try:
        sql = args.sql_file.read_text(encoding="utf-8")
    except OSError as e:
        print(f"讀取 SQL 檔案時發生錯誤：{e}")
        sys.exit(1)

    # 解析資料表
    print("\n" + "=" * 60)
    print("解析資料表...")
    print("=" * 60)

    try:
        tables = parse_create_tables(sql, strict=args.strict)
    except SqlTableParserError as e:
        print(f"解析失敗：{e}")
        print(f"建議：{e.suggestion}")
        sys.exit(1)

    print(f"找到 {len(tables)} 個資料表")
    for i, table in enumerate(tables, 1):
        enum_count = sum(1 for c in table.columns if c.enum_values is not None)
        print(f"  [{i}/{len(tables)}] {table.name}（{len(table.columns)} 個欄位，{enum_count} 個列舉）")

    # 寫入快取
    print("\n初始化儲存...")
    cache = SQLiteCache()
    counts = ingest_tables(cache, tables, synced_at, clear=args.clear)

    if args.export_json:
        try:
            path = export_schema_json(tables, export_path=args.export_json, emitter=FileEmitter())
        except SqlTableParserError as e:
            print(f"匯出失敗：{e}")
            sys.exit(1)
        print(f"已匯出 JSON：{path}")

    # 列印摘要
    print("\n" + "=" * 60)
    print("注入完成！")
    print("=" * 60)

    stats = cache.get_stats()
    print(f"\n本次寫入：{counts['tables']} 個資料表，{counts['enums']} 個列舉")
    print(f"\nSQLite 快取：")
    print(f"  - 資料表：{stats['tables']}")
    print(f"  - 列舉：{stats['enums']}")
    print(f"  - 最後同步：{stats['last_sync']}")

    print(f"\n資料儲存於：{DATA_DIR}")
    print("\n您現在可以使用以下指令啟動 MCP 伺服器：uv run sql-table-parser-mcp")


if __name__ == "__main__":
    main()
