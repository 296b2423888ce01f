"""取得特定資料表的詳細結構。"""

from ..storage import SQLiteCache


async def get_table_schema(table_name: str) -> dict:
    """依名稱取得已注入資料表的完整結構。

    參數：
        table_name: 精確的資料表名稱（不分大小寫）。

    回傳：
        包含欄位、主鍵及註解的字典；找不到時附上相似的資料表名稱。
    """
    cache = SQLiteCache()
    table = cache.get_table(table_name)

    if not table:
        # 嘗試建議類似的資料表
        all_tables = cache.get_all_tables()
        suggestions = [
            t["table_name"] for t in all_tables
            if table_name.lower() in t["table_name"].lower()
        ][:5]

        return {
            "success": False,
            "error": f"找不到資料表「{table_name}」。",
            "suggestions": suggestions if suggestions else None,
        }

    # 格式化欄位以提高可讀性
    columns_formatted = []
    for col in table["columns"]:
        col_info = {
            "name": col["name"],
            "type": col["type"]["original_type"],
            "nullable": col["nullable"],
        }
        if col.get("comment"):
            col_info["comment"] = col["comment"]
        if col.get("default_value") is not None:
            col_info["default"] = col["default_value"]
        if col.get("auto_increment"):
            col_info["auto_increment"] = True
        if col.get("enum_values"):
            col_info["enum_values"] = col["enum_values"]
        columns_formatted.append(col_info)

    return {
        "success": True,
        "table_name": table["table_name"],
        "description": table.get("comment") or "無可用描述",
        "primary_key": table.get("primary_key", []),
        "columns": columns_formatted,
    }
