"""在所有資料表中搜尋欄位。"""

from typing import Optional

from ..config import DEFAULT_SEARCH_LIMIT, MAX_SEARCH_LIMIT
from ..storage import SQLiteCache


async def search_columns(
    query: str,
    data_type: Optional[str] = None,
    limit: int = DEFAULT_SEARCH_LIMIT,
) -> dict:
    """依名稱或註解在所有資料表中搜尋欄位。

    參數：
        query: 欄位名稱或註解中的關鍵字（例如：「email」、「创建时间」）。
        data_type: 選用，依類型名稱篩選（例如：「VARCHAR」、「BIGINT」）。
        limit: 最大結果數（預設：20）。

    回傳：
        包含符合欄位及其資料表名稱的字典。
    """
    limit = max(1, min(limit, MAX_SEARCH_LIMIT))
    results = SQLiteCache().search_columns(query, data_type=data_type, limit=limit)

    if not results:
        message = f"找不到符合「{query}」的欄位"
        if data_type:
            message += f"（類型為「{data_type}」）"
        message += "。請嘗試其他關鍵字或移除類型篩選。"

        return {
            "success": True,
            "query": query,
            "data_type_filter": data_type,
            "results": [],
            "message": message,
        }

    return {
        "success": True,
        "query": query,
        "data_type_filter": data_type,
        "result_count": len(results),
        "results": results,
    }
