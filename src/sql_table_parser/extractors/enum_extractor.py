"""從欄位註解提取內嵌的列舉值。"""

import logging
import re
from typing import Optional

from ..config import (
    ENUM_DASHES,
    ENUM_ITEM_SEPARATORS,
    ENUM_MARKERS,
    ENUM_SEPARATORS,
    ENUM_TERMINATORS,
)
from .schema import EnumValue

logger = logging.getLogger(__name__)


class EnumCommentParser:
    """解析形如「狀態【枚举】：0-待處理，1-處理中，2-已完成。」的註解。"""

    def __init__(
        self,
        markers: tuple[str, ...] = ENUM_MARKERS,
        separators: str = ENUM_SEPARATORS,
        terminators: str = ENUM_TERMINATORS,
        item_separators: str = ENUM_ITEM_SEPARATORS,
        dashes: str = ENUM_DASHES,
    ):
        """初始化列舉註解解析器。

        參數：
            markers: 標示「此欄位為列舉」的固定子字串，不分大小寫。
            separators: 標記後可接受的分隔符號。
            terminators: 結束項目列表的字元（句號或換行）。
            item_separators: 分割項目的逗號（全形與半形）。
            dashes: 數值與標籤之間可接受的連字號。
        """
        marker_alt = "|".join(re.escape(m) for m in markers)
        self._marker_re = re.compile(marker_alt, re.IGNORECASE)
        self._list_re = re.compile(
            rf"(?:{marker_alt})\s*[{re.escape(separators)}]"
            rf"\s*([^{re.escape(terminators)}]*)",
            re.IGNORECASE,
        )
        self._item_split_re = re.compile(rf"[{re.escape(item_separators)}]")
        self._item_re = re.compile(rf"^(\d+)\s*[{re.escape(dashes)}]\s*(.+)$", re.DOTALL)

    def has_marker(self, comment: Optional[str]) -> bool:
        return bool(comment) and self._marker_re.search(comment) is not None

    def parse(self, comment: Optional[str]) -> Optional[tuple[EnumValue, ...]]:
        """從註解提取列舉值。

        不符合「數字-標籤」格式的項目會被略過。

        參數：
            comment: 欄位註解。

        回傳：
            依出現順序的 EnumValue 元組；若沒有標記，或有標記但
            沒有任何項目符合，則為 None。
        """
        if not self.has_marker(comment):
            return None

        match = self._list_re.search(comment)
        if not match:
            logger.debug("列舉標記後缺少分隔符號：%r", comment)
            return None

        values = []
        for item in self._item_split_re.split(match.group(1)):
            item = item.strip()
            item_match = self._item_re.match(item)
            if not item_match:
                if item:
                    logger.debug("略過無法解析的列舉項目：%r", item)
                continue

            value, label = item_match.groups()
            values.append(EnumValue(value=int(value), label=label.strip()))

        return tuple(values) if values else None


def parse_enum_comment(comment: Optional[str]) -> Optional[tuple[EnumValue, ...]]:
    """以預設設定解析列舉註解。"""
    return EnumCommentParser().parse(comment)
