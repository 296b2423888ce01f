"""Non-sensitive configuration for the SQL table parser."""

from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).parent.parent.parent
DATA_DIR = PROJECT_ROOT / "data"
SQLITE_PATH = DATA_DIR / "schema.db"
TYPE_OVERRIDES_PATH = DATA_DIR / "type_overrides.yaml"

# Enum comments, e.g. "状态【枚举】：0-待处理，1-处理中"
ENUM_MARKERS = ("【枚举】", "【enum】")
ENUM_SEPARATORS = "：:"
ENUM_TERMINATORS = "。.\n"
ENUM_ITEM_SEPARATORS = "，,"
ENUM_DASHES = "-—"

# Export defaults
DEFAULT_EXPORT_FILE_NAME = "database_schema"
DEFAULT_BASE_PACKAGE = "com.graduation"
DEFAULT_OUTPUT_PATH = "project/backend/src/main/java/com/graduation"

# Search defaults
DEFAULT_SEARCH_LIMIT = 20
MAX_SEARCH_LIMIT = 50
