"""Map normalized SQL type names to Java types."""

from pathlib import Path
from typing import Optional

import yaml

from ..config import TYPE_OVERRIDES_PATH
from ..errors import ConfigError
from ..extractors.schema import ColumnType

DEFAULT_JAVA_TYPE = "String"

SQL_TO_JAVA = {
    "BIGINT": "Long",
    "INT": "Integer",
    "INTEGER": "Integer",
    "MEDIUMINT": "Integer",
    "SMALLINT": "Integer",
    "TINYINT": "Integer",
    "DECIMAL": "BigDecimal",
    "NUMERIC": "BigDecimal",
    "DOUBLE": "Double",
    "FLOAT": "Float",
    "CHAR": "String",
    "VARCHAR": "String",
    "TINYTEXT": "String",
    "TEXT": "String",
    "MEDIUMTEXT": "String",
    "LONGTEXT": "String",
    "JSON": "String",
    "ENUM": "String",
    "DATETIME": "LocalDateTime",
    "TIMESTAMP": "LocalDateTime",
    "DATE": "LocalDate",
    "TIME": "LocalTime",
    "BOOLEAN": "Boolean",
    "BOOL": "Boolean",
    "BIT": "Boolean",
}

JAVA_IMPORTS = {
    "BigDecimal": "java.math.BigDecimal",
    "LocalDateTime": "java.time.LocalDateTime",
    "LocalDate": "java.time.LocalDate",
    "LocalTime": "java.time.LocalTime",
}


class TypeMapper:
    """Look up Java types, with optional per-project overrides."""

    def __init__(self, overrides: Optional[dict[str, str]] = None):
        self._mapping = dict(SQL_TO_JAVA)
        for sql_type, java_type in (overrides or {}).items():
            self._mapping[str(sql_type).upper()] = str(java_type)

    @classmethod
    def from_yaml(cls, path: Optional[Path] = None) -> "TypeMapper":
        """Build a mapper from a `{SQL_TYPE: JavaType}` YAML file.

        Args:
            path: YAML file. Uses the default overrides path if None.

        Returns:
            TypeMapper; without overrides when the file does not exist.

        Raises:
            ConfigError: If the file cannot be read or is not a mapping.
        """
        path = Path(path) if path is not None else TYPE_OVERRIDES_PATH
        if not path.exists():
            return cls()

        try:
            content = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Cannot load type overrides from {path}: {e}") from e

        if content is None:
            return cls()
        if not isinstance(content, dict):
            raise ConfigError(f"Type overrides in {path} must be a mapping")
        return cls(content)

    def java_type(self, column_type: ColumnType) -> str:
        return self._mapping.get(column_type.name, DEFAULT_JAVA_TYPE)

    @staticmethod
    def java_import(java_type: str) -> Optional[str]:
        return JAVA_IMPORTS.get(java_type)
