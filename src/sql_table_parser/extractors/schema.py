"""Schema model produced by the DDL parser."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union


class DefaultKeyword(Enum):
    """Keyword defaults that are not literal values."""
    CURRENT_TIMESTAMP = "CURRENT_TIMESTAMP"

    def __str__(self) -> str:
        return self.value


CURRENT_TIMESTAMP = DefaultKeyword.CURRENT_TIMESTAMP

DefaultValue = Union[int, float, str, DefaultKeyword]


def default_kind(value: Optional[DefaultValue]) -> Optional[str]:
    """Tag of a coerced default: 'keyword', 'number', 'string' or None."""
    if value is None:
        return None
    if isinstance(value, DefaultKeyword):
        return "keyword"
    if isinstance(value, (int, float)):
        return "number"
    return "string"


@dataclass(frozen=True)
class EnumValue:
    """One value→label pair embedded in a column comment."""
    value: int
    label: str

    def to_dict(self) -> dict:
        return {
            "value": self.value,
            "label": self.label,
        }


@dataclass(frozen=True)
class ColumnType:
    """Normalized column type."""
    name: str
    length: Optional[str]
    original_type: str

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "length": self.length,
            "original_type": self.original_type,
        }


@dataclass(frozen=True)
class Column:
    """Column metadata."""
    name: str
    type: ColumnType
    nullable: bool = True
    default_value: Optional[DefaultValue] = None
    auto_increment: bool = False
    primary_key: bool = False
    comment: str = ""
    enum_values: Optional[tuple[EnumValue, ...]] = None

    def to_dict(self) -> dict:
        default = self.default_value
        return {
            "name": self.name,
            "type": self.type.to_dict(),
            "nullable": self.nullable,
            "default_value": str(default) if isinstance(default, DefaultKeyword) else default,
            "default_kind": default_kind(default),
            "auto_increment": self.auto_increment,
            "primary_key": self.primary_key,
            "comment": self.comment,
            "enum_values": (
                [v.to_dict() for v in self.enum_values]
                if self.enum_values is not None else None
            ),
        }


@dataclass(frozen=True)
class Table:
    """Table metadata with columns in declaration order."""
    name: str
    comment: str = ""
    columns: tuple[Column, ...] = field(default_factory=tuple)

    @property
    def primary_key(self) -> list[str]:
        return [c.name for c in self.columns if c.primary_key]

    def get_column(self, name: str) -> Optional[Column]:
        for column in self.columns:
            if column.name.lower() == name.lower():
                return column
        return None

    def to_dict(self) -> dict:
        return {
            "table_name": self.name,
            "comment": self.comment,
            "columns": [c.to_dict() for c in self.columns],
            "primary_key": self.primary_key,
        }

    def to_document(self) -> str:
        """Create a short plain-text description of the table."""
        col_descriptions = []
        for c in self.columns:
            desc = f"- {c.name} ({c.type.original_type})"
            if c.comment:
                desc += f": {c.comment}"
            col_descriptions.append(desc)

        pk_text = f"Primary Key: {', '.join(self.primary_key)}" if self.primary_key else ""

        return f"""Table: {self.name}
Description: {self.comment or 'No description available'}
{pk_text}
Columns:
{chr(10).join(col_descriptions)}""".strip()
