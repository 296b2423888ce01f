"""DDL extractors for MySQL-style CREATE TABLE text."""

from .column_parser import ColumnParser, DefaultValueCoercer, TypeNormalizer
from .constraint_classifier import ConstraintClassifier
from .ddl_parser import DDLParser, parse_create_tables
from .enum_extractor import EnumCommentParser, parse_enum_comment
from .field_splitter import FieldListSplitter, split_fields
from .schema import (
    CURRENT_TIMESTAMP,
    Column,
    ColumnType,
    DefaultKeyword,
    EnumValue,
    Table,
)
from .statement_extractor import StatementExtractor, TableStatement, strip_comments

__all__ = [
    "CURRENT_TIMESTAMP",
    "Column",
    "ColumnParser",
    "ColumnType",
    "ConstraintClassifier",
    "DDLParser",
    "DefaultKeyword",
    "DefaultValueCoercer",
    "EnumCommentParser",
    "EnumValue",
    "FieldListSplitter",
    "StatementExtractor",
    "Table",
    "TableStatement",
    "TypeNormalizer",
    "parse_create_tables",
    "parse_enum_comment",
    "split_fields",
    "strip_comments",
]
