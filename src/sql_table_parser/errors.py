"""Exceptions raised by the parser and its collaborators."""

from pathlib import Path
from typing import Optional


class SqlTableParserError(Exception):
    """Base error with a user-facing remediation hint."""

    suggestion = "Check the input and try again."

    def __init__(self, message: str, suggestion: Optional[str] = None):
        super().__init__(message)
        if suggestion is not None:
            self.suggestion = suggestion

    def to_dict(self) -> dict:
        return {
            "success": False,
            "error": str(self),
            "suggestion": self.suggestion,
        }


class ParseError(SqlTableParserError):
    """The DDL text could not be turned into tables."""


class NoTableFound(ParseError):
    """No CREATE TABLE statement was found; fatal for the whole call."""

    suggestion = (
        "Make sure the input contains at least one "
        "'CREATE TABLE name (...);' statement."
    )

    def __init__(self, message: str = "No valid CREATE TABLE statement found"):
        super().__init__(message)


class MalformedColumnError(ParseError):
    """A column segment did not match `name type ...` (strict mode only)."""

    suggestion = "Every column definition needs at least a name and a type."

    def __init__(self, segment: str, table_name: Optional[str] = None):
        where = f" in table '{table_name}'" if table_name else ""
        super().__init__(f"Cannot parse column definition{where}: {segment!r}")
        self.segment = segment
        self.table_name = table_name


class EmissionError(SqlTableParserError):
    """Writing a generated artifact failed."""

    suggestion = "Check that the output directory exists or can be created and is writable."

    def __init__(self, path: Path, original: OSError):
        super().__init__(f"Failed to write {path}: {original}")
        self.path = path
        self.original = original


class ConfigError(SqlTableParserError):
    """A configuration file could not be loaded."""

    suggestion = "Fix or remove the configuration file."
