"""Locate CREATE TABLE statements in raw SQL text."""

import logging
import re
from dataclasses import dataclass

from ..errors import NoTableFound
from .field_splitter import FieldListSplitter, ScanState

logger = logging.getLogger(__name__)

BLOCK_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)
LINE_COMMENT_RE = re.compile(r"--[^\n]*")

_IDENT = r'(?:`[^`]+`|"[^"]+"|[^\s`"(.;]+)'

CREATE_TABLE_RE = re.compile(
    r"\bCREATE\s+(?:TEMPORARY\s+)?TABLE\s+(?:IF\s+NOT\s+EXISTS\s+)?"
    rf"(?P<name>{_IDENT}(?:\s*\.\s*{_IDENT})?)\s*\(",
    re.IGNORECASE,
)

TABLE_COMMENT_RE = re.compile(
    r"\bCOMMENT\s*=?\s*(?P<literal>'(?:[^']|'')*'|\"(?:[^\"]|\"\")*\")",
    re.IGNORECASE | re.DOTALL,
)


@dataclass(frozen=True)
class TableStatement:
    """One CREATE TABLE statement split into its parts."""
    table_name: str
    table_comment: str
    fields_section: str


def strip_comments(sql: str) -> str:
    """Remove /* */ and -- comments.

    Comment markers inside quoted literals are not special-cased.
    """
    return LINE_COMMENT_RE.sub("", BLOCK_COMMENT_RE.sub("", sql))


def _unquote(literal: str) -> str:
    quote = literal[0]
    return literal[1:-1].replace(quote * 2, quote)


def clean_identifier(name: str) -> str:
    """Drop identifier quoting: `db`.`user` -> db.user"""
    parts = [p.strip().strip('`"') for p in name.split(".")]
    return ".".join(p for p in parts if p)


class StatementExtractor:
    """Find `CREATE TABLE <name> ( <body> ) [options] ;` blocks."""

    def __init__(self):
        self._splitter = FieldListSplitter()

    def extract(self, sql: str) -> list[TableStatement]:
        """Extract every CREATE TABLE statement in source order.

        Args:
            sql: Raw text, possibly with several statements and comments.

        Returns:
            List of TableStatement objects.

        Raises:
            NoTableFound: If the text holds no CREATE TABLE statement.
        """
        text = strip_comments(sql)
        statements = []
        pos = 0

        while True:
            match = CREATE_TABLE_RE.search(text, pos)
            if match is None:
                break

            open_index = match.end() - 1
            close_index = self._splitter.find_closing_paren(text, open_index)
            if close_index is None:
                logger.debug("Unterminated CREATE TABLE body for %s", match.group("name"))
                pos = match.end()
                continue

            # A missing ';' ends the statement at the next CREATE TABLE.
            next_match = CREATE_TABLE_RE.search(text, close_index + 1)
            stop = next_match.start() if next_match else len(text)
            options_end = self._find_statement_end(text, close_index + 1, stop)
            options = text[close_index + 1:options_end]
            comment_match = TABLE_COMMENT_RE.search(options)
            comment = _unquote(comment_match.group("literal")) if comment_match else ""

            statements.append(TableStatement(
                table_name=clean_identifier(match.group("name")),
                table_comment=comment,
                fields_section=text[open_index + 1:close_index],
            ))
            pos = options_end + 1 if options_end < stop else stop

        if not statements:
            raise NoTableFound()

        logger.debug("Found %d CREATE TABLE statement(s)", len(statements))
        return statements

    @staticmethod
    def _find_statement_end(text: str, start: int, stop: int) -> int:
        """Index of the terminating ';' outside quotes, or `stop`."""
        state = ScanState()
        for i in range(start, stop):
            char = text[i]
            if char == ";" and not state.in_quotes:
                return i
            state.feed(char)
        return stop
