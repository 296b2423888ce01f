"""Parse MySQL-style CREATE TABLE text into Table records."""

import logging

from .column_parser import ColumnParser
from .constraint_classifier import ConstraintClassifier
from .field_splitter import FieldListSplitter
from .schema import Table
from .statement_extractor import StatementExtractor, TableStatement

logger = logging.getLogger(__name__)


class DDLParser:
    """Extract table structure from CREATE TABLE statements.

    Each call to parse() works only on its argument; nothing is cached
    between calls.
    """

    def __init__(
        self,
        include_comments: bool = True,
        parse_enums: bool = True,
        strict: bool = False,
    ):
        """Initialize the parser.

        Args:
            include_comments: Keep column comments in the output.
            parse_enums: Extract enumerations embedded in column comments.
            strict: Raise MalformedColumnError on unparseable columns
                instead of dropping them.
        """
        self._statements = StatementExtractor()
        self._splitter = FieldListSplitter()
        self._classifier = ConstraintClassifier()
        self._columns = ColumnParser(
            include_comments=include_comments,
            parse_enums=parse_enums,
            strict=strict,
        )

    def parse(self, sql: str) -> list[Table]:
        """Parse every CREATE TABLE statement in `sql`.

        Args:
            sql: One or more semicolon-terminated CREATE TABLE statements.

        Returns:
            List of Table objects in source order.

        Raises:
            NoTableFound: If no CREATE TABLE statement is present.
            MalformedColumnError: In strict mode only.
        """
        tables = [self._parse_statement(s) for s in self._statements.extract(sql)]
        logger.info(
            "Parsed %d table(s), %d column(s)",
            len(tables),
            sum(len(t.columns) for t in tables),
        )
        return tables

    def _parse_statement(self, statement: TableStatement) -> Table:
        columns = []
        for segment in self._splitter.split(statement.fields_section):
            # Table-level constraints are not modeled
            if self._classifier.is_constraint(segment):
                continue

            column = self._columns.parse(segment, statement.table_name)
            if column is not None:
                columns.append(column)

        return Table(
            name=statement.table_name,
            comment=statement.table_comment,
            columns=tuple(columns),
        )


def parse_create_tables(
    sql: str,
    *,
    include_comments: bool = True,
    parse_enums: bool = True,
    strict: bool = False,
) -> list[Table]:
    """Parse CREATE TABLE statements with a one-off DDLParser."""
    parser = DDLParser(
        include_comments=include_comments,
        parse_enums=parse_enums,
        strict=strict,
    )
    return parser.parse(sql)
