"""Tell table-level constraint clauses apart from column definitions."""

import re

# Each keyword must be followed by whitespace, '(' or a quoted identifier,
# so `KEY(a)` and `CHECK(a > 0)` match while `keyword INT` does not.
TABLE_CONSTRAINT_RE = re.compile(
    r"^\s*(?:PRIMARY\s+KEY|FOREIGN\s+KEY|UNIQUE(?:\s+(?:KEY|INDEX))?|KEY|INDEX"
    r"|CONSTRAINT|CHECK|FULLTEXT|SPATIAL)(?=[\s(`\"]|$)",
    re.IGNORECASE,
)


class ConstraintClassifier:
    """Classify a definition segment by its leading keyword.

    A keyword prefix always wins: a bare column named like a keyword
    (`key VARCHAR(10)`) is classified as a constraint. Quote the name
    (`` `key` VARCHAR(10) ``) to keep it as a column.
    """

    def __init__(self, pattern: re.Pattern = TABLE_CONSTRAINT_RE):
        self._pattern = pattern

    def is_constraint(self, segment: str) -> bool:
        return self._pattern.match(segment) is not None

    def is_column(self, segment: str) -> bool:
        return not self.is_constraint(segment)
