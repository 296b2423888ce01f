"""Parse a single column definition into a Column."""

import logging
import re
from typing import Optional

from ..errors import MalformedColumnError
from .enum_extractor import EnumCommentParser
from .field_splitter import ScanState
from .schema import CURRENT_TIMESTAMP, Column, ColumnType, DefaultValue

logger = logging.getLogger(__name__)

NAME_RE = re.compile(r'\s*(?:`([^`]+)`|"([^"]+)"|([^\s`"(),]+))\s+')
TYPE_WORD_RE = re.compile(r"[A-Za-z_][\w]*")
TYPE_MODIFIER_RE = re.compile(r"\s+(?:UNSIGNED|SIGNED|ZEROFILL)\b", re.IGNORECASE)

# Quoted literals are consumed first so COMMENT inside them is ignored.
COMMENT_RE = re.compile(
    r"'(?:[^']|'')*'"
    r'|"(?:[^"]|"")*"'
    r"|\bCOMMENT\s+('(?:[^']|'')*'|\"(?:[^\"]|\"\")*\")",
    re.IGNORECASE | re.DOTALL,
)

NOT_NULL_RE = re.compile(r"\bNOT\s+NULL\b", re.IGNORECASE)
AUTO_INCREMENT_RE = re.compile(r"\bAUTO_INCREMENT\b", re.IGNORECASE)
PRIMARY_KEY_RE = re.compile(r"\bPRIMARY\s+KEY\b", re.IGNORECASE)
DEFAULT_RE = re.compile(r"\bDEFAULT\s+(\S+)", re.IGNORECASE)

TYPE_RE = re.compile(r"^([A-Z][A-Z0-9_]*)(?:\s*\((.*)\))?", re.IGNORECASE | re.DOTALL)
NUMBER_RE = re.compile(r"^[+-]?\d+(\.\d+)?$")


class TypeNormalizer:
    """Split a raw type token into name and parenthesized arguments."""

    def normalize(self, raw_type: str) -> ColumnType:
        """Normalize `VARCHAR(255)` to name=VARCHAR, length=255.

        The parenthesized text is kept verbatim (`DECIMAL(10,2)` gives
        length `10,2`). Tokens that do not start with a letter keep their
        upper-cased text as the name and no length.
        """
        raw_type = raw_type.strip()
        match = TYPE_RE.match(raw_type)
        if not match:
            return ColumnType(name=raw_type.upper(), length=None, original_type=raw_type)

        name, length = match.groups()
        if length is not None:
            # Everything after the first '(' up to its partner only
            length = length[:_closing_index(length)].strip()
        return ColumnType(
            name=name.upper(),
            length=length if length else None,
            original_type=raw_type,
        )


def _closing_index(inner: str) -> int:
    """Index in `inner` of the ')' closing a group opened just before it."""
    state = ScanState(depth=1)
    for i, char in enumerate(inner):
        state.feed(char)
        if state.at_top_level():
            return i
    return len(inner)


class DefaultValueCoercer:
    """Extract and type the value of a DEFAULT clause."""

    def coerce(self, constraints: str) -> Optional[DefaultValue]:
        """Return the typed DEFAULT value, or None without a DEFAULT clause.

        Only the run of non-whitespace characters after DEFAULT is read,
        so a quoted default containing a space is truncated.
        """
        match = DEFAULT_RE.search(constraints)
        if not match:
            return None

        value = match.group(1)
        if len(value) >= 2 and value[0] == value[-1] and value[0] in "'\"":
            value = value[1:-1]

        if value.upper() == CURRENT_TIMESTAMP.value:
            return CURRENT_TIMESTAMP

        number = NUMBER_RE.match(value)
        if number:
            return float(value) if number.group(1) else int(value)

        return value


class ColumnParser:
    """Decompose `name type [constraints] [COMMENT '...']`."""

    def __init__(
        self,
        include_comments: bool = True,
        parse_enums: bool = True,
        strict: bool = False,
    ):
        """Initialize the column parser.

        Args:
            include_comments: Keep column comments in the output.
            parse_enums: Extract enumerations embedded in comments.
            strict: Raise MalformedColumnError instead of dropping a
                segment that has no name or type.
        """
        self.include_comments = include_comments
        self.parse_enums = parse_enums
        self.strict = strict
        self._types = TypeNormalizer()
        self._defaults = DefaultValueCoercer()
        self._enums = EnumCommentParser()

    def parse(self, segment: str, table_name: Optional[str] = None) -> Optional[Column]:
        """Parse one column segment.

        Args:
            segment: A single definition produced by the field splitter.
            table_name: Owning table, used in error messages.

        Returns:
            Column, or None when the segment is not `name + type`.

        Raises:
            MalformedColumnError: In strict mode, instead of returning None.
        """
        parts = self._split(segment)
        if parts is None:
            if self.strict:
                raise MalformedColumnError(segment, table_name)
            logger.debug("Dropping unparseable column segment: %r", segment)
            return None

        name, raw_type, rest = parts
        constraints, comment = self._extract_comment(rest)

        enum_values = None
        if self.parse_enums and comment:
            enum_values = self._enums.parse(comment)

        return Column(
            name=name,
            type=self._types.normalize(raw_type),
            nullable=NOT_NULL_RE.search(constraints) is None,
            default_value=self._defaults.coerce(constraints),
            auto_increment=AUTO_INCREMENT_RE.search(constraints) is not None,
            primary_key=PRIMARY_KEY_RE.search(constraints) is not None,
            comment=comment if self.include_comments else "",
            enum_values=enum_values,
        )

    @staticmethod
    def _split(segment: str) -> Optional[tuple[str, str, str]]:
        """Split into (name, raw type token, trailing text)."""
        name_match = NAME_RE.match(segment)
        if not name_match:
            return None
        name = next(g for g in name_match.groups() if g is not None)

        pos = name_match.end()
        type_match = TYPE_WORD_RE.match(segment, pos)
        if not type_match:
            return None
        end = type_match.end()

        # Optional (length), (p,s) or ('a','b') group
        cursor = end
        while cursor < len(segment) and segment[cursor].isspace():
            cursor += 1
        if cursor < len(segment) and segment[cursor] == "(":
            close = _closing_index(segment[cursor + 1:])
            if close == len(segment) - cursor - 1:
                return None
            end = cursor + 1 + close + 1

        while True:
            modifier = TYPE_MODIFIER_RE.match(segment, end)
            if not modifier:
                break
            end = modifier.end()

        return name, segment[pos:end], segment[end:]

    @staticmethod
    def _extract_comment(rest: str) -> tuple[str, str]:
        """Return (constraint text without the COMMENT clause, comment)."""
        for match in COMMENT_RE.finditer(rest):
            literal = match.group(1)
            if literal is None:
                continue
            quote = literal[0]
            comment = literal[1:-1].replace(quote * 2, quote)
            return rest[:match.start()] + rest[match.end():], comment
        return rest, ""
