"""Split a CREATE TABLE body into column and constraint definitions."""

from dataclasses import dataclass
from typing import Optional

QUOTE_CHARS = "'\"`"


@dataclass
class ScanState:
    """Parenthesis depth and the quote character currently open, if any.

    The same quote character opens and closes a literal, so a doubled
    quote ('') simply closes and reopens it.
    """
    depth: int = 0
    quote_char: Optional[str] = None

    @property
    def in_quotes(self) -> bool:
        return self.quote_char is not None

    def feed(self, char: str) -> None:
        if self.quote_char is not None:
            if char == self.quote_char:
                self.quote_char = None
        elif char in QUOTE_CHARS:
            self.quote_char = char
        elif char == "(":
            self.depth += 1
        elif char == ")":
            self.depth -= 1

    def at_top_level(self) -> bool:
        return self.depth == 0 and self.quote_char is None


class FieldListSplitter:
    """Depth- and quote-aware comma splitter."""

    def split(self, body: str) -> list[str]:
        """Split `body` on top-level commas.

        Commas inside parentheses (`DECIMAL(10,2)`) or quoted literals
        (`DEFAULT 'a,b'`) stay in the current segment. Segments are
        trimmed; blank segments are omitted.

        Args:
            body: Text between the outer parentheses of a CREATE TABLE.

        Returns:
            List of definition strings in source order.
        """
        segments = []
        current: list[str] = []
        state = ScanState()

        for char in body:
            if char == "," and state.at_top_level():
                segments.append("".join(current).strip())
                current = []
                continue
            state.feed(char)
            current.append(char)

        segments.append("".join(current).strip())
        return [s for s in segments if s]

    def find_closing_paren(self, text: str, open_index: int) -> Optional[int]:
        """Return the index of the ')' matching the '(' at `open_index`.

        Returns:
            Index of the closing parenthesis, or None if it is never closed.
        """
        state = ScanState()
        for i in range(open_index, len(text)):
            state.feed(text[i])
            if state.at_top_level():
                return i
        return None


def split_fields(body: str) -> list[str]:
    """Module-level shortcut for FieldListSplitter().split()."""
    return FieldListSplitter().split(body)
