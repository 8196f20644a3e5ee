"""Parse errors and their diagnostic rendering."""

from __future__ import annotations

from quickaccount.cursor import Position

INVALID_RANGE_SYNTAX = "Invalid range syntax"
EXPECTED_OPEN_PAREN = "Expected `(`"
EXPECTED_CLOSE_PAREN = "Expected `)`"
EXPECTED_ARROW = "Expected `=>`"
UNEXPECTED_EOF = "Unexpected end of input"
EXPECTED_ENTRY = "Expected range or block"


def format_error(position: Position, message: str, line_text: str) -> str:
    """Render a failure as a location line, the source line, a caret under the column and the message.

    ::

        line: 5, pos: 22
                        6020.6100 => Office supplies
        ---------------------^

        ERROR: Invalid range syntax
    """
    indicator = "-" * (position.column - 1) + "^"
    return f"line: {position.line}, pos: {position.column}\n{line_text}\n{indicator}\n\nERROR: {message}"


class ParseError(Exception):
    def __init__(self, message: str, position: Position, line_text: str = ""):
        super().__init__(message, position, line_text)
        self.message = message
        self.position = position
        self.line_text = line_text

    def __str__(self) -> str:
        return f"{self.message} at line {self.position.line}, column {self.position.column}"

    @property
    def line(self) -> int:
        return self.position.line

    @property
    def column(self) -> int:
        return self.position.column

    def to_display_string(self) -> str:
        return format_error(self.position, self.message, self.line_text)


__all__ = [
    "EXPECTED_ARROW",
    "EXPECTED_CLOSE_PAREN",
    "EXPECTED_ENTRY",
    "EXPECTED_OPEN_PAREN",
    "INVALID_RANGE_SYNTAX",
    "ParseError",
    "UNEXPECTED_EOF",
    "format_error",
]
