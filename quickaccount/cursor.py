"""Character cursor over report definition text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

EOF_CHAR = "\0"


@dataclass(frozen=True, slots=True)
class Position:
    line: int
    column: int


@dataclass(frozen=True, slots=True)
class Checkpoint:
    index: int
    line: int
    column: int


class Cursor:
    """Single pass, position aware walk over the source text.

    ``line`` and ``column`` are 1-based. Every character, tabs included, advances
    the column by one; a newline moves to column 1 of the next line.
    """

    def __init__(self, text: str):
        self.text = text
        self._pos = 0
        self._line = 1
        self._column = 1

    @property
    def at_end(self) -> bool:
        return self._pos >= len(self.text)

    def peek(self, ahead: int = 0) -> str:
        index = self._pos + ahead
        if index >= len(self.text):
            return EOF_CHAR
        return self.text[index]

    def advance(self) -> str:
        if self.at_end:
            return EOF_CHAR
        char = self.text[self._pos]
        self._pos += 1
        if char == "\n":
            self._line += 1
            self._column = 1
        else:
            self._column += 1
        return char

    def consume_while(self, condition: Callable[[str], bool]) -> str:
        start = self._pos
        while not self.at_end and condition(self.peek()):
            self.advance()
        return self.text[start : self._pos]

    def skip_whitespace(self) -> None:
        self.consume_while(str.isspace)

    def skip_blanks(self) -> None:
        self.consume_while(lambda c: c != "\n" and c.isspace())

    def position(self) -> Position:
        return Position(self._line, self._column)

    def current_line_text(self) -> str:
        start = self.text.rfind("\n", 0, self._pos) + 1
        end = self.text.find("\n", self._pos)
        if end == -1:
            end = len(self.text)
        return self.text[start:end].rstrip("\r")

    def checkpoint(self) -> Checkpoint:
        return Checkpoint(self._pos, self._line, self._column)

    def restore(self, checkpoint: Checkpoint) -> None:
        self._pos = checkpoint.index
        self._line = checkpoint.line
        self._column = checkpoint.column


__all__ = ["Checkpoint", "Cursor", "EOF_CHAR", "Position"]
