"""Recursive descent parser for report definitions.

A report definition is a sequence of spans. A span is an optional title, a
parenthesized block of ranges and nested spans, and an optional ``=> label``
trailer::

    Other costs (
        6000..6010 => Leasing
        (
            6020..6100 => Office supplies
        ) => Sum miscellaneous costs
    ) => Sum other costs

The default strategy recurses once per nesting level, so nesting deeper than
the interpreter's recursion limit raises ``RecursionError``. The ``iterative``
strategy parses the same grammar with an explicit stack of open blocks.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Literal, NotRequired, Optional, TypedDict

from quickaccount.cursor import Cursor
from quickaccount.errors import (
    EXPECTED_ARROW,
    EXPECTED_CLOSE_PAREN,
    EXPECTED_ENTRY,
    EXPECTED_OPEN_PAREN,
    INVALID_RANGE_SYNTAX,
    UNEXPECTED_EOF,
    ParseError,
)
from quickaccount.logger import get_logger
from quickaccount.nodes import Document, NoSum, Range, Span, SubTotal, SumTotal
from quickaccount.utils import resolve_config

Strategy = Literal["recursive", "iterative"]

DIGITS = frozenset("0123456789")
TITLE_STOPS = frozenset("()=\n")
LABEL_STOPS = frozenset(")\n")


class ParserConfig(TypedDict):
    strategy: NotRequired[Strategy]
    enable_logger: NotRequired[bool]


class ParserConfigRequired(TypedDict):
    strategy: Strategy
    enable_logger: bool


DEFAULT_CONFIG: ParserConfigRequired = {"strategy": "recursive", "enable_logger": False}

logger = get_logger("parser")


@dataclass
class _BlockFrame:
    name: str | None
    entries: list[Range | Span] = field(default_factory=list)


class AccountParser:
    def __init__(self, text: str, config: Optional[ParserConfig] = None):
        self.config = resolve_config(config or {}, DEFAULT_CONFIG)
        if self.config["strategy"] not in ("recursive", "iterative"):
            raise ValueError(f"Unknown parse strategy: {self.config['strategy']}")
        self.cursor = Cursor(text)

    def parse(self) -> Document:
        self._log(logging.INFO, f"Starting {self.config['strategy']} parse of {len(self.cursor.text)} characters")
        if self.config["strategy"] == "iterative":
            spans = self._parse_iterative()
        else:
            spans = self._parse_recursive()
        self._log(logging.INFO, f"Parse complete, {len(spans)} top-level span(s)")
        return Document(spans=tuple(spans))

    def _log(self, level: int, message: str) -> None:
        if self.config["enable_logger"]:
            logger.log(level, message)

    def error(self, message: str) -> ParseError:
        error = ParseError(message, self.cursor.position(), self.cursor.current_line_text())
        self._log(logging.DEBUG, f"Raising {error}")
        return error

    # Strategies --------------------------------------------------------------
    def _parse_recursive(self) -> list[Span]:
        spans: list[Span] = []
        self.cursor.skip_whitespace()
        while not self.cursor.at_end:
            spans.append(self._parse_span(nested=False))
            self.cursor.skip_whitespace()
        return spans

    def _parse_span(self, nested: bool) -> Span:
        name = self._parse_block_start()
        entries: list[Range | Span] = []
        while True:
            self.cursor.skip_whitespace()
            if self._at_block_end(has_entries=bool(entries)):
                break
            entry = self._parse_range()
            if entry is None:
                entry = self._parse_span(nested=True)
            entries.append(entry)
        return self._build_span(name, entries, self._parse_block_end(), nested)

    def _parse_iterative(self) -> list[Span]:
        spans: list[Span] = []
        stack: list[_BlockFrame] = []
        while True:
            self.cursor.skip_whitespace()
            if not stack:
                if self.cursor.at_end:
                    return spans
                stack.append(_BlockFrame(self._parse_block_start()))
                continue
            frame = stack[-1]
            if self._at_block_end(has_entries=bool(frame.entries)):
                stack.pop()
                span = self._build_span(frame.name, frame.entries, self._parse_block_end(), nested=bool(stack))
                if stack:
                    stack[-1].entries.append(span)
                else:
                    spans.append(span)
                continue
            entry = self._parse_range()
            if entry is None:
                stack.append(_BlockFrame(self._parse_block_start()))
            else:
                frame.entries.append(entry)

    # Grammar rules -----------------------------------------------------------
    def _parse_block_start(self) -> str | None:
        """title? '('"""
        title = self.cursor.consume_while(lambda c: c not in TITLE_STOPS).strip()
        self.cursor.skip_whitespace()
        if self.cursor.peek() != "(":
            raise self.error(UNEXPECTED_EOF if self.cursor.at_end else EXPECTED_OPEN_PAREN)
        self.cursor.advance()
        return title or None

    def _at_block_end(self, has_entries: bool) -> bool:
        if self.cursor.at_end or self.cursor.peek() == "=":
            raise self.error(EXPECTED_CLOSE_PAREN)
        if self.cursor.peek() != ")":
            return False
        if not has_entries:
            raise self.error(EXPECTED_ENTRY)
        return True

    def _parse_block_end(self) -> tuple[bool, str | None]:
        """')' trailer?

        Returns whether a trailer was present and its label.
        """
        self.cursor.advance()
        self.cursor.skip_blanks()
        if self.cursor.peek() != "=":
            return False, None
        self._expect_arrow()
        return True, self._parse_label() or None

    def _parse_range(self) -> Range | None:
        """integer '..' integer '=>' label

        Returns None, with the cursor untouched, when the item is not a range.
        """
        if self.cursor.peek() not in DIGITS:
            return None
        checkpoint = self.cursor.checkpoint()
        start = self.cursor.consume_while(lambda c: c in DIGITS)
        if self.cursor.peek() != ".":
            # digits leading a title, e.g. "2024 budget ("
            self.cursor.restore(checkpoint)
            return None
        self.cursor.advance()
        if self.cursor.peek() != ".":
            raise self.error(UNEXPECTED_EOF if self.cursor.at_end else INVALID_RANGE_SYNTAX)
        self.cursor.advance()
        end = self.cursor.consume_while(lambda c: c in DIGITS)
        if not end:
            raise self.error(UNEXPECTED_EOF if self.cursor.at_end else INVALID_RANGE_SYNTAX)
        self.cursor.skip_whitespace()
        self._expect_arrow()
        title = self._parse_label()
        range_ = Range(title=title, from_=int(start), to=int(end))
        self._log(logging.DEBUG, f"Parsed range {range_.from_}..{range_.to} => '{title}'")
        return range_

    def _expect_arrow(self) -> None:
        for expected in "=>":
            if self.cursor.peek() != expected:
                raise self.error(UNEXPECTED_EOF if self.cursor.at_end else EXPECTED_ARROW)
            self.cursor.advance()

    def _parse_label(self) -> str:
        self.cursor.skip_blanks()
        return self.cursor.consume_while(lambda c: c not in LABEL_STOPS).strip()

    def _build_span(
        self, name: str | None, entries: list[Range | Span], trailer: tuple[bool, str | None], nested: bool
    ) -> Span:
        has_trailer, label = trailer
        if not has_trailer:
            sum_type = NoSum()
        elif nested:
            sum_type = SubTotal(label=label)
        else:
            sum_type = SumTotal(label=label)
        span = Span(name=name, entries=tuple(entries), sum_type=sum_type)
        self._log(logging.DEBUG, f"Parsed span '{name}' with {len(entries)} entries and {sum_type!r}")
        return span


@dataclass(frozen=True)
class ParseResult:
    document: Document | None = None
    error: ParseError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse(text: str, config: Optional[ParserConfig] = None) -> Document:
    """Parse a report definition, raising ParseError at the first syntax violation."""
    return AccountParser(text, config=config).parse()


def try_parse(text: str, config: Optional[ParserConfig] = None) -> ParseResult:
    try:
        return ParseResult(document=parse(text, config=config))
    except ParseError as exc:
        return ParseResult(error=exc)


__all__ = ["AccountParser", "ParseResult", "ParserConfig", "Strategy", "parse", "try_parse"]
