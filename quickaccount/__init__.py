"""Parser for the QuickAccount report definition language."""

from .cursor import Cursor, Position
from .nodes import Document, NoSum, Range, Span, SubTotal, SumTotal, SumType
from .errors import ParseError, format_error
from .formatter import ReportFormatter, format_document
from .parser import AccountParser, ParseResult, ParserConfig, parse, try_parse

__version__ = "0.1.0"

__all__ = [
    "Cursor",
    "Position",
    "Document",
    "NoSum",
    "Range",
    "Span",
    "SubTotal",
    "SumTotal",
    "SumType",
    "ParseError",
    "format_error",
    "ReportFormatter",
    "format_document",
    "AccountParser",
    "ParseResult",
    "ParserConfig",
    "parse",
    "try_parse",
]
