"""Canonical printer for report definition trees."""

from __future__ import annotations

import re
from dataclasses import dataclass

from quickaccount.nodes import Document, NoSum, Range, Span

_RANGE_LIKE = re.compile(r"^\d+\.")


@dataclass
class ReportFormatter:
    """Prints a Document back into report definition text.

    Parsing the output yields a tree equal to the one printed, for every tree
    the parser can produce.
    """

    indent: str = "    "

    def format_document(self, document: Document) -> str:
        blocks = ["\n".join(self.format_span(span, level=0)) for span in document.spans]
        return "\n\n".join(blocks) + "\n" if blocks else ""

    def format_span(self, span: Span, level: int = 0) -> list[str]:
        if not span.entries:
            raise ValueError("Cannot format a span without entries")
        header = "("
        if span.name is not None:
            header = f"{self._check_title(span.name)} ("
        lines = [f"{self._indent(level)}{header}"]
        for entry in span.entries:
            if isinstance(entry, Range):
                lines.append(self.format_range(entry, level + 1))
            else:
                lines.extend(self.format_span(entry, level + 1))
        lines.append(f"{self._indent(level)}{self._format_trailer(span)}")
        return lines

    def format_range(self, range_: Range, level: int = 0) -> str:
        title = self._check_label(range_.title, allow_empty=True)
        line = f"{self._indent(level)}{range_.from_}..{range_.to} =>"
        return f"{line} {title}" if title else line

    def _format_trailer(self, span: Span) -> str:
        if isinstance(span.sum_type, NoSum):
            return ")"
        if span.sum_type.label is None:
            return ") =>"
        return f") => {self._check_label(span.sum_type.label, allow_empty=False)}"

    def _indent(self, level: int) -> str:
        return "" if level <= 0 else self.indent * level

    def _check_title(self, title: str) -> str:
        if not title or title != title.strip() or any(ch in title for ch in "()=\n") or _RANGE_LIKE.match(title):
            raise ValueError(f"Span title cannot be represented: {title!r}")
        return title

    def _check_label(self, label: str, allow_empty: bool) -> str:
        if (not label and not allow_empty) or label != label.strip() or any(ch in label for ch in ")\n"):
            raise ValueError(f"Label cannot be represented: {label!r}")
        return label


def format_document(document: Document, indent: str = "    ") -> str:
    return ReportFormatter(indent=indent).format_document(document)


__all__ = ["ReportFormatter", "format_document"]
