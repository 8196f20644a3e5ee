"""Node definitions for the report definition syntax tree."""

from typing import Annotated, Literal
from pydantic import BaseModel, ConfigDict, Field


class NoSum(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["no_sum"] = "no_sum"


class SubTotal(BaseModel):
    """Trailing label of a span nested inside another span."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["sub_total"] = "sub_total"
    label: str | None = None


class SumTotal(BaseModel):
    """Trailing label of a top-level span."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["sum_total"] = "sum_total"
    label: str | None = None


SumType = Annotated[NoSum | SubTotal | SumTotal, Field(discriminator="kind")]


class Range(BaseModel):
    """An inclusive account number interval such as ``3000..3050 => Sales``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    kind: Literal["range"] = "range"
    title: str
    from_: int = Field(alias="from")
    to: int


class Span(BaseModel):
    """A parenthesized group of ranges and nested spans.

    ``entries`` keeps ranges and subspans interleaved in the order they were
    written; ``ranges`` and ``subspans`` are the two filtered views of it.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["span"] = "span"
    name: str | None = None
    entries: tuple["SpanEntry", ...] = ()
    sum_type: SumType = Field(default_factory=NoSum)

    @property
    def ranges(self) -> tuple[Range, ...]:
        return tuple(entry for entry in self.entries if isinstance(entry, Range))

    @property
    def subspans(self) -> tuple["Span", ...]:
        return tuple(entry for entry in self.entries if isinstance(entry, Span))


SpanEntry = Annotated[Range | Span, Field(discriminator="kind")]

Span.model_rebuild()


class Document(BaseModel):
    model_config = ConfigDict(frozen=True)

    spans: tuple[Span, ...] = ()

    def __len__(self) -> int:
        return len(self.spans)

    def __getitem__(self, index: int) -> Span:
        return self.spans[index]


__all__ = ["Document", "NoSum", "Range", "Span", "SpanEntry", "SubTotal", "SumTotal", "SumType"]
