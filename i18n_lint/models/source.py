"""Source coordinates used to locate template nodes.

Spans are raw character offsets produced by the template reader. Positions
and ranges are what diagnostics report: 1-based lines, 0-based columns.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class SourceSpan:
    """Half-open character range ``[start, end)`` in the template text."""

    start: int
    end: int


@dataclass(frozen=True)
class SourcePosition:
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


@dataclass(frozen=True)
class SourceRange:
    start: SourcePosition
    end: SourcePosition


class SourceLocator(Protocol):
    """Span and offset conversion service consumed by the rule.

    The rule never does its own line/column arithmetic; it goes through
    ``to_range`` and ``to_offset`` only.
    """

    def to_range(self, span: SourceSpan) -> SourceRange: ...

    def to_offset(self, position: SourcePosition) -> int: ...
