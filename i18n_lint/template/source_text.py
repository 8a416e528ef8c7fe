"""Line/column and offset conversion for template source text.

Functions:
    - find_line_starts: Character offsets at which each line begins
    - SourceText: ``SourceLocator`` implementation over one template

Lines are 1-based and columns 0-based, matching the positions reported by
the HTML parser.
"""

from __future__ import annotations

import re
from bisect import bisect_right

from i18n_lint.models import SourcePosition, SourceRange, SourceSpan

# The HTML parser counts lines on "\n" only; "\r\n" ends with it as well
LINE_BREAK_PATTERN = re.compile(r"\n")


def find_line_starts(text: str) -> list[int]:
    """Find the character offset at which each line of ``text`` starts.

    Example:
        >>> find_line_starts("ab\\ncd\\r\\nef")
        [0, 3, 7]
    """
    starts = [0]
    starts.extend(match.end() for match in LINE_BREAK_PATTERN.finditer(text))
    return starts


class SourceText:
    """Converts spans and positions for a single template text."""

    def __init__(self, text: str) -> None:
        self.text = text
        self._line_starts = find_line_starts(text)

    def position_at(self, offset: int) -> SourcePosition:
        """Return the line/column position of character ``offset``."""
        if offset < 0 or offset > len(self.text):
            raise ValueError(
                f"Offset {offset} is outside the source text (length {len(self.text)})"
            )
        line_index = bisect_right(self._line_starts, offset) - 1
        return SourcePosition(
            line=line_index + 1, column=offset - self._line_starts[line_index]
        )

    def to_range(self, span: SourceSpan) -> SourceRange:
        return SourceRange(start=self.position_at(span.start), end=self.position_at(span.end))

    def to_offset(self, position: SourcePosition) -> int:
        """Return the character offset of ``position``.

        Raises:
            ValueError: If the line does not exist or the column runs past the
                end of the text
        """
        if position.line < 1 or position.line > len(self._line_starts):
            raise ValueError(f"Line {position.line} is outside the source text")
        if position.column < 0:
            raise ValueError(f"Column must not be negative: {position.column}")
        offset = self._line_starts[position.line - 1] + position.column
        if offset > len(self.text):
            raise ValueError(f"Position {position} is outside the source text")
        return offset
