"""Template reading helpers: markup to node tree, spans to positions."""

from __future__ import annotations

from .source_text import SourceText, find_line_starts
from .template_reader import classify_text, merge_namespace, parse_i18n_marker, read_template

__all__ = [
    "SourceText",
    "classify_text",
    "find_line_starts",
    "merge_namespace",
    "parse_i18n_marker",
    "read_template",
]
