"""Pydantic models for diagnostics emitted by the i18n rule.

A diagnostic may carry one autofix (a machine-applicable edit) and any number
of suggestions. Suggestions are a separate type: they always have a
human-readable label and may carry no edit at all.
"""

from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .enums import MessageKind
from .source import SourceRange


class TextEdit(BaseModel):
    """Replace ``text_range`` (character offsets, half-open) with ``text``.

    Every edit produced by the rule is a pure insertion, i.e. a zero-width
    range.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    text_range: tuple[int, int]
    text: str

    @model_validator(mode="after")
    def _check_range(self) -> "TextEdit":
        start, end = self.text_range
        if start < 0 or end < start:
            raise ValueError(f"Invalid edit range: {self.text_range!r}")
        return self

    @classmethod
    def insert(cls, offset: int, text: str) -> "TextEdit":
        return cls(text_range=(offset, offset), text=text)

    @property
    def is_insertion(self) -> bool:
        return self.text_range[0] == self.text_range[1]

    def apply(self, source: str) -> str:
        start, end = self.text_range
        return source[:start] + self.text + source[end:]


class Suggestion(BaseModel):
    """A user-triggered alternative action; ``fix`` of ``None`` is a no-op."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    message_id: MessageKind
    message: str
    data: Dict[str, str] = Field(default_factory=dict)
    fix: TextEdit | None = None


class Diagnostic(BaseModel):
    """A single finding reported against a template node.

    Fields:
    - rule: name of the rule that produced the finding
    - message_id: one of the MessageKind values
    - message: message text with ``data`` interpolated
    - loc: line/column range of the node's opening tag
    - data: interpolation fields (e.g. ``attrib_name``)
    - fix: optional autofix
    - suggestions: optional alternative actions
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    rule: str = "i18n"
    message_id: MessageKind
    message: str
    loc: SourceRange
    data: Dict[str, str] = Field(default_factory=dict)
    fix: TextEdit | None = None
    suggestions: List[Suggestion] = Field(default_factory=list)

    @field_validator("message", mode="before")
    def _strip_message(cls, value: object) -> str:
        return str(value or "").strip()

    @model_validator(mode="after")
    def final_checks(self) -> "Diagnostic":
        if not self.message:
            raise ValueError("message must not be empty")
        if self.message_id is MessageKind.SUGGEST_IGNORE:
            raise ValueError("i18n-suggest-ignore is a suggestion label, not a diagnostic")
        return self

    @property
    def attrib_name(self) -> str | None:
        return self.data.get("attrib_name")
