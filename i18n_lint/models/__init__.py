"""Public model exports for the project.

Tests and other modules should import
``from i18n_lint.models import TemplateNode, Diagnostic, RuleOptions``.
"""

from __future__ import annotations

from .diagnostic import Diagnostic, Suggestion, TextEdit
from .enums import ChildContentKind, MessageKind, NodeKind
from .options import RuleOptions
from .source import SourceLocator, SourcePosition, SourceRange, SourceSpan
from .template_nodes import Attribute, I18nMarker, TemplateChild, TemplateNode, TextNode, walk

__all__ = [
    "Attribute",
    "ChildContentKind",
    "Diagnostic",
    "I18nMarker",
    "MessageKind",
    "NodeKind",
    "RuleOptions",
    "SourceLocator",
    "SourcePosition",
    "SourceRange",
    "SourceSpan",
    "Suggestion",
    "TemplateChild",
    "TemplateNode",
    "TextEdit",
    "TextNode",
    "walk",
]
