"""Read-only view of a parsed template.

The tree is a closed set of frozen dataclasses: ``TemplateNode`` for elements
and structural templates, ``TextNode`` for translatable child content, and
``Attribute`` records hanging off a node. The i18n rule only ever reads these.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Union

from .enums import ChildContentKind, NodeKind
from .source import SourceSpan


@dataclass(frozen=True)
class I18nMarker:
    """i18n metadata attached to a node or an attribute.

    Attributes:
        custom_id: Explicit message id authored after ``@@`` (``None`` when the
            marker relies on an auto-generated id)
        meaning: Optional meaning (text before ``|``)
        description: Optional description
    """

    custom_id: str | None = None
    meaning: str | None = None
    description: str | None = None

    @property
    def has_custom_id(self) -> bool:
        return bool(self.custom_id)


@dataclass(frozen=True)
class Attribute:
    """A static attribute; ``i18n`` is set when ``i18n-<name>`` is present."""

    name: str
    value: str | None = None
    i18n: I18nMarker | None = None


@dataclass(frozen=True)
class TextNode:
    kind: ChildContentKind
    value: str = ""


@dataclass(frozen=True)
class TemplateNode:
    """An element or structural-template element.

    ``name`` is the tag name for elements and the template tag name for
    structural templates; the latter may be empty for anonymous templates.
    """

    kind: NodeKind
    name: str
    source_span: SourceSpan
    attributes: tuple[Attribute, ...] = ()
    children: tuple["TemplateChild", ...] = ()
    i18n: I18nMarker | None = None

    def child_nodes(self) -> Iterator["TemplateNode"]:
        return (child for child in self.children if isinstance(child, TemplateNode))

    def attribute(self, name: str) -> Attribute | None:
        for attrib in self.attributes:
            if attrib.name == name:
                return attrib
        return None


TemplateChild = Union[TemplateNode, TextNode]


def walk(nodes: Iterable[TemplateNode]) -> Iterator[TemplateNode]:
    """Yield ``nodes`` and their descendants depth first, in document order."""

    stack: list[TemplateNode] = list(reversed(list(nodes)))
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(list(node.child_nodes())))

