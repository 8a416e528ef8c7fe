"""The ``i18n`` rule: find template markup without i18n coverage.

For every element and structural template the rule:

1. locates the opening tag and the offset just past its tag name;
2. inspects each attribute, reporting missing ``i18n-<name>`` markers
   (with an autofix) or markers without a custom ``@@id``;
3. inspects the node itself, reporting a marker without a custom id or, when
   the node has no marker but holds text, a missing ``i18n`` marker (with an
   autofix).

Nodes are processed independently; the only run-wide state is the resolved
options and ignore set, both read-only.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Callable, Iterable, Iterator, Mapping

from i18n_lint.models import (
    ChildContentKind,
    Diagnostic,
    MessageKind,
    NodeKind,
    RuleOptions,
    SourceLocator,
    Suggestion,
    TemplateNode,
    TextEdit,
    TextNode,
    walk,
)

from .exemptions import is_exempt
from .i18n_check_config import collect_ignored_attributes
from .messages import RULE_META, RULE_NAME, format_message
from .node_locator import NodeLocation, locate

LOGGER = logging.getLogger(__name__)

ATTRIB_I18N = "i18n"

TRANSLATABLE_CONTENT = frozenset(
    {ChildContentKind.TEXT, ChildContentKind.BOUND_TEXT, ChildContentKind.ICU}
)

NodeVisitor = Callable[[TemplateNode, SourceLocator, list[Diagnostic]], None]


def has_translatable_content(node: TemplateNode) -> bool:
    """True when a direct child is text, bound text or an ICU expression."""
    return any(
        isinstance(child, TextNode) and child.kind in TRANSLATABLE_CONTENT
        for child in node.children
    )


class I18nRule:
    """Checks template nodes for missing i18n markers and custom ids."""

    name = RULE_NAME
    meta = RULE_META

    def __init__(self, options: RuleOptions | Mapping[str, Any] | None = None) -> None:
        if options is None:
            options = RuleOptions()
        elif not isinstance(options, RuleOptions):
            options = RuleOptions.model_validate(dict(options))
        self.options = options
        self.ignored_attributes = collect_ignored_attributes(options.ignore_attributes)
        self._visitors: dict[NodeKind, NodeVisitor] = {
            NodeKind.ELEMENT: self._visit_element,
            NodeKind.TEMPLATE: self._visit_template,
        }

    @property
    def visitors(self) -> Mapping[NodeKind, NodeVisitor]:
        """Node kind -> visitor table used by ``check``."""
        return MappingProxyType(self._visitors)

    def check(self, nodes: Iterable[TemplateNode], source: SourceLocator) -> list[Diagnostic]:
        """Inspect ``nodes`` and their descendants in document order."""
        diagnostics: list[Diagnostic] = []
        visited = 0
        for node in walk(nodes):
            self._visitors[node.kind](node, source, diagnostics)
            visited += 1
        LOGGER.debug("Visited %d node(s); %d diagnostic(s)", visited, len(diagnostics))
        return diagnostics

    def _visit_element(
        self, node: TemplateNode, source: SourceLocator, diagnostics: list[Diagnostic]
    ) -> None:
        self.check_node(node, node.name, source, diagnostics)

    def _visit_template(
        self, node: TemplateNode, source: SourceLocator, diagnostics: list[Diagnostic]
    ) -> None:
        # anonymous templates have no tag name; inspect them all the same
        self.check_node(node, node.name or "", source, diagnostics)

    def check_node(
        self,
        node: TemplateNode,
        name: str,
        source: SourceLocator,
        diagnostics: list[Diagnostic],
    ) -> None:
        location = locate(node, name, source)
        diagnostics.extend(self.inspect_attributes(node, location))
        diagnostics.extend(self.inspect_element(node, location))

    def inspect_attributes(
        self, node: TemplateNode, location: NodeLocation
    ) -> Iterator[Diagnostic]:
        """Yield at most one diagnostic per attribute, in document order."""
        for attrib in node.attributes:
            data = {"attrib_name": attrib.name}
            if attrib.i18n is not None:
                if self.options.check_id and not attrib.i18n.has_custom_id:
                    yield self._report(MessageKind.MISSING_ID_ON_ATTRIBUTE, location, data)
            elif self.options.check_attributes and not is_exempt(
                attrib.name, attrib.value, self.ignored_attributes
            ):
                yield self._report(
                    MessageKind.MISSING_ATTRIBUTE,
                    location,
                    data,
                    fix=TextEdit.insert(
                        location.insertion_offset, f" {ATTRIB_I18N}-{attrib.name}"
                    ),
                    suggestions=[
                        Suggestion(
                            message_id=MessageKind.SUGGEST_IGNORE,
                            message=format_message(MessageKind.SUGGEST_IGNORE, data),
                            data=data,
                        )
                    ],
                )

    def inspect_element(self, node: TemplateNode, location: NodeLocation) -> Iterator[Diagnostic]:
        """Yield at most one diagnostic for the node itself."""
        if node.i18n is not None:
            if self.options.check_id and not node.i18n.has_custom_id:
                yield self._report(MessageKind.MISSING_ID, location)
        elif self.options.check_text and has_translatable_content(node):
            yield self._report(
                MessageKind.MISSING_TEXT,
                location,
                fix=TextEdit.insert(location.insertion_offset, f" {ATTRIB_I18N}"),
            )

    def _report(
        self,
        message_id: MessageKind,
        location: NodeLocation,
        data: dict[str, str] | None = None,
        *,
        fix: TextEdit | None = None,
        suggestions: list[Suggestion] | None = None,
    ) -> Diagnostic:
        return Diagnostic(
            rule=self.name,
            message_id=message_id,
            message=format_message(message_id, data),
            loc=location.loc,
            data=dict(data or {}),
            fix=fix,
            suggestions=suggestions or [],
        )
