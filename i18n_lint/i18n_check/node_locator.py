"""Locate a node's opening tag and the offset where a new attribute can go."""

from __future__ import annotations

from dataclasses import dataclass

from i18n_lint.models import SourceLocator, SourceRange, TemplateNode


@dataclass(frozen=True)
class NodeLocation:
    """Where to report a node and where autofixes splice new attributes.

    ``insertion_offset`` points just past ``<`` + tag name, so inserting
    ``" i18n"`` there yields ``<div i18n ...``.
    """

    loc: SourceRange
    insertion_offset: int


def locate(node: TemplateNode, name: str, source: SourceLocator) -> NodeLocation:
    """Return the reporting range and insertion offset for ``node``.

    ``name`` is the tag name the dispatcher resolved for the node kind; an
    anonymous structural template passes ``""`` and gets the offset right
    after ``<``.
    """
    loc = source.to_range(node.source_span)
    start_offset = source.to_offset(loc.start)
    return NodeLocation(loc=loc, insertion_offset=start_offset + 1 + len(name or ""))
