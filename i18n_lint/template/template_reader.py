"""Read template markup into the ``i18n_lint.models`` node tree.

BeautifulSoup's ``html.parser`` builder is tolerant of template syntax
(``[input]``, ``(output)``, ``*ngIf``, custom elements) and records the
line/column of every start tag. It lowercases tag and attribute names, so the
original spelling is recovered from the raw start-tag text; ignore-list
matching in the rule is case-sensitive.

i18n metadata is attached the same way the template compiler does it: an
``i18n`` attribute marks the element, ``i18n-<name>`` marks attribute
``<name>``, and neither remains in the attribute list. Namespaced attribute
names are spelled ``:prefix:name`` (``xml:lang`` becomes ``:xml:lang``).

Only ``<ng-template>`` becomes a Template node. Elements carrying a
structural directive such as ``*ngIf`` stay plain elements with their own
static attributes; they are not wrapped in a separate Template node.
"""

from __future__ import annotations

import logging
import re

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString, Tag

from i18n_lint.models import (
    Attribute,
    ChildContentKind,
    I18nMarker,
    NodeKind,
    SourcePosition,
    SourceSpan,
    TemplateChild,
    TemplateNode,
    TextNode,
)

from .source_text import SourceText

LOGGER = logging.getLogger(__name__)

I18N_ATTRIBUTE = "i18n"
I18N_ATTRIBUTE_PREFIX = "i18n-"
ID_SEPARATOR = "@@"
MEANING_SEPARATOR = "|"
NAMESPACE_SEPARATOR = ":"

STRUCTURAL_TEMPLATE_TAGS = frozenset({"ng-template"})
RAW_TEXT_TAGS = frozenset({"script", "style"})

# Property/event bindings, structural directives and references are not
# static attributes.
BINDING_NAME_PREFIXES = ("[", "(", "*", "#", "bind-", "on-", "bindon-", "ref-", "let-")

START_TAG_PATTERN = re.compile(
    r"<(?P<name>[^\s/>]+)(?P<attrs>(?:\"[^\"]*\"|'[^']*'|[^'\">])*)>", re.DOTALL
)
ATTRIBUTE_PATTERN = re.compile(
    r"(?P<name>[^\s/>\"'=][^\s/>\"'=]*)(?P<value>\s*=\s*(?:\"[^\"]*\"|'[^']*'|[^\s>]+))?"
)
ICU_PATTERN = re.compile(
    r"\{\s*[^{}\s][^{}]*?,\s*(?:plural|select|selectordinal)\s*,", re.DOTALL
)
INTERPOLATION_PATTERN = re.compile(r"\{\{.*?\}\}", re.DOTALL)


def parse_i18n_marker(value: str | None) -> I18nMarker:
    """Parse ``meaning|description@@id`` into an ``I18nMarker``.

    Example:
        >>> parse_i18n_marker("site header|Welcome banner@@home-welcome").custom_id
        'home-welcome'
    """
    text = (value or "").strip()
    custom_id: str | None = None
    if ID_SEPARATOR in text:
        text, raw_id = text.split(ID_SEPARATOR, 1)
        custom_id = raw_id.strip() or None

    meaning: str | None = None
    description = text
    if MEANING_SEPARATOR in text:
        meaning, description = text.split(MEANING_SEPARATOR, 1)
        meaning = meaning.strip() or None

    return I18nMarker(
        custom_id=custom_id,
        meaning=meaning,
        description=description.strip() or None,
    )


def is_binding_attribute(name: str) -> bool:
    return name.startswith(BINDING_NAME_PREFIXES)


def merge_namespace(name: str) -> str:
    """Spell a namespaced attribute name as the template compiler does.

    Example:
        >>> merge_namespace("xml:lang"), merge_namespace("xmlns:xlink"), merge_namespace("title")
        (':xml:lang', ':xmlns:xlink', 'title')
    """
    if name.startswith(NAMESPACE_SEPARATOR):
        return name
    prefix, separator, local_name = name.partition(NAMESPACE_SEPARATOR)
    if not separator or not prefix or not local_name:
        return name
    return f"{NAMESPACE_SEPARATOR}{prefix}{NAMESPACE_SEPARATOR}{local_name}"


def classify_text(value: str) -> ChildContentKind | None:
    """Return the content kind of a text chunk, or ``None`` for whitespace."""
    if not value.strip():
        return None
    if ICU_PATTERN.search(value):
        return ChildContentKind.ICU
    if INTERPOLATION_PATTERN.search(value):
        return ChildContentKind.BOUND_TEXT
    return ChildContentKind.TEXT


def _scan_start_tag(text: str, offset: int) -> tuple[str | None, dict[str, tuple[str, bool]], int | None]:
    """Return the raw tag name, raw attribute names and end of the start tag.

    Attribute names are keyed by their lowercased form and map to
    ``(original name, has value)``.
    """
    match = START_TAG_PATTERN.match(text, offset)
    if match is None:
        return None, {}, None

    names: dict[str, tuple[str, bool]] = {}
    for attr_match in ATTRIBUTE_PATTERN.finditer(match.group("attrs")):
        raw_name = attr_match.group("name")
        # the parser keeps the last duplicate; so do we
        names[raw_name.lower()] = (raw_name, attr_match.group("value") is not None)
    return match.group("name"), names, match.end()


def _build_node(tag: Tag, text: str, source: SourceText) -> TemplateNode:
    if tag.sourceline is None or tag.sourcepos is None:
        raise ValueError(f"No source position recorded for <{tag.name}>")

    start = source.to_offset(SourcePosition(line=tag.sourceline, column=tag.sourcepos))
    raw_name, raw_attributes, end = _scan_start_tag(text, start)
    name = raw_name if raw_name and raw_name.lower() == tag.name else tag.name
    if end is None:
        LOGGER.debug("Could not scan start tag <%s> at offset %d", tag.name, start)
        end = start + 1 + len(name)

    node_marker: I18nMarker | None = None
    attribute_markers: dict[str, I18nMarker] = {}
    plain: list[tuple[str, str | None]] = []
    for lowered, value in tag.attrs.items():
        attrib_name, has_value = raw_attributes.get(lowered, (lowered, True))
        if attrib_name == I18N_ATTRIBUTE:
            node_marker = parse_i18n_marker(value)
        elif attrib_name.startswith(I18N_ATTRIBUTE_PREFIX):
            marked_name = merge_namespace(attrib_name[len(I18N_ATTRIBUTE_PREFIX):])
            attribute_markers[marked_name] = parse_i18n_marker(value)
        elif is_binding_attribute(attrib_name):
            continue
        else:
            plain.append((merge_namespace(attrib_name), value if has_value else None))

    attributes = tuple(
        Attribute(name=attrib_name, value=value, i18n=attribute_markers.get(attrib_name))
        for attrib_name, value in plain
    )

    children: list[TemplateChild] = []
    if tag.name not in RAW_TEXT_TAGS:
        for child in tag.children:
            if isinstance(child, Tag):
                children.append(_build_node(child, text, source))
            elif isinstance(child, PreformattedString):
                # comments, CDATA, doctype and processing instructions
                continue
            elif isinstance(child, NavigableString):
                kind = classify_text(str(child))
                if kind is not None:
                    children.append(TextNode(kind=kind, value=str(child)))

    kind = NodeKind.TEMPLATE if tag.name in STRUCTURAL_TEMPLATE_TAGS else NodeKind.ELEMENT
    return TemplateNode(
        kind=kind,
        name=name,
        source_span=SourceSpan(start=start, end=end),
        attributes=attributes,
        children=tuple(children),
        i18n=node_marker,
    )


def read_template(text: str, *, source: SourceText | None = None) -> list[TemplateNode]:
    """Parse ``text`` and return its root nodes in document order.

    Top-level text has no element to carry a marker and is not returned.
    """
    locator = source or SourceText(text)
    soup = BeautifulSoup(text, "html.parser", multi_valued_attributes=None)
    return [_build_node(child, text, locator) for child in soup.children if isinstance(child, Tag)]
