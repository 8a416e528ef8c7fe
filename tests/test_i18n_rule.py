"""Tests for the i18n rule: attribute and element inspection and dispatch."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from pydantic import ValidationError

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from i18n_lint.i18n_check import I18nRule, check_template_text, locate
from i18n_lint.i18n_check.i18n_check_config import DEFAULT_IGNORE_ATTRIBUTES
from i18n_lint.models import (
    Attribute,
    ChildContentKind,
    I18nMarker,
    MessageKind,
    NodeKind,
    SourcePosition,
    SourceSpan,
    TemplateNode,
    TextEdit,
    TextNode,
)
from i18n_lint.template import SourceText


def _kinds(diagnostics) -> list[MessageKind]:
    return [d.message_id for d in diagnostics]


def _check(text: str, options=None):
    return check_template_text(text, I18nRule(options))


# --- Scenarios ---------------------------------------------------------------


def test_text_and_attribute_without_markers() -> None:
    text = '<div title="Hello">Hi</div>'
    diagnostics = _check(text)

    assert _kinds(diagnostics) == [MessageKind.MISSING_ATTRIBUTE, MessageKind.MISSING_TEXT]
    attribute, element = diagnostics

    assert attribute.data == {"attrib_name": "title"}
    assert attribute.message.startswith("Attribute 'title' has no corresponding i18n attribute.")
    assert attribute.fix == TextEdit.insert(4, " i18n-title")
    assert attribute.fix.apply(text) == '<div i18n-title title="Hello">Hi</div>'

    assert element.fix == TextEdit.insert(4, " i18n")
    assert element.fix.apply(text) == '<div i18n title="Hello">Hi</div>'
    assert element.loc.start == SourcePosition(line=1, column=0)


def test_node_marker_without_id_does_not_cover_attributes() -> None:
    diagnostics = _check('<div i18n title="Hello">Hi</div>')

    assert sorted(_kinds(diagnostics)) == sorted(
        [MessageKind.MISSING_ID, MessageKind.MISSING_ATTRIBUTE]
    )
    missing_id = next(d for d in diagnostics if d.message_id is MessageKind.MISSING_ID)
    assert missing_id.fix is None
    assert missing_id.suggestions == []
    assert "Missing custom message identifier." in missing_id.message


def test_node_marker_with_custom_id_is_clean() -> None:
    assert _check('<div i18n="@@greeting">Hi</div>') == []


def test_ignore_attributes_option_exempts_title() -> None:
    diagnostics = _check('<div title="Hello">Hi</div>', {"ignoreAttributes": ["title"]})
    assert _kinds(diagnostics) == [MessageKind.MISSING_TEXT]


def test_missing_text_autofix_is_idempotent() -> None:
    text = "<p>Welcome back</p>"
    (diagnostic,) = _check(text)
    assert diagnostic.message_id is MessageKind.MISSING_TEXT

    fixed = diagnostic.fix.apply(text)
    assert fixed == "<p i18n>Welcome back</p>"
    assert MessageKind.MISSING_TEXT not in _kinds(_check(fixed))


def test_missing_attribute_autofix_yields_marker_without_id() -> None:
    text = '<img src="a.png" alt="Logo">'
    (diagnostic,) = _check(text)

    fixed = diagnostic.fix.apply(text)
    assert fixed == '<img i18n-alt src="a.png" alt="Logo">'
    assert _kinds(_check(fixed)) == [MessageKind.MISSING_ID_ON_ATTRIBUTE]


# --- Attribute inspection ----------------------------------------------------


def test_missing_attribute_carries_noop_ignore_suggestion() -> None:
    (diagnostic,) = _check('<input placeholder="Your name">')

    assert diagnostic.message_id is MessageKind.MISSING_ATTRIBUTE
    (suggestion,) = diagnostic.suggestions
    assert suggestion.message_id is MessageKind.SUGGEST_IGNORE
    assert suggestion.data == {"attrib_name": "placeholder"}
    assert suggestion.fix is None
    assert "'placeholder'" in suggestion.message
    assert "ignoreAttributes" in suggestion.message


@pytest.mark.parametrize("name", sorted(DEFAULT_IGNORE_ATTRIBUTES))
def test_built_in_ignored_attributes_never_reported(name: str) -> None:
    node = TemplateNode(
        kind=NodeKind.ELEMENT,
        name="div",
        source_span=SourceSpan(0, 5),
        attributes=(Attribute(name=name, value="Readable words"),),
    )
    diagnostics = I18nRule().check([node], SourceText("<div></div>"))
    assert MessageKind.MISSING_ATTRIBUTE not in _kinds(diagnostics)


@pytest.mark.parametrize("value", ["", "true", "false", "12", "12px", "0.5"])
def test_exempt_values_never_reported(value: str) -> None:
    diagnostics = _check(f'<div title="{value}" data-label="{value}"></div>')
    assert diagnostics == []


@pytest.mark.parametrize("check_attributes", [True, False])
def test_attribute_marker_without_id_reported_regardless_of_check_attributes(
    check_attributes: bool,
) -> None:
    diagnostics = _check(
        '<img src="a.png" alt="Logo" i18n-alt>',
        {"checkAttributes": check_attributes},
    )
    assert _kinds(diagnostics) == [MessageKind.MISSING_ID_ON_ATTRIBUTE]
    assert diagnostics[0].attrib_name == "alt"
    assert diagnostics[0].fix is None
    assert diagnostics[0].message.startswith(
        "Missing custom message identifier on attribute 'alt'."
    )


def test_attribute_marker_with_id_is_clean() -> None:
    assert _check('<img src="a.png" alt="Logo" i18n-alt="@@logo">') == []


def test_check_id_disabled_skips_id_diagnostics() -> None:
    diagnostics = _check('<div i18n title="Hi" i18n-title>Text</div>', {"checkId": False})
    assert diagnostics == []


def test_check_attributes_disabled() -> None:
    diagnostics = _check('<div title="Hello">Hi</div>', {"checkAttributes": False})
    assert _kinds(diagnostics) == [MessageKind.MISSING_TEXT]


def test_one_diagnostic_per_attribute_in_document_order() -> None:
    diagnostics = _check('<input placeholder="Name" title="Your name" aria-label="Name field">')
    assert [d.attrib_name for d in diagnostics] == ["placeholder", "title", "aria-label"]
    assert {d.fix for d in diagnostics} == {
        TextEdit.insert(6, " i18n-placeholder"),
        TextEdit.insert(6, " i18n-title"),
        TextEdit.insert(6, " i18n-aria-label"),
    }


# --- Element inspection ------------------------------------------------------


@pytest.mark.parametrize(
    "markup",
    ["<p>{{ user.name }}</p>", "<p>{count, plural, =0 {none} other {many}}</p>", "<p>Plain</p>"],
)
def test_each_translatable_child_kind_triggers_missing_text(markup: str) -> None:
    diagnostics = _check(markup)
    assert _kinds(diagnostics) == [MessageKind.MISSING_TEXT]
    assert diagnostics[0].fix == TextEdit.insert(2, " i18n")


def test_only_direct_children_count() -> None:
    diagnostics = _check("<section><p>Nested</p></section>")
    assert len(diagnostics) == 1
    assert diagnostics[0].loc.start == SourcePosition(line=1, column=len("<section>"))


def test_marked_node_never_reports_missing_text() -> None:
    diagnostics = _check("<p i18n>Hello</p>")
    assert _kinds(diagnostics) == [MessageKind.MISSING_ID]


def test_check_text_disabled() -> None:
    assert _check("<p>Hello</p>", {"checkText": False}) == []


def test_elements_without_text_are_clean() -> None:
    assert _check("<div>\n  <!-- nothing to translate -->\n</div>") == []


# --- Dispatch and location ---------------------------------------------------


def test_visitors_cover_elements_and_structural_templates() -> None:
    assert set(I18nRule().visitors) == {NodeKind.ELEMENT, NodeKind.TEMPLATE}


def test_structural_template_uses_template_tag_name() -> None:
    text = "<ng-template>Loading</ng-template>"
    (diagnostic,) = _check(text)
    assert diagnostic.fix == TextEdit.insert(len("<ng-template"), " i18n")
    assert diagnostic.fix.apply(text) == "<ng-template i18n>Loading</ng-template>"


def test_anonymous_structural_template_is_inspected() -> None:
    text = "<ng-template>Loading</ng-template>"
    node = TemplateNode(
        kind=NodeKind.TEMPLATE,
        name="",
        source_span=SourceSpan(0, len("<ng-template>")),
        attributes=(Attribute(name="title", value="Spinner"),),
        children=(TextNode(kind=ChildContentKind.TEXT, value="Loading"),),
    )

    diagnostics = I18nRule().check([node], SourceText(text))

    assert _kinds(diagnostics) == [MessageKind.MISSING_ATTRIBUTE, MessageKind.MISSING_TEXT]
    assert [d.fix for d in diagnostics] == [
        TextEdit.insert(1, " i18n-title"),
        TextEdit.insert(1, " i18n"),
    ]


def test_locate_returns_range_and_insertion_offset() -> None:
    text = '<main>\n  <button type="button">Go</button>\n</main>'
    start = text.index("<button")
    node = TemplateNode(
        kind=NodeKind.ELEMENT,
        name="button",
        source_span=SourceSpan(start, text.index(">", start) + 1),
    )

    location = locate(node, node.name, SourceText(text))

    assert location.loc.start == SourcePosition(line=2, column=2)
    assert location.insertion_offset == start + 1 + len("button")
    assert locate(node, "", SourceText(text)).insertion_offset == start + 1


def test_diagnostics_follow_document_order() -> None:
    text = (
        '<nav title="Main">\n'
        '  <a href="/home">Home</a>\n'
        '  <ng-template><span i18n>Later</span></ng-template>\n'
        "</nav>"
    )
    diagnostics = _check(text)

    assert [(d.message_id, d.loc.start.line) for d in diagnostics] == [
        (MessageKind.MISSING_ATTRIBUTE, 1),
        (MessageKind.MISSING_TEXT, 2),
        (MessageKind.MISSING_ID, 3),
    ]


def test_hand_built_marker_on_node() -> None:
    node = TemplateNode(
        kind=NodeKind.ELEMENT,
        name="h1",
        source_span=SourceSpan(0, 4),
        children=(TextNode(kind=ChildContentKind.TEXT, value="Title"),),
        i18n=I18nMarker(custom_id="page-title"),
    )
    assert I18nRule().check([node], SourceText("<h1>Title</h1>")) == []


# --- Options -----------------------------------------------------------------


def test_rule_rejects_unknown_options() -> None:
    with pytest.raises(ValidationError):
        I18nRule({"checkIds": False})


def test_rule_options_are_resolved_once() -> None:
    rule = I18nRule({"ignoreAttributes": ["title"]})
    assert "title" in rule.ignored_attributes
    assert DEFAULT_IGNORE_ATTRIBUTES <= rule.ignored_attributes
    assert "title" not in I18nRule().ignored_attributes


# --- Namespaced attributes ---------------------------------------------------


@pytest.mark.parametrize(
    "markup",
    [
        '<svg xmlns:xlink="http://www.w3.org/1999/xlink" xml:lang="cy"><title>Logo</title></svg>',
        '<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink"></svg>',
        '<html xml:lang="cy" xmlns="http://www.w3.org/1999/xhtml"><body></body></html>',
    ],
)
def test_xml_namespaced_attributes_read_from_markup_are_exempt(markup: str) -> None:
    diagnostics = _check(markup)
    assert MessageKind.MISSING_ATTRIBUTE not in _kinds(diagnostics)


def test_other_namespaced_attributes_are_reported_with_prefixed_name() -> None:
    text = '<svg><use xlink:href="#icon-close"></use></svg>'
    (diagnostic,) = _check(text)

    assert diagnostic.message_id is MessageKind.MISSING_ATTRIBUTE
    assert diagnostic.attrib_name == ":xlink:href"
    assert diagnostic.fix == TextEdit.insert(len("<svg><use"), " i18n-:xlink:href")


def test_rule_fixes_are_insertions() -> None:
    diagnostics = _check('<section title="Intro"><p>Hello</p></section>')
    fixes = [d.fix for d in diagnostics if d.fix is not None]
    assert len(fixes) == 2
    assert all(fix.is_insertion for fix in fixes)


# --- Metadata ----------------------------------------------------------------


def test_rule_meta_describes_default_config() -> None:
    meta = I18nRule().meta
    assert meta["type"] == "suggestion"
    assert meta["fixable"] == "code"
    assert meta["description"].endswith(
        'Default Config = {"checkId": true, "checkText": true, '
        '"checkAttributes": true, "ignoreAttributes": []}'
    )
