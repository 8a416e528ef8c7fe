"""Configuration for the i18n rule: built-in ignored attributes and defaults.

This module defines the attribute names that never need an ``i18n-<name>``
marker, plus the default rule options.
"""

from __future__ import annotations

from typing import Iterable

# Attributes whose values are never human-readable text (can be extended via
# the ``ignoreAttributes`` option or ``--ignore-attribute``). Matching is
# exact and case-sensitive.
DEFAULT_IGNORE_ATTRIBUTES = frozenset({
    # --- Styling ---
    "class", "style", "color",

    # --- Icons / links / resources ---
    "svgIcon", "href", "src",

    # --- Identity / document metadata ---
    "id", "lang", "charset",

    # --- Layout ---
    "height", "width", "colspan", "tabindex",

    # --- Behaviour ---
    "target", "type",

    # --- Routing (ui-router) ---
    "uiSref", "uiSrefActive", "ui-view",

    # --- SVG presentation ---
    "xmlns", "stroke-width", "stroke", "fill", "viewBox",

    # --- Forms ---
    "formControlName",
})

# Values that read as booleans rather than text
BOOLEAN_LITERALS = frozenset({"true", "false"})

SIZE_SUFFIX = "px"

# Namespaced attributes (``:xml:lang`` and friends) are never translated
NAMESPACE_PREFIX = ":xml"

DEFAULT_OPTIONS = {
    "checkId": True,
    "checkText": True,
    "checkAttributes": True,
    "ignoreAttributes": [],
}


def collect_ignored_attributes(extra_attributes: Iterable[str] | None) -> frozenset[str]:
    """Return the union of the built-in ignored attributes and any extras."""
    names = set(DEFAULT_IGNORE_ATTRIBUTES)
    if extra_attributes:
        names.update(extra_attributes)
    return frozenset(names)
