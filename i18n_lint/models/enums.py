"""Enumerations shared by the template model and the i18n rule.

Values are serialised into reports, so they are kept stable and readable.
"""

from __future__ import annotations

from enum import Enum


class NodeKind(str, Enum):
    """Node kinds that can carry translatable content.

    Values:
        ELEMENT: A plain markup element (``<div>``, ``<my-widget>``)
        TEMPLATE: A structural-template element (``<ng-template>``); its
            template tag name may be empty
    """

    ELEMENT = "Element"
    TEMPLATE = "Template"

    @classmethod
    def all_values(cls) -> list[str]:
        return [m.value for m in cls]


class ChildContentKind(str, Enum):
    """Kinds of child content that count as translatable text."""

    TEXT = "Text"
    BOUND_TEXT = "BoundText"
    ICU = "Icu"

    @classmethod
    def all_values(cls) -> list[str]:
        return [m.value for m in cls]


class MessageKind(str, Enum):
    """Every diagnostic kind the i18n rule can emit.

    ``SUGGEST_IGNORE`` only labels a suggestion; it is never reported on its
    own.
    """

    MISSING_ID = "i18n-missing-id"
    MISSING_ID_ON_ATTRIBUTE = "i18n-missing-id-on-attribute"
    MISSING_TEXT = "i18n-missing-text"
    MISSING_ATTRIBUTE = "i18n-missing-attribute"
    SUGGEST_IGNORE = "i18n-suggest-ignore"

    @classmethod
    def all_values(cls) -> list[str]:
        return [m.value for m in cls]
