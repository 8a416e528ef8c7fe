"""Message catalog and metadata for the i18n rule."""

from __future__ import annotations

import json

from i18n_lint.models import MessageKind

from .i18n_check_config import DEFAULT_OPTIONS

RULE_NAME = "i18n"

_CUSTOM_ID_GUIDE = "https://angular.io/guide/i18n#use-a-custom-id-with-a-description"

MESSAGES: dict[MessageKind, str] = {
    MessageKind.MISSING_ID: (
        "Missing custom message identifier. "
        f"For more information visit {_CUSTOM_ID_GUIDE}"
    ),
    MessageKind.MISSING_ID_ON_ATTRIBUTE: (
        "Missing custom message identifier on attribute '{attrib_name}'. "
        f"For more information visit {_CUSTOM_ID_GUIDE}"
    ),
    MessageKind.MISSING_TEXT: (
        "Each element containing text node should have an i18n attribute. "
        "See https://angular.io/guide/i18n"
    ),
    MessageKind.MISSING_ATTRIBUTE: (
        "Attribute '{attrib_name}' has no corresponding i18n attribute. "
        "See https://angular.io/guide/i18n#translate-attributes"
    ),
    MessageKind.SUGGEST_IGNORE: (
        "Add the attribute name '{attrib_name}' to the ignoreAttributes option "
        "in the lint config."
    ),
}

RULE_META = {
    "type": "suggestion",
    "fixable": "code",
    "description": (
        "Helps to ensure following best practices for i18n. "
        "Checks for missing i18n attributes on elements and non-ignored attributes "
        "containing text. Can also highlight tags that do not use Custom ID (@@) feature. "
        "Default Config = " + json.dumps(DEFAULT_OPTIONS)
    ),
    "category": "Best Practices",
    "recommended": False,
}


def format_message(message_id: MessageKind, data: dict[str, str] | None = None) -> str:
    """Interpolate ``data`` into the catalog entry for ``message_id``.

    Missing fields raise ``KeyError``; every caller passes the fields its
    message needs.
    """
    template = MESSAGES[message_id]
    return template.format(**(data or {}))
