"""i18n check package exports.

This package exposes the rule and the run helpers so callers can import
from ``i18n_lint.i18n_check``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing only
    # Only for type checkers; not executed at runtime
    from .exemptions import is_exempt, is_size_or_number
    from .i18n_check import (
        TemplateReport,
        check_template,
        check_template_text,
        iter_template_files,
        run_i18n_checks,
    )
    from .i18n_check_config import DEFAULT_IGNORE_ATTRIBUTES, collect_ignored_attributes
    from .i18n_rule import I18nRule
    from .node_locator import NodeLocation, locate
    from .options_loader import load_rule_options
    from .report_utils import build_report_csv, build_report_markdown

__all__ = [
    "I18nRule",
    "NodeLocation",
    "TemplateReport",
    "build_report_csv",
    "build_report_markdown",
    "check_template",
    "check_template_text",
    "collect_ignored_attributes",
    "is_exempt",
    "is_size_or_number",
    "iter_template_files",
    "load_rule_options",
    "locate",
    "run_i18n_checks",
    "DEFAULT_IGNORE_ATTRIBUTES",
]

_LAZY_EXPORTS = {
    # attribute -> (module, attribute)
    "I18nRule": (".i18n_rule", "I18nRule"),
    "NodeLocation": (".node_locator", "NodeLocation"),
    "locate": (".node_locator", "locate"),
    "TemplateReport": (".i18n_check", "TemplateReport"),
    "check_template": (".i18n_check", "check_template"),
    "check_template_text": (".i18n_check", "check_template_text"),
    "iter_template_files": (".i18n_check", "iter_template_files"),
    "run_i18n_checks": (".i18n_check", "run_i18n_checks"),
    "is_exempt": (".exemptions", "is_exempt"),
    "is_size_or_number": (".exemptions", "is_size_or_number"),
    "load_rule_options": (".options_loader", "load_rule_options"),
    "build_report_csv": (".report_utils", "build_report_csv"),
    "build_report_markdown": (".report_utils", "build_report_markdown"),
    "collect_ignored_attributes": (".i18n_check_config", "collect_ignored_attributes"),
    "DEFAULT_IGNORE_ATTRIBUTES": (".i18n_check_config", "DEFAULT_IGNORE_ATTRIBUTES"),
}


def __getattr__(name: str):
    """Lazily import and return exported attributes.

    Submodules are only imported when used, so importing the rule does not
    pull in the report writers or the template reader.
    """

    if name in _LAZY_EXPORTS:
        module_name, attr = _LAZY_EXPORTS[name]
        from importlib import import_module

        mod = import_module(f"i18n_lint.i18n_check{module_name}")
        value = getattr(mod, attr)
        globals()[name] = value
        return value
    raise AttributeError(name)


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(_LAZY_EXPORTS.keys()))
