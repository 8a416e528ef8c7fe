"""i18n coverage checks for HTML component templates.

This module scans a directory of templates, runs the ``i18n`` rule on each
one and writes a Markdown and a CSV report summarising the findings per
template.
"""

from __future__ import annotations

import argparse
import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional

from i18n_lint.models import Diagnostic, RuleOptions
from i18n_lint.template import SourceText, read_template

from .i18n_check_config import DEFAULT_IGNORE_ATTRIBUTES
from .i18n_rule import I18nRule
from .options_loader import load_rule_options
from .report_utils import build_report_csv, build_report_markdown

LOGGER = logging.getLogger(__name__)

TEMPLATE_GLOB = "*.html"
DEFAULT_REPORT_NAME = "i18n-check-report.md"


@dataclass
class TemplateReport:
    """Compilation of diagnostics for a specific template."""

    path: Path
    display_name: str
    diagnostics: list[Diagnostic] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)


def iter_template_files(root: Path) -> list[Path]:
    """Return a sorted list of template files under ``root``."""

    if not root.exists():
        return []
    return sorted(path for path in root.rglob(TEMPLATE_GLOB) if path.is_file())


def check_template_text(text: str, rule: I18nRule) -> list[Diagnostic]:
    """Parse ``text`` and run ``rule`` over every node."""
    source = SourceText(text)
    nodes = read_template(text, source=source)
    return rule.check(nodes, source)


def check_template(
    template_path: Path,
    rule: I18nRule,
    *,
    display_name: str | None = None,
) -> TemplateReport:
    """Run the rule on a single template file.

    Read or parse failures are logged and recorded on the report so that one
    broken template does not stop the run.
    """

    report = TemplateReport(path=template_path, display_name=display_name or template_path.name)
    try:
        text = template_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        LOGGER.exception("Could not read template %s", template_path)
        report.errors.append(f"Could not read template: {exc}")
        return report

    try:
        report.diagnostics = check_template_text(text, rule)
    except Exception as exc:
        LOGGER.exception("i18n check failed for %s", template_path)
        report.errors.append(f"i18n check failed due to {type(exc).__name__}: {exc}")
    return report


def _display_name(path: Path, root: Path) -> str:
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return path.name


def _run_check_with_logging(
    template_path: Path,
    root: Path,
    rule: I18nRule,
    running_total: int,
) -> tuple[TemplateReport, int]:
    """Run a check and emit consistent progress logging."""
    display_name = _display_name(template_path, root)
    LOGGER.info("Checking %s", display_name)
    report = check_template(template_path, rule, display_name=display_name)
    running_total += len(report.diagnostics)
    LOGGER.info(
        "Completed %s: %d issue(s) (running total: %d)",
        display_name,
        len(report.diagnostics),
        running_total,
    )
    return report, running_total


def run_i18n_checks(
    root: Path,
    *,
    report_path: Optional[Path] = None,
    document: Path | None = None,
    options: RuleOptions | Mapping[str, Any] | None = None,
) -> Path:
    """Run the i18n rule across all templates and write the reports.

    Args:
            root: Directory containing the templates (searched recursively)
            report_path: Path to write the Markdown report; the CSV report is
                written next to it (default: <root>/i18n-check-report.md)
            document: Single template to check (relative to root unless absolute)
            options: Rule options; defaults apply when omitted

    Returns:
            Path of the Markdown report

    Raises:
            FileNotFoundError: If ``document`` does not exist
    """

    if document is not None:
        document_path = document if document.is_absolute() else (root / document)
        document_path = document_path.resolve()
        if not document_path.is_file():
            raise FileNotFoundError(f"Template not found: {document_path}")
        templates = [document_path]
        root = root.resolve()
    else:
        templates = iter_template_files(root)

    rule = I18nRule(options)
    LOGGER.info(
        "Checking %d template(s) with %d ignored attribute(s)",
        len(templates),
        len(rule.ignored_attributes),
    )

    reports: list[TemplateReport] = []
    running_total = 0
    for template_path in templates:
        report, running_total = _run_check_with_logging(template_path, root, rule, running_total)
        reports.append(report)

    if report_path is None:
        report_path = root / DEFAULT_REPORT_NAME

    # Write Markdown report
    report_markdown = build_report_markdown(reports)
    report_path.parent.mkdir(parents=True, exist_ok=True)
    report_path.write_text(report_markdown, encoding="utf-8")

    # Write CSV report
    csv_path = report_path.with_suffix(".csv")
    csv_rows = build_report_csv(reports)
    with csv_path.open("w", encoding="utf-8", newline="") as csv_file:
        writer = csv.writer(csv_file)
        writer.writerows(csv_rows)

    return report_path


def parse_args(argv: Optional[Iterable[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Check HTML component templates for missing i18n markers."
    )
    parser.add_argument(
        "--root",
        type=Path,
        default=Path("."),
        help="Directory containing the templates (default: current directory)",
    )
    parser.add_argument(
        "--report",
        type=Path,
        default=None,
        help=f"Path to write the Markdown report (default: <root>/{DEFAULT_REPORT_NAME})",
    )
    parser.add_argument(
        "--document",
        type=Path,
        default=None,
        help="Single template to check (relative to root unless absolute).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON file with rule options (checkId, checkText, checkAttributes, ignoreAttributes).",
    )
    parser.add_argument(
        "--dotenv",
        type=Path,
        default=None,
        help="Optional .env file providing I18N_LINT_* variables.",
    )
    parser.add_argument(
        "--ignore-attribute",
        action="append",
        dest="ignore_attributes",
        help="Add an attribute name to the ignore list (case-sensitive, can be specified multiple times). "
        f"Default ignored attributes: {', '.join(sorted(DEFAULT_IGNORE_ATTRIBUTES))}",
    )
    parser.add_argument(
        "--no-check-id",
        action="store_true",
        help="Don't report i18n markers without a custom @@id",
    )
    parser.add_argument(
        "--no-check-text",
        action="store_true",
        help="Don't report elements with text but no i18n marker",
    )
    parser.add_argument(
        "--no-check-attributes",
        action="store_true",
        help="Don't report attributes without an i18n-<name> marker",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    return parser.parse_args(list(argv) if argv is not None else None)


def _cli_overrides(args: argparse.Namespace) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    if args.no_check_id:
        overrides["checkId"] = False
    if args.no_check_text:
        overrides["checkText"] = False
    if args.no_check_attributes:
        overrides["checkAttributes"] = False
    if args.ignore_attributes:
        overrides["ignoreAttributes"] = list(args.ignore_attributes)
    return overrides


def main(argv: Optional[Iterable[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    try:
        options = load_rule_options(
            args.config,
            dotenv_path=args.dotenv,
            overrides=_cli_overrides(args),
        )
    except (FileNotFoundError, ValueError) as exc:
        LOGGER.error("Invalid i18n configuration: %s", exc)
        return 1

    try:
        report_path = run_i18n_checks(
            args.root,
            report_path=args.report,
            document=args.document,
            options=options,
        )
    except FileNotFoundError as exc:
        LOGGER.error("%s", exc)
        return 1
    csv_path = report_path.with_suffix(".csv")
    print(f"i18n check report written to {report_path.resolve()}")
    print(f"CSV report written to {csv_path.resolve()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
