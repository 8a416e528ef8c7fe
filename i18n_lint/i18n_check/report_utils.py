"""Utilities for generating i18n check reports.

This module holds the Markdown and CSV report builders used by the i18n
check workflow, kept apart from the file scanning so they can be tested on
their own.
"""

from __future__ import annotations

from typing import Iterable, TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing only
    from i18n_lint.models import Diagnostic, TextEdit

    from .i18n_check import TemplateReport


def _escape(text: str) -> str:
    return text.replace("|", "\\|").replace("\n", " ")


def _format_fix(fix: "TextEdit | None") -> str:
    """Describe an autofix, e.g. ``insert " i18n" at 5``; empty when none."""
    if fix is None:
        return ""
    start, end = fix.text_range
    if fix.is_insertion:
        return f'insert "{fix.text}" at {start}'
    return f'replace {start}-{end} with "{fix.text}"'


def _format_suggestions(diagnostic: "Diagnostic") -> str:
    return "; ".join(suggestion.message for suggestion in diagnostic.suggestions)


def _sorted_reports(reports: Iterable["TemplateReport"]) -> list["TemplateReport"]:
    return sorted(reports, key=lambda item: item.display_name.lower())


def build_report_markdown(reports: Iterable["TemplateReport"]) -> str:
    """Convert the collected template reports into Markdown output."""

    report_list = _sorted_reports(reports)
    total_files = len(report_list)
    total_issues = sum(len(report.diagnostics) for report in report_list)
    total_fixable = sum(
        1 for report in report_list for diagnostic in report.diagnostics if diagnostic.fix
    )
    failed = [report for report in report_list if report.errors]

    kind_totals: dict[str, int] = {}
    for report in report_list:
        for diagnostic in report.diagnostics:
            key = diagnostic.message_id.value
            kind_totals[key] = kind_totals.get(key, 0) + 1

    lines: list[str] = []
    lines.append("# i18n Check Report")
    lines.append("")
    lines.append(f"- Checked {total_files} template(s)")
    lines.append(f"- Total issues found: {total_issues} ({total_fixable} with an autofix)")
    if failed:
        lines.append(f"- Templates that could not be checked: {len(failed)}")

    lines.append("")
    lines.append("## Totals by Rule")
    if kind_totals:
        for kind in sorted(kind_totals):
            lines.append(f"- `{kind}`: {kind_totals[kind]}")
    else:
        lines.append("- No issues found.")

    lines.append("")
    lines.append("---")
    lines.append("")
    lines.append("## Template Details")
    if not report_list:
        lines.append("")
        lines.append("_No templates found for checking._")
        return "\n".join(lines)

    for report in report_list:
        lines.append("")
        lines.append(f"### {report.display_name}")
        lines.append("")
        for error in report.errors:
            lines.append(f"- **Error:** {_escape(error)}")
        if report.errors:
            lines.append("")
        if not report.diagnostics:
            lines.append("_No issues found._")
            continue

        lines.append(f"Found {len(report.diagnostics)} issue(s).")
        lines.append("")
        lines.append("| Line | Column | Rule | Message | Fix |")
        lines.append("| --- | --- | --- | --- | --- |")
        for diagnostic in report.diagnostics:
            fix = _escape(_format_fix(diagnostic.fix)) or "-"
            lines.append(
                f"| {diagnostic.loc.start.line} | {diagnostic.loc.start.column} "
                f"| `{diagnostic.message_id.value}` | {_escape(diagnostic.message)} | {fix} |"
            )

    return "\n".join(lines)


def build_report_csv(reports: Iterable["TemplateReport"]) -> list[list[str]]:
    """Convert the collected template reports into CSV data.

    Returns a list of rows, where each row is a list of string values.
    The first row contains the column headers.
    """

    rows: list[list[str]] = []

    rows.append([
        "File",
        "Line",
        "Column",
        "Message ID",
        "Attribute",
        "Message",
        "Fix",
        "Suggestions",
    ])

    for report in _sorted_reports(reports):
        for diagnostic in report.diagnostics:
            rows.append([
                report.display_name,
                str(diagnostic.loc.start.line),
                str(diagnostic.loc.start.column),
                diagnostic.message_id.value,
                diagnostic.attrib_name or "",
                diagnostic.message,
                _format_fix(diagnostic.fix),
                _format_suggestions(diagnostic),
            ])

    return rows
