"""Rich formatting utilities for the CLI.

Keeps all Rich rendering (tables, panels, syntax) in a dedicated module
that knows nothing about how reports are produced.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

if TYPE_CHECKING:
    from docstyle.domain.models.report import Report
    from docstyle.rules.base import BaseRule

console = Console()
err_console = Console(stderr=True)


# ---------------------------------------------------------------------------
# Success / error panels
# ---------------------------------------------------------------------------


def success_panel(message: str, title: str = "docstyle") -> None:
    """Print a green success panel."""
    console.print(Panel(message, title=title, border_style="green"))


def error_message(message: str) -> None:
    """Print a red error message on stderr."""
    err_console.print(f"[bold red]❌ {escape(message)}[/]")


# ---------------------------------------------------------------------------
# JSON / config rendering
# ---------------------------------------------------------------------------


def json_panel(raw_json: str, title: str = "⚙️  Active configuration") -> None:
    """Render JSON inside a syntax-highlighted panel."""
    console.print(
        Panel(
            Syntax(raw_json, "json", theme="monokai", line_numbers=True),
            title=title,
            border_style="blue",
        )
    )


# ---------------------------------------------------------------------------
# Rule set table
# ---------------------------------------------------------------------------


def rules_table(rules: Sequence[BaseRule]) -> None:
    """Print the rules that a validation run would apply."""
    table = Table(title="📐 Style rules", show_header=True, border_style="blue")
    table.add_column("Rule", style="cyan", no_wrap=True)
    table.add_column("Severity", no_wrap=True)
    table.add_column("Description")

    for rule in rules:
        style = "red" if rule.severity.value == "error" else "yellow"
        table.add_row(rule.rule_id.value, f"[{style}]{rule.severity.value}[/]", rule.description)

    console.print(table)


# ---------------------------------------------------------------------------
# Report rendering
# ---------------------------------------------------------------------------


def report_text(report: Report) -> None:
    """Print findings grouped by document and rule, then a summary line."""
    for doc_id, by_rule in report.grouped().items():
        console.print(f"\n[bold]{escape(doc_id)}[/]")
        for rule_id, findings in by_rule.items():
            style = "red" if findings[0].is_error else "yellow"
            console.print(f"  [{style}]{rule_id.value}[/] ({len(findings)})")
            for finding in findings:
                where = f"line {finding.location.line}" if finding.location.line else "document"
                console.print(f"    {finding.icon} {where}: {escape(finding.message)}")

    color = "red" if report.has_errors else ("yellow" if report.warning_count else "green")
    console.print(f"\n[bold {color}]{report.summary()}[/]")


def report_json(report: Report) -> None:
    """Print the report as plain JSON (no markup, no wrapping)."""
    console.out(json.dumps(report.to_dict(), indent=2), highlight=False)
