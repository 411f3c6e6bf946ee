# src/declsort/cli/formatter.py
from typing import Any, Dict, List, Type

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from declsort.checks.base import BaseCheck
from declsort.core.models import NO_TRIGGER

# Initialize the Rich console for high-quality terminal output
console = Console()


class IssueFormatter:
    """
    IssueFormatter: the visual side of the CLI.
    Responsible for rendering per-file issues, the run summary and check explanations.
    """

    def print_file_report(self, report: Dict[str, Any]):
        """Renders the issues of one file, or a single status line when there are none."""
        path = report.get("file_path")

        if report.get("status") == "ENGINE_ERROR":
            console.print(f"[bold red]Error in {escape(str(path))}:[/bold red] {escape(str(report.get('error')))}")
            return

        issues = report.get("issues", [])
        if not issues:
            console.print(f"[dim]ℹ {escape(str(path))}: declarations are in order.[/dim]")
            return

        table = Table(title=escape(str(path)), show_header=True, header_style="bold magenta")
        table.add_column("Line", justify="right", style="cyan")
        table.add_column("Check", style="dim")
        table.add_column("Trigger", style="bold yellow")
        table.add_column("Message")

        for issue in issues:
            line = f"{issue.line}:{issue.column}" if issue.column else str(issue.line)
            trigger = "" if issue.trigger == NO_TRIGGER else issue.trigger
            table.add_row(line, issue.check_id, escape(trigger), escape(issue.message))

        console.print(table)

    def print_summary(self, summary: Dict[str, Any]):
        by_check = ", ".join(f"{name}: {count}" for name, count in summary["by_check"].items()) or "none"
        console.print(Panel(
            f"[bold white]Summary Report[/bold white]\n"
            f"════════════════════════════════════════\n"
            f"Files Checked:  {summary['total_files']}\n"
            f"Clean:          [green]{summary['clean']}[/green]\n"
            f"With Issues:    [yellow]{summary['with_issues']}[/yellow]\n"
            f"Total Issues:   {summary['total_issues']} ({by_check})\n"
            f"System Errors:  [red]{summary['system_errors']}[/red]",
            border_style="dim"
        ))

    def print_explanation(self, check_cls: Type[BaseCheck]):
        params: List[str] = []
        for name, default in check_cls.param_defaults.items():
            doc = check_cls.param_docs.get(name, "")
            params.append(f"[bold]{name}[/bold] (default: {default})\n{doc}")

        console.print(Panel(
            check_cls.explanation.rstrip() + "\n\n[bold cyan]Params[/bold cyan]\n\n" + "\n\n".join(params),
            title=f"[bold white]{check_cls.id} {check_cls.name}[/bold white]",
            subtitle=f"{check_cls.category} / priority {check_cls.priority.value}",
            border_style="cyan"
        ))
