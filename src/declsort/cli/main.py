#!/usr/bin/env python3
"""
DECLSORT CLI
------------
Command-line front for the ordering checks. Reads the serialized token
streams / parse trees written by the language front end, runs the checks
and renders the findings.

Author: DeclSort Team
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.markup import escape
from rich.progress import (
    Progress,
    SpinnerColumn,
    TextColumn,
    BarColumn,
    TaskProgressColumn
)

from declsort.checks.registry import CHECKS
from declsort.cli.formatter import IssueFormatter
from declsort.core.comparators import SortMethod
from declsort.core.config import AnalysisConfig, load_config
from declsort.core.engine import AuditEngine
from declsort.core.errors import ConfigurationError
from declsort.frontend.codec import discover

# Global console for consistent styling across the application
console = Console()

EXIT_CLEAN = 0
EXIT_ISSUES = 1
EXIT_USAGE = 2


class DeclSortCLI:
    """
    CLI wrapper that translates user commands into Engine actions.
    """

    def __init__(self):
        self.parser = argparse.ArgumentParser(
            prog="declsort",
            description="DeclSort - ordering checks for types, imports and deps lists",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        self.formatter = IssueFormatter()
        self._setup_args()

    def _setup_args(self):
        self.parser.add_argument("--version", action="version", version="declsort 0.1.0")
        subparsers = self.parser.add_subparsers(dest="command", metavar="Command")

        check_parser = subparsers.add_parser("check", help="Report out-of-order declarations")
        check_parser.add_argument("paths", nargs="+", help="Representation files or directories")
        check_parser.add_argument("--config", help="YAML file with per-check settings")
        check_parser.add_argument("--sort-method", choices=[m.value for m in SortMethod],
                                  help="Override sort_method for every check that supports it")
        check_parser.add_argument("--only", nargs="+", metavar="CHECK", choices=list(CHECKS),
                                  help="Run only the named checks")
        check_parser.add_argument("--format", choices=["table", "json"], default="table",
                                  help="Output format (default: table)")
        check_parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

        explain_parser = subparsers.add_parser("explain", help="Describe a check and its params")
        explain_parser.add_argument("check", choices=list(CHECKS), help="Check name")

    def _build_config(self, args: argparse.Namespace) -> AnalysisConfig:
        config = load_config(args.config) if args.config else AnalysisConfig()
        if args.sort_method:
            config = config.with_sort_method(args.sort_method)
        if args.only:
            config = config.only(args.only)
        return config

    def _collect_targets(self, raw_paths: List[str]) -> Optional[List[Path]]:
        targets: List[Path] = []
        for raw in raw_paths:
            path = Path(raw)
            if not path.exists():
                console.print(f"[bold red]Error:[/bold red] Path '{escape(str(raw))}' not found.")
                return None
            targets.extend(discover(path))
        return targets

    def _run_check(self, args: argparse.Namespace) -> int:
        logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

        targets = self._collect_targets(args.paths)
        if targets is None:
            return EXIT_USAGE
        if not targets:
            console.print("[bold yellow]⚠️  No representation files found.[/bold yellow]")
            return EXIT_CLEAN

        try:
            engine = AuditEngine(self._build_config(args))
            if args.format == "json":
                reports = engine.scan(targets)
            else:
                reports = self._scan_with_progress(engine, targets)
        except ConfigurationError as e:
            console.print(f"[bold red]Configuration error:[/bold red] {escape(str(e))}")
            return EXIT_USAGE

        summary = engine.generate_summary(reports)
        if args.format == "json":
            self._print_json(reports, summary)
        else:
            for report in reports:
                self.formatter.print_file_report(report)
            self.formatter.print_summary(summary)

        if summary["total_issues"] or summary["system_errors"]:
            return EXIT_ISSUES
        return EXIT_CLEAN

    def _scan_with_progress(self, engine: AuditEngine, targets: List[Path]) -> List[Dict[str, Any]]:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(bar_width=40),
            TaskProgressColumn(),
            console=console,
            transient=True
        ) as progress:
            task_id = progress.add_task("Checking declarations...", total=len(targets))
            return engine.scan(
                targets,
                progress_callback=lambda done, total: progress.update(task_id, completed=done)
            )

    def _print_json(self, reports: List[Dict[str, Any]], summary: Dict[str, Any]):
        payload = {
            "files": [
                {
                    "file_path": r["file_path"],
                    "status": r["status"],
                    "error": r.get("error"),
                    "issues": [issue.to_dict() for issue in r.get("issues", [])],
                }
                for r in reports
            ],
            "summary": summary,
        }
        # Plain stdout: rich would soft-wrap long strings
        sys.stdout.write(json.dumps(payload, indent=2) + "\n")

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Primary routing entry point."""
        args = self.parser.parse_args(argv)
        if args.command == "check":
            return self._run_check(args)
        if args.command == "explain":
            self.formatter.print_explanation(CHECKS[args.check])
            return EXIT_CLEAN
        self.parser.print_help()
        return EXIT_USAGE


def main(argv: Optional[List[str]] = None) -> int:
    """Application entry point with interrupt handling."""
    try:
        return DeclSortCLI().run(argv)
    except KeyboardInterrupt:
        console.print("\n[bold red]Terminated by user.[/bold red]")
        return 130


if __name__ == "__main__":
    sys.exit(main())
