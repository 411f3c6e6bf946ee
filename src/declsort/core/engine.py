#!/usr/bin/env python3
"""
DECLSORT ENGINE - The Orchestrator
----------------------------------
The AuditEngine runs every enabled ordering check over decoded source
documents and turns the resulting issues into per-file reports. The checks
themselves are pure; all file access happens here and in the codec.

Author: DeclSort Team
"""

import logging
import time
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional, Union

from declsort.checks.registry import build_checks
from declsort.core.config import AnalysisConfig
from declsort.core.errors import RepresentationError
from declsort.core.models import SourceDocument
from declsort.frontend.codec import load_document

logger = logging.getLogger("declsort.engine")


class AuditEngine:
    """
    Principal orchestrator for ordering checks.
    Builds the configured checks once and reuses them for every document.
    """

    def __init__(self, config: Optional[AnalysisConfig] = None):
        self.config = config or AnalysisConfig()
        # Bad params surface here, before any file is touched
        self.checks = build_checks(self.config)

    def audit_document(self, document: SourceDocument) -> Dict[str, Any]:
        """Runs all active checks over one decoded document."""
        issues = []
        for check in self.checks:
            found = check.run(document)
            logger.debug(f"{check.name}: {len(found)} issue(s) in {document.filename}")
            issues.extend(found)

        return {
            "file_path": document.filename,
            "status": "ISSUES" if issues else "CLEAN",
            "success": not issues,
            "issues": issues,
            "checks_run": [check.name for check in self.checks],
            "timestamp": time.time(),
        }

    def audit_file(self, path: Union[str, Path]) -> Dict[str, Any]:
        try:
            document = load_document(path)
            return self.audit_document(document)
        except RepresentationError as e:
            logger.error(f"Error processing {path}: {e}")
            return self._file_error(str(path), str(e))

    def scan(self, paths: Iterable[Union[str, Path]],
             progress_callback: Optional[Callable[[int, int], None]] = None) -> List[Dict[str, Any]]:
        """Audits every path in order; one broken file never stops the batch."""
        targets = list(paths)
        reports = []
        for processed, path in enumerate(targets, 1):
            reports.append(self.audit_file(path))
            if progress_callback:
                progress_callback(processed, len(targets))
        return reports

    def generate_summary(self, reports: List[Dict[str, Any]]) -> Dict[str, Any]:
        by_check: Dict[str, int] = {}
        for report in reports:
            for issue in report.get("issues", []):
                by_check[issue.check_name] = by_check.get(issue.check_name, 0) + 1

        return {
            "total_files": len(reports),
            "clean": sum(1 for r in reports if r.get("status") == "CLEAN"),
            "with_issues": sum(1 for r in reports if r.get("status") == "ISSUES"),
            "total_issues": sum(by_check.values()),
            "system_errors": sum(1 for r in reports if r.get("status") == "ENGINE_ERROR"),
            "by_check": by_check,
            "summary_timestamp": time.strftime("%Y-%m-%d %H:%M:%S"),
        }

    def _file_error(self, path: str, error: str) -> Dict[str, Any]:
        return {
            "file_path": path, "status": "ENGINE_ERROR", "error": error,
            "success": False, "issues": [], "checks_run": [],
            "timestamp": time.time(),
        }
