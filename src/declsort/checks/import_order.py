#!/usr/bin/env python3
"""
IMPORT ORDER CHECK (EX9001)
---------------------------
Ensures imports are alphabetically ordered within their groups, including
the sibling names of a composite import (`import Data.{One, Two}`).
Imports on consecutive lines form a group; a blank line starts a new one.
Only the first violation of each group is reported.

Author: DeclSort Team
"""

from typing import List

from declsort.checks.base import BaseCheck
from declsort.core.models import Issue, SourceDocument
from declsort.extraction.tree import ImportExtractor
from declsort.grouping.partitioner import on_next_line, partition
from declsort.verification.nested import Violation, verify_nested


class ImportOrderCheck(BaseCheck):
    id = "EX9001"
    name = "import_order"
    param_docs = {
        "sort_method": (
            "The ordering method to use.\n"
            "  alpha - Alphabetical case-insensitive sorting.\n"
            "  ascii - Case-sensitive sorting where upper case characters are\n"
            "          ordered before their lower case equivalent."
        ),
    }
    explanation = """\
Alphabetically ordered imports are more easily scannable by the reader.

    # preferred

    import ModuleA
    import ModuleB
    import ModuleC

    # NOT preferred

    import ModuleA
    import ModuleC
    import ModuleB

Imports should be alphabetically ordered among their group:

    # preferred

    import ModuleC
    import ModuleD

    import ModuleA
    import ModuleB

    # NOT preferred

    import ModuleC
    import ModuleD

    import ModuleB
    import ModuleA

Like all Readability issues, this one is not a technical concern.
But you can improve the odds of others reading and liking your code by
making it easier to follow.
"""

    def __init__(self, **params):
        super().__init__(**params)
        self.extractor = ImportExtractor()

    def run(self, document: SourceDocument) -> List[Issue]:
        issues = []
        for scope in self.extractor.extract(document.ast):
            groups = partition(scope, on_next_line)
            issues.extend(self._issue_for(v) for v in verify_nested(groups, self.sort_method))
        return issues

    def _issue_for(self, violation: Violation) -> Issue:
        return self.format_issue(
            line=violation.line,
            message=f"The import `{violation.path}` is not alphabetically ordered among its group.",
            trigger=violation.trigger,
            column=violation.column,
        )
