#!/usr/bin/env python3
"""
TYPESPEC ORDER CHECK (EX9003)
-----------------------------
Ensures @type, @typep and @opaque declarations are alphabetically ordered
within their groups. A group is a run of same-kind declarations on
consecutive lines; a blank line or a different kind starts a new one.

Author: DeclSort Team
"""

from typing import List

from declsort.checks.base import BaseCheck
from declsort.core.models import Declaration, Issue, SourceDocument
from declsort.extraction.scanner import TypeDefinitionScanner
from declsort.grouping.partitioner import partition_by_line, same_kind_within_gap
from declsort.verification.flat import verify_flat


class TypespecOrderCheck(BaseCheck):
    id = "EX9003"
    name = "typespec_order"
    param_docs = {
        "sort_method": (
            "The ordering method to use.\n"
            "  alpha - Alphabetical case-insensitive sorting.\n"
            "  ascii - Case-sensitive sorting where upper case characters are\n"
            "          ordered before their lower case equivalent."
        ),
    }
    explanation = """\
Alphabetically ordered typespecs are more easily scannable by the reader.

    # preferred

    @type apple :: String.t()
    @type banana :: String.t()

    @typep color :: String.t()
    @typep dimension :: integer()

    # NOT preferred

    @type banana :: String.t()
    @type apple :: String.t()

    @typep dimension :: integer()
    @typep color :: String.t()

Like all Readability issues, this one is not a technical concern.
But you can improve the odds of others reading and liking your code by
making it easier to follow.
"""

    def __init__(self, **params):
        super().__init__(**params)
        self.scanner = TypeDefinitionScanner()

    def run(self, document: SourceDocument) -> List[Issue]:
        definitions = self.scanner.scan(document.tokens)
        groups = partition_by_line(definitions, same_kind_within_gap)
        return verify_flat(groups, self.sort_method, self._issue_for)

    def _issue_for(self, declaration: Declaration) -> Issue:
        return self.format_issue(
            line=declaration.line,
            message=(
                f"The typespec `@{declaration.kind.value} {declaration.primary_name}` "
                "is not alphabetically ordered among its group."
            ),
            trigger=declaration.primary_name,
            column=declaration.column,
        )
