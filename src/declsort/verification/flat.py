#!/usr/bin/env python3
"""
DECLSORT FLAT VERIFIER
----------------------
Exhaustive adjacent-pair ordering check, used for type definitions and
dependency lists. Every out-of-order pair is reported on its own, anchored
at the earlier declaration.

Author: DeclSort Team
"""

from typing import Callable, Iterable, List

from declsort.core.comparators import SortMethod, out_of_order
from declsort.core.models import Declaration, Group, Issue

IssueFactory = Callable[[Declaration], Issue]


def unordered_declarations(group: Group, method: SortMethod) -> List[Declaration]:
    """The earlier member of every out-of-order adjacent pair, in source order."""
    return [
        first for first, second in group.pairs()
        if out_of_order(first.primary_name, second.primary_name, method)
    ]


def verify_flat(groups: Iterable[Group], method: SortMethod, issue_for: IssueFactory) -> List[Issue]:
    issues = []
    for group in groups:
        issues.extend(issue_for(decl) for decl in unordered_declarations(group, method))
    return issues
