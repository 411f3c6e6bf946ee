#!/usr/bin/env python3
"""
DECLSORT NESTED VERIFIER
------------------------
First-violation-wins ordering check for import groups, where a declaration
may be composite (`Data.{One, Two}`). At most one violation is reported per
group: the first one found while scanning adjacent pairs in source order.

For each pair the checks run in this order:
  1. ascii fast path   - both simple, ascii: raw primary names
  2. pairwise          - primary names under the active comparator
  3. inner ordering    - sub_names of the first, then the second declaration

Author: DeclSort Team
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional

from declsort.core.comparators import SortMethod, first_divergence, out_of_order
from declsort.core.models import Declaration, Group


@dataclass(frozen=True)
class Violation:
    line: int
    path: str             # Dotted path shown in the message
    trigger: str          # Name to highlight
    column: Optional[int] = None


def inner_violation(declaration: Declaration, method: SortMethod) -> Optional[Violation]:
    """Checks the sub_names of a composite declaration; simple ones always pass."""
    if not declaration.is_composite:
        return None

    index = first_divergence(declaration.sub_names, method)
    if index is None:
        return None

    trigger = declaration.sub_names[index]
    return Violation(
        line=declaration.line,
        path=f"{declaration.primary_name}.{trigger}",
        trigger=trigger,
        column=declaration.column,
    )


def pair_violation(first: Declaration, second: Declaration, method: SortMethod) -> Optional[Violation]:
    if method is SortMethod.ASCII and not first.is_composite and not second.is_composite:
        unordered = first.primary_name > second.primary_name
    else:
        unordered = out_of_order(first.primary_name, second.primary_name, method)

    if unordered:
        return Violation(first.line, first.primary_name, first.primary_name, first.column)

    return inner_violation(first, method) or inner_violation(second, method)


def group_violation(group: Group, method: SortMethod) -> Optional[Violation]:
    if len(group) == 1:
        return inner_violation(group.declarations[0], method)

    for first, second in group.pairs():
        violation = pair_violation(first, second, method)
        if violation is not None:
            return violation
    return None


def verify_nested(groups: Iterable[Group], method: SortMethod) -> List[Violation]:
    violations = []
    for group in groups:
        violation = group_violation(group, method)
        if violation is not None:
            violations.append(violation)
    return violations
