#!/usr/bin/env python3
"""
DECLSORT GROUP PARTITIONER
--------------------------
Splits an ordered declaration sequence into Groups. Partitioning is a
two-step fold: every declaration is first paired with its line gap from
the previous one, then an adjacency predicate decides whether it extends
the open Group or starts a new one.

Author: DeclSort Team
"""

from typing import Callable, Iterable, Iterator, List, Optional, Sequence, Tuple

from declsort.core.models import Declaration, Group

Adjacency = Callable[[Declaration, Declaration, int], bool]


def with_gaps(declarations: Iterable[Declaration]) -> Iterator[Tuple[Declaration, Optional[int]]]:
    """Pairs each declaration with its line distance from its predecessor."""
    previous = None
    for declaration in declarations:
        gap = None if previous is None else declaration.line - previous.line
        yield declaration, gap
        previous = declaration


def same_kind_within_gap(previous: Declaration, current: Declaration, gap: int) -> bool:
    """Type definitions: same kind, at most one line further down."""
    return current.kind == previous.kind and gap <= 1


def on_next_line(previous: Declaration, current: Declaration, gap: int) -> bool:
    """Imports: strictly consecutive lines. A predecessor with no known line never breaks."""
    return previous.line == 0 or gap == 1


def partition(declarations: Sequence[Declaration], adjacent: Adjacency) -> List[Group]:
    groups: List[Group] = []
    current: List[Declaration] = []

    for declaration, gap in with_gaps(declarations):
        if current and not adjacent(current[-1], declaration, gap):
            groups.append(Group(tuple(current)))
            current = []
        current.append(declaration)

    if current:
        groups.append(Group(tuple(current)))
    return groups


def partition_by_line(declarations: Iterable[Declaration], adjacent: Adjacency) -> List[Group]:
    """Stable-sorts by line first; for extractors that do not emit in line order."""
    return partition(sorted(declarations, key=lambda d: d.line), adjacent)
