#!/usr/bin/env python3
"""
DECLSORT PARSE TREE
-------------------
A closed set of tagged node variants describing the parts of a parsed
source file the tree extractors care about. Everything the codec does
not recognize becomes an Opaque node: walkers descend into it but no
extraction rule ever matches it.

Author: DeclSort Team
"""

from dataclasses import dataclass
from typing import Any, Iterator, Optional, Tuple


class Node:
    """Base for every parse-tree variant."""

    def children(self) -> Tuple["Node", ...]:
        return ()


@dataclass(frozen=True)
class Module(Node):
    name: str
    body: Tuple[Node, ...] = ()
    line: Optional[int] = None

    def children(self) -> Tuple[Node, ...]:
        return self.body


@dataclass(frozen=True)
class AliasRef(Node):
    """A dotted-path reference such as `Data.One`."""
    segments: Tuple[str, ...]
    line: Optional[int] = None
    column: Optional[int] = None

    @property
    def full_name(self) -> str:
        return ".".join(self.segments)


@dataclass(frozen=True)
class MultiAlias(Node):
    """`Prefix.{A, B}`: several sibling references under one prefix."""
    prefix: AliasRef
    suffixes: Tuple[AliasRef, ...] = ()
    line: Optional[int] = None

    def children(self) -> Tuple[Node, ...]:
        return (self.prefix,) + self.suffixes


@dataclass(frozen=True)
class Import(Node):
    target: Node
    options: Tuple[Node, ...] = ()
    line: Optional[int] = None

    def children(self) -> Tuple[Node, ...]:
        return (self.target,) + self.options


@dataclass(frozen=True)
class FunctionDef(Node):
    name: str
    params: Tuple[Node, ...] = ()
    body: Optional[Node] = None
    private: bool = False
    line: Optional[int] = None

    def children(self) -> Tuple[Node, ...]:
        return self.params + ((self.body,) if self.body is not None else ())


@dataclass(frozen=True)
class Block(Node):
    exprs: Tuple[Node, ...] = ()
    line: Optional[int] = None

    def children(self) -> Tuple[Node, ...]:
        return self.exprs


@dataclass(frozen=True)
class ListLiteral(Node):
    items: Tuple[Node, ...] = ()
    line: Optional[int] = None

    def children(self) -> Tuple[Node, ...]:
        return self.items


@dataclass(frozen=True)
class TupleLiteral(Node):
    """A tuple that carries source metadata (three or more elements)."""
    elements: Tuple[Node, ...] = ()
    line: Optional[int] = None

    def children(self) -> Tuple[Node, ...]:
        return self.elements


@dataclass(frozen=True)
class Pair(Node):
    """A two-element tuple or a keyword entry; usually has no line."""
    key: Node
    value: Node
    line: Optional[int] = None

    def children(self) -> Tuple[Node, ...]:
        return (self.key, self.value)


@dataclass(frozen=True)
class Atom(Node):
    name: str
    line: Optional[int] = None


@dataclass(frozen=True)
class Literal(Node):
    value: Any = None
    line: Optional[int] = None


@dataclass(frozen=True)
class Call(Node):
    name: str
    args: Tuple[Node, ...] = ()
    line: Optional[int] = None

    def children(self) -> Tuple[Node, ...]:
        return self.args


@dataclass(frozen=True)
class Opaque(Node):
    tag: str
    nodes: Tuple[Node, ...] = ()
    line: Optional[int] = None

    def children(self) -> Tuple[Node, ...]:
        return self.nodes


def walk(node: Optional[Node]) -> Iterator[Node]:
    """Pre-order traversal of a tree, parents before children."""
    if node is None:
        return
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children()))
