#!/usr/bin/env python3
"""
DECLSORT TREE EXTRACTORS
------------------------
Recognition rules that run over the parse tree:

  DependencyExtractor - entries of the private deps list functions
  ImportExtractor     - import targets, simple and composite, per scope

Both fail open: any node shape they do not expect is skipped, never
reported as an error.

Author: DeclSort Team
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from declsort.core.models import Declaration, DeclarationKind
from declsort.core.nodes import (
    AliasRef, Atom, Block, FunctionDef, Import, ListLiteral, Module,
    MultiAlias, Node, Pair, TupleLiteral, walk,
)

DEFAULT_DEPS_FUNCTIONS = ("app_deps", "optimum_deps")


@dataclass(frozen=True)
class DependencyList:
    """The recognized entries of one deps function, in written order."""
    function_name: str
    declarations: Tuple[Declaration, ...]


class DependencyExtractor:

    def __init__(self, function_names: Sequence[str] = DEFAULT_DEPS_FUNCTIONS):
        self.function_names = tuple(function_names)

    def extract(self, root: Optional[Node]) -> List[DependencyList]:
        found = []
        for node in walk(root):
            if self._is_deps_function(node):
                entries = self._flatten(self._body_items(node.body))
                declarations = tuple(
                    decl for decl in (self._entry(item, node.name) for item in entries)
                    if decl is not None
                )
                found.append(DependencyList(node.name, declarations))
        return found

    def _is_deps_function(self, node: Node) -> bool:
        return (
            isinstance(node, FunctionDef)
            and node.private
            and not node.params
            and node.name in self.function_names
        )

    def _body_items(self, body: Optional[Node]) -> Tuple[Node, ...]:
        if isinstance(body, Block):
            return body.exprs
        if isinstance(body, ListLiteral):
            return (body,)
        return ()

    def _flatten(self, items: Iterable[Node]) -> List[Node]:
        flat: List[Node] = []
        for item in items:
            if isinstance(item, ListLiteral):
                flat.extend(item.items)
            else:
                flat.append(item)
        return flat

    def _entry(self, item: Node, owner: str) -> Optional[Declaration]:
        # {:name, "~> 1.0", opts...}: only the leading atom matters
        if isinstance(item, TupleLiteral) and item.elements and isinstance(item.elements[0], Atom):
            return self._declaration(item.elements[0].name, item.line, owner)
        # {:name, "~> 1.0"} or name: "~> 1.0"
        if isinstance(item, Pair) and isinstance(item.key, Atom):
            return self._declaration(item.key.name, item.line, owner)
        return None

    def _declaration(self, name: str, line: Optional[int], owner: str) -> Declaration:
        return Declaration(
            kind=DeclarationKind.DEPENDENCY,
            line=line or 0,
            primary_name=name,
            column=1,
            owner=owner,
        )


class ImportExtractor:
    """
    Collects import declarations scope by scope. A scope is a module body, or
    the top level of the file outside any module; nested modules are scopes
    of their own.
    """

    def extract(self, root: Optional[Node]) -> List[List[Declaration]]:
        """Returns the import declarations of each scope, in source order."""
        scopes = []
        for scope_imports in self._scopes(root):
            declarations = [d for d in map(self.declaration_for, scope_imports) if d is not None]
            if declarations:
                scopes.append(declarations)
        return scopes

    def declaration_for(self, node: Import) -> Optional[Declaration]:
        target = node.target
        if isinstance(target, AliasRef):
            return Declaration(
                kind=DeclarationKind.IMPORT,
                line=self._line_of(node, target),
                primary_name=target.full_name,
                column=target.column,
            )
        if isinstance(target, MultiAlias):
            return Declaration(
                kind=DeclarationKind.IMPORT,
                line=self._line_of(node, target.prefix),
                primary_name=target.prefix.full_name,
                sub_names=tuple(suffix.full_name for suffix in target.suffixes),
                column=target.prefix.column,
            )
        return None

    def _line_of(self, node: Import, alias: AliasRef) -> int:
        if alias.line is not None:
            return alias.line
        return node.line or 0

    def _scopes(self, root: Optional[Node]) -> List[List[Import]]:
        if root is None:
            return []
        scopes = []
        pending = [root]
        while pending:
            scope_root = pending.pop(0)
            imports: List[Import] = []
            start = scope_root.children() if isinstance(scope_root, Module) else (scope_root,)
            stack = list(reversed(start))
            while stack:
                node = stack.pop()
                if isinstance(node, Module):
                    pending.append(node)
                elif isinstance(node, Import):
                    imports.append(node)
                else:
                    stack.extend(reversed(node.children()))
            scopes.append(imports)
        return scopes
