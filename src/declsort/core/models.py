#!/usr/bin/env python3
"""
DECLSORT CORE MODELS
--------------------
Defines the fundamental data structures used across the DeclSort engine.
Tokens come in from the external front end; Declarations, Groups and
Issues are derived views built fresh on every analysis pass.

Author: DeclSort Team
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, Optional, Tuple


# Sentinel for issues where no single token can be highlighted
NO_TRIGGER = "__no_trigger__"


class DeclarationKind(str, Enum):
    """Check family and subtype of a recognized construct."""
    TYPE = "type"
    TYPEP = "typep"
    OPAQUE = "opaque"
    IMPORT = "import"
    DEPENDENCY = "dependency"


class Priority(str, Enum):
    """Severity scale of the host linter. Every built-in check reports LOW."""
    HIGH = "high"
    NORMAL = "normal"
    LOW = "low"


@dataclass(frozen=True)
class Token:
    """
    One lexical token as produced by the external front end.

    Position fields are optional: some front ends emit synthetic tokens
    that carry no location at all.
    """
    type: str                     # Token type (e.g. 'eol', 'at_op', 'identifier')
    line: Optional[int] = None    # 1-based source line, if known
    column: Optional[int] = None  # 1-based source column, if known
    value: Any = None             # Token payload ('@', 'type', 'user_id', ...)

    @property
    def has_position(self) -> bool:
        return self.line is not None


@dataclass(frozen=True)
class Declaration:
    """
    The atomic unit of ordering analysis.

    A Declaration is one recognized construct (type alias, import target,
    dependency entry). Composite declarations carry their shared prefix in
    primary_name and the bundled targets in sub_names.
    """
    kind: DeclarationKind
    line: int                            # 1-based line; 0 when the source line is unknown
    primary_name: str                    # Name used for top-level ordering, case as written
    sub_names: Tuple[str, ...] = ()      # Bundled suffixes, only for composite declarations
    column: Optional[int] = None         # Column of the name token, if known
    owner: Optional[str] = None          # Owning function for dependency entries

    @property
    def is_composite(self) -> bool:
        return bool(self.sub_names)


@dataclass(frozen=True)
class Group:
    """A maximal contiguous run of Declarations that are ordered together."""
    declarations: Tuple[Declaration, ...]

    def __len__(self) -> int:
        return len(self.declarations)

    def __iter__(self) -> Iterator[Declaration]:
        return iter(self.declarations)

    @property
    def kind(self) -> Optional[DeclarationKind]:
        return self.declarations[0].kind if self.declarations else None

    @property
    def first_line(self) -> Optional[int]:
        return self.declarations[0].line if self.declarations else None

    def pairs(self) -> Iterator[Tuple[Declaration, Declaration]]:
        """Yields every adjacent (earlier, later) pair in source order."""
        return zip(self.declarations, self.declarations[1:])


@dataclass(frozen=True)
class Issue:
    """One reported ordering violation."""
    check_id: str
    line: int
    message: str
    trigger: str = NO_TRIGGER
    column: Optional[int] = None
    priority: Priority = Priority.LOW
    category: str = "readability"
    check_name: str = ""

    def to_dict(self) -> dict:
        return {
            "check": self.check_id,
            "name": self.check_name,
            "line": self.line,
            "column": self.column,
            "message": self.message,
            "trigger": None if self.trigger == NO_TRIGGER else self.trigger,
            "priority": self.priority.value,
            "category": self.category,
        }


@dataclass(frozen=True)
class SourceDocument:
    """
    A single file as handed over by the front end: its token stream, its
    parse tree, or both.
    """
    filename: str
    tokens: Tuple[Token, ...] = field(default_factory=tuple)
    ast: Any = None  # Root parse-tree node (see declsort.core.nodes)
