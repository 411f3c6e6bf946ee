#!/usr/bin/env python3
"""
DECLSORT SCANNER - Type Definition Recognizer
---------------------------------------------
Mines type-definition declarations (@type / @typep / @opaque) out of the
logical lines produced by the LineLexer. Lines whose head does not match
are ignored.

Author: DeclSort Team
"""

from typing import Iterable, List, Optional

from declsort.core.models import Declaration, DeclarationKind, Token
from declsort.extraction.lexer import LineLexer, LogicalLine

TYPE_KINDS = {
    "type": DeclarationKind.TYPE,
    "typep": DeclarationKind.TYPEP,
    "opaque": DeclarationKind.OPAQUE,
}

# Token types accepted as the declared name; 't(a)' lexes as paren_identifier
NAME_TOKEN_TYPES = ("identifier", "paren_identifier")


class TypeDefinitionScanner:
    """
    Recognizes lines shaped '@', kind identifier, name identifier, with all
    three tokens on the same source line.
    """

    def __init__(self, lexer: Optional[LineLexer] = None):
        self.lexer = lexer or LineLexer()

    def scan(self, tokens: Iterable[Token]) -> List[Declaration]:
        declarations = []
        for logical_line in self.lexer.split_lines(tokens):
            declaration = self.match_line(logical_line)
            if declaration is not None:
                declarations.append(declaration)
        return declarations

    def match_line(self, logical_line: LogicalLine) -> Optional[Declaration]:
        head = logical_line.head
        if len(head) < 3:
            return None

        marker, kind_token, name_token = head
        if marker.type != "at_op" or str(marker.value) != "@":
            return None
        if kind_token.type != "identifier" or str(kind_token.value) not in TYPE_KINDS:
            return None
        if name_token.type not in NAME_TOKEN_TYPES:
            return None
        if not (marker.line is not None and marker.line == kind_token.line == name_token.line):
            return None

        return Declaration(
            kind=TYPE_KINDS[str(kind_token.value)],
            line=marker.line,
            primary_name=str(name_token.value),
            column=name_token.column,
        )
