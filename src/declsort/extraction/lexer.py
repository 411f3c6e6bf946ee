#!/usr/bin/env python3
"""
DECLSORT LINE LEXER - Logical Line Rebuilder
--------------------------------------------
Regroups a flat token stream into logical source lines so that the
scanner can pattern-match the head of each line.

Author: DeclSort Team
"""

from dataclasses import dataclass
from typing import Iterable, List, Tuple

from declsort.core.models import Token

EOL = "eol"


@dataclass(frozen=True)
class LogicalLine:
    tokens: Tuple[Token, ...]

    @property
    def head(self) -> Tuple[Token, ...]:
        return self.tokens[:3]


class LineLexer:
    """
    Rebuilds logical lines from tokens.

    An 'eol' token closes the current buffer (even an empty one) and moves
    the cursor to the following line. A positioned token on another line
    closes a non-empty buffer and opens a new one. Tokens with no position
    stick to whatever buffer is open.
    """

    def split_lines(self, tokens: Iterable[Token]) -> List[LogicalLine]:
        lines: List[LogicalLine] = []
        buffer: List[Token] = []
        current_line = 1

        for token in tokens:
            if token.type == EOL and token.has_position:
                lines.append(LogicalLine(tuple(buffer)))
                buffer = []
                current_line = token.line + 1
            elif not token.has_position or token.line == current_line:
                buffer.append(token)
            else:
                if buffer:
                    lines.append(LogicalLine(tuple(buffer)))
                buffer = [token]
                current_line = token.line

        if buffer:
            lines.append(LogicalLine(tuple(buffer)))
        return lines
