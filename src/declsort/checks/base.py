#!/usr/bin/env python3
"""
DECLSORT CHECK BASE
-------------------
Common surface of every ordering check: identity, priority, parameter
defaults and the explanation shown by `declsort explain`.

Author: DeclSort Team
"""

from typing import Any, Dict, List, Optional, Tuple

from declsort.core.comparators import SortMethod, resolve_sort_method
from declsort.core.errors import ConfigurationError
from declsort.core.models import Issue, Priority, SourceDocument


class BaseCheck:
    id: str = ""
    name: str = ""
    category: str = "readability"
    priority: Priority = Priority.LOW
    param_defaults: Dict[str, Any] = {"sort_method": SortMethod.ALPHA.value}
    supported_sort_methods: Tuple[SortMethod, ...] = (SortMethod.ALPHA, SortMethod.ASCII)
    # Documentation for each entry of param_defaults
    param_docs: Dict[str, str] = {}
    explanation: str = ""

    def __init__(self, **params: Any):
        unknown = set(params) - set(self.param_defaults)
        if unknown:
            raise ConfigurationError(
                f"Unknown parameter(s) for {self.name}: {', '.join(sorted(unknown))}"
            )
        self.params: Dict[str, Any] = {**self.param_defaults, **params}
        self.sort_method: SortMethod = resolve_sort_method(self.params["sort_method"])

    def run(self, document: SourceDocument) -> List[Issue]:
        raise NotImplementedError

    def format_issue(self, line: int, message: str, trigger: str,
                     column: Optional[int] = None) -> Issue:
        return Issue(
            check_id=self.id,
            check_name=self.name,
            line=line,
            message=message,
            trigger=trigger,
            column=column,
            priority=self.priority,
            category=self.category,
        )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.id} sort_method={self.sort_method.value}>"
