#!/usr/bin/env python3
"""
DEPS ORDER CHECK (EX9002)
-------------------------
Ensures dependencies listed in the private deps functions (app_deps and
optimum_deps by default) are alphabetically ordered. Each function's list
is one group; every out-of-order neighbour pair is reported.

Author: DeclSort Team
"""

from typing import List

from declsort.checks.base import BaseCheck
from declsort.core.comparators import SortMethod
from declsort.core.errors import ConfigurationError
from declsort.core.models import Declaration, Group, Issue, SourceDocument
from declsort.extraction.tree import DEFAULT_DEPS_FUNCTIONS, DependencyExtractor
from declsort.verification.flat import verify_flat


class DepsOrderCheck(BaseCheck):
    id = "EX9002"
    name = "deps_order"
    param_defaults = {
        "sort_method": SortMethod.ALPHA.value,
        "functions": list(DEFAULT_DEPS_FUNCTIONS),
    }
    supported_sort_methods = (SortMethod.ALPHA,)
    param_docs = {
        "sort_method": (
            "The ordering method to use.\n"
            "  alpha - Alphabetical case-insensitive sorting."
        ),
        "functions": "Names of the zero-argument private functions that return deps lists.",
    }
    explanation = """\
Alphabetically ordered dependencies are more easily scannable by the reader.

    # preferred

    defp app_deps do
      [
        {:bcrypt_elixir, "~> 3.0"},
        {:mdex, "~> 0.4.0"},
        {:multipart, "~> 0.4"},
        {:number, "~> 1.0"},
        {:plug, "~> 1.14"}
      ]
    end

    # NOT preferred

    defp app_deps do
      [
        {:bcrypt_elixir, "~> 3.0"},
        {:multipart, "~> 0.4"},
        {:number, "~> 1.0"},
        {:plug, "~> 1.14"},
        {:mdex, "~> 0.4.0"}
      ]
    end

Dependencies should be alphabetically ordered within each deps group:
- app_deps
- optimum_deps

Like all Readability issues, this one is not a technical concern.
But you can improve the odds of others reading and liking your code by
making it easier to follow.
"""

    def __init__(self, **params):
        super().__init__(**params)
        functions = self.params["functions"]
        if not isinstance(functions, (list, tuple)) or not all(isinstance(f, str) for f in functions):
            raise ConfigurationError("deps_order 'functions' must be a list of function names")
        self.extractor = DependencyExtractor(functions)

    def run(self, document: SourceDocument) -> List[Issue]:
        if self.sort_method is not SortMethod.ALPHA:
            raise ConfigurationError(
                f"deps_order only supports sort_method 'alpha', got '{self.sort_method.value}'"
            )

        groups = [Group(deps.declarations) for deps in self.extractor.extract(document.ast)]
        return verify_flat(groups, self.sort_method, self._issue_for)

    def _issue_for(self, declaration: Declaration) -> Issue:
        return self.format_issue(
            line=declaration.line,
            message=(
                f"The dependency {declaration.primary_name} in {declaration.owner}/0 "
                "is not alphabetically ordered."
            ),
            trigger=declaration.primary_name,
            column=1,
        )
