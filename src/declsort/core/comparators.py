#!/usr/bin/env python3
"""
DECLSORT COMPARATORS
--------------------
The two ordering strategies a check can be configured with.

  alpha - case-insensitive: both operands are folded to lower case.
  ascii - case-sensitive code-point order, so 'Zebra' < 'apple'.

Author: DeclSort Team
"""

from enum import Enum
from typing import Callable, Optional, Sequence, Union

from declsort.core.errors import ConfigurationError


class SortMethod(str, Enum):
    ALPHA = "alpha"
    ASCII = "ascii"


def resolve_sort_method(value: Union[str, SortMethod, None]) -> SortMethod:
    """
    Normalizes a configured sort_method. Accepts the enum, its string value,
    or the atom spelling (':ascii') used in host-language config files.
    """
    if isinstance(value, SortMethod):
        return value
    if isinstance(value, str):
        try:
            return SortMethod(value.strip().lstrip(":").lower())
        except ValueError:
            pass
    choices = ", ".join(m.value for m in SortMethod)
    raise ConfigurationError(f"Unknown sort_method {value!r} (expected one of: {choices})")


def sort_key(method: SortMethod) -> Callable[[str], str]:
    if method is SortMethod.ALPHA:
        return str.lower
    return str


def out_of_order(first: str, second: str, method: SortMethod) -> bool:
    """True when `first` must not precede `second` under `method`."""
    key = sort_key(method)
    return key(first) > key(second)


def is_sorted(names: Sequence[str], method: SortMethod) -> bool:
    return not any(out_of_order(a, b, method) for a, b in zip(names, names[1:]))


def first_divergence(names: Sequence[str], method: SortMethod) -> Optional[int]:
    """
    Index of the first position where the written sequence differs from its
    own sorted copy, comparing keys (folded for alpha). None when sorted.
    """
    key = sort_key(method)
    written = [key(name) for name in names]
    for index, (actual, expected) in enumerate(zip(written, sorted(written))):
        if actual != expected:
            return index
    return None
