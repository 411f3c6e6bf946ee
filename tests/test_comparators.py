import pytest

from declsort.core.comparators import (
    SortMethod, first_divergence, is_sorted, out_of_order, resolve_sort_method,
)
from declsort.core.errors import ConfigurationError


@pytest.mark.parametrize("raw, expected", [
    ("alpha", SortMethod.ALPHA),
    ("ascii", SortMethod.ASCII),
    (":ascii", SortMethod.ASCII),
    (" ALPHA ", SortMethod.ALPHA),
    (SortMethod.ASCII, SortMethod.ASCII),
])
def test_resolve_sort_method(raw, expected):
    assert resolve_sort_method(raw) is expected


@pytest.mark.parametrize("raw", ["natural", "", None, 3])
def test_resolve_sort_method_rejects_unknown_values(raw):
    with pytest.raises(ConfigurationError):
        resolve_sort_method(raw)


def test_alpha_and_ascii_disagree_on_mixed_case():
    """'apple' sorts first under alpha, 'Zebra' sorts first under ascii."""
    assert out_of_order("Zebra", "apple", SortMethod.ALPHA)
    assert not out_of_order("apple", "Zebra", SortMethod.ALPHA)

    assert not out_of_order("Zebra", "apple", SortMethod.ASCII)
    assert out_of_order("apple", "Zebra", SortMethod.ASCII)


def test_equal_names_are_never_out_of_order():
    assert not out_of_order("Apple", "apple", SortMethod.ALPHA)
    assert not out_of_order("apple", "apple", SortMethod.ASCII)


def test_is_sorted():
    assert is_sorted([], SortMethod.ALPHA)
    assert is_sorted(["only"], SortMethod.ALPHA)
    assert is_sorted(["Abc", "Zebra", "apple", "zebra"], SortMethod.ASCII)
    assert not is_sorted(["Abc", "Zebra", "apple", "zebra"], SortMethod.ALPHA)


@pytest.mark.parametrize("names, method, expected", [
    (["Two", "One"], SortMethod.ALPHA, 0),
    (["a", "c", "b"], SortMethod.ALPHA, 1),
    (["a", "B", "c"], SortMethod.ALPHA, None),
    (["a", "B", "c"], SortMethod.ASCII, 0),
    (["One", "Two"], SortMethod.ALPHA, None),
    ([], SortMethod.ASCII, None),
])
def test_first_divergence(names, method, expected):
    assert first_divergence(names, method) == expected
