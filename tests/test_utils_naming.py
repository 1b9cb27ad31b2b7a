"""Tests for calckit.utils.naming."""

import pytest

from calckit.utils.naming import lookup_name, normalize_name


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Newton-Cotes", "newtoncotes"),
        ("gauss_legendre", "gausslegendre"),
        ("  Central ", "central"),
        ("GL", "gl"),
    ],
)
def test_normalize_name(raw, expected):
    """Tests case, spacing and punctuation are ignored."""
    assert normalize_name(raw) == expected


def test_lookup_name_uses_normalized_key():
    """Tests lookup goes through normalize_name."""
    table = {"newtoncotes": 1, "nc": 1}
    assert lookup_name("Newton Cotes", table, "method") == 1


def test_lookup_name_unknown_lists_options():
    """Tests unknown names report the known keys."""
    with pytest.raises(ValueError, match=r"Unknown method 'simpson'.*nc, newtoncotes"):
        lookup_name("simpson", {"newtoncotes": 1, "nc": 1}, "method")


def test_lookup_name_non_string():
    """Tests non-string names raise ValueError."""
    with pytest.raises(ValueError):
        lookup_name(3, {"a": 1}, "method")
