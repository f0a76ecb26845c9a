"""Tests for the NO_VALUE marker."""

import copy
import pickle

from singlylinkedlist import NO_VALUE, NoValue


def test_no_value_is_singleton() -> None:
    """Test that NO_VALUE is the only NoValue member."""
    assert list(NoValue) == [NO_VALUE]
    assert NoValue("NO_VALUE") is NO_VALUE


def test_no_value_is_falsy() -> None:
    """Test truthiness of the marker."""
    assert not NO_VALUE


def test_no_value_repr() -> None:
    """Test the marker's repr."""
    assert repr(NO_VALUE) == "NO_VALUE"


def test_no_value_is_distinct_from_falsy_values() -> None:
    """Test that the marker does not compare equal to ordinary falsy values."""
    for value in (None, 0, "", False, [], ()):
        assert NO_VALUE != value
        assert NO_VALUE is not value


def test_no_value_survives_copy_and_pickle() -> None:
    """Test that identity checks still work on copies."""
    assert copy.copy(NO_VALUE) is NO_VALUE
    assert copy.deepcopy(NO_VALUE) is NO_VALUE
    assert pickle.loads(pickle.dumps(NO_VALUE)) is NO_VALUE
