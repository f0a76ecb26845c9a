"""Tests for exception classes."""

import pytest

from singlylinkedlist import (
    OUT_OF_BOUNDARIES_MESSAGE,
    OutOfBoundariesError,
    SinglyLinkedList,
    SinglyLinkedListError,
)


def test_out_of_boundaries_message() -> None:
    """Test the fixed error message."""
    error = OutOfBoundariesError()
    assert str(error) == "Index out of boundaries"
    assert OUT_OF_BOUNDARIES_MESSAGE == "Index out of boundaries"


def test_out_of_boundaries_hierarchy() -> None:
    """Test that the error is catchable as a library error and as IndexError."""
    assert issubclass(OutOfBoundariesError, SinglyLinkedListError)
    assert issubclass(OutOfBoundariesError, IndexError)
    assert issubclass(SinglyLinkedListError, Exception)


def test_catch_as_index_error() -> None:
    """Test that generic IndexError handlers see boundary failures."""
    lst = SinglyLinkedList[int]()
    with pytest.raises(IndexError):
        lst.remove(0)


def test_catch_as_library_error() -> None:
    """Test catching boundary failures through the base class."""
    lst = SinglyLinkedList([1])
    with pytest.raises(SinglyLinkedListError) as excinfo:
        lst.set(1, 2)
    assert str(excinfo.value) == OUT_OF_BOUNDARIES_MESSAGE
