"""Exception classes for singlylinkedlist."""

OUT_OF_BOUNDARIES_MESSAGE = "Index out of boundaries"


class SinglyLinkedListError(Exception):
    """Base exception for all singlylinkedlist errors."""


class OutOfBoundariesError(SinglyLinkedListError, IndexError):
    """Raised when set(), insert() or remove() is given an index outside the list."""

    def __init__(self) -> None:
        super().__init__(OUT_OF_BOUNDARIES_MESSAGE)
