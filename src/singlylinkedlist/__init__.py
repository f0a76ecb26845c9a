"""singlylinkedlist - Singly-linked list with indexed access and positional insert/remove."""

from singlylinkedlist.errors import (
    OUT_OF_BOUNDARIES_MESSAGE,
    OutOfBoundariesError,
    SinglyLinkedListError,
)
from singlylinkedlist.linkedlist import Node, SinglyLinkedList
from singlylinkedlist.types import NO_VALUE, NoValue, NoValueType

__version__ = "0.0.1"

__all__ = [
    "SinglyLinkedList",
    "Node",
    "NO_VALUE",
    "NoValue",
    "NoValueType",
    "SinglyLinkedListError",
    "OutOfBoundariesError",
    "OUT_OF_BOUNDARIES_MESSAGE",
]
