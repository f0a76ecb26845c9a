"""Singly-linked list with a cached tail and index-based access."""

import logging
from collections.abc import Iterable, Iterator
from typing import Generic

from singlylinkedlist.errors import OutOfBoundariesError
from singlylinkedlist.types import NO_VALUE, NoValueType, V

logger = logging.getLogger(__name__)


class Node(Generic[V]):
    """A node in the singly-linked list."""

    __slots__ = ("value", "next")

    def __init__(self, value: V) -> None:
        self.value = value
        self.next: Node[V] | None = None


class SinglyLinkedList(Generic[V]):
    """
    Singly-linked list supporting indexed access and positional insert/remove.

    The head owns the chain; the tail is only cached so push() is O(1).
    Index-based operations walk the chain from the head and are O(n).

    Lookups that miss (get, pop, shift) return NO_VALUE. Writes to a bad
    index (set, insert, remove) raise OutOfBoundariesError and leave the
    list untouched.
    """

    def __init__(self, values: Iterable[V] | None = None) -> None:
        """
        Initialize the list.

        Args:
            values: Optional initial values, loaded in order via from_array().
        """
        self._head: Node[V] | None = None
        self._tail: Node[V] | None = None
        self._length = 0
        if values is not None:
            self.from_array(values)

    @property
    def length(self) -> int:
        """Number of values in the list."""
        return self._length

    def clear(self) -> None:
        """Drop every node and return to the empty state."""
        self._head = None
        self._tail = None
        self._length = 0

    def to_array(self) -> list[V]:
        """Return all values, head to tail, as a new list."""
        return list(self)

    def from_array(self, values: Iterable[V]) -> int:
        """
        Replace the contents of the list with values.

        Args:
            values: Values to append in order

        Returns:
            The new length of the list
        """
        # Snapshot first so a list can be reloaded from itself
        items = list(values)
        self.clear()
        for value in items:
            self.push(value)
        return self._length

    def push(self, value: V) -> V:
        """Append value as the new tail. O(1)."""
        node = Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._length += 1
        return value

    def pop(self) -> V | NoValueType:
        """Remove and return the last value, or NO_VALUE if the list is empty. O(n)."""
        if self._head is None:
            return NO_VALUE
        node, prior = self._locate(self._length - 1)
        if node is None:
            raise RuntimeError("Unexpected missing tail after checking")
        return self._unlink(node, prior)

    def shift(self) -> V | NoValueType:
        """Remove and return the first value, or NO_VALUE if the list is empty. O(1)."""
        if self._head is None:
            return NO_VALUE
        return self._unlink(self._head, None)

    def unshift(self, value: V) -> V:
        """Insert value as the new head. O(1)."""
        if self._head is None:
            return self.push(value)
        node = Node(value)
        node.next = self._head
        self._head = node
        self._length += 1
        return value

    def get(self, index: int) -> V | NoValueType:
        """
        Return the value at index.

        Args:
            index: 0-based position; negative or too large indexes are a miss

        Returns:
            The stored value, or NO_VALUE if index is outside the list
        """
        node, _ = self._locate(index)
        if node is None:
            return NO_VALUE
        return node.value

    def set(self, index: int, value: V) -> None:
        """
        Overwrite the value at index in place.

        Raises:
            OutOfBoundariesError: If index is outside the list
        """
        node, _ = self._locate(index)
        if node is None:
            raise self._out_of_boundaries("set", index)
        node.value = value

    def insert(self, index: int, value: V) -> V:
        """
        Insert value before the node currently at index.

        Valid indexes run from 0 to length - 1, so insert() never appends
        past the tail; use push() for that.

        Args:
            index: Position the new value will occupy
            value: Value to insert

        Returns:
            The inserted value

        Raises:
            OutOfBoundariesError: If the list is empty or index is outside it
        """
        if not 0 <= index < self._length:
            raise self._out_of_boundaries("insert", index)

        if index == 0:
            return self.unshift(value)

        current, prior = self._locate(index)
        if current is None or prior is None:
            raise RuntimeError("Unexpected missing node after checking")

        node = Node(value)
        node.next = current
        prior.next = node
        self._length += 1
        return value

    def remove(self, index: int) -> V:
        """
        Remove the node at index and return its value.

        Raises:
            OutOfBoundariesError: If the list is empty or index is outside it
        """
        if not 0 <= index < self._length:
            raise self._out_of_boundaries("remove", index)

        current, prior = self._locate(index)
        if current is None:
            raise RuntimeError("Unexpected missing node after checking")
        return self._unlink(current, prior)

    def _locate(self, index: int) -> tuple[Node[V] | None, Node[V] | None]:
        """
        Find the node at index and the node just before it in one pass.

        Returns (None, None) when index is outside the list. The prior node
        is None for index 0.
        """
        if not 0 <= index < self._length:
            return None, None

        prior: Node[V] | None = None
        current = self._head
        for _ in range(index):
            if current is None:
                break
            prior = current
            current = current.next
        return current, prior

    def _unlink(self, node: Node[V], prior: Node[V] | None) -> V:
        """Detach node from the chain (prior is None when node is the head)."""
        if prior is None:
            self._head = node.next
        else:
            prior.next = node.next

        # Removing the last node makes its predecessor the tail, or empties
        # the list entirely when there is no predecessor.
        if node is self._tail:
            self._tail = prior

        node.next = None
        self._length -= 1
        return node.value

    def _out_of_boundaries(self, operation: str, index: int) -> OutOfBoundariesError:
        logger.debug(
            "Rejected %s at index %r on list of length %d", operation, index, self._length
        )
        return OutOfBoundariesError()

    def __iter__(self) -> Iterator[V]:
        """Iterate over values from head to tail."""
        current = self._head
        while current is not None:
            yield current.value
            current = current.next

    def __len__(self) -> int:
        """Return the number of values in the list."""
        return self._length

    def __bool__(self) -> bool:
        """Return True if the list is non-empty."""
        return self._length > 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_array()!r})"
