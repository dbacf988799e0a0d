"""Doubly-linked list of string values with O(1) access to both ends."""

import logging
from collections.abc import Iterable, Iterator

logger = logging.getLogger(__name__)

# Separator placed between consecutive values by str()
DELIMITER = " <-> "


class _Node:
    """A node in the doubly-linked list. Never handed out by the list."""

    __slots__ = ("value", "prev", "next")

    def __init__(self, value: str) -> None:
        self.value = value
        self.prev: _Node | None = None
        self.next: _Node | None = None


class DoublyLinkedList:
    """
    Ordered, mutable sequence of strings.

    Insertion and deletion at either end are O(1); ``get`` walks from the
    head and is O(index). Lookups and deletions that cannot produce a value
    return None instead of raising.
    """

    def __init__(self, values: Iterable[str] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.insert_back(value)

    def is_empty(self) -> bool:
        """Return True if the list holds no values."""
        return self._size == 0

    def get_size(self) -> int:
        """Return the number of values in the list."""
        return self._size

    def insert_front(self, value: str) -> None:
        """Insert value as the new head. O(1)."""
        node = _Node(value)
        self._size += 1
        if self._head is None:
            self._head = node
            self._tail = node
            return
        node.next = self._head
        self._head.prev = node
        self._head = node

    def insert_back(self, value: str) -> None:
        """Insert value as the new tail. O(1)."""
        if self._tail is None:
            self.insert_front(value)
            return
        node = _Node(value)
        self._size += 1
        node.prev = self._tail
        self._tail.next = node
        self._tail = node

    def get(self, index: int) -> str | None:
        """
        Return the value at zero-based position index, counting from the head.

        Negative indices and indices past the end return None. O(index).
        """
        if index < 0 or index >= self._size:
            logger.debug("get(%d) out of range for size %d", index, self._size)
            return None
        node = self._head
        for _ in range(index):
            node = node.next  # type: ignore[union-attr]
        return node.value  # type: ignore[union-attr]

    def delete_front(self) -> str | None:
        """Remove and return the head value, or None if the list is empty. O(1)."""
        node = self._head
        if node is None:
            logger.debug("delete_front on empty list")
            return None
        self._size -= 1
        self._head = node.next
        if self._head is not None:
            self._head.prev = None
        else:
            self._tail = None
        node.next = None
        return node.value

    def delete_back(self) -> str | None:
        """Remove and return the tail value, or None if the list is empty. O(1)."""
        node = self._tail
        if node is None:
            logger.debug("delete_back on empty list")
            return None
        # Head and tail coincide
        if self._size == 1:
            return self.delete_front()
        self._size -= 1
        self._tail = node.prev
        self._tail.next = None  # type: ignore[union-attr]
        node.prev = None
        return node.value

    def front(self) -> str | None:
        """Return the head value without removing it."""
        return None if self._head is None else self._head.value

    def back(self) -> str | None:
        """Return the tail value without removing it."""
        return None if self._tail is None else self._tail.value

    def __iter__(self) -> Iterator[str]:
        """Yield values from head to tail."""
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        """Return the number of values in the list."""
        return self._size

    def __bool__(self) -> bool:
        """Return True if the list is non-empty."""
        return self._size > 0

    def __str__(self) -> str:
        return DELIMITER.join(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"
