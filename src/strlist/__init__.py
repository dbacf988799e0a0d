"""strlist - Doubly-linked list of strings with O(1) operations at both ends."""

from strlist.linkedlist import DELIMITER, DoublyLinkedList

__version__ = "0.0.1"

__all__ = [
    "DoublyLinkedList",
    "DELIMITER",
]
