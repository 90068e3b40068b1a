"""
Bucket chain for separate chaining.

Each bucket of the LocationTable owns one BucketChain: a singly linked
list of entries with the most recently pushed entry at the head.
"""

from typing import Iterator, Optional

from ..models import LocationEntry


class _Node:
    __slots__ = ("entry", "next")

    def __init__(self, entry: LocationEntry, next_node: Optional["_Node"] = None):
        self.entry = entry
        self.next = next_node


class BucketChain:
    """
    Singly linked list of LocationEntry objects owned by one bucket.

    Nodes never leave the chain: callers only ever see the entries, so
    dropping a node here releases it for good.
    """

    def __init__(self):
        self._head: Optional[_Node] = None
        self._length = 0

    def push_front(self, entry: LocationEntry):
        """Prepend an entry in O(1). Duplicate keys are not checked."""
        self._head = _Node(entry, self._head)
        self._length += 1

    def find(self, key: str) -> Optional[LocationEntry]:
        """Return the first entry with an exact key match, scanning head to tail."""
        node = self._head
        while node is not None:
            if node.entry.key == key:
                return node.entry
            node = node.next
        return None

    def remove_first(self, key: str) -> Optional[LocationEntry]:
        """
        Unlink the first entry whose key matches.

        Later entries with the same key stay in the chain.

        Returns:
            The removed entry, or None if no entry matched
        """
        prev = None
        node = self._head
        while node is not None:
            if node.entry.key == key:
                if prev is None:
                    self._head = node.next
                else:
                    prev.next = node.next
                self._length -= 1
                return node.entry
            prev = node
            node = node.next
        return None

    def clear(self):
        self._head = None
        self._length = 0

    def __iter__(self) -> Iterator[LocationEntry]:
        node = self._head
        while node is not None:
            yield node.entry
            node = node.next

    def __len__(self) -> int:
        return self._length

    def __bool__(self) -> bool:
        return self._head is not None

    def __repr__(self) -> str:
        return f"BucketChain({[entry.key for entry in self]})"
