"""
Location hash table.

This module holds the in-memory side of the campus location guide: a
fixed number of buckets, each one a BucketChain, addressed by hash_key().
"""

from typing import Iterator, Optional

from ..config import HASH_SIZE
from ..errors import LocationAllocationError
from ..models import LocationEntry
from .chain import BucketChain
from .hasher import hash_key


class LocationTable:
    """
    Fixed-size hash table of campus locations with separate chaining.

    ═══════════════════════════════════════════════════════════════════════════
    WHAT THE TABLE GUARANTEES
    ═══════════════════════════════════════════════════════════════════════════

    - Every entry lives in bucket hash_key(entry.key).
    - Within a bucket, the most recently inserted entry is at the head.
    - Iteration runs bucket 0 .. size-1, head to tail inside each bucket.

    WHAT IT DOES NOT GUARANTEE:
    ---------------------------
    Key uniqueness. insert() never looks for an existing key. If the same
    key is inserted twice, both entries are kept and search() returns the
    newer one, shadowing the older one until it is deleted. Uniqueness is
    checked by the caller (DirectoryService.add_location) before inserting.

    ═══════════════════════════════════════════════════════════════════════════

    Usage:
        table = LocationTable()
        table.insert(LocationEntry("c_lab", "Engineering Hall", "2nd", "204", "Computer Lab"))
        entry = table.search("c_lab")
        table.delete("c_lab")
    """

    def __init__(self, size: int = HASH_SIZE):
        if size <= 0:
            raise ValueError(f"Bucket count must be positive, got {size}")
        self._size = size
        self._buckets = [BucketChain() for _ in range(size)]

    @property
    def size(self) -> int:
        """Number of buckets."""
        return self._size

    def bucket_index(self, key: str) -> int:
        return hash_key(key, self._size)

    def insert(self, entry: LocationEntry):
        """
        Prepend an entry to the chain of its bucket.

        Raises:
            LocationAllocationError: Node storage could not be obtained.
                The table is left exactly as it was.
        """
        bucket = self._buckets[self.bucket_index(entry.key)]
        try:
            bucket.push_front(entry)
        except MemoryError as exc:
            raise LocationAllocationError(
                f"Could not allocate storage for location '{entry.key}'"
            ) from exc

    def search(self, key: str) -> Optional[LocationEntry]:
        """Return the first entry stored under `key`, or None."""
        return self._buckets[self.bucket_index(key)].find(key)

    def delete(self, key: str) -> Optional[LocationEntry]:
        """
        Remove the first entry stored under `key`.

        Only one entry is removed even if duplicates exist; the next one in
        the chain becomes visible to search().

        Returns:
            The removed entry, or None if the key was not found
        """
        return self._buckets[self.bucket_index(key)].remove_first(key)

    def clear(self):
        """Empty every bucket. Used before a full reload from disk."""
        for bucket in self._buckets:
            bucket.clear()

    def iterate_all(self) -> Iterator[LocationEntry]:
        """
        Yield every entry, bucket-ascending then head to tail.

        The generator reads the live chains. Each call starts a fresh pass.
        """
        for bucket in self._buckets:
            yield from bucket

    def bucket_sizes(self) -> list:
        """Chain length of every bucket, indexed by bucket number."""
        return [len(bucket) for bucket in self._buckets]

    def __iter__(self) -> Iterator[LocationEntry]:
        return self.iterate_all()

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def __contains__(self, key: str) -> bool:
        return self.search(key) is not None

    def __repr__(self) -> str:
        return f"LocationTable(size={self._size}, entries={len(self)})"
