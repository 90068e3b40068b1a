"""
Hashing and hash table engines.

This package contains the in-memory data structure of the location guide.
"""

from .hasher import hash_key
from .chain import BucketChain
from .table import LocationTable

__all__ = [
    "hash_key",
    "BucketChain",
    "LocationTable",
]
