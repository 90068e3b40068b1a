"""
Task key hashing.

Maps a task key to a bucket index. The function is deliberately simple
and independent of Python's built-in hash(), which is salted per process
and would scatter the same key into different buckets on every run.
"""

from ..config import FILE_ENCODING, FILE_ERRORS, HASH_MULTIPLIER, HASH_SIZE


def hash_key(key: str, size: int = HASH_SIZE) -> int:
    """
    Compute the bucket index for a task key.

    Polynomial rolling hash over the key's UTF-8 bytes. The modulo is taken
    at every step, so the accumulator never grows past `size`:

        h = (h * 31 + byte) % size

    The empty key hashes to 0.

    Args:
        key: Task key to hash
        size: Number of buckets in the table

    Returns:
        Bucket index in the range [0, size)
    """
    if size <= 0:
        raise ValueError(f"Bucket count must be positive, got {size}")

    h = 0
    for byte in key.encode(FILE_ENCODING, FILE_ERRORS):
        h = (h * HASH_MULTIPLIER + byte) % size
    return h
