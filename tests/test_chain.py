"""Bucket chain - head insertion, first-match lookup and unlinking."""

from campus_guide import BucketChain, LocationEntry


def _entry(key, room="1"):
    return LocationEntry(key, "Building", "1st", room, "desc")


def test_new_chain_is_empty():
    chain = BucketChain()
    assert len(chain) == 0
    assert not chain
    assert list(chain) == []


def test_push_front_puts_newest_at_head():
    chain = BucketChain()
    chain.push_front(_entry("a"))
    chain.push_front(_entry("b"))
    chain.push_front(_entry("c"))
    assert [e.key for e in chain] == ["c", "b", "a"]
    assert len(chain) == 3


def test_find_returns_first_match():
    chain = BucketChain()
    chain.push_front(_entry("dup", room="old"))
    chain.push_front(_entry("dup", room="new"))
    assert chain.find("dup").room == "new"
    assert chain.find("missing") is None


def test_remove_head():
    chain = BucketChain()
    chain.push_front(_entry("a"))
    chain.push_front(_entry("b"))
    removed = chain.remove_first("b")
    assert removed.key == "b"
    assert [e.key for e in chain] == ["a"]


def test_remove_middle_and_tail():
    chain = BucketChain()
    for key in ("a", "b", "c"):
        chain.push_front(_entry(key))
    assert chain.remove_first("b").key == "b"
    assert [e.key for e in chain] == ["c", "a"]
    assert chain.remove_first("a").key == "a"
    assert [e.key for e in chain] == ["c"]
    assert len(chain) == 1


def test_remove_only_first_duplicate():
    chain = BucketChain()
    chain.push_front(_entry("dup", room="old"))
    chain.push_front(_entry("dup", room="new"))
    assert chain.remove_first("dup").room == "new"
    assert chain.find("dup").room == "old"


def test_remove_missing_returns_none():
    chain = BucketChain()
    chain.push_front(_entry("a"))
    assert chain.remove_first("zzz") is None
    assert len(chain) == 1


def test_clear():
    chain = BucketChain()
    chain.push_front(_entry("a"))
    chain.clear()
    assert len(chain) == 0
    assert chain.find("a") is None
