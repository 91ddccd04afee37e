"""Open-addressing hash table of integer keys with linear probing."""

from __future__ import annotations

from dataclasses import dataclass

TABLE_SIZES = (11, 31, 61, 127, 251, 503)
EMPTY_KEY = 9999
MAX_COLLISION_RATIO = 0.5

_FREE = 0
_USED = 1
_DELETED = -1


def hash_key(key: int, size: int) -> int:
    """Division-remainder hash of ``3 * key``."""
    return (3 * key) % size


@dataclass(frozen=True)
class SearchResult:
    """Outcome of a probe: the slot reached and the collisions on the way."""

    found: bool
    position: int
    collisions: int


class HashTable:
    """Hash table that is rebuilt with the next size when probing runs long.

    Table sizes follow ``TABLE_SIZES``; once the largest size is exhausted a
    further rebuild raises OverflowError.
    """

    def __init__(self) -> None:
        self._next_size = 0
        self._reset()

    def _reset(self) -> None:
        if self._next_size >= len(TABLE_SIZES):
            raise OverflowError("hash table cannot grow any further")
        size = TABLE_SIZES[self._next_size]
        self._next_size += 1
        self._keys = [EMPTY_KEY] * size
        self._tags = [_FREE] * size
        self._count = 0

    @property
    def size(self) -> int:
        """Number of slots in the table."""
        return len(self._keys)

    def search(self, key: int) -> SearchResult:
        """Probe for ``key`` and report where the probe stopped."""
        size = self.size
        position = hash_key(key, size)
        collisions = 0
        while collisions < size and (
            (self._tags[position] == _USED and self._keys[position] != key)
            or self._tags[position] == _DELETED
        ):
            position = (position + 1) % size
            collisions += 1
        found = self._tags[position] == _USED and self._keys[position] == key
        return SearchResult(found, position, collisions)

    def _rebuild(self) -> None:
        old = [k for k, tag in zip(self._keys, self._tags) if tag == _USED]
        self._reset()
        for key in old:
            self.insert(key)

    def insert(self, key: int) -> bool:
        """Insert ``key``; return True if it was stored.

        Returns False when the key is already present, or when the probe ran
        into too many collisions: the table is then rebuilt at the next size
        and the key is not stored.
        """
        result = self.search(key)
        if result.found:
            return False
        if result.collisions / self.size < MAX_COLLISION_RATIO:
            self._keys[result.position] = key
            self._tags[result.position] = _USED
            self._count += 1
            return True
        self._rebuild()
        return False

    def delete(self, key: int) -> bool:
        """Mark ``key`` deleted; return False when it is absent."""
        result = self.search(key)
        if not result.found:
            return False
        self._tags[result.position] = _DELETED
        self._count -= 1
        return True

    def __contains__(self, key: int) -> bool:
        return self.search(key).found

    def __len__(self) -> int:
        return self._count

    def format(self) -> str:
        """Two lines listing every slot's key and its tag."""
        keys = "".join(f"{key:3d} " for key in self._keys)
        tags = "".join(f"{tag:3d} " for tag in self._tags)
        return f"key : {keys}\ntag : {tags}"