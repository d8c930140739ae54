"""A set supporting insertion, removal and uniform random choice in O(1)."""

from __future__ import annotations

import random
from typing import Optional


class RandomizedSet:
    """A set of integers with constant-time random sampling."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._values: list[int] = []
        self._positions: dict[int, int] = {}
        self._rng = rng if rng is not None else random.Random()

    def insert(self, val: int) -> bool:
        """Add ``val``; return True if it was not already present."""
        if val in self._positions:
            return False
        self._positions[val] = len(self._values)
        self._values.append(val)
        return True

    def remove(self, val: int) -> bool:
        """Remove ``val``; return True if it was present."""
        index = self._positions.pop(val, None)
        if index is None:
            return False
        last = self._values.pop()
        if last != val:
            self._values[index] = last
            self._positions[last] = index
        return True

    def get_random(self) -> int:
        """Return a member chosen uniformly at random."""
        if not self._values:
            raise IndexError("get_random from an empty set")
        return self._values[self._rng.randrange(len(self._values))]

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, val: object) -> bool:
        return val in self._positions