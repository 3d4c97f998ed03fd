"""A sorted key-value map backed by a probabilistic skip list."""

from __future__ import annotations

import random
from collections.abc import Callable, Iterator
from typing import Any, Generic, Optional, TypeVar

from containerkit.pair import Pair

K = TypeVar("K")
V = TypeVar("V")

MAX_LEVEL = 32
PROBABILITY = 0.5


def _natural_compare(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


class _Node:
    __slots__ = ("key", "value", "forward")

    def __init__(self, key: Any, value: Any, height: int) -> None:
        self.key = key
        self.value = value
        self.forward: list[Optional[_Node]] = [None] * height


class SkipList(Generic[K, V]):
    """A mapping whose keys are kept sorted by a comparison function.

    ``compare(a, b)`` returns a negative number, zero or a positive number
    when ``a`` sorts before, equal to or after ``b``. Without one, keys are
    ordered with ``<`` and ``>``.
    """

    __slots__ = ("_header", "_level", "_length", "_rng", "_compare")

    def __init__(
        self,
        compare: Optional[Callable[[K, K], int]] = None,
        *,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._header = _Node(None, None, MAX_LEVEL)
        self._level = 0
        self._length = 0
        self._rng = rng if rng is not None else random.Random()
        self._compare: Callable[[Any, Any], int] = compare or _natural_compare

    def _random_level(self) -> int:
        level = 0
        while self._rng.random() < PROBABILITY and level < MAX_LEVEL - 1:
            level += 1
        return level

    def _search(self, key: K) -> tuple[list[_Node], Optional[_Node]]:
        """Return the per-level predecessors of ``key`` and the candidate node."""
        update: list[_Node] = [self._header] * MAX_LEVEL
        current = self._header
        compare = self._compare
        for i in range(self._level, -1, -1):
            nxt = current.forward[i]
            while nxt is not None and compare(nxt.key, key) < 0:
                current = nxt
                nxt = current.forward[i]
            update[i] = current
        return update, current.forward[0]

    def _first_at_least(self, start: K) -> Optional[_Node]:
        return self._search(start)[1]

    def _find(self, key: K) -> Optional[_Node]:
        node = self._search(key)[1]
        if node is not None and self._compare(node.key, key) == 0:
            return node
        return None

    def __len__(self) -> int:
        return self._length

    def get(self, key: K, default: Any = None) -> Any:
        """Return the value stored for ``key``, or ``default``."""
        node = self._find(key)
        return default if node is None else node.value

    def __getitem__(self, key: K) -> V:
        node = self._find(key)
        if node is None:
            raise KeyError(key)
        return node.value

    def __contains__(self, key: object) -> bool:
        return self._find(key) is not None  # type: ignore[arg-type]

    def set(self, key: K, value: V) -> None:
        """Insert ``key`` with ``value``, replacing any existing value."""
        update, current = self._search(key)
        if current is not None and self._compare(current.key, key) == 0:
            current.value = value
            return

        new_level = self._random_level()
        if new_level > self._level:
            for i in range(self._level + 1, new_level + 1):
                update[i] = self._header
            self._level = new_level

        node = _Node(key, value, new_level + 1)
        for i in range(new_level + 1):
            node.forward[i] = update[i].forward[i]
            update[i].forward[i] = node
        self._length += 1

    def __setitem__(self, key: K, value: V) -> None:
        self.set(key, value)

    def delete(self, key: K) -> bool:
        """Remove ``key``; return False if it was not present."""
        update, current = self._search(key)
        if current is None or self._compare(current.key, key) != 0:
            return False

        for i in range(self._level + 1):
            if update[i].forward[i] is not current:
                break
            update[i].forward[i] = current.forward[i]

        while self._level > 0 and self._header.forward[self._level] is None:
            self._level -= 1
        self._length -= 1
        return True

    def __delitem__(self, key: K) -> None:
        if not self.delete(key):
            raise KeyError(key)

    def clear(self) -> None:
        """Remove every entry."""
        self._header.forward = [None] * MAX_LEVEL
        self._level = 0
        self._length = 0

    def _nodes_from(self, node: Optional[_Node]) -> Iterator[_Node]:
        while node is not None:
            yield node
            node = node.forward[0]

    def keys(self) -> list[K]:
        """Return all keys in sorted order."""
        return [n.key for n in self._nodes_from(self._header.forward[0])]

    def values(self) -> list[V]:
        """Return all values in the order of their keys."""
        return [n.value for n in self._nodes_from(self._header.forward[0])]

    def pairs(self) -> list[Pair[K, V]]:
        """Return all key-value pairs in key order."""
        return [Pair(n.key, n.value) for n in self._nodes_from(self._header.forward[0])]

    def all(self) -> Iterator[tuple[K, V]]:
        """Iterate over ``(key, value)`` tuples in key order."""
        for node in self._nodes_from(self._header.forward[0]):
            yield node.key, node.value

    def all_from(self, start: K) -> Iterator[tuple[K, V]]:
        """Iterate over entries whose key is at or after ``start``."""
        for node in self._nodes_from(self._first_at_least(start)):
            yield node.key, node.value

    def all_between(self, start: K, end: K) -> Iterator[tuple[K, V]]:
        """Iterate over entries with keys in ``[start, end]``, both inclusive.

        The bounds are swapped if ``start`` sorts after ``end``.
        """
        if self._compare(start, end) > 0:
            start, end = end, start
        for node in self._nodes_from(self._first_at_least(start)):
            if self._compare(node.key, end) > 0:
                return
            yield node.key, node.value

    def range(self, fn: Callable[[K, V], bool]) -> None:
        """Call ``fn(key, value)`` for each entry until it returns False."""
        self._visit(self.all(), fn)

    def range_from(self, start: K, fn: Callable[[K, V], bool]) -> None:
        """Call ``fn`` for each entry from ``start`` on until it returns False."""
        self._visit(self.all_from(start), fn)

    def range_between(self, start: K, end: K, fn: Callable[[K, V], bool]) -> None:
        """Call ``fn`` for each entry in ``[start, end]`` until it returns False."""
        self._visit(self.all_between(start, end), fn)

    @staticmethod
    def _visit(entries: Iterator[tuple[Any, Any]], fn: Callable[[Any, Any], bool]) -> None:
        for key, value in entries:
            if not fn(key, value):
                break

    def __iter__(self) -> Iterator[K]:
        return (key for key, _ in self.all())

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {v!r}" for k, v in self.all())
        return f"SkipList({{{items}}})"