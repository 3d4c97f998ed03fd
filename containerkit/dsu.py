"""Disjoint Set Union (union-find) with path compression and union by rank."""

from __future__ import annotations


class DSU:
    """Disjoint sets over the integers ``0 .. n-1``.

    Every element starts in its own singleton set.
    """

    __slots__ = ("_parent", "_rank", "_components")

    def __init__(self, n: int) -> None:
        if n <= 0:
            raise ValueError(f"DSU size must be positive, got {n}")
        self._parent = list(range(n))
        self._rank = [0] * n
        self._components = n

    def _check(self, x: int) -> None:
        if not 0 <= x < len(self._parent):
            raise IndexError(
                f"element {x} out of range for DSU of size {len(self._parent)}"
            )

    def find(self, x: int) -> int:
        """Return the representative of the set containing ``x``."""
        self._check(x)
        parent = self._parent
        root = x
        while parent[root] != root:
            root = parent[root]
        # Path compression: point every node on the path straight at the root.
        while parent[x] != root:
            nxt = parent[x]
            parent[x] = root
            x = nxt
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the sets of ``x`` and ``y``; return False if already joined."""
        self._check(x)
        self._check(y)
        root_x = self.find(x)
        root_y = self.find(y)
        if root_x == root_y:
            return False

        rank = self._rank
        if rank[root_x] < rank[root_y]:
            self._parent[root_x] = root_y
        elif rank[root_x] > rank[root_y]:
            self._parent[root_y] = root_x
        else:
            self._parent[root_y] = root_x
            rank[root_x] += 1

        self._components -= 1
        return True

    def connected(self, x: int, y: int) -> bool:
        """Return True if ``x`` and ``y`` are in the same set."""
        self._check(x)
        self._check(y)
        return self.find(x) == self.find(y)

    def component_count(self) -> int:
        """Return the current number of disjoint sets."""
        return self._components

    def __len__(self) -> int:
        return len(self._parent)

    def __repr__(self) -> str:
        return f"DSU(size={len(self)}, components={self._components})"