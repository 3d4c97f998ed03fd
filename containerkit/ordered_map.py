"""An ordered map backed by a red-black tree."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Generic, TypeVar

from containerkit.pair import Pair

K = TypeVar("K")
V = TypeVar("V")

_MISSING: Any = object()


class _Node:
    __slots__ = ("key", "value", "left", "right", "parent", "red")

    def __init__(self, key: Any, value: Any, parent: _Node | None, red: bool) -> None:
        self.key = key
        self.value = value
        self.left: _Node | None = None
        self.right: _Node | None = None
        self.parent = parent
        self.red = red


def _is_red(node: _Node | None) -> bool:
    return node is not None and node.red


def _in_order(root: _Node | None) -> Iterator[_Node]:
    stack: list[_Node] = []
    current = root
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        yield current
        current = current.right


class RedBlackTree(Generic[K, V]):
    """A mapping whose keys are kept in ascending order.

    Keys must be mutually comparable with ``<``.
    """

    __slots__ = ("_root", "_size")

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._size = 0

    # -- lookup -----------------------------------------------------------

    def _find(self, key: K) -> _Node | None:
        node = self._root
        while node is not None:
            if key < node.key:
                node = node.left
            elif node.key < key:
                node = node.right
            else:
                return node
        return None

    def __len__(self) -> int:
        return self._size

    def cap(self) -> int:
        """Return the capacity, which for a tree equals its size."""
        return self._size

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

    # -- insertion --------------------------------------------------------

    def set(self, key: K, value: V) -> None:
        """Insert ``key`` with ``value``, replacing any existing value."""
        if self._root is None:
            self._root = _Node(key, value, None, red=False)
            self._size += 1
            return

        node: _Node | None = self._root
        parent = self._root
        while node is not None:
            parent = node
            if key < node.key:
                node = node.left
            elif node.key < key:
                node = node.right
            else:
                node.value = value
                return

        inserted = _Node(key, value, parent, red=True)
        if key < parent.key:
            parent.left = inserted
        else:
            parent.right = inserted
        self._size += 1
        self._fix_insert(inserted)

    def __setitem__(self, key: K, value: V) -> None:
        self.set(key, value)

    def _rotate_left(self, x: _Node) -> None:
        y = x.right
        assert y is not None
        x.right = y.left
        if y.left is not None:
            y.left.parent = x
        y.parent = x.parent
        if x.parent is None:
            self._root = y
        elif x is x.parent.left:
            x.parent.left = y
        else:
            x.parent.right = y
        y.left = x
        x.parent = y

    def _rotate_right(self, x: _Node) -> None:
        y = x.left
        assert y is not None
        x.left = y.right
        if y.right is not None:
            y.right.parent = x
        y.parent = x.parent
        if x.parent is None:
            self._root = y
        elif x is x.parent.right:
            x.parent.right = y
        else:
            x.parent.left = y
        y.right = x
        x.parent = y

    def _fix_insert(self, node: _Node) -> None:
        while node is not self._root and node.parent.red:
            parent = node.parent
            grand = parent.parent
            if parent is grand.left:
                uncle = grand.right
                if _is_red(uncle):
                    parent.red = False
                    uncle.red = False
                    grand.red = True
                    node = grand
                else:
                    if node is parent.right:
                        node = parent
                        self._rotate_left(node)
                    node.parent.red = False
                    node.parent.parent.red = True
                    self._rotate_right(node.parent.parent)
            else:
                uncle = grand.left
                if _is_red(uncle):
                    parent.red = False
                    uncle.red = False
                    grand.red = True
                    node = grand
                else:
                    if node is parent.left:
                        node = parent
                        self._rotate_right(node)
                    node.parent.red = False
                    node.parent.parent.red = True
                    self._rotate_left(node.parent.parent)
        self._root.red = False

    # -- deletion ---------------------------------------------------------

    def delete(self, key: K) -> bool:
        """Remove ``key``; return False if it was not present."""
        node = self._find(key)
        if node is None:
            return False
        self._delete_node(node)
        self._size -= 1
        return True

    def __delitem__(self, key: K) -> None:
        if not self.delete(key):
            raise KeyError(key)

    def _delete_node(self, z: _Node) -> None:
        if z.left is not None and z.right is not None:
            successor = z.right
            while successor.left is not None:
                successor = successor.left
            z.key, z.value = successor.key, successor.value
            z = successor

        child = z.left if z.left is not None else z.right
        parent = z.parent
        if child is not None:
            child.parent = parent
        if parent is None:
            self._root = child
        elif z is parent.left:
            parent.left = child
        else:
            parent.right = child

        if not z.red:
            self._fix_delete(child, parent)

    def _fix_delete(self, x: _Node | None, parent: _Node | None) -> None:
        while x is not self._root and not _is_red(x):
            assert parent is not None
            if x is parent.left:
                w = parent.right
                if w.red:
                    w.red = False
                    parent.red = True
                    self._rotate_left(parent)
                    w = parent.right
                if not _is_red(w.left) and not _is_red(w.right):
                    w.red = True
                    x = parent
                    parent = x.parent
                else:
                    if not _is_red(w.right):
                        w.left.red = False
                        w.red = True
                        self._rotate_right(w)
                        w = parent.right
                    w.red = parent.red
                    parent.red = False
                    w.right.red = False
                    self._rotate_left(parent)
                    x = self._root
                    break
            else:
                w = parent.left
                if w.red:
                    w.red = False
                    parent.red = True
                    self._rotate_right(parent)
                    w = parent.left
                if not _is_red(w.left) and not _is_red(w.right):
                    w.red = True
                    x = parent
                    parent = x.parent
                else:
                    if not _is_red(w.left):
                        w.right.red = False
                        w.red = True
                        self._rotate_left(w)
                        w = parent.left
                    w.red = parent.red
                    parent.red = False
                    w.left.red = False
                    self._rotate_right(parent)
                    x = self._root
                    break
        if x is not None:
            x.red = False

    # -- traversal --------------------------------------------------------

    def keys(self) -> list[K]:
        """Return all keys in ascending order."""
        return list(self.iter_keys())

    def values(self) -> list[V]:
        """Return all values in the order of their keys."""
        return list(self.iter_values())

    def pairs(self) -> list[Pair[K, V]]:
        """Return all key-value pairs in key order."""
        return [Pair(node.key, node.value) for node in _in_order(self._root)]

    def iter_keys(self) -> Iterator[K]:
        """Iterate over keys in ascending order."""
        return (node.key for node in _in_order(self._root))

    def iter_values(self) -> Iterator[V]:
        """Iterate over values in the order of their keys."""
        return (node.value for node in _in_order(self._root))

    def iter_pairs(self) -> Iterator[tuple[K, V]]:
        """Iterate over ``(key, value)`` tuples in key order."""
        return ((node.key, node.value) for node in _in_order(self._root))

    def __iter__(self) -> Iterator[K]:
        return self.iter_keys()

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {v!r}" for k, v in self.iter_pairs())
        return f"RedBlackTree({{{items}}})"