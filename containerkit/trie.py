"""A prefix tree of strings keyed by character."""

from __future__ import annotations

from collections.abc import Iterator


class _Node:
    __slots__ = ("children", "is_end")

    def __init__(self) -> None:
        self.children: dict[str, _Node] = {}
        self.is_end = False


def _walk(node: _Node, prefix: str) -> Iterator[str]:
    """Yield every word below ``node`` in lexicographical order."""
    stack = [(node, prefix)]
    while stack:
        current, text = stack.pop()
        if current.is_end:
            yield text
        for char in sorted(current.children, reverse=True):
            stack.append((current.children[char], text + char))


class Trie:
    """A set of non-empty strings supporting prefix queries."""

    __slots__ = ("_root", "_size")

    def __init__(self) -> None:
        self._root = _Node()
        self._size = 0

    def _find_node(self, text: str) -> _Node | None:
        node = self._root
        for char in text:
            child = node.children.get(char)
            if child is None:
                return None
            node = child
        return node

    def insert(self, word: str) -> None:
        """Add ``word``; the empty string is ignored."""
        if not word:
            return
        node = self._root
        for char in word:
            node = node.children.setdefault(char, _Node())
        if not node.is_end:
            node.is_end = True
            self._size += 1

    def search(self, word: str) -> bool:
        """Return True if ``word`` was inserted."""
        if not word:
            return False
        node = self._find_node(word)
        return node is not None and node.is_end

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word)

    def starts_with(self, prefix: str) -> bool:
        """Return True if any stored word begins with ``prefix``."""
        if not prefix:
            return self._size > 0
        return self._find_node(prefix) is not None

    def delete(self, word: str) -> bool:
        """Remove ``word``; return False if it was not stored."""
        if not word:
            return False
        path: list[tuple[_Node, str]] = []
        node = self._root
        for char in word:
            child = node.children.get(char)
            if child is None:
                return False
            path.append((node, char))
            node = child
        if not node.is_end:
            return False

        node.is_end = False
        self._size -= 1
        for parent, char in reversed(path):
            child = parent.children[char]
            if child.is_end or child.children:
                break
            del parent.children[char]
        return True

    def __len__(self) -> int:
        return self._size

    def clear(self) -> None:
        """Remove every word."""
        self._root = _Node()
        self._size = 0

    def all_words(self) -> list[str]:
        """Return every stored word in lexicographical order."""
        return list(self.iter_words())

    def words_with_prefix(self, prefix: str) -> list[str]:
        """Return the stored words beginning with ``prefix``, in order."""
        return list(self.iter_prefix(prefix))

    def iter_words(self) -> Iterator[str]:
        """Iterate over every stored word in lexicographical order."""
        return _walk(self._root, "")

    def iter_prefix(self, prefix: str) -> Iterator[str]:
        """Iterate over the stored words beginning with ``prefix``, in order."""
        node = self._find_node(prefix)
        if node is None:
            return iter(())
        return _walk(node, prefix)

    def __iter__(self) -> Iterator[str]:
        return self.iter_words()

    def __repr__(self) -> str:
        return f"Trie({self.all_words()!r})"