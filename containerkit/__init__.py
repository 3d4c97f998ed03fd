"""Classic data structures: pair, disjoint set union, trie, red-black ordered map and skip list."""

__version__ = "0.1.0"
__all__ = ["pair", "dsu", "trie", "ordered_map", "skip_list"]