# containerkit

Pure-Python implementations of a few classic data structures:

- `containerkit.pair.Pair`: a dataclass holding `first` and `second`.
  It can be unpacked as `first, second = pair`.
- `containerkit.dsu.DSU`: disjoint set union (union-find) with path
  compression and union by rank.
- `containerkit.trie.Trie`: a prefix tree over Unicode strings.
- `containerkit.ordered_map.RedBlackTree`: a sorted map backed by a
  red-black tree.
- `containerkit.skip_list.SkipList`: a sorted map backed by a
  probabilistic skip list. It takes an optional comparison function.

It needs nothing beyond the standard library.

## Installation

```
pip install .
```

## Usage

### Disjoint set union

```python
from containerkit.dsu import DSU

sets = DSU(6)
sets.union(0, 1)          # True
sets.union(0, 1)          # False, already in the same set
sets.union(2, 3)
sets.connected(0, 1)      # True
sets.connected(0, 2)      # False
sets.find(1) == sets.find(0)  # True
sets.component_count()    # 4
len(sets)                 # 6
```

`DSU(n)` raises `ValueError` when `n` is zero or negative. `find`,
`union` and `connected` raise `IndexError` for an element outside
`0 .. n-1`.

### Trie

```python
from containerkit.trie import Trie

trie = Trie()
for word in ["app", "apple", "apply", "banana"]:
    trie.insert(word)

trie.search("apple")              # True
"apple" in trie                   # True
trie.starts_with("ban")           # True
trie.words_with_prefix("app")     # ['app', 'apple', 'apply']
trie.delete("apple")              # True
trie.all_words()                  # ['app', 'apply', 'banana']
list(trie)                        # the same words, in lexicographical order
len(trie)                         # 3
```

`insert` ignores the empty string, and `search` and `delete` return
`False` for it. `starts_with("")` is true whenever the trie holds any word,
and `words_with_prefix("")` returns every word. `iter_words()` and
`iter_prefix(prefix)` give the same words lazily. `clear()` removes
everything.

### Ordered map (red-black tree)

```python
from containerkit.ordered_map import RedBlackTree

tree = RedBlackTree()
tree[5] = "five"
tree[1] = "one"
tree.set(3, "three")

tree.keys()          # [1, 3, 5]
tree.values()        # ['one', 'three', 'five']
tree.get(9, "none")  # 'none'
tree[9]              # raises KeyError
tree.delete(3)       # True; returns False for a missing key
del tree[1]          # raises KeyError for a missing key
list(tree.iter_pairs())  # [(5, 'five')]
tree.pairs()         # [Pair(first=5, second='five')]
```

Keys must be comparable with `<`. Iterating the tree yields its keys in
ascending order. `iter_keys()` and `iter_values()` are lazy versions of
`keys()` and `values()`. `cap()` returns the same number as `len(tree)`.

### Skip list

```python
from containerkit.skip_list import SkipList

sl = SkipList()
for i in range(1, 11):
    sl[i] = chr(ord("A") + i - 1)

list(sl.all_between(3, 5))   # [(3, 'C'), (4, 'D'), (5, 'E')]
list(sl.all_from(9))         # [(9, 'I'), (10, 'J')]
sl.keys()[:3]                # [1, 2, 3]
```

The map operations are the same as the tree's: `get`, `set`, `delete`,
indexing, `del`, `in`, `len`, `keys`, `values`, `pairs`, plus `clear()`.
`all()` iterates over every `(key, value)` tuple, and iterating the list
itself yields its keys.

`all_between(start, end)` includes both bounds and swaps them if `start`
sorts after `end`.

`range(fn)`, `range_from(start, fn)` and `range_between(start, end, fn)`
call `fn(key, value)` for each entry in turn and stop as soon as `fn`
returns a false value.

A comparison function returning a negative, zero or positive number
changes the order. For example, to keep keys in reverse:

```python
rev = SkipList(lambda a, b: (b > a) - (b < a))
for i in range(1, 6):
    rev[i] = i
rev.keys()                   # [5, 4, 3, 2, 1]
```

The levels of new nodes are drawn from a `random.Random`. Pass your own
with the keyword `rng=` for a reproducible layout.

## Running the tests

```
pip install .[test]
pytest
```