import itertools

import pytest

from containerkit.dsu import DSU


@pytest.mark.parametrize("n", [5, 1])
def test_new_valid_sizes(n):
    dsu = DSU(n)
    assert len(dsu) == n
    assert dsu.component_count() == n


@pytest.mark.parametrize("n", [0, -1])
def test_new_invalid_sizes(n):
    with pytest.raises(ValueError):
        DSU(n)


def test_find_initial():
    dsu = DSU(5)
    assert [dsu.find(i) for i in range(5)] == [0, 1, 2, 3, 4]


@pytest.mark.parametrize("x", [-1, 5])
def test_find_invalid(x):
    dsu = DSU(5)
    with pytest.raises(IndexError):
        dsu.find(x)


def test_union():
    dsu = DSU(5)
    assert dsu.union(0, 1) is True
    assert dsu.find(0) == dsu.find(1)
    assert dsu.component_count() == 4

    assert dsu.union(0, 1) is False
    assert dsu.component_count() == 4


@pytest.mark.parametrize("x, y", [(-1, 0), (0, 5)])
def test_union_invalid(x, y):
    dsu = DSU(5)
    with pytest.raises(IndexError):
        dsu.union(x, y)
    assert dsu.component_count() == 5


def test_connected():
    dsu = DSU(5)
    for i, j in itertools.combinations(range(5), 2):
        assert dsu.connected(i, j) is False
    for i in range(5):
        assert dsu.connected(i, i) is True

    dsu.union(0, 1)
    assert dsu.connected(0, 1) is True
    assert dsu.connected(1, 0) is True

    dsu.union(1, 2)
    assert dsu.connected(0, 2) is True
    assert dsu.connected(0, 3) is False


@pytest.mark.parametrize("x, y", [(-1, 0), (0, 5)])
def test_connected_invalid(x, y):
    dsu = DSU(5)
    with pytest.raises(IndexError):
        dsu.connected(x, y)


def test_complex_operations():
    dsu = DSU(10)
    dsu.union(0, 1)
    dsu.union(1, 2)
    dsu.union(3, 4)
    dsu.union(5, 6)
    dsu.union(6, 7)
    assert dsu.component_count() == 5

    cases = [
        (0, 1, True), (0, 2, True), (1, 2, True),
        (3, 4, True),
        (5, 6, True), (5, 7, True), (6, 7, True),
        (8, 8, True),
        (9, 9, True),
        (0, 3, False), (0, 5, False), (0, 8, False), (0, 9, False),
        (3, 5, False), (3, 8, False), (3, 9, False),
        (5, 8, False), (5, 9, False),
        (8, 9, False),
    ]
    for x, y, expected in cases:
        assert dsu.connected(x, y) is expected, (x, y)

    dsu.union(2, 3)
    assert dsu.component_count() == 4
    for i, j in itertools.product(range(5), repeat=2):
        assert dsu.connected(i, j) is True


def test_complex_operations_pairs():
    dsu = DSU(6)
    dsu.union(0, 1)
    dsu.union(2, 3)
    dsu.union(4, 5)
    assert dsu.connected(0, 1)
    assert dsu.connected(2, 3)
    assert dsu.connected(4, 5)
    assert not dsu.connected(0, 2)
    assert dsu.component_count() == 3


def test_path_compression_chain():
    dsu = DSU(5)
    for i in range(4):
        dsu.union(i, i + 1)
    for i, j in itertools.product(range(5), repeat=2):
        assert dsu.connected(i, j)
    roots = {dsu.find(i) for i in range(5)}
    assert len(roots) == 1
    assert dsu.component_count() == 1


def test_long_chain_find():
    dsu = DSU(1000)
    for i in range(999):
        dsu.union(i, i + 1)
    roots = {dsu.find(i) for i in range(1000)}
    assert len(roots) == 1
    assert dsu.component_count() == 1


def test_single_element():
    dsu = DSU(1)
    assert len(dsu) == 1
    assert dsu.component_count() == 1
    assert dsu.find(0) == 0
    assert dsu.connected(0, 0) is True
    assert dsu.union(0, 0) is False
    assert dsu.component_count() == 1


def test_component_count_never_below_one():
    dsu = DSU(8)
    for i in range(8):
        for j in range(8):
            dsu.union(i, j)
    assert dsu.component_count() == 1
    assert len(dsu) == 8