import pytest

from containerkit.pair import Pair


def test_pair_with_different_types():
    p = Pair(42, "hello")
    assert p.first == 42
    assert p.second == "hello"


def test_pair_with_same_types():
    p = Pair(1, 2)
    assert (p.first, p.second) == (1, 2)


def test_pair_keyword_construction():
    p = Pair(first="", second=False)
    assert p.first == ""
    assert p.second is False


def test_pair_equality():
    assert Pair(1, "one") == Pair(1, "one")
    assert not (Pair(1, "one") == Pair(1, "two"))


def test_pair_unpacking():
    first, second = Pair("key", 7)
    assert first == "key"
    assert second == 7


def test_pair_is_mutable():
    p = Pair(1, "a")
    p.second = "b"
    assert p == Pair(1, "b")


def test_pair_requires_both_values():
    with pytest.raises(TypeError):
        Pair(1)