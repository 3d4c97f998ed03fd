"""A simple two-element container."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

A = TypeVar("A")
B = TypeVar("B")


@dataclass
class Pair(Generic[A, B]):
    """Two values held together: ``first`` and ``second``."""

    first: A
    second: B

    def __iter__(self) -> Iterator[Any]:
        yield self.first
        yield self.second