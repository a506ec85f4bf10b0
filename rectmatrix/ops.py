"""
Function-style matrix API.

Each function takes the matrix as its last argument so calls compose in
pipelines, e.g. ``to_list(set((0, 0), 1, repeat((2, 2), 0)))``. They
delegate to the ``Matrix`` methods of the same name.

Several names shadow builtins (``set``, ``slice``, ``map``); import the
module rather than its members.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, TypeVar

from .matrix import Dimensions, Index, Matrix

T = TypeVar("T")
U = TypeVar("U")


def empty() -> Matrix:
    return Matrix.empty()


def initialize(dimensions: Dimensions, generator: Callable[[int, int], T]) -> Matrix[T]:
    return Matrix.initialize(dimensions, generator)


def repeat(dimensions: Dimensions, value: T) -> Matrix[T]:
    return Matrix.repeat(dimensions, value)


def from_list(rows: Iterable[Iterable[T]]) -> Matrix[T]:
    return Matrix.from_list(rows)


def is_empty(matrix: Matrix) -> bool:
    return matrix.is_empty()


def size(matrix: Matrix) -> Dimensions:
    return matrix.size


def get(index: Index, matrix: Matrix[T], default: Any = None) -> T | None:
    return matrix.get(index, default)


def set(index: Index, value: T, matrix: Matrix[T]) -> Matrix[T]:
    return matrix.set(index, value)


def slice(start: Index, end: Index, matrix: Matrix[T]) -> Matrix[T]:
    return matrix.slice(start, end)


def to_list(matrix: Matrix[T]) -> list[list[T]]:
    return matrix.to_list()


def to_indexed_list(matrix: Matrix[T]) -> list[tuple[Index, T]]:
    return matrix.to_indexed_list()


def map(function: Callable[[T], U], matrix: Matrix[T]) -> Matrix[U]:
    return matrix.map(function)


def indexed_map(function: Callable[[Index, T], U], matrix: Matrix[T]) -> Matrix[U]:
    return matrix.indexed_map(function)


__all__ = [
    "empty",
    "initialize",
    "repeat",
    "from_list",
    "is_empty",
    "size",
    "get",
    "set",
    "slice",
    "to_list",
    "to_indexed_list",
    "map",
    "indexed_map",
]
