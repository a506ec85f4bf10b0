"""
Matrix: an immutable rectangular grid of arbitrary values.

Cells are addressed by ``(x, y)`` where ``x`` is the column and ``y`` the
row. Every operation returns a new value; a ``Matrix`` is never modified
after construction.

Two invariants hold for every instance:

- every row has exactly ``width`` elements
- ``width == 0`` if and only if ``height == 0``
"""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, TypeVar

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, model_validator

from .core.config import get_settings
from .core.errors import InvalidDimensionsError, InvalidShapeError
from .core.logging import get_context_logger

logger = get_context_logger(__name__)

T = TypeVar("T")
U = TypeVar("U")

Index = tuple[int, int]
Dimensions = tuple[int, int]


def _checked_dimensions(dimensions: Dimensions) -> Dimensions:
    """Apply the negative-dimension policy and return usable sizes."""
    width, height = dimensions
    if width >= 0 and height >= 0:
        return width, height

    if get_settings().NEGATIVE_DIMENSIONS == "reject":
        raise InvalidDimensionsError(width, height)

    logger.debug(
        "Clamping negative dimensions %dx%d to an empty matrix",
        width,
        height,
        extra_data={"width": width, "height": height},
    )
    return max(width, 0), max(height, 0)


class Matrix(BaseModel, Generic[T]):
    """
    Rectangular two-dimensional container with value semantics.

    Storage is row-major: ``rows[y][x]``, a tuple of row tuples. Elements
    are held by reference; derived matrices share the element objects.

    Parametrize (``Matrix[int]``) to have pydantic validate element types;
    a bare ``Matrix`` stores anything.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    width: int = Field(default=0, ge=0)
    height: int = Field(default=0, ge=0)
    rows: tuple[tuple[T, ...], ...] = ()

    @model_validator(mode="after")
    def _check_rectangular(self) -> Matrix:
        if len(self.rows) != self.height:
            raise ValueError(f"Matrix has {len(self.rows)} rows but height {self.height}")
        if any(len(row) != self.width for row in self.rows):
            raise ValueError(f"Matrix rows must all have width {self.width}")
        if (self.width == 0) != (self.height == 0):
            raise ValueError(
                f"Matrix of size {self.width}x{self.height} is degenerate: "
                "a zero dimension requires the other to be zero"
            )
        return self

    @classmethod
    def _from_rows(cls, rows: tuple[tuple[Any, ...], ...]) -> Matrix:
        """Build from already-rectangular rows, collapsing zero width to empty."""
        if not rows or not rows[0]:
            return cls()
        return cls(width=len(rows[0]), height=len(rows), rows=rows)

    # Construction

    @classmethod
    def empty(cls) -> Matrix[T]:
        """Return the 0x0 matrix."""
        return cls()

    @classmethod
    def initialize(cls, dimensions: Dimensions, generator: Callable[[int, int], T]) -> Matrix[T]:
        """
        Build a matrix by calling ``generator(x, y)`` for every cell.

        The generator runs exactly once per cell in row-major order:
        ``(0, 0), (1, 0), ..., (width - 1, 0), (0, 1), ...``.

        Args:
            dimensions: ``(width, height)``
            generator: Function of the column and row index

        Returns:
            New matrix; empty when either dimension is zero or negative
            (negative sizes raise instead under the ``reject`` policy)
        """
        width, height = _checked_dimensions(dimensions)
        if width == 0 or height == 0:
            return cls()
        rows = tuple(tuple(generator(x, y) for x in range(width)) for y in range(height))
        return cls(width=width, height=height, rows=rows)

    @classmethod
    def repeat(cls, dimensions: Dimensions, value: T) -> Matrix[T]:
        """Build a matrix with ``value`` in every cell (the same object, not copies)."""
        width, height = _checked_dimensions(dimensions)
        if width == 0 or height == 0:
            return cls()
        row = (value,) * width
        return cls(width=width, height=height, rows=(row,) * height)

    @classmethod
    def from_list(cls, rows: Iterable[Iterable[T]]) -> Matrix[T]:
        """
        Build a matrix from nested rows, truncating to the shortest row.

        Longer rows are cut down to the shortest row's length and keep their
        position; nothing is padded. A single empty row therefore makes the
        whole matrix empty.
        """
        materialized = [list(row) for row in rows]
        width = min((len(row) for row in materialized), default=0)
        if width == 0:
            return cls()
        return cls(
            width=width,
            height=len(materialized),
            rows=tuple(tuple(row[:width]) for row in materialized),
        )

    @classmethod
    def from_numpy(cls, array: np.ndarray) -> Matrix[T]:
        """
        Build a matrix from a two-dimensional NumPy array.

        Raises:
            InvalidShapeError: If the array is not two-dimensional
        """
        array = np.asarray(array)
        if array.ndim != 2:
            raise InvalidShapeError(tuple(array.shape))
        return cls.from_list(array.tolist())

    # Query

    def is_empty(self) -> bool:
        """Check whether this is the 0x0 matrix."""
        return (self.width, self.height) == (0, 0)

    @property
    def size(self) -> Dimensions:
        """Get matrix dimensions (width, height)."""
        return (self.width, self.height)

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def __contains__(self, index: object) -> bool:
        """Whether ``index`` is an in-bounds ``(x, y)`` pair."""
        if not isinstance(index, tuple) or len(index) != 2:
            return False
        x, y = index
        return isinstance(x, int) and isinstance(y, int) and self._in_bounds(x, y)

    def get(self, index: Index, default: Any = None) -> T | None:
        """
        Get the element at ``(x, y)``.

        Negative indices do not wrap around.

        Args:
            index: ``(x, y)`` column and row
            default: Returned when the index is out of bounds

        Returns:
            The element, or ``default`` (``None`` unless given)
        """
        x, y = index
        if not self._in_bounds(x, y):
            return default
        return self.rows[y][x]

    # Manipulate

    def set(self, index: Index, value: T) -> Matrix[T]:
        """
        Return a copy with the cell at ``(x, y)`` replaced by ``value``.

        Out-of-bounds indices are ignored and the matrix itself is returned.
        Validation rebuilds every row tuple; the element objects themselves
        are not copied.
        """
        x, y = index
        if not self._in_bounds(x, y):
            logger.debug(
                "Ignoring set at (%d, %d) outside %dx%d matrix",
                x,
                y,
                self.width,
                self.height,
                extra_data={"index": (x, y), "size": self.size},
            )
            return self
        row = self.rows[y]
        new_row = row[:x] + (value,) + row[x + 1:]
        return type(self)(
            width=self.width,
            height=self.height,
            rows=self.rows[:y] + (new_row,) + self.rows[y + 1:],
        )

    def slice(self, start: Index, end: Index) -> Matrix[T]:
        """
        Extract the sub-matrix of rows ``[yb, ye)`` and columns ``[xb, xe)``.

        Bounds are clamped to the matrix and inverted ranges select
        nothing, so this never raises. The result's size comes from what was
        actually extracted; a slice with no columns or no rows is empty.

        Args:
            start: ``(xb, yb)`` inclusive corner
            end: ``(xe, ye)`` exclusive corner
        """
        x_begin, y_begin = (max(bound, 0) for bound in start)
        x_end, y_end = (max(bound, 0) for bound in end)
        rows = tuple(row[x_begin:x_end] for row in self.rows[y_begin:y_end])
        return type(self)._from_rows(rows)

    # Lists

    def to_list(self) -> list[list[T]]:
        """Convert to nested Python lists (row-major)."""
        return [list(row) for row in self.rows]

    def to_indexed_list(self) -> list[tuple[Index, T]]:
        """List ``((x, y), value)`` pairs in row-major order."""
        return [((x, y), value) for y, row in enumerate(self.rows) for x, value in enumerate(row)]

    # Transform

    def map(self, function: Callable[[T], U]) -> Matrix[U]:
        """Apply ``function`` to every element, in row-major order."""
        return Matrix._from_rows(tuple(tuple(function(value) for value in row) for row in self.rows))

    def indexed_map(self, function: Callable[[Index, T], U]) -> Matrix[U]:
        """Apply ``function((x, y), value)`` to every element, in row-major order."""
        return Matrix._from_rows(
            tuple(
                tuple(function((x, y), value) for x, value in enumerate(row))
                for y, row in enumerate(self.rows)
            )
        )

    # Conversion

    def to_numpy(self, dtype: Any = None) -> np.ndarray:
        """
        Convert to a NumPy array of shape (height, width).

        With ``dtype=object`` every cell becomes one array element, even when
        the cells are themselves sequences.

        Raises:
            InvalidShapeError: If the cells are sequences and ``dtype`` is not
                ``object``, so NumPy would add extra axes
        """
        if dtype is not None and np.dtype(dtype) == np.dtype(object):
            array = np.empty((self.height, self.width), dtype=object)
            for y, row in enumerate(self.rows):
                for x, value in enumerate(row):
                    array[y, x] = value
            return array

        if self.is_empty():
            return np.empty((0, 0), dtype=dtype)

        try:
            array = np.array(self.to_list(), dtype=dtype)
        except ValueError as exc:
            raise InvalidShapeError(
                (self.height, self.width),
                message=f"Cells of the {self.width}x{self.height} matrix are ragged sequences; use dtype=object",
            ) from exc
        if array.shape != (self.height, self.width):
            raise InvalidShapeError(tuple(array.shape))
        return array

    def to_string(self) -> str:
        """Convert to string."""
        rows_str = ", ".join("[" + ", ".join(str(el) for el in row) + "]" for row in self.rows)
        return f"[{rows_str}]"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Matrix({self.width}x{self.height}, {self.to_string()})"
