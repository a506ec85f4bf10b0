"""
rectmatrix - immutable rectangular matrices of arbitrary values

- Always rectangular, even from ragged input
- Value-returning updates (``set`` returns a new matrix)
- Absence instead of exceptions for out-of-range indices
- Function-style API in ``rectmatrix.ops``
"""

from . import ops
from .core import (
    InvalidDimensionsError,
    InvalidShapeError,
    MatrixError,
    Settings,
    get_settings,
    setup_logging,
)
from .matrix import Dimensions, Index, Matrix

__version__ = "0.1.0"

__all__ = [
    "Matrix",
    "Index",
    "Dimensions",
    "ops",
    "MatrixError",
    "InvalidDimensionsError",
    "InvalidShapeError",
    "Settings",
    "get_settings",
    "setup_logging",
]
