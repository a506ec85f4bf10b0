"""
Library exceptions.

Index problems never raise; these cover construction input that cannot
describe a rectangle at all.
"""

from typing import Any, Dict, Optional


class MatrixError(Exception):
    """Base exception for rectmatrix errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidDimensionsError(MatrixError, ValueError):
    """Raised for negative dimensions when the policy is ``reject``"""

    def __init__(self, width: int, height: int):
        super().__init__(
            message=f"Invalid matrix dimensions {width}x{height}: sizes must be non-negative",
            details={"width": width, "height": height}
        )


class InvalidShapeError(MatrixError, ValueError):
    """Raised when array data is not two-dimensional"""

    def __init__(self, shape: tuple[int, ...], message: Optional[str] = None):
        super().__init__(
            message=message or f"Expected a two-dimensional array, got shape {shape}",
            details={"shape": shape}
        )
