"""
Shared pytest fixtures for testing rectmatrix.

This module provides:
- Settings isolation (environment-driven config is cached per process)
- Utilities for testing Pydantic validation of hand-built matrices
- Serialization round-trip helpers
- An invariant checker used across operation tests
"""

import pytest
from typing import Any, Type, TypeVar
from pydantic import BaseModel, ValidationError

from rectmatrix.core.config import get_settings
from rectmatrix.matrix import Matrix


T = TypeVar('T', bound=BaseModel)


@pytest.fixture(autouse=True)
def reset_settings():
    """Drop cached settings before and after each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def negative_dimension_policy(monkeypatch):
    """Switch the negative-dimension policy for the duration of a test."""
    def _set_policy(policy: str) -> None:
        monkeypatch.setenv("RECTMATRIX_NEGATIVE_DIMENSIONS", policy)
        get_settings.cache_clear()
    return _set_policy


@pytest.fixture
def assert_validation_error():
    """Helper to assert that a ValidationError is raised with expected details."""
    def _assert_validation(
        model_class: Type[BaseModel],
        data: dict[str, Any],
        expected_field: str | None = None,
        expected_type: str | None = None,
    ) -> ValidationError:
        """
        Assert that creating a model raises ValidationError.

        Args:
            model_class: The Pydantic model class
            data: Invalid data to pass to model
            expected_field: Expected field name in error (optional)
            expected_type: Expected error type (optional)

        Returns:
            The ValidationError that was raised
        """
        with pytest.raises(ValidationError) as exc_info:
            model_class(**data)

        error = exc_info.value
        if expected_field:
            field_errors = [e for e in error.errors() if e['loc'] and e['loc'][0] == expected_field]
            assert len(field_errors) > 0, f"Expected error for field '{expected_field}' not found"

        if expected_type:
            assert any(
                expected_type in str(e['type']).lower() for e in error.errors()
            ), f"Expected error type containing '{expected_type}' not found"

        return error

    return _assert_validation


@pytest.fixture
def assert_serializable():
    """Helper to assert that a model can be serialized and deserialized."""
    def _assert_serialization(model: BaseModel, model_class: Type[T]) -> T:
        """
        Assert that a model survives a JSON round trip.

        Args:
            model: The model instance to test
            model_class: The model class for reconstruction

        Returns:
            The reconstructed model
        """
        reconstructed = model_class.model_validate_json(model.model_dump_json())
        assert reconstructed == model
        return reconstructed

    return _assert_serialization


@pytest.fixture
def assert_rectangular():
    """Helper to assert both structural invariants of a matrix."""
    def _assert_rectangular(matrix: Matrix) -> None:
        width, height = matrix.size
        assert width >= 0 and height >= 0
        assert len(matrix.rows) == height
        assert all(len(row) == width for row in matrix.rows)
        assert (width == 0) == (height == 0), f"degenerate size {width}x{height}"

    return _assert_rectangular


@pytest.fixture
def grid_3x2() -> Matrix[int]:
    """3 wide, 2 high: [[0, 1, 2], [10, 11, 12]]."""
    return Matrix.initialize((3, 2), lambda x, y: x + y * 10)


pytestmark = [
    pytest.mark.filterwarnings("ignore::DeprecationWarning"),
]
