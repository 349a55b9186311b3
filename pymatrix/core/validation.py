"""
Input validation utilities for pymatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pymatrix.core.exceptions import (
    ValidationError,
    DimensionError,
    EmptyMatrixError,
    MatrixIndexError,
)
from pymatrix.core.limits import MAX_MATRIX_SIZE
from pymatrix.core.protocols import Storage


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating ragged rows, "
            f"mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.); bool is
    # accepted as 0/1.
    if not (np.issubdtype(result.dtype, np.number) or result.dtype == np.bool_):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, only real values are supported"
        )

    return result.astype(np.float64, copy=False)


def working_copy(
    source: Storage | ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Build a private 2-D float64 copy of a kernel operand.

    Storage implementations are read row by row through the protocol;
    anything else goes through check_array. The returned array never
    aliases the caller's data, so kernels may mutate it freely.

    Args:
        source: Storage implementation or 2-D array-like
        name: Parameter name for error messages

    Returns:
        Owned 2-D float64 array; shape (0, 0) for an empty source
    """
    if isinstance(source, Storage):
        rows, cols = source.num_rows, source.num_columns
        if rows == 0 or cols == 0:
            return np.empty((0, 0), dtype=np.float64)
        grid = np.empty((rows, cols), dtype=np.float64)
        for i in range(rows):
            grid[i, :] = source.get_row(i)
        return grid

    grid = np.array(check_array(source, name), dtype=np.float64, copy=True)
    check_2d(grid, name)
    if grid.size == 0:
        return np.empty((0, 0), dtype=np.float64)
    return grid


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Raises:
        DimensionError: If array is not 2D
    """
    if array.ndim != 2:
        raise DimensionError(
            f"{name}: expected 2D array, got {array.ndim}D with shape {array.shape}"
        )


def check_not_empty(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify the matrix has data.

    Raises:
        EmptyMatrixError: If array has no elements
    """
    if array.size == 0:
        raise EmptyMatrixError(f"{name}: matrix must have data, got empty matrix")


def check_square(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify the matrix is square.

    Raises:
        DimensionError: If row and column counts differ
    """
    rows, cols = array.shape
    if rows != cols:
        raise DimensionError(
            f"{name}: matrix must be square, got {rows}x{cols}"
        )


def check_vector_shaped(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify the matrix has exactly one row or exactly one column.

    Raises:
        EmptyMatrixError: If array is empty
        DimensionError: If array is neither a single row nor a single column
    """
    check_not_empty(array, name)
    rows, cols = array.shape
    if rows != 1 and cols != 1:
        raise DimensionError(
            f"{name}: must be only 1 row or column, got {rows}x{cols}"
        )


def check_index(index: int, bound: int, name: str) -> None:
    """
    Verify 0 <= index < bound.

    Args:
        index: Index to check
        bound: Exclusive upper bound (current row or column count)
        name: What is being indexed, e.g. 'row' or 'column'

    Raises:
        MatrixIndexError: If index is negative or not below bound
    """
    if index < 0 or index >= bound:
        raise MatrixIndexError(
            f"{name} {index} does not exist (valid range 0..{bound - 1})"
            if bound > 0 else f"{name} {index} does not exist (matrix is empty)",
            index=index,
            bound=bound,
        )


def check_size(size: int, name: str) -> None:
    """
    Verify a requested row/column count is within MAX_MATRIX_SIZE.

    Raises:
        ValidationError: If size is negative
        MatrixIndexError: If size exceeds MAX_MATRIX_SIZE
    """
    if size < 0:
        raise ValidationError(f"{name}: size must be non-negative, got {size}")
    if size > MAX_MATRIX_SIZE:
        raise MatrixIndexError(
            f"{name}: size must be at most {MAX_MATRIX_SIZE}, got {size}",
            index=size,
            bound=MAX_MATRIX_SIZE,
        )


def check_tolerance(tolerance: float, name: str) -> None:
    """
    Verify a convergence tolerance is a non-negative finite number.

    Raises:
        ValidationError: If tolerance is negative, NaN or infinite
    """
    if not np.isfinite(tolerance) or tolerance < 0:
        raise ValidationError(
            f"{name}: must be a non-negative finite number, got {tolerance}"
        )


def check_positive_int(value: int, name: str) -> None:
    """
    Verify value is an integer >= 1.

    Raises:
        ValidationError: If value is not a positive integer
    """
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value < 1:
        raise ValidationError(f"{name}: must be a positive integer, got {value!r}")
