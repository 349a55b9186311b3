"""
Elimination kernels: determinant, reduced row-echelon form, inverse.

All three are built on row elimination over a private working copy of the
operand; the caller's data is never modified.

Pivoting policy is existence-based, not magnitude-based: the pivot is the
first entry at or below the current row that is not zero-classified
(see pymatrix.core.compute.numeric). This reproduces exact structural
behaviour (an exactly singular matrix gives determinant 0.0) but is not
the numerically stable choice for ill-conditioned input.
"""

from __future__ import annotations

import warnings
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.compute.numeric import is_zero_classified
from pymatrix.core.exceptions import SingularMatrixError, SingularMatrixWarning
from pymatrix.core.protocols import Storage
from pymatrix.core.validation import (
    working_copy,
    check_not_empty,
    check_square,
)


def _first_pivot_row(grid: NDArray[np.floating[Any]], start: int, col: int) -> int | None:
    """Index of the first row >= start whose entry in col is not zero-classified."""
    for row in range(start, grid.shape[0]):
        if not is_zero_classified(grid[row, col]):
            return row
    return None


def _swap_rows(grid: NDArray[np.floating[Any]], r1: int, r2: int) -> None:
    grid[[r1, r2], :] = grid[[r2, r1], :]


def determinant(a: Storage | ArrayLike) -> float:
    """
    Determinant by forward elimination.

    For each column i, the first non-zero-classified entry at or below the
    diagonal becomes the pivot; a row swap flips the sign. If a column has
    no pivot the matrix is singular and 0.0 is returned immediately.

    Args:
        a: Square, non-empty matrix

    Returns:
        sign * product of the eliminated diagonal

    Raises:
        EmptyMatrixError: If a is empty
        DimensionError: If a is not square
    """
    grid = working_copy(a, 'a')
    check_not_empty(grid, 'a')
    check_square(grid, 'a')

    n = grid.shape[0]
    scale = 1.0
    for i in range(n):
        pivot_row = _first_pivot_row(grid, i, i)
        if pivot_row is None:
            return 0.0
        if pivot_row != i:
            _swap_rows(grid, pivot_row, i)
            scale = -scale

        for row in range(i + 1, n):
            if not is_zero_classified(grid[row, i]):
                coeff = grid[row, i] / grid[i, i]
                grid[row, i:] -= coeff * grid[i, i:]

    for value in np.diag(grid):
        scale *= value
    return float(scale)


def _rref_in_place(grid: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """Gauss-Jordan reduction of an owned, non-empty grid."""
    rows, cols = grid.shape
    lead = 0
    for i in range(rows):
        if lead >= cols:
            break

        # Find the next column with a pivot at or below row i.
        pivot_row = _first_pivot_row(grid, i, lead)
        while pivot_row is None:
            lead += 1
            if lead == cols:
                return grid
            pivot_row = _first_pivot_row(grid, i, lead)

        if pivot_row != i:
            _swap_rows(grid, pivot_row, i)

        # Every other row eliminates against the pre-normalization column,
        # not the live one.
        leading = grid[:, lead].copy()

        grid[i, lead:] /= leading[i]
        for k in range(rows):
            if k != i and not is_zero_classified(leading[k]):
                grid[k, lead:] -= leading[k] * grid[i, lead:]

        lead += 1
    return grid


def rref(a: Storage | ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Reduced row-echelon form by Gauss-Jordan elimination.

    A lead column cursor starts at 0. For each row the cursor advances
    past columns that are zero-classified from that row down; the first
    non-zero entry found is swapped up, its row normalized, and the column
    cleared in every other row.

    Args:
        a: Non-empty matrix of any shape

    Returns:
        New array of the same shape in reduced row-echelon form

    Raises:
        EmptyMatrixError: If a is empty
    """
    grid = working_copy(a, 'a')
    check_not_empty(grid, 'a')
    return _rref_in_place(grid)


def inverse(
    a: Storage | ArrayLike,
    *,
    strict: bool = False,
) -> NDArray[np.floating[Any]]:
    """
    Inverse by Gauss-Jordan reduction of [A | I].

    A zero-classified determinant means no inverse exists. By default this
    is NOT an exception: a SingularMatrixWarning is emitted and an empty
    0x0 array is returned, so callers must check ``result.size == 0``.
    Pass strict=True to raise SingularMatrixError instead.

    Args:
        a: Square, non-empty matrix
        strict: Raise on a singular matrix instead of returning empty

    Returns:
        n x n inverse, or a 0x0 array if a is singular and strict is False

    Raises:
        EmptyMatrixError: If a is empty
        DimensionError: If a is not square
        SingularMatrixError: If a is singular and strict is True
    """
    grid = working_copy(a, 'a')
    check_not_empty(grid, 'a')
    check_square(grid, 'a')

    det = determinant(grid)
    if is_zero_classified(det):
        message = "Matrix not invertible: determinant is zero"
        if strict:
            raise SingularMatrixError(message, matrix_name='a', determinant=det)
        warnings.warn(message, SingularMatrixWarning, stacklevel=2)
        return np.empty((0, 0), dtype=np.float64)

    n = grid.shape[0]
    augmented = np.hstack([grid, np.eye(n)])
    reduced = _rref_in_place(augmented)
    return np.ascontiguousarray(reduced[:, n:])
