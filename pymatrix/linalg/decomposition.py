"""
QR decomposition by classical Gram-Schmidt.

Provides the pair-returning qr() and the single-factor qr_component().
Both run the same column-by-column orthogonalization routine, so the Q
returned on its own is always identical to the Q of the pair.

Classical (not modified, not re-orthogonalized) Gram-Schmidt: each
projection coefficient is taken against the ORIGINAL column, not the
partially reduced one. This matches textbook Q R = A exactly in exact
arithmetic and loses orthogonality gradually on ill-conditioned input.
"""

from dataclasses import dataclass
from typing import Literal, Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.compute.numeric import dot, is_zero_classified, norm
from pymatrix.core.exceptions import (
    DimensionError,
    LinearDependenceError,
    ValidationError,
)
from pymatrix.core.protocols import Storage
from pymatrix.core.validation import (
    working_copy,
    check_not_empty,
    check_vector_shaped,
)

QRComponent = Literal['Q', 'R']


@dataclass(frozen=True)
class QRResult:
    """
    Result of QR decomposition.

    Attributes:
        Q: Matrix with orthonormal columns, same shape as the input (m x n)
        R: Upper triangular matrix (n x n)
    """
    Q: NDArray[np.floating[Any]]
    R: NDArray[np.floating[Any]]

    def __iter__(self):
        # Allows ``q, r = qr(a)``
        yield self.Q
        yield self.R


def _orthogonalize(
    grid: NDArray[np.floating[Any]],
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """
    Column-by-column Gram-Schmidt over an owned, non-empty grid.

    Q is a pre-sized buffer filled left to right; after step i its first
    i+1 columns are the orthonormal basis accumulated so far.
    """
    rows, cols = grid.shape
    q = np.zeros((rows, cols), dtype=np.float64)
    r = np.zeros((cols, cols), dtype=np.float64)

    for i in range(cols):
        column = grid[:, i]
        perpendicular = column.copy()
        for j in range(i):
            r[j, i] = dot(column, q[:, j])
            perpendicular -= r[j, i] * q[:, j]

        length = norm(perpendicular)
        if is_zero_classified(length):
            raise LinearDependenceError(
                f"Columns are linearly dependent: column {i} has no "
                f"component orthogonal to the columns before it",
                column=i,
                expected_rank=cols,
            )
        r[i, i] = length
        q[:, i] = perpendicular / length

    return q, r


def qr(a: Storage | ArrayLike) -> QRResult:
    """
    QR decomposition via classical Gram-Schmidt.

    Computes A = QR where Q has orthonormal columns and R is upper
    triangular with a positive diagonal.

    Args:
        a: Non-empty matrix (m x n) with linearly independent columns

    Returns:
        QRResult with Q (m x n) and R (n x n)

    Raises:
        EmptyMatrixError: If a is empty
        LinearDependenceError: If a column lies in the span of earlier ones
    """
    grid = working_copy(a, 'a')
    check_not_empty(grid, 'a')
    q, r = _orthogonalize(grid)
    return QRResult(Q=q, R=r)


def qr_component(
    a: Storage | ArrayLike,
    which: QRComponent,
) -> NDArray[np.floating[Any]]:
    """
    One factor of the QR decomposition.

    Args:
        a: Non-empty matrix with linearly independent columns
        which: 'Q' or 'R'

    Returns:
        The requested factor

    Raises:
        ValidationError: If which is not 'Q' or 'R'
    """
    if which not in ('Q', 'R'):
        raise ValidationError(f"which: must be 'Q' or 'R', got {which!r}")
    result = qr(a)
    return result.Q if which == 'Q' else result.R


def vec_dot(
    a: Storage | ArrayLike,
    b: Storage | ArrayLike | None = None,
) -> float:
    """
    Dot product of vector-shaped matrices.

    With one argument, the sum of squares of a. With two, the sum of
    elementwise products; a row vector may be dotted with a column vector
    as long as both hold the same number of elements.

    Raises:
        EmptyMatrixError: If an operand is empty
        DimensionError: If an operand is not vector-shaped, or lengths differ
    """
    u = working_copy(a, 'a')
    check_vector_shaped(u, 'a')
    u = u.ravel()
    if b is None:
        return dot(u, u)

    v = working_copy(b, 'b')
    check_vector_shaped(v, 'b')
    v = v.ravel()
    if u.shape[0] != v.shape[0]:
        raise DimensionError(
            f"Vectors must be the same length for dot product: "
            f"a has {u.shape[0]}, b has {v.shape[0]}"
        )
    return dot(u, v)
