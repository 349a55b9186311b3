"""
pymatrix: dense real matrices with an exact-pivoting linear algebra kernel.

A Matrix value type with in-place editing and formatted display, backed by
NumPy storage, plus kernels that work on private copies of their input.

Submodules:
    matrix: the Matrix type (construction, editing, arithmetic, printing)
    linalg: determinant, rref, inverse, Gram-Schmidt QR, QR-iteration eigenvalues
    core: exceptions, validation, limits, timing, tolerances
"""

__version__ = "0.1.0"

from pymatrix.core.exceptions import (
    MatrixError,
    ValidationError,
    DimensionError,
    EmptyMatrixError,
    MatrixIndexError,
    LinearDependenceError,
    NumericalError,
    SingularMatrixError,
    ConvergenceError,
    SingularMatrixWarning,
)
from pymatrix.matrix import Matrix
from pymatrix import linalg

__all__ = [
    "__version__",
    "Matrix",
    "linalg",
    "MatrixError",
    "ValidationError",
    "DimensionError",
    "EmptyMatrixError",
    "MatrixIndexError",
    "LinearDependenceError",
    "NumericalError",
    "SingularMatrixError",
    "ConvergenceError",
    "SingularMatrixWarning",
]
