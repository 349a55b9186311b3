"""
Matrix storage type.

Public API:
    Matrix         - dense real matrix: construction, editing, arithmetic,
                     and the linear algebra kernels as methods
    format_matrix  - plain-text rendering used by str(Matrix)
"""

from pymatrix.matrix.storage import Matrix, Orientation
from pymatrix.matrix.formatting import format_matrix

__all__ = [
    "Matrix",
    "Orientation",
    "format_matrix",
]
