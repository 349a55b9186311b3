"""
Linear algebra kernels for pymatrix.

All functions follow these conventions:
    - Accept a Storage implementation (e.g. pymatrix.Matrix) or any 2-D
      numeric array-like
    - Work on a private float64 copy; inputs are never modified
    - Return NumPy arrays, scalars, or structured result dataclasses
    - Errors are raised immediately with clear messages (the one exception
      is inverse() of a singular matrix, see its docstring)

Submodules:
    elimination: determinant, rref, inverse
    decomposition: QR via Gram-Schmidt, vector dot product
    eigen: eigenvalues by unshifted QR iteration
"""

from pymatrix.linalg.elimination import determinant, rref, inverse
from pymatrix.linalg.decomposition import (
    QRComponent,
    QRResult,
    qr,
    qr_component,
    vec_dot,
)
from pymatrix.linalg.eigen import eigenvalues_approx, qr_iteration
from pymatrix.linalg.solution import EigenParams, EigenSolution

__all__ = [
    # Elimination
    "determinant",
    "rref",
    "inverse",
    # QR decomposition
    "QRComponent",
    "QRResult",
    "qr",
    "qr_component",
    "vec_dot",
    # Eigenvalues
    "eigenvalues_approx",
    "qr_iteration",
    "EigenParams",
    "EigenSolution",
]
