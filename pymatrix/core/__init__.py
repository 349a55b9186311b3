"""
Core infrastructure for pymatrix.

This module provides shared abstractions and utilities used by the
storage type (pymatrix.matrix) and the kernels (pymatrix.linalg).

Key components:
    protocols: Storage protocol consumed by the kernels
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    limits: Size bound and default parameters
    compute: Zero test, dot product, timing, tolerance tiers
"""

from pymatrix.core.protocols import Storage
from pymatrix.core.result import Result
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

__all__ = [
    # Protocols
    "Storage",
    # Result
    "Result",
    # Exceptions
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
