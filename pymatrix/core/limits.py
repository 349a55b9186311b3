"""
Limits and default settings for pymatrix.

This module is the SINGLE SOURCE OF TRUTH for size bounds and default
parameters. Import from here, never repeat raw numbers.

Usage:
    from pymatrix.core.limits import (
        MAX_MATRIX_SIZE,
        DEFAULT_EIGEN_TOLERANCE,
    )

    if rows > MAX_MATRIX_SIZE:
        ...
"""

# Largest row or column count a Matrix may have (2^29)
MAX_MATRIX_SIZE = 0x20000000

# Sub-diagonal magnitude below which the QR iteration counts as triangular
DEFAULT_EIGEN_TOLERANCE = 1e-12

# Iteration cap for the QR eigenvalue iteration
DEFAULT_MAX_ITERATIONS = 100000

# Decimal places printed for non-integral matrices
DEFAULT_FLOAT_LEN = 4

# Largest accepted float_len
MAX_FLOAT_LEN = 12

__all__ = [
    'MAX_MATRIX_SIZE',
    'DEFAULT_EIGEN_TOLERANCE',
    'DEFAULT_MAX_ITERATIONS',
    'DEFAULT_FLOAT_LEN',
    'MAX_FLOAT_LEN',
]
