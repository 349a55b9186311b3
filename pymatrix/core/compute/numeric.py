"""
Scalar and vector primitives shared by the linear algebra kernels.

The zero test here is a classification, not a tolerance: a value is
"zero-classified" when it is exactly zero or an IEEE-754 subnormal.
Small but normal values such as 1e-10 are NOT zero. Pivot searches,
singularity checks and the Gram-Schmidt dependence check all use it.
"""

from typing import Any
import numpy as np
from numpy.typing import NDArray

# Smallest positive normal float64; anything smaller in magnitude is
# subnormal or zero.
_SMALLEST_NORMAL = float(np.finfo(np.float64).tiny)


def is_zero_classified(value: float) -> bool:
    """
    True if value is exactly zero or subnormal.

    NaN compares false against everything, so it is never zero-classified.

    Examples:
        >>> is_zero_classified(0.0), is_zero_classified(-5e-324)
        (True, True)
        >>> is_zero_classified(1e-10)
        False
    """
    return abs(float(value)) < _SMALLEST_NORMAL


def zero_classified_mask(values: NDArray[np.floating[Any]]) -> NDArray[np.bool_]:
    """Elementwise is_zero_classified over an array."""
    return np.abs(values) < _SMALLEST_NORMAL


def dot(u: NDArray[np.floating[Any]], v: NDArray[np.floating[Any]]) -> float:
    """
    Sum of elementwise products of two equal-length 1-D arrays.

    Callers validate shapes; this is the inner-loop primitive.
    """
    return float(np.dot(u, v))


def norm(u: NDArray[np.floating[Any]]) -> float:
    """Euclidean norm as sqrt(dot(u, u))."""
    return float(np.sqrt(dot(u, u)))
