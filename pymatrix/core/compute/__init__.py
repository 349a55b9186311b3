"""
Shared compute infrastructure for pymatrix.

This module provides the numeric primitives, timing utilities and tolerance
tiers that the kernels in pymatrix.linalg share.

IMPORTANT: This is NOT where the kernels live. Those go in pymatrix.linalg.
This module contains shared NUMERIC infrastructure.

Submodules:
    numeric: Zero classification, dot product, norm
    timing: Execution timing utilities
    tolerances: Comparison tolerance tiers
"""

from pymatrix.core.compute.numeric import (
    is_zero_classified,
    zero_classified_mask,
    dot,
    norm,
)
from pymatrix.core.compute.timing import Timer, timed

__all__ = [
    # Numeric primitives
    "is_zero_classified",
    "zero_classified_mask",
    "dot",
    "norm",
    # Timing
    "Timer",
    "timed",
]
