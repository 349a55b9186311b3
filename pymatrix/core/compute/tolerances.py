"""
Tolerance tiers for numerical validation.

Defines precision expectations for different kernel paths:
- Exact: structural results (identity in, identity out; integer determinants)
- Kernel FP64: direct elimination / Gram-Schmidt against LAPACK
- Iterative FP64: QR-iteration eigenvalues against LAPACK

Used by the test suite and by callers comparing kernel output to a reference.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Structural results that involve no rounding beyond a handful of operations
EXACT = ToleranceTier(
    rtol=0.0,
    atol=1e-14,
    name='exact',
    description='No meaningful rounding expected',
)

# Elimination and Gram-Schmidt on well-conditioned input
KERNEL_FP64 = ToleranceTier(
    rtol=1e-9,
    atol=1e-10,
    name='kernel_fp64',
    description='Double precision direct kernels, well-conditioned input',
)

# Elimination on ill-conditioned input (existence pivoting, no scaling)
KERNEL_FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='kernel_fp64_ill_conditioned',
    description='Double precision direct kernels, ill-conditioned (cond > 1e4)',
)

# Unshifted QR iteration stopped at the default tolerance
ITERATIVE_FP64 = ToleranceTier(
    rtol=1e-8,
    atol=1e-9,
    name='iterative_fp64',
    description='QR iteration eigenvalues at default tolerance',
)


def select_tolerance(
    kernel: str,
    is_ill_conditioned: bool = False,
) -> ToleranceTier:
    """Select appropriate tolerance tier for a given kernel."""
    if kernel in ('eigen', 'qr_iteration'):
        return ITERATIVE_FP64
    if is_ill_conditioned:
        return KERNEL_FP64_ILL_CONDITIONED
    return KERNEL_FP64
