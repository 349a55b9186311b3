"""
Generic result container for iterative pymatrix computations.

The Result class provides a standardized envelope for kernels that report
more than a single value (iteration counts, convergence diagnostics,
timing). Each kernel defines its own parameter payload.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (converged, iterations, diagnostics)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) so a result can't drift from what was computed
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for kernel computations.

    Type Parameters:
        P: The kernel-specific parameter payload type

    Attributes:
        params: Kernel-specific payload (eigenvalues, final iterate, etc.)
        info: Structured metadata (method, convergence, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the algorithm that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=EigenParams(eigenvalues=vals, final_iterate=a_k),
        ...     info={'method': 'unshifted_qr', 'converged': True, 'iterations': 23},
        ...     timing={'total_seconds': 0.01, 'factor': 0.008},
        ...     backend_name='cpu_gram_schmidt'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
