"""
Eigenvalue approximation by unshifted QR iteration.

A_0 = A, and A_{k+1} = R_k Q_k where A_k = Q_k R_k. Each A_k is similar to
A. For a real matrix whose eigenvalues are real and distinct in modulus
the iterates approach upper triangular form and the diagonal approaches
the eigenvalues.

Complex conjugate eigenvalue pairs leave a 2x2 block on the sub-diagonal
that never decays, so the iteration runs to its cap and raises
ConvergenceError. Singular input fails inside the QR step with
LinearDependenceError (Gram-Schmidt needs independent columns).
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.compute.timing import Timer
from pymatrix.core.exceptions import ConvergenceError
from pymatrix.core.limits import DEFAULT_EIGEN_TOLERANCE, DEFAULT_MAX_ITERATIONS
from pymatrix.core.protocols import Storage
from pymatrix.core.result import Result
from pymatrix.core.validation import (
    working_copy,
    check_not_empty,
    check_square,
    check_tolerance,
    check_positive_int,
)
from pymatrix.linalg.decomposition import qr
from pymatrix.linalg.solution import EigenParams, EigenSolution


def _max_subdiagonal(grid: NDArray[np.floating[Any]]) -> float:
    """Largest magnitude strictly below the diagonal (0.0 for 1x1)."""
    return float(np.max(np.abs(np.tril(grid, k=-1))))


def qr_iteration(
    a: Storage | ArrayLike,
    *,
    tolerance: float = DEFAULT_EIGEN_TOLERANCE,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> EigenSolution:
    """
    Run the unshifted QR iteration to upper triangular form.

    Convergence is tested after every iteration (so at least one is
    always performed): the iterate is upper triangular when every strictly
    lower entry has absolute value <= tolerance.

    Args:
        a: Square, non-empty matrix
        tolerance: Sub-diagonal magnitude accepted as zero
        max_iterations: Iteration cap

    Returns:
        EigenSolution with eigenvalues, final iterate and diagnostics

    Raises:
        EmptyMatrixError: If a is empty
        DimensionError: If a is not square
        ValidationError: If tolerance or max_iterations is invalid
        LinearDependenceError: If an iterate has dependent columns (singular a)
        ConvergenceError: If max_iterations is reached first
    """
    check_tolerance(tolerance, 'tolerance')
    check_positive_int(max_iterations, 'max_iterations')
    grid = working_copy(a, 'a')
    check_not_empty(grid, 'a')
    check_square(grid, 'a')

    timer = Timer()
    timer.start()

    iterations = 0
    residual = _max_subdiagonal(grid)
    converged = False
    while iterations < max_iterations:
        with timer.section('factor'):
            q, r = qr(grid)
        with timer.section('recombine'):
            grid = r @ q
        iterations += 1

        residual = _max_subdiagonal(grid)
        if residual <= tolerance:
            converged = True
            break

    timer.stop()

    if not converged:
        raise ConvergenceError(
            f"QR iteration did not converge after {iterations} iterations "
            f"(max sub-diagonal {residual:.3e} > tolerance {tolerance:g}); "
            f"eigenvalues may be complex",
            iterations=iterations,
            final_change=residual,
            reason='max_iterations',
            threshold=tolerance,
        )

    params = EigenParams(
        eigenvalues=np.diag(grid).copy(),
        final_iterate=grid,
    )
    result = Result(
        params=params,
        info={
            'method': 'unshifted_qr',
            'converged': converged,
            'iterations': iterations,
            'tolerance': tolerance,
            'max_subdiagonal': residual,
        },
        timing=timer.result(),
        backend_name='cpu_gram_schmidt',
    )
    return EigenSolution(_result=result)


def eigenvalues_approx(
    a: Storage | ArrayLike,
    tolerance: float = DEFAULT_EIGEN_TOLERANCE,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> list[float]:
    """
    Approximate real eigenvalues of a square matrix.

    Returns the diagonal of the converged QR iterate in row order, not
    sorted by magnitude and not deduplicated. See qr_iteration() for the
    failure modes.
    """
    solution = qr_iteration(a, tolerance=tolerance, max_iterations=max_iterations)
    return solution.to_list()
