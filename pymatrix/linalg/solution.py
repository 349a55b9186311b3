"""
Eigenvalue solution types.

Contains the parameter payload and user-facing solution wrapper for the
QR iteration.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pymatrix.core.result import Result


@dataclass(frozen=True)
class EigenParams:
    """
    Parameter payload for the QR eigenvalue iteration.

    eigenvalues is the diagonal of final_iterate, in row order.
    """
    eigenvalues: NDArray[np.floating[Any]]
    final_iterate: NDArray[np.floating[Any]]


@dataclass
class EigenSolution:
    """
    User-facing eigenvalue iteration results.

    Wraps Result[EigenParams] and provides convenient accessors.
    """
    _result: Result[EigenParams]

    @property
    def eigenvalues(self) -> NDArray[np.floating[Any]]:
        """Approximate eigenvalues, diagonal order (not sorted, not deduplicated)."""
        return self._result.params.eigenvalues

    @property
    def final_iterate(self) -> NDArray[np.floating[Any]]:
        """Last A_k of the iteration, upper triangular to within tolerance."""
        return self._result.params.final_iterate

    @property
    def iterations(self) -> int:
        return self._result.info['iterations']

    @property
    def converged(self) -> bool:
        return self._result.info['converged']

    @property
    def tolerance(self) -> float:
        return self._result.info['tolerance']

    @property
    def max_subdiagonal(self) -> float:
        """Largest strictly-lower-triangular magnitude at exit."""
        return self._result.info['max_subdiagonal']

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    def to_list(self) -> list[float]:
        """Eigenvalues as plain Python floats."""
        return [float(v) for v in self._result.params.eigenvalues]

    def summary(self) -> str:
        lines = [
            "QR Iteration Eigenvalues",
            "=" * 40,
            f"Iterations: {self.iterations}",
            f"Tolerance: {self.tolerance:g}",
            f"Max sub-diagonal: {self.max_subdiagonal:.3e}",
            "",
        ]
        for i, value in enumerate(self.eigenvalues):
            lines.append(f"  lambda[{i}] = {value: .10g}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"EigenSolution(n={len(self.eigenvalues)}, "
            f"iterations={self.iterations}, converged={self.converged})"
        )
