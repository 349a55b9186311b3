"""
Core protocols for pymatrix.

These define structural interfaces between the linear algebra kernels and
whatever holds the numbers. We use Protocol (structural typing) rather than
ABC (nominal typing) so the kernels accept any conforming container.

Design Principles:
    - Minimal contracts: prescribe only what the kernels actually read
    - Kernels never write through the protocol; they take a working copy
"""

from typing import Protocol, Any, runtime_checkable

import numpy as np
from numpy.typing import NDArray


@runtime_checkable
class Storage(Protocol):
    """
    Minimal protocol for a rectangular grid of real values.

    pymatrix.Matrix implements this protocol. The kernels in
    pymatrix.linalg build their private working copy from it row by row,
    so anything exposing dimensions and row access can be decomposed or
    reduced without first being converted to a Matrix.

    A 0x0 grid is the canonical empty grid. Implementations never report
    zero rows with a non-zero column count or the reverse.
    """

    @property
    def num_rows(self) -> int:
        """Number of rows."""
        ...

    @property
    def num_columns(self) -> int:
        """Number of columns (length of every row)."""
        ...

    def get_row(self, row: int) -> NDArray[np.floating[Any]]:
        """
        Copy of one row.

        Args:
            row: Row index, 0 <= row < num_rows

        Returns:
            1-D array of length num_columns
        """
        ...

    def get_column(self, col: int) -> NDArray[np.floating[Any]]:
        """
        Copy of one column.

        Args:
            col: Column index, 0 <= col < num_columns

        Returns:
            1-D array of length num_rows
        """
        ...
