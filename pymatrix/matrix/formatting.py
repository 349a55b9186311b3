"""
Plain-text rendering of a Matrix.

    |   1.0000  -2.5000  |       0  |
    |  10.0000        0  |  1.0000  |

Every column is right-aligned to its widest entry. When every entry is
integral (within the display precision) no decimals are printed at all;
otherwise each entry gets float_len fixed decimals. Zero-classified
entries always print as a bare 0. A separator recorded by augment()
prints as a bar before its column.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from pymatrix.core.compute.numeric import is_zero_classified

if TYPE_CHECKING:
    from pymatrix.matrix.storage import Matrix

_GAP = '  '


def _is_integral(value: float, precision: float) -> bool:
    fractional = math.modf(value)[0]
    return abs(fractional + precision) <= 2 * precision


def _format_entry(value: float, decimals: int) -> str:
    if is_zero_classified(value):
        return '0'
    return f"{value:.{decimals}f}"


def format_matrix(matrix: 'Matrix') -> str:
    """Render matrix as aligned text rows; the empty matrix renders as []."""
    if matrix.is_empty:
        return '[]'

    grid = matrix.to_array()
    float_len = matrix.float_len
    precision = 10.0 ** -(float_len + 1)

    all_integral = all(
        _is_integral(float(v), precision) or not math.isfinite(v)
        for v in grid.ravel()
    )
    decimals = 0 if all_integral else float_len

    cells = [[_format_entry(float(v), decimals) for v in row] for row in grid]
    widths = [
        max(len(cells[i][j]) for i in range(len(cells)))
        for j in range(matrix.num_columns)
    ]
    separators = matrix.separators

    lines = []
    for row in cells:
        parts = ['|' + _GAP]
        for j, cell in enumerate(row):
            if j in separators:
                parts.append('|' + _GAP)
            parts.append(cell.rjust(widths[j]) + _GAP)
        parts.append('|')
        lines.append(''.join(parts))
    return '\n'.join(lines)
