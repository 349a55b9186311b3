"""
Matrix: a dense, editable grid of real values.

Matrix owns a rectangular float64 grid and a set of display-only separator
columns. It is edited in place (push, set, insert, swap, pop, erase,
augment) and computes through the kernels in pymatrix.linalg, which work
on private copies: determinant(), rref(), inverse(), qr() and
eigenvalues_approx() never modify the receiver.

Usage:
    from pymatrix import Matrix

    m = Matrix([[4, 2], [2, 3]])
    m.determinant()          # 8.0
    m.inverse()              # Matrix 2x2
    q, r = m.qr()
    m.eigenvalues_approx()   # [5.5615..., 1.4384...]

    m.augment(Matrix.identity(2))
    print(m)
    # |  4  2  |  1  0  |
    # |  2  3  |  0  1  |
"""

from __future__ import annotations

import numbers
from typing import Any, Literal
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import (
    ValidationError,
    DimensionError,
    EmptyMatrixError,
)
from pymatrix.core.limits import (
    DEFAULT_EIGEN_TOLERANCE,
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_FLOAT_LEN,
    MAX_FLOAT_LEN,
)
from pymatrix.core.validation import (
    check_array,
    check_index,
    check_size,
)
from pymatrix.linalg import decomposition, eigen, elimination
from pymatrix.linalg.decomposition import QRComponent
from pymatrix.matrix.formatting import format_matrix

Orientation = Literal['column', 'row']

LineValues = ArrayLike | float | None


def _empty_grid() -> NDArray[np.floating[Any]]:
    return np.empty((0, 0), dtype=np.float64)


def _is_scalar(values: Any) -> bool:
    return values is None or np.ndim(values) == 0


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real)


def _grid_from_rows(rows: Any) -> NDArray[np.floating[Any]]:
    """Validated private 2-D copy of a nested sequence or ndarray."""
    if isinstance(rows, np.ndarray):
        grid = check_array(rows, 'data')
        if grid.ndim != 2:
            raise DimensionError(
                f"data: expected 2D array, got {grid.ndim}D with shape {grid.shape}"
            )
    else:
        rows = list(rows)
        if not rows:
            return _empty_grid()
        width = None
        for i, row in enumerate(rows):
            if _is_scalar(row):
                raise DimensionError(
                    f"data: row {i} is a scalar, expected a sequence of values"
                )
            length = len(row)
            if width is None:
                width = length
            elif length != width:
                raise DimensionError(
                    f"Rows must be same size: row 0 has {width} values, "
                    f"row {i} has {length}"
                )
        grid = check_array(rows, 'data')
        if grid.ndim != 2:
            raise DimensionError(
                f"data: expected rows of scalars, got nested shape {grid.shape}"
            )

    if grid.size == 0:
        return _empty_grid()
    check_size(grid.shape[0], 'rows')
    check_size(grid.shape[1], 'columns')
    return np.array(grid, dtype=np.float64, copy=True)


class Matrix:
    """
    Dense real matrix with in-place editing and linear algebra.

    Construction:
        Matrix()                          empty 0x0
        Matrix([[1, 2], [3, 4]])          literal rows
        Matrix(other)                     deep copy (separators included)
        Matrix(ndarray)                   2-D array
        Matrix.filled(rows, cols, value)  constant fill
        Matrix.zeros(rows, cols)
        Matrix.identity(n)
        Matrix.from_vector(values, orientation='column')

    A matrix is empty iff it has zero rows AND zero columns; an operation
    that would leave one dimension at zero clears it instead.

    Implements pymatrix.core.protocols.Storage.
    """

    # Make ndarray (op) Matrix defer to Matrix's reflected operators.
    __array_ufunc__ = None

    def __init__(self, data: 'Matrix | ArrayLike | None' = None):
        self._separators: set[int] = set()
        self._float_len = DEFAULT_FLOAT_LEN

        if data is None:
            self._data = _empty_grid()
        elif isinstance(data, Matrix):
            self._data = data._data.copy()
            self._separators = set(data._separators)
            self._float_len = data._float_len
        else:
            self._data = _grid_from_rows(data)

    # === Factory Methods ===

    @classmethod
    def filled(cls, rows: int, columns: int, value: float) -> Matrix:
        """rows x columns matrix of value; zero in either dimension gives empty."""
        check_size(rows, 'rows')
        check_size(columns, 'columns')
        m = cls()
        if rows and columns:
            m._data = np.full((rows, columns), float(value), dtype=np.float64)
        return m

    @classmethod
    def zeros(cls, rows: int, columns: int) -> Matrix:
        return cls.filled(rows, columns, 0.0)

    @classmethod
    def identity(cls, size: int) -> Matrix:
        """
        size x size identity matrix.

        Raises:
            ValidationError: If size is 0
            MatrixIndexError: If size exceeds MAX_MATRIX_SIZE
        """
        check_size(size, 'size')
        if size == 0:
            raise ValidationError("identity size must be greater than 0")
        m = cls()
        m._data = np.eye(size, dtype=np.float64)
        return m

    @classmethod
    def from_vector(
        cls,
        values: ArrayLike,
        orientation: Orientation = 'column',
    ) -> Matrix:
        """
        Single-column (default) or single-row matrix from a 1-D sequence.

        Raises:
            ValidationError: If orientation is not 'column' or 'row'
        """
        if orientation not in ('column', 'row'):
            raise ValidationError(
                f"orientation: must be 'column' or 'row', got {orientation!r}"
            )
        line = check_array(values, 'values').ravel()
        check_size(line.shape[0], 'values')
        m = cls()
        if line.size:
            shape = (line.size, 1) if orientation == 'column' else (1, line.size)
            m._data = line.reshape(shape).copy()
        return m

    # === Queries ===

    @property
    def num_rows(self) -> int:
        return int(self._data.shape[0])

    @property
    def num_columns(self) -> int:
        return int(self._data.shape[1])

    @property
    def shape(self) -> tuple[int, int]:
        return self.num_rows, self.num_columns

    @property
    def size(self) -> int:
        """Number of elements (rows * columns)."""
        return int(self._data.size)

    @property
    def is_empty(self) -> bool:
        return self._data.size == 0

    @property
    def separators(self) -> frozenset[int]:
        """Columns preceded by an augmentation bar when printed."""
        return frozenset(self._separators)

    @property
    def float_len(self) -> int:
        """Decimal places printed for non-integral matrices."""
        return self._float_len

    def set_float_len(self, length: int) -> None:
        """
        Set decimal places used by str().

        Raises:
            ValidationError: If length is negative or above MAX_FLOAT_LEN
        """
        if length < 0 or length > MAX_FLOAT_LEN:
            raise ValidationError(
                f"float length must be between 0 and {MAX_FLOAT_LEN}, got {length}"
            )
        self._float_len = int(length)

    def get_row(self, row: int) -> NDArray[np.floating[Any]]:
        """Copy of row as a 1-D array."""
        check_index(row, self.num_rows, 'Row')
        return self._data[row, :].copy()

    def get_column(self, col: int) -> NDArray[np.floating[Any]]:
        """Copy of column as a 1-D array."""
        check_index(col, self.num_columns, 'Column')
        return self._data[:, col].copy()

    def to_vector(self) -> NDArray[np.floating[Any]]:
        """
        Values of a single-row or single-column matrix as a 1-D array.

        Raises:
            DimensionError: If the matrix has more than one row and column
        """
        if self.is_empty:
            return np.empty(0, dtype=np.float64)
        if self.num_rows != 1 and self.num_columns != 1:
            raise DimensionError(
                f"Must be only 1 row or column, got {self.num_rows}x{self.num_columns}"
            )
        return self._data.ravel().copy()

    def to_array(self) -> NDArray[np.floating[Any]]:
        """Copy of the grid; shape (0, 0) when empty."""
        return self._data.copy()

    def copy(self) -> Matrix:
        return Matrix(self)

    def __array__(self, dtype=None, copy=None):
        return np.array(self._data, dtype=dtype, copy=True)

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, col = index
        check_index(row, self.num_rows, 'Row')
        check_index(col, self.num_columns, 'Column')
        return float(self._data[row, col])

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        row, col = index
        check_index(row, self.num_rows, 'Row')
        check_index(col, self.num_columns, 'Column')
        self._data[row, col] = float(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"Matrix(rows={self.num_rows}, columns={self.num_columns})"

    def __str__(self) -> str:
        return format_matrix(self)

    # === Editing ===

    def _line(self, values: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
        line = check_array(values, name)
        if line.ndim != 1:
            raise DimensionError(
                f"{name}: expected a 1-D sequence of values, got shape {line.shape}"
            )
        return line

    def _fill_or_line(self, values: LineValues, length: int, name: str) -> NDArray[np.floating[Any]]:
        """Scalar/None -> constant line of length; sequence -> checked line."""
        if _is_scalar(values):
            if values is not None and not _is_number(values):
                raise ValidationError(
                    f"{name}: fill value must be a real number, got {values!r}"
                )
            return np.full(length, 0.0 if values is None else float(values))
        line = self._line(values, name)
        if line.shape[0] != length:
            raise DimensionError(
                f"{name}: must have {length} values to match the matrix, "
                f"got {line.shape[0]}"
            )
        return line

    def _clear_if_degenerate(self) -> None:
        if self._data.shape[0] == 0 or self._data.shape[1] == 0:
            self.clear()

    def push_back_row(self, values: LineValues = None) -> None:
        """
        Append a row at the bottom.

        values may be a sequence (on an empty matrix it sets the width), a
        scalar fill value, or None for zeros. Scalar and None need an
        existing width.

        Raises:
            MatrixIndexError: If the matrix already has MAX_MATRIX_SIZE rows
            ValidationError: If values is an empty sequence
            DimensionError: If the row length doesn't match
            EmptyMatrixError: If a fill row is pushed onto an empty matrix
        """
        check_size(self.num_rows + 1, 'rows')
        if _is_scalar(values):
            if self.is_empty:
                raise EmptyMatrixError("Must have data to add row without size")
            row = self._fill_or_line(values, self.num_columns, 'row')
        else:
            row = self._line(values, 'row')
            if row.size == 0:
                raise ValidationError("Row cannot be empty")
            if self.is_empty:
                check_size(row.size, 'columns')
                self._data = row.reshape(1, -1).copy()
                return
            row = self._fill_or_line(row, self.num_columns, 'row')
        self._data = np.vstack([self._data, row])

    def push_back_column(self, values: LineValues = None) -> None:
        """
        Append a column at the right edge.

        Same conventions as push_back_row(), with height in place of width.
        """
        check_size(self.num_columns + 1, 'columns')
        if _is_scalar(values):
            if self.is_empty:
                raise EmptyMatrixError("Must have data to add column without size")
            col = self._fill_or_line(values, self.num_rows, 'column')
        else:
            col = self._line(values, 'column')
            if col.size == 0:
                raise ValidationError("Column cannot be empty")
            if self.is_empty:
                check_size(col.size, 'rows')
                self._data = col.reshape(-1, 1).copy()
                return
            col = self._fill_or_line(col, self.num_rows, 'column')
        self._data = np.hstack([self._data, col.reshape(-1, 1)])

    def set_row(self, row: int, values: LineValues = 0.0) -> None:
        """Replace row with a sequence or a fill value (default zeros)."""
        check_index(row, self.num_rows, 'Row')
        self._data[row, :] = self._fill_or_line(values, self.num_columns, 'row')

    def set_column(self, col: int, values: LineValues = 0.0) -> None:
        """Replace column with a sequence or a fill value (default zeros)."""
        check_index(col, self.num_columns, 'Column')
        self._data[:, col] = self._fill_or_line(values, self.num_rows, 'column')

    def insert_row(self, row: int, values: LineValues = 0.0) -> None:
        """Insert before existing row index row; rows below shift down."""
        check_size(self.num_rows + 1, 'rows')
        check_index(row, self.num_rows, 'Row')
        line = self._fill_or_line(values, self.num_columns, 'row')
        self._data = np.insert(self._data, row, line, axis=0)

    def insert_column(self, col: int, values: LineValues = 0.0) -> None:
        """
        Insert before existing column index col; columns to the right shift.

        Separators at or right of col move with their columns.
        """
        check_size(self.num_columns + 1, 'columns')
        check_index(col, self.num_columns, 'Column')
        line = self._fill_or_line(values, self.num_rows, 'column')
        self._data = np.insert(self._data, col, line, axis=1)
        self._separators = {s + 1 if s >= col else s for s in self._separators}

    def swap_row(self, r1: int, r2: int) -> None:
        check_index(r1, self.num_rows, 'Row')
        check_index(r2, self.num_rows, 'Row')
        self._data[[r1, r2], :] = self._data[[r2, r1], :]

    def swap_column(self, c1: int, c2: int) -> None:
        check_index(c1, self.num_columns, 'Column')
        check_index(c2, self.num_columns, 'Column')
        self._data[:, [c1, c2]] = self._data[:, [c2, c1]]

    def pop_back_row(self) -> None:
        """Remove the last row; removing the only row clears the matrix."""
        if self.is_empty:
            raise EmptyMatrixError("No values to pop")
        self._data = self._data[:-1, :].copy()
        self._clear_if_degenerate()

    def pop_back_column(self) -> None:
        """Remove the last column; removing the only column clears the matrix."""
        if self.is_empty:
            raise EmptyMatrixError("No values to pop")
        self._data = self._data[:, :-1].copy()
        self._separators = {s for s in self._separators if s < self.num_columns}
        self._clear_if_degenerate()

    def erase_row(self, row: int) -> None:
        if self.is_empty:
            raise EmptyMatrixError("No values to erase")
        check_index(row, self.num_rows, 'Row')
        self._data = np.delete(self._data, row, axis=0)
        self._clear_if_degenerate()

    def erase_column(self, col: int) -> None:
        if self.is_empty:
            raise EmptyMatrixError("No values to erase")
        check_index(col, self.num_columns, 'Column')
        self._data = np.delete(self._data, col, axis=1)
        remaining = self.num_columns
        self._separators = {
            s - 1 if s > col else s
            for s in self._separators
        }
        self._separators = {s for s in self._separators if 0 < s < remaining}
        self._clear_if_degenerate()

    def clear(self) -> None:
        """Reset to the empty 0x0 matrix."""
        self._data = _empty_grid()
        self._separators = set()

    def augment(self, other: 'Matrix | ArrayLike', separator: bool = True) -> None:
        """
        Append other's columns to the right of this matrix.

        An empty receiver becomes a copy of other; augmenting with an empty
        matrix changes nothing. When separator is True the boundary column
        is recorded so str() draws a bar there.

        Raises:
            DimensionError: If row counts differ
            MatrixIndexError: If the result would exceed MAX_MATRIX_SIZE columns
        """
        if not isinstance(other, Matrix):
            other = Matrix(other)
        if other.is_empty:
            return
        if self.is_empty:
            self._data = other._data.copy()
            self._separators = set(other._separators)
            return
        if other.num_rows != self.num_rows:
            raise DimensionError(
                f"Cannot augment: matrix has {self.num_rows} rows, "
                f"other has {other.num_rows}"
            )
        boundary = self.num_columns
        check_size(boundary + other.num_columns, 'columns')
        self._data = np.hstack([self._data, other._data])
        if separator:
            self._separators.add(boundary)
        self._separators.update(s + boundary for s in other._separators)

    # === Arithmetic ===

    def _require_data(self, other: Matrix | None = None) -> None:
        if self.is_empty or (other is not None and other.is_empty):
            raise EmptyMatrixError(
                "Matrices must have data" if other is not None else "Matrix must have data"
            )

    def _check_same_shape(self, other: Matrix, op: str) -> None:
        self._require_data(other)
        if self.shape != other.shape:
            raise DimensionError(
                f"Matrices must have same dimensions for {op}: "
                f"{self.num_rows}x{self.num_columns} vs "
                f"{other.num_rows}x{other.num_columns}"
            )

    @staticmethod
    def _wrap(grid: NDArray[np.floating[Any]]) -> Matrix:
        m = Matrix()
        if grid.size:
            m._data = np.array(grid, dtype=np.float64, copy=True)
        return m

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other, 'addition')
        return Matrix._wrap(self._data + other._data)

    def __sub__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other, 'subtraction')
        return Matrix._wrap(self._data - other._data)

    def __iadd__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other, 'addition')
        self._data += other._data
        return self

    def __isub__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other, 'subtraction')
        self._data -= other._data
        return self

    def __neg__(self) -> Matrix:
        self._require_data()
        return Matrix._wrap(-self._data)

    def __matmul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._require_data(other)
        if self.num_columns != other.num_rows:
            raise DimensionError(
                f"Invalid matrix dimensions for multiplication: "
                f"{self.num_rows}x{self.num_columns} @ "
                f"{other.num_rows}x{other.num_columns}"
            )
        return Matrix._wrap(self._data @ other._data)

    def _times_vector(self, vector: Any) -> NDArray[np.floating[Any]]:
        self._require_data()
        line = self._line(vector, 'vector')
        if line.shape[0] != self.num_columns:
            raise DimensionError(
                f"Vector must be same size as number of columns: "
                f"expected {self.num_columns}, got {line.shape[0]}"
            )
        return self._data @ line

    def __mul__(self, other: Any) -> 'Matrix | NDArray[np.floating[Any]]':
        """Matrix product, scalar scaling, or matrix-vector product (ndarray)."""
        if isinstance(other, Matrix):
            return self @ other
        if _is_number(other):
            self._require_data()
            return Matrix._wrap(self._data * float(other))
        if isinstance(other, (list, tuple, np.ndarray)):
            return self._times_vector(other)
        return NotImplemented

    def __rmul__(self, other: Any) -> 'Matrix | NDArray[np.floating[Any]]':
        """Scalar scaling, or vector-matrix product (vector times each column)."""
        if _is_number(other):
            return self * other
        if isinstance(other, (list, tuple, np.ndarray)):
            return self.transpose()._times_vector(other)
        return NotImplemented

    def __imul__(self, other: Any) -> Matrix:
        if not _is_number(other):
            return NotImplemented
        self._require_data()
        self._data *= float(other)
        return self

    def __truediv__(self, other: Any) -> Matrix:
        if not _is_number(other):
            return NotImplemented
        self._require_data()
        if float(other) == 0.0:
            raise ValidationError("scale: division by zero")
        return Matrix._wrap(self._data / float(other))

    def __itruediv__(self, other: Any) -> Matrix:
        if not _is_number(other):
            return NotImplemented
        self._require_data()
        if float(other) == 0.0:
            raise ValidationError("scale: division by zero")
        self._data /= float(other)
        return self

    # === Linear algebra ===

    def transpose(self) -> Matrix:
        """
        Raises:
            EmptyMatrixError: If the matrix is empty
        """
        if self.is_empty:
            raise EmptyMatrixError("Matrix cannot be empty")
        return Matrix._wrap(self._data.T)

    @property
    def T(self) -> Matrix:
        return self.transpose()

    def determinant(self) -> float:
        """See pymatrix.linalg.elimination.determinant."""
        return elimination.determinant(self)

    def rref(self) -> Matrix:
        """Reduced row-echelon form; see pymatrix.linalg.elimination.rref."""
        return Matrix._wrap(elimination.rref(self))

    def inverse(self, *, strict: bool = False) -> Matrix:
        """
        Inverse matrix.

        A singular matrix gives an EMPTY matrix plus a SingularMatrixWarning,
        not an exception; check ``result.is_empty``. strict=True raises
        SingularMatrixError instead.
        """
        return Matrix._wrap(elimination.inverse(self, strict=strict))

    def qr(self, which: QRComponent | None = None) -> 'tuple[Matrix, Matrix] | Matrix':
        """
        QR decomposition by Gram-Schmidt.

        Args:
            which: None for the (Q, R) pair, 'Q' or 'R' for one factor

        Raises:
            EmptyMatrixError: If the matrix is empty
            LinearDependenceError: If the columns are linearly dependent
        """
        if which is None:
            result = decomposition.qr(self)
            return Matrix._wrap(result.Q), Matrix._wrap(result.R)
        return Matrix._wrap(decomposition.qr_component(self, which))

    def vec_dot(self, other: 'Matrix | ArrayLike | None' = None) -> float:
        """Dot product of vector-shaped matrices (self-dot when other is None)."""
        return decomposition.vec_dot(self, other)

    def eigenvalues_approx(
        self,
        tolerance: float = DEFAULT_EIGEN_TOLERANCE,
        max_iterations: int = DEFAULT_MAX_ITERATIONS,
    ) -> list[float]:
        """Real eigenvalues by unshifted QR iteration, diagonal order."""
        return eigen.eigenvalues_approx(
            self, tolerance=tolerance, max_iterations=max_iterations
        )

