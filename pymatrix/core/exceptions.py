"""
Exception hierarchy for pymatrix.

All exceptions inherit from MatrixError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class MatrixError(Exception):
    """Base exception for all pymatrix errors."""
    pass


class ValidationError(MatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Raised when a matrix is not square where a square matrix is required,
    when rows are ragged, or when two operands have incompatible shapes.
    """
    pass


class EmptyMatrixError(ValidationError):
    """
    Operation attempted on an empty matrix.

    Raised when an operation structurally requires data (a computing
    operation, a fill-valued append, a pop or erase) and the matrix
    is the canonical 0x0 empty matrix.
    """
    pass


class MatrixIndexError(ValidationError):
    """
    Row/column index or requested size is out of range.

    Attributes:
        index: The offending index or size, if available
        bound: The exclusive upper bound it was checked against
    """

    def __init__(
        self,
        message: str,
        index: int | None = None,
        bound: int | None = None
    ):
        super().__init__(message)
        self.index = index
        self.bound = bound


class LinearDependenceError(ValidationError):
    """
    Columns are linearly dependent.

    Raised by Gram-Schmidt QR when a column has no component orthogonal
    to the columns before it.

    Attributes:
        column: Index of the first dependent column
        expected_rank: Rank required for the decomposition (column count)
    """

    def __init__(
        self,
        message: str,
        column: int | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(message)
        self.column = column
        self.expected_rank = expected_rank


class NumericalError(MatrixError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Raised when a matrix operation requires invertibility but the
    determinant is zero-classified, and the caller asked for strict
    behaviour.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        determinant: Determinant that was computed, if available
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        determinant: float | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.determinant = determinant


class ConvergenceError(MatrixError):
    """
    Iterative algorithm failed to converge.

    Raised when the QR eigenvalue iteration fails to reach upper
    triangular form within the maximum number of iterations.

    Attributes:
        iterations: Number of iterations completed
        final_change: Largest remaining sub-diagonal magnitude
        reason: Why convergence failed (e.g., 'max_iterations')
        threshold: The convergence threshold that was not met
    """

    def __init__(
        self,
        message: str,
        iterations: int,
        final_change: float | None = None,
        reason: str | None = None,
        threshold: float | None = None
    ):
        super().__init__(message)
        self.iterations = iterations
        self.final_change = final_change
        self.reason = reason
        self.threshold = threshold


class SingularMatrixWarning(RuntimeWarning):
    """
    Emitted by inverse() when it returns the empty-matrix sentinel.

    Escalate with warnings.simplefilter('error', SingularMatrixWarning)
    or call inverse(strict=True) to get SingularMatrixError instead.
    """
    pass
