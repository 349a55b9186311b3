"""
Tests for pymatrix exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via MatrixError)
    - Diagnostic attributes on MatrixIndexError, LinearDependenceError,
      SingularMatrixError, ConvergenceError
    - Default attribute values (None for optional attributes)
    - SingularMatrixWarning is a RuntimeWarning, not an exception
"""

import pytest

from pymatrix.core.exceptions import (
    ConvergenceError,
    DimensionError,
    EmptyMatrixError,
    LinearDependenceError,
    MatrixError,
    MatrixIndexError,
    NumericalError,
    SingularMatrixError,
    SingularMatrixWarning,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via MatrixError."""

    @pytest.mark.parametrize("exc_type", [
        DimensionError,
        EmptyMatrixError,
        MatrixIndexError,
        LinearDependenceError,
    ])
    def test_argument_errors_are_validation_errors(self, exc_type):
        with pytest.raises(ValidationError):
            raise exc_type("bad argument")

    def test_validation_error_is_matrix_error(self):
        with pytest.raises(MatrixError):
            raise ValidationError("bad input")

    def test_singular_matrix_error_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise SingularMatrixError("singular")

    def test_singular_matrix_error_is_matrix_error(self):
        with pytest.raises(MatrixError):
            raise SingularMatrixError("singular")

    def test_convergence_error_is_matrix_error(self):
        with pytest.raises(MatrixError):
            raise ConvergenceError("did not converge", iterations=100)

    def test_convergence_error_is_not_numerical_error(self):
        """ConvergenceError inherits from MatrixError, not NumericalError."""
        err = ConvergenceError("did not converge", iterations=100)
        assert not isinstance(err, NumericalError)

    def test_linear_dependence_is_not_numerical_error(self):
        """Dependent columns are an argument problem, not a numeric failure."""
        err = LinearDependenceError("dependent", column=2)
        assert not isinstance(err, NumericalError)

    def test_warning_category(self):
        assert issubclass(SingularMatrixWarning, RuntimeWarning)
        assert not issubclass(SingularMatrixWarning, MatrixError)


# ═══════════════════════════════════════════════════════════════════════
# Simple exceptions (no extra attributes)
# ═══════════════════════════════════════════════════════════════════════


class TestSimpleExceptions:
    """ValidationError, DimensionError, EmptyMatrixError carry only a message."""

    def test_matrix_error_message(self):
        err = MatrixError("base error")
        assert str(err) == "base error"

    def test_dimension_error_message(self):
        err = DimensionError("a: matrix must be square, got 2x3")
        assert "must be square" in str(err)

    def test_empty_matrix_error_message(self):
        err = EmptyMatrixError("Matrix must have data")
        assert "have data" in str(err)


# ═══════════════════════════════════════════════════════════════════════
# Exceptions with diagnostics
# ═══════════════════════════════════════════════════════════════════════


class TestMatrixIndexError:

    def test_all_attributes(self):
        err = MatrixIndexError("Row 5 does not exist", index=5, bound=3)
        assert str(err) == "Row 5 does not exist"
        assert err.index == 5
        assert err.bound == 3

    def test_defaults_are_none(self):
        err = MatrixIndexError("out of range")
        assert err.index is None
        assert err.bound is None


class TestLinearDependenceError:

    def test_all_attributes(self):
        err = LinearDependenceError("dependent", column=2, expected_rank=3)
        assert err.column == 2
        assert err.expected_rank == 3

    def test_defaults_are_none(self):
        err = LinearDependenceError("dependent")
        assert err.column is None
        assert err.expected_rank is None


class TestSingularMatrixError:

    def test_all_attributes(self):
        err = SingularMatrixError("not invertible", matrix_name="A", determinant=0.0)
        assert str(err) == "not invertible"
        assert err.matrix_name == "A"
        assert err.determinant == 0.0

    def test_defaults_are_none(self):
        err = SingularMatrixError("singular")
        assert err.matrix_name is None
        assert err.determinant is None

    def test_catchable_with_attributes(self):
        with pytest.raises(SingularMatrixError) as exc_info:
            raise SingularMatrixError("singular", matrix_name="a")
        assert exc_info.value.matrix_name == "a"


class TestConvergenceError:

    def test_all_attributes(self):
        err = ConvergenceError(
            "QR iteration did not converge",
            iterations=500,
            final_change=0.7,
            reason="max_iterations",
            threshold=1e-12,
        )
        assert str(err) == "QR iteration did not converge"
        assert err.iterations == 500
        assert err.final_change == 0.7
        assert err.reason == "max_iterations"
        assert err.threshold == 1e-12

    def test_required_iterations(self):
        """iterations is required (positional)."""
        err = ConvergenceError("failed", 42)
        assert err.iterations == 42

    def test_defaults_are_none(self):
        err = ConvergenceError("failed", iterations=10)
        assert err.final_change is None
        assert err.reason is None
        assert err.threshold is None
