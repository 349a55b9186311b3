"""
Tests for the linear algebra methods on Matrix.

The kernels themselves are covered in tests/linalg; these check that the
methods return Matrix values and never modify the receiver.
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose

from pymatrix import Matrix
from pymatrix.core.exceptions import (
    ConvergenceError,
    DimensionError,
    LinearDependenceError,
    SingularMatrixError,
    SingularMatrixWarning,
)


class TestMatrixLinalg:

    def test_determinant(self, symmetric_2x2):
        assert symmetric_2x2.determinant() == pytest.approx(8.0)

    def test_rref(self):
        result = Matrix([[2, 4], [1, 3]]).rref()
        assert isinstance(result, Matrix)
        assert_allclose(result.to_array(), np.eye(2), atol=1e-14)

    def test_inverse(self, symmetric_2x2):
        result = symmetric_2x2.inverse()
        assert isinstance(result, Matrix)
        assert_allclose((symmetric_2x2 @ result).to_array(), np.eye(2), atol=1e-14)

    def test_inverse_singular_is_empty(self):
        with pytest.warns(SingularMatrixWarning):
            result = Matrix([[1, 2], [2, 4]]).inverse()
        assert result.is_empty

    def test_inverse_strict(self):
        with pytest.raises(SingularMatrixError):
            Matrix([[0, 0], [0, 0]]).inverse(strict=True)

    def test_inverse_non_square(self):
        with pytest.raises(DimensionError):
            Matrix([[1, 2, 3]]).inverse()

    def test_qr_pair(self, symmetric_2x2):
        q, r = symmetric_2x2.qr()
        assert isinstance(q, Matrix) and isinstance(r, Matrix)
        assert_allclose((q @ r).to_array(), symmetric_2x2.to_array(), atol=1e-14)

    def test_qr_single_factor(self, symmetric_2x2):
        q, r = symmetric_2x2.qr()
        assert symmetric_2x2.qr('Q') == q
        assert symmetric_2x2.qr('R') == r

    def test_qr_dependent(self):
        with pytest.raises(LinearDependenceError):
            Matrix([[1, 2], [0, 0]]).qr()

    def test_vec_dot(self):
        v = Matrix.from_vector([1, 2, 2])
        assert v.vec_dot() == 9.0
        assert v.vec_dot(Matrix.from_vector([1, 0, 1], 'row')) == 3.0

    def test_eigenvalues(self):
        assert_allclose(Matrix([[2, 0], [0, 3]]).eigenvalues_approx(), [2.0, 3.0])

    def test_eigenvalues_complex(self, rotation_2x2):
        with pytest.raises(ConvergenceError):
            rotation_2x2.eigenvalues_approx(max_iterations=25)


class TestReceiverUnchanged:
    """Every kernel method works on a private copy."""

    @pytest.fixture
    def m(self):
        return Matrix([[0, 2, 1], [3, 1, 4], [2, 5, 1]])

    @pytest.mark.parametrize("method", [
        lambda m: m.determinant(),
        lambda m: m.rref(),
        lambda m: m.inverse(),
        lambda m: m.qr(),
        lambda m: m.qr('R'),
        lambda m: m.transpose(),
        lambda m: m * 2,
        lambda m: m @ m,
    ])
    def test_no_mutation(self, m, method):
        before = m.to_array()
        method(m)
        np.testing.assert_array_equal(m.to_array(), before)
