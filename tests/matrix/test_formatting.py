"""
Tests for str(Matrix).
"""

from pymatrix import Matrix
from pymatrix.matrix import format_matrix


class TestFormatting:

    def test_empty(self):
        assert str(Matrix()) == '[]'

    def test_integral_values_no_decimals(self):
        assert str(Matrix([[1, 2], [3, 4]])) == "|  1  2  |\n|  3  4  |"

    def test_columns_right_aligned(self):
        text = str(Matrix([[1, -20], [300, 4]]))
        assert text == "|    1  -20  |\n|  300    4  |"

    def test_fractional_uses_float_len(self):
        assert str(Matrix([[0.5, 1]])) == "|  0.5000  1.0000  |"

    def test_custom_float_len(self):
        m = Matrix([[1.23456]])
        m.set_float_len(2)
        assert str(m) == "|  1.23  |"

    def test_zero_printed_bare(self):
        assert str(Matrix([[0.25, 0.0]])) == "|  0.2500  0  |"

    def test_subnormal_printed_as_zero(self):
        assert str(Matrix([[1e-320, 2.5]])) == "|  0  2.5000  |"

    def test_separator(self):
        m = Matrix([[4, 2], [2, 3]])
        m.augment(Matrix.identity(2))
        assert str(m) == "|  4  2  |  1  0  |\n|  2  3  |  0  1  |"

    def test_mixed_example(self):
        m = Matrix([[1, -2.5], [10, 0]])
        m.augment(Matrix([[0], [1]]))
        expected = (
            "|   1.0000  -2.5000  |       0  |\n"
            "|  10.0000        0  |  1.0000  |"
        )
        assert str(m) == expected

    def test_near_integral_rounds_to_integer_display(self):
        # Within 10^-(float_len + 1) of an integer counts as integral
        assert str(Matrix([[2.000000001]])) == "|  2  |"

    def test_format_matrix_matches_str(self):
        m = Matrix([[1.5, 2]])
        assert format_matrix(m) == str(m)
