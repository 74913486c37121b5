"""Tests for _lsf_common — shared math helpers, combinators and argument checks."""

from fractions import Fraction

import numpy as np
import numpy.testing as npt
import pytest

import _lsf_common as common
from _lsf_common import InvalidArgumentError


class TestCombinators:
    a = np.array([-1.0, 0.5, 2.0])
    b = np.array([0.5, -0.5, 1.0])

    def test_union_is_max(self):
        npt.assert_array_equal(common.opUnion(self.a, self.b), [0.5, 0.5, 2.0])

    def test_intersection_is_min(self):
        npt.assert_array_equal(common.opIntersection(self.a, self.b), [-1.0, -0.5, 1.0])

    def test_subtraction(self):
        npt.assert_array_equal(common.opSubtraction(self.a, self.b), [-1.0, 0.5, -1.0])

    def test_length_last_axis(self):
        v = np.array([[3.0, 4.0], [0.0, 0.0]])
        npt.assert_allclose(common.length(v), [5.0, 0.0])


class TestExports:
    def test_public_names(self):
        assert set(common.__all__) == {
            "_F", "length", "dot", "dot2", "clamp",
            "opUnion", "opIntersection", "opSubtraction",
            "InvalidArgumentError", "chkarg", "check_positive", "is_real",
            "as_real_vector", "as_points", "as_max_cell_size",
        }


class TestChkarg:
    def test_passes(self):
        common.chkarg(True, "never raised")

    def test_formats_message(self):
        with pytest.raises(InvalidArgumentError, match='"center" should be length-3'):
            common.chkarg(False, '"%s" should be length-%d', "center", 3)

    def test_is_value_error(self):
        assert issubclass(InvalidArgumentError, ValueError)


class TestIsReal:
    @pytest.mark.parametrize("value", [1, 2.5, np.float32(1.0), np.int64(3), np.inf, Fraction(1, 2)])
    def test_real(self, value):
        assert common.is_real(value)

    @pytest.mark.parametrize("value", [True, 1j, "1", None, [1.0], np.nan, float("nan")])
    def test_not_real(self, value):
        assert not common.is_real(value)


class TestCheckPositive:
    def test_returns_float(self):
        assert common.check_positive("height", 3) == 3.0
        assert isinstance(common.check_positive("height", 3), float)

    def test_fraction(self):
        assert common.check_positive("height", Fraction(1, 2)) == 0.5

    def test_huge_int_rejected(self):
        with pytest.raises(InvalidArgumentError, match='"height" should be positive'):
            common.check_positive("height", 10 ** 400)

    @pytest.mark.parametrize("value", [0, -1.0, np.inf, "2", None, False])
    def test_rejects(self, value):
        with pytest.raises(InvalidArgumentError, match='"height" should be positive'):
            common.check_positive("height", value)


class TestAsRealVector:
    def test_list(self):
        v = common.as_real_vector("center", [0, 1, 2], 3)
        npt.assert_array_equal(v, [0.0, 1.0, 2.0])
        assert v.dtype == float

    def test_read_only(self):
        v = common.as_real_vector("center", [0, 1, 2], 3)
        with pytest.raises(ValueError):
            v[0] = 5.0

    @pytest.mark.parametrize("value", [[0, 0], [0, 0, 0, 0], ["a", 0, 0], [0, np.nan, 0], 3.0, [[0, 0, 0]]])
    def test_rejects(self, value):
        with pytest.raises(InvalidArgumentError, match='"center"'):
            common.as_real_vector("center", value, 3)


class TestAsPoints:
    def test_batch(self):
        assert common.as_points(np.zeros((4, 5, 3)), 3).shape == (4, 5, 3)

    def test_empty_batch(self):
        assert common.as_points(np.zeros((0, 3)), 3).shape == (0, 3)

    def test_wrong_columns(self):
        with pytest.raises(InvalidArgumentError, match="3 columns"):
            common.as_points(np.zeros((4, 2)), 3)

    @pytest.mark.parametrize("value", [[["a", "b", "c"]], [[0, 0, "x"]], [[0, 0], [0, 0, 0]]])
    def test_not_numeric(self, value):
        with pytest.raises(InvalidArgumentError, match='"points"'):
            common.as_points(value, 3)


class TestAsMaxCellSize:
    def test_scalar(self):
        npt.assert_array_equal(common.as_max_cell_size(2.0), [2.0, 2.0, 2.0])

    def test_inf(self):
        assert np.all(np.isinf(common.as_max_cell_size(np.inf)))

    def test_vector(self):
        npt.assert_array_equal(common.as_max_cell_size([1, 2, np.inf]), [1.0, 2.0, np.inf])

    def test_huge_int_is_unbounded(self):
        assert np.all(np.isinf(common.as_max_cell_size(10 ** 400)))

    @pytest.mark.parametrize("value", [0, -1.0, [1, 2], [1, 0, 1], "x", [1, np.nan, 1], True])
    def test_rejects(self, value):
        with pytest.raises(InvalidArgumentError, match="max_cell_size"):
            common.as_max_cell_size(value)
