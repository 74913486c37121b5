"""Tests for lsf3d/primitives.py — 3-D level sets and the extrusion operator."""

import numpy as np
import numpy.testing as npt
import pytest

from lsf3d import Axis
from lsf3d import primitives as lsf
from lsf2d import primitives as lsf2d  # 2D level sets needed for opExtrusion tests


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _p3(*xyz) -> np.ndarray:
    """Single 3-D point as shape ``(1, 3)``."""
    return np.array([list(xyz)], dtype=float)


def _grid3(n: int = 8) -> np.ndarray:
    """Uniform ``n³`` grid of 3-D points in ``[-1, 1]³`` (shape ``(n, n, n, 3)``)."""
    lin = np.linspace(-1.0, 1.0, n)
    Z, Y, X = np.meshgrid(lin, lin, lin, indexing="ij")
    return np.stack([X, Y, Z], axis=-1)


class TestSphere:
    c = np.array([0.0, 0.0, 1.0])

    def test_center(self):
        npt.assert_allclose(lsf.lsSphere(_p3(0, 0, 1), self.c, 0.5), [1.0])

    def test_on_surface(self):
        npt.assert_allclose(lsf.lsSphere(_p3(0, 0.5, 1), self.c, 0.5), [0.0], atol=1e-12)

    def test_outside(self):
        npt.assert_allclose(lsf.lsSphere(_p3(1, 0, 1), self.c, 0.5), [-1.0])

    def test_batch(self):
        assert lsf.lsSphere(_grid3(4), self.c, 0.5).shape == (4, 4, 4)


class TestBox:
    c = np.zeros(3)
    s = np.array([0.5, 0.25, 1.0])

    def test_center(self):
        npt.assert_allclose(lsf.lsBox(_p3(0, 0, 0), self.c, self.s), [1.0])

    def test_on_face(self):
        npt.assert_allclose(lsf.lsBox(_p3(0, 0.25, 0.3), self.c, self.s), [0.0], atol=1e-12)

    def test_outside(self):
        assert lsf.lsBox(_p3(0, 0, 1.2), self.c, self.s)[0] < 0


class TestSlab:
    def test_values(self):
        npt.assert_allclose(lsf.lsSlab(np.array([0.0, 1.0, 2.0, 3.0]), 1.0, 1.0), [0.0, 1.0, 0.0, -1.0])


class TestExtrusion:
    @staticmethod
    def _disk(q):
        return lsf2d.lsCircle(q, np.zeros(2), 0.5)

    def test_inside(self):
        assert lsf.opExtrusion(_p3(0, 0, 0), self._disk, Axis.Z, 0.0, 0.2)[0] > 0

    def test_outside_axially(self):
        assert lsf.opExtrusion(_p3(0, 0, 0.3), self._disk, Axis.Z, 0.0, 0.2)[0] < 0

    def test_outside_radially(self):
        assert lsf.opExtrusion(_p3(0.6, 0, 0), self._disk, Axis.Z, 0.0, 0.2)[0] < 0

    def test_is_min_of_parts(self):
        p = _grid3(5)
        expected = np.minimum(self._disk(p[..., :2]), 0.2 - np.abs(p[..., 2] - 0.1))
        npt.assert_allclose(lsf.opExtrusion(p, self._disk, Axis.Z, 0.1, 0.2), expected)

    def test_along_x_uses_yz_plane(self):
        # along X the cross section lives in (y, z)
        assert lsf.opExtrusion(_p3(0.15, 0.4, 0.0), self._disk, Axis.X, 0.0, 0.2)[0] > 0
        assert lsf.opExtrusion(_p3(0.4, 0.0, 0.0), self._disk, Axis.X, 0.0, 0.2)[0] < 0

    def test_batch_shape(self):
        assert lsf.opExtrusion(_grid3(4), self._disk, Axis.Y, 0.0, 0.2).shape == (4, 4, 4)
