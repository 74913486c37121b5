"""Tests for lsf3d grid utilities."""

import os
import tempfile

import numpy as np
import numpy.testing as npt
import pytest

from lsf3d import (
    Axis, CircularShellCylinder, InvalidArgumentError, Sphere,
    cell_centers, resolution_for, sample_levelset_3d, save_npy,
)


def _shell(**kw):
    return CircularShellCylinder(Axis.Z, 100.0, (0.0, 0.0, 50.0), 50.0, 100.0, **kw)


class TestCellCenters:
    def test_shape_and_values(self):
        p = cell_centers(((0, 2), (0, 4), (0, 1)), (2, 4, 1))
        assert p.shape == (1, 4, 2, 3)
        npt.assert_allclose(p[0, 0, 0], [0.5, 0.5, 0.5])
        npt.assert_allclose(p[0, 3, 1], [1.5, 3.5, 0.5])

    def test_bad_resolution(self):
        with pytest.raises(InvalidArgumentError):
            cell_centers(((0, 1), (0, 1), (0, 1)), (1, 0, 1))


class TestSampleLevelset3D:
    def test_output_shape(self):
        phi = sample_levelset_3d(Sphere((0, 0, 0), 0.3), ((-1, 1), (-1, 1), (-1, 1)), (16, 16, 16))
        assert phi.shape == (16, 16, 16)

    def test_non_cube(self):
        phi = sample_levelset_3d(Sphere((0, 0, 0), 0.3), ((-1, 1), (-1, 1), (-1, 1)), (8, 16, 32))
        assert phi.shape == (32, 16, 8)

    def test_defaults_to_bounding_box(self):
        phi = sample_levelset_3d(_shell(), resolution=(8, 8, 4))
        assert phi.shape == (4, 8, 8)
        assert (phi > 0).any()
        assert (phi < 0).any()

    def test_shell_hole_on_axis(self):
        phi = sample_levelset_3d(_shell(), resolution=(9, 9, 3))
        # centre column lies inside the inner radius
        assert np.all(phi[:, 4, 4] < 0)
        # (x, y) = (-66.7, 0) lies in the ring at mid-height
        assert phi[1, 4, 1] > 0


class TestResolutionFor:
    def test_from_max_cell_size(self):
        assert resolution_for(_shell(max_cell_size=25.0)) == (8, 8, 4)

    def test_rounds_up(self):
        assert resolution_for(_shell(max_cell_size=(30.0, 200.0, 1000.0))) == (7, 1, 1)

    def test_unbounded_uses_default(self):
        assert resolution_for(_shell(), default=5) == (5, 5, 5)

    def test_mixed(self):
        assert resolution_for(_shell(max_cell_size=(np.inf, 50.0, np.inf)), default=3) == (3, 4, 3)


class TestSaveNpy3D:
    def test_round_trip(self):
        phi = sample_levelset_3d(_shell(), resolution=(4, 4, 4))
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "phi3d.npy")
            save_npy(path, phi)
            loaded = np.load(path)
        npt.assert_array_equal(phi, loaded)

    def test_creates_nested_dirs(self):
        phi = np.zeros((4, 4, 4))
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "a", "b", "phi.npy")
            save_npy(path, phi)
            assert os.path.isfile(path)
