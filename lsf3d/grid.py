"""Grid sampling utilities for 3D level-set shapes."""

from __future__ import annotations

import logging
import os
from typing import Optional, Tuple

import numpy as np
import numpy.typing as npt

from .config import DEFAULT_RESOLUTION
from .geometry import Shape
from .primitives import chkarg

logger = logging.getLogger(__name__)

_Array = npt.NDArray[np.floating]
_Bounds3D = Tuple[Tuple[float, float], Tuple[float, float], Tuple[float, float]]
_Resolution3D = Tuple[int, int, int]


def cell_centers(bounds: _Bounds3D, resolution: _Resolution3D) -> _Array:
    """Return the ``(nz, ny, nx, 3)`` cell-centre points of a uniform grid."""
    (x0, x1), (y0, y1), (z0, z1) = bounds
    nx, ny, nz = resolution
    chkarg(nx > 0 and ny > 0 and nz > 0, '"resolution" should have positive elements.')

    xs = np.linspace(x0, x1, nx, endpoint=False) + (x1 - x0) / (2.0 * nx)
    ys = np.linspace(y0, y1, ny, endpoint=False) + (y1 - y0) / (2.0 * ny)
    zs = np.linspace(z0, z1, nz, endpoint=False) + (z1 - z0) / (2.0 * nz)

    Z, Y, X = np.meshgrid(zs, ys, xs, indexing="ij")
    return np.stack([X, Y, Z], axis=-1)


def sample_levelset_3d(
    shape: Shape,
    bounds: Optional[_Bounds3D] = None,
    resolution: _Resolution3D = (DEFAULT_RESOLUTION,) * 3,
) -> _Array:
    """Sample *shape* on a uniform 3-D cell-centred grid.

    Parameters
    ----------
    shape:
        A 3-D shape whose ``level_set()`` method accepts ``(..., 3)`` arrays.
    bounds:
        ``((x0, x1), (y0, y1), (z0, z1))`` physical extents of the domain.
        Defaults to ``shape.bounding_box()``.
    resolution:
        ``(nx, ny, nz)`` number of cells along each axis.

    Returns
    -------
    numpy.ndarray
        Shape ``(nz, ny, nx)`` array of level-set values, z-first indexing.
    """
    if bounds is None:
        bounds = shape.bounding_box()
    p = cell_centers(bounds, resolution)
    logger.debug("Sampling %s on %s cells", shape.__class__.__name__, tuple(resolution))
    return shape.level_set(p)


def resolution_for(shape: Shape, bounds: Optional[_Bounds3D] = None,
                   default: int = DEFAULT_RESOLUTION) -> Tuple[int, int, int]:
    """Smallest per-axis cell counts honouring ``shape.max_cell_size()``.

    Axes whose maximum cell size is ``inf`` get *default* cells.
    """
    b = shape.bounding_box() if bounds is None else np.asarray(bounds, dtype=float)
    dl = shape.max_cell_size()
    extent = b[:, 1] - b[:, 0]
    res = []
    for L, d in zip(extent, dl):
        if np.isinf(d):
            res.append(default)
        else:
            res.append(max(1, int(np.ceil(L / d))))
    return tuple(res)


def save_npy(path: str, phi: _Array) -> None:
    """Save *phi* array to *path* (creates parent directories if needed)."""
    out_dir = os.path.dirname(path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    np.save(path, phi)
