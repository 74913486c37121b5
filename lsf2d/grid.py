"""Grid sampling utilities for 2D cross-section level sets."""

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np
import numpy.typing as npt

from .geometry import CrossSection2D
from .primitives import chkarg

_Array = npt.NDArray[np.floating]
_Bounds2D = Tuple[Tuple[float, float], Tuple[float, float]]
_Resolution2D = Tuple[int, int]


def sample_levelset_2d(
    section: CrossSection2D,
    resolution: _Resolution2D,
    bounds: Optional[_Bounds2D] = None,
) -> _Array:
    """Sample *section* on a uniform 2-D cell-centred grid.

    Parameters
    ----------
    section:
        A 2-D cross section whose ``level_set()`` method accepts ``(..., 2)`` arrays.
    resolution:
        ``(nh, nv)`` number of cells along each in-plane axis.
    bounds:
        ``((h0, h1), (v0, v1))`` physical extents of the domain.  Defaults to
        ``section.bounding_box()``.

    Returns
    -------
    numpy.ndarray
        Shape ``(nv, nh)`` array of level-set values, row-major (v first).
    """
    if bounds is None:
        bounds = section.bounding_box()
    (h0, h1), (v0, v1) = bounds
    nh, nv = resolution
    chkarg(nh > 0 and nv > 0, '"resolution" should have positive elements.')

    hs = np.linspace(h0, h1, nh, endpoint=False) + (h1 - h0) / (2.0 * nh)
    vs = np.linspace(v0, v1, nv, endpoint=False) + (v1 - v0) / (2.0 * nv)

    V, H = np.meshgrid(vs, hs, indexing="ij")
    p = np.stack([H, V], axis=-1)
    return section.level_set(p)
