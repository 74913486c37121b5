"""3-D level-set math primitives for the lsf3d package.

Re-exports all shared helpers from :mod:`_lsf_common`, then adds the 3-D
primitive level sets and the extrusion operator that turns a 2-D
cross-section level set into a cylinder along any Cartesian axis.

All functions accept and return ``numpy.ndarray`` objects and support
broadcasting over arbitrary leading batch dimensions.  A "point array" *p*
has shape ``(..., 3)``; scalar results have shape ``(...,)``.

Sign convention: positive inside, zero on the boundary, negative outside.
"""

from __future__ import annotations

from typing import Callable

import numpy as np

from _lsf_common import *  # noqa: F401, F403

from .axis import Axis, project


# ===========================================================================
# 3-D primitive level sets
# ===========================================================================

def lsSphere(p: _F, c: _F, r: float) -> _F:
    """Ball of radius *r* centred at *c*: ``1 - |p - c| / r``."""
    return 1.0 - length((p - c) / r)


def lsBox(p: _F, c: _F, s: _F) -> _F:
    """Axis-aligned box with semi-sides *s* centred at *c*."""
    return 1.0 - np.max(np.abs(p - c) / s, axis=-1)


def lsSlab(t: _F, c: float, h: float) -> _F:
    """Slab ``|t - c| <= h`` along one coordinate: ``h - |t - c|``."""
    return h - np.abs(t - c)


# ===========================================================================
# Extrusion
# ===========================================================================

def opExtrusion(p: _F, primitive2d: Callable[[_F], _F], normal: Axis, c: float, h: float) -> _F:
    """Extrude a 2-D level set along *normal* over ``[c - h, c + h]``.

    The in-plane coordinates are taken in the ``(h, v)`` order of
    :func:`lsf3d.axis.cycle`.  Inside the cross section AND inside the slab,
    combined as an intersection.
    """
    rho, t = project(p, normal)
    return opIntersection(primitive2d(rho), lsSlab(t, c, h))
