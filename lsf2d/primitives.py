"""2-D level-set math primitives for the lsf2d package.

Re-exports all shared helpers from :mod:`_lsf_common`, then adds the 2-D
cross-section level sets used to build cylinders.

All functions accept and return ``numpy.ndarray`` objects and support
broadcasting over arbitrary leading batch dimensions.  A "point array" *p*
has shape ``(..., 2)``; scalar results have shape ``(...,)``.

Sign convention: positive inside, zero on the boundary, negative outside.
The circular and elliptic level sets are normalized by the radius (they are
not distances), so ``1`` is reached only at the centre.
"""

from __future__ import annotations

import numpy as np

from _lsf_common import *  # noqa: F401, F403  — re-export shared helpers


# ===========================================================================
# 2-D cross-section level sets
# ===========================================================================

def lsCircle(p: _F, c: _F, r: float) -> _F:
    """Disk of radius *r* centred at *c*: ``1 - |p - c| / r``."""
    return 1.0 - length((p - c) / r)


def lsEllipse(p: _F, c: _F, ab: _F) -> _F:
    """Ellipse with semi-axes *ab* = ``(a, b)`` centred at *c*."""
    return 1.0 - length((p - c) / ab)


def lsCircleOutside(p: _F, c: _F, r: float) -> _F:
    """Complement of the disk of radius *r*: ``|p - c| / r - 1``."""
    return length((p - c) / r) - 1.0


def lsCircularShell(p: _F, c: _F, r: float, R: float) -> _F:
    """Annulus between radii *r* (inner) and *R* (outer) centred at *c*.

    Inside *R* and outside *r*, combined as an intersection.  When
    ``r == R`` the annulus has no interior and the level set is non-positive
    everywhere.
    """
    return opIntersection(lsCircle(p, c, R), lsCircleOutside(p, c, r))


def lsRectangle(p: _F, c: _F, s: _F) -> _F:
    """Axis-aligned rectangle with semi-sides *s* centred at *c*."""
    return 1.0 - np.max(np.abs(p - c) / s, axis=-1)


def lsPolygon(p: _F, v: _F) -> _F:
    """Simple polygon from *N* vertices *v* (shape ``(N, 2)``).

    Signed Euclidean distance to the polygon boundary, positive inside
    (even-odd rule).  Vertex order may be clockwise or counter-clockwise.
    """
    N = v.shape[0]
    d = dot2(p - v[0])
    s = -np.ones(p.shape[:-1])
    for i in range(N):
        j = (i + 1) % N
        e = v[j] - v[i]
        w = p - v[i]
        b = w - e * clamp(dot(w, e) / dot2(e), 0.0, 1.0)[..., None]
        d = np.minimum(d, dot2(b))
        cond = np.array([
            p[..., 1] >= v[i][1],
            p[..., 1] < v[j][1],
            e[0] * w[..., 1] > e[1] * w[..., 0],
        ])
        s = np.where(np.all(cond, axis=0) | np.all(~cond, axis=0), -s, s)
    return s * np.sqrt(d)
