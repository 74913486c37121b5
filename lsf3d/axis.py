"""Cartesian axes and the cyclic permutation used to extrude cross sections.

For a cylinder aligned with a *normal* axis ``n``, the in-plane
(horizontal, vertical) axes ``(h, v)`` are chosen so that ``(n, h, v)`` is a
cyclic rotation of ``(X, Y, Z)``:

=======  ===========
normal   (h, v, n)
=======  ===========
X        (Y, Z, X)
Y        (Z, X, Y)
Z        (X, Y, Z)
=======  ===========

This keeps the ``(h, v, n)`` frame right-handed for every choice of ``n``.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Tuple

import numpy as np
import numpy.typing as npt

from _lsf_common import InvalidArgumentError, as_points

_Array = npt.NDArray[np.floating]

__all__ = ["Axis", "cycle", "project", "embed"]


class Axis(IntEnum):
    """One of the three Cartesian axes; the value is the coordinate column."""

    X = 0
    Y = 1
    Z = 2

    @property
    def next(self) -> Axis:
        """Cyclic successor: X -> Y -> Z -> X."""
        return Axis((self.value + 1) % len(Axis))

    @classmethod
    def parse(cls, value) -> Axis:
        """Return *value* as an :class:`Axis`.

        Accepts an ``Axis`` member or a case-insensitive name ``"x"``,
        ``"y"`` or ``"z"``.
        """
        if isinstance(value, Axis):
            return value
        if isinstance(value, str) and value.upper() in cls.__members__:
            return cls[value.upper()]
        raise InvalidArgumentError(f'"normal_axis" should be instance of Axis, got {value!r}.')


def cycle(normal: Axis) -> Tuple[Axis, Axis, Axis]:
    """Return ``(h, v, n)`` for the given *normal* axis."""
    n = Axis.parse(normal)
    h = n.next
    return h, h.next, n


def project(p, normal: Axis) -> Tuple[_Array, _Array]:
    """Split ``(..., 3)`` points into in-plane ``(..., 2)`` and normal ``(...)`` parts."""
    h, v, n = cycle(normal)
    p = as_points(p, 3)
    return p[..., [int(h), int(v)]], p[..., int(n)]


def embed(rho, t, normal: Axis) -> _Array:
    """Inverse of :func:`project`: rebuild ``(..., 3)`` points from ``(rho, t)``."""
    h, v, n = cycle(normal)
    rho = as_points(rho, 2)
    t = np.asarray(t, dtype=float)
    p = np.empty(np.broadcast_shapes(rho.shape[:-1], t.shape) + (3,))
    p[..., h] = rho[..., 0]
    p[..., v] = rho[..., 1]
    p[..., n] = t
    return p
