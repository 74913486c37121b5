"""2D cross-section geometries and boolean operations for level-set functions."""

from __future__ import annotations

import logging
from typing import Callable, Sequence

import numpy as np
import numpy.typing as npt

from . import primitives as lsf
from .primitives import InvalidArgumentError, as_points, as_real_vector, check_positive, chkarg

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Type aliases
# ---------------------------------------------------------------------------
_Array = npt.NDArray[np.floating]
_LSFFunc = Callable[[_Array], _Array]


def _as_bound2d(bound) -> _Array:
    try:
        b = np.asarray(bound, dtype=float)
    except (TypeError, ValueError):
        b = None
    chkarg(
        b is not None and b.shape == (2, 2) and bool(np.all(np.isfinite(b)))
        and bool(np.all(b[:, 0] <= b[:, 1])),
        '"bound" should be 2x2 array of [min, max] rows with finite real elements.',
    )
    b = b.copy()
    b.setflags(write=False)
    return b


# ===========================================================================
# Base class
# ===========================================================================

class CrossSection2D:
    """Base class for 2D cross sections described by a level-set function.

    A ``CrossSection2D`` wraps a callable ``func(p) -> levels`` where *p* is
    a ``(..., 2)`` array of in-plane points and the return value is a
    ``(...)`` array, positive inside and negative outside, together with a
    sound ``(2, 2)`` bound ``[[h_min, h_max], [v_min, v_max]]``.

    Implements:
    - Boolean operations: :meth:`union`, :meth:`subtract`, :meth:`intersect`
    - Transforms:         :meth:`translate`
    """

    def __init__(self, func: _LSFFunc, bound) -> None:
        self._func = func
        self._bound = _as_bound2d(bound)
        logger.debug("%s: bound %s", self.__class__.__name__, self._bound.tolist())

    def level_set(self, p) -> _Array:
        """Evaluate the level set at *p* (shape ``(..., 2)``)."""
        return self._func(as_points(p, 2))

    def __call__(self, p) -> _Array:
        return self.level_set(p)

    def bounding_box(self) -> _Array:
        """Return the ``(2, 2)`` in-plane bound."""
        return self._bound.copy()

    # ------------------------------------------------------------------
    # Boolean operations
    # ------------------------------------------------------------------

    def union(self, other: CrossSection2D) -> CrossSection2D:
        """Return the union (max) of this cross section and *other*."""
        return Union2D(self, other)

    def subtract(self, other: CrossSection2D) -> CrossSection2D:
        """Subtract *other* from this cross section."""
        return Subtraction2D(self, other)

    def intersect(self, other: CrossSection2D) -> CrossSection2D:
        """Return the intersection (min) of this cross section and *other*."""
        return Intersection2D(self, other)

    # ------------------------------------------------------------------
    # Transforms
    # ------------------------------------------------------------------

    def translate(self, th: float, tv: float) -> CrossSection2D:
        """Translate by ``(th, tv)``."""
        t = as_real_vector("t", (th, tv), 2)
        return CrossSection2D(lambda p: self._func(p - t), self._bound + t[:, None])


# ===========================================================================
# Primitive cross sections
# ===========================================================================

class Circle2D(CrossSection2D):
    """Disk centred at *center* with given *radius*."""

    def __init__(self, center: Sequence[float], radius: float) -> None:
        c = as_real_vector("center", center, 2)
        r = check_positive("radius", radius)
        self._center = c
        self._radius = r
        super().__init__(lambda p: lsf.lsCircle(p, c, r), np.stack([c - r, c + r], axis=-1))

    @property
    def center(self) -> _Array:
        return self._center

    @property
    def radius(self) -> float:
        return self._radius


class Ellipse2D(CrossSection2D):
    """Axis-aligned ellipse centred at *center* with *semiaxes* ``(a, b)``."""

    def __init__(self, center: Sequence[float], semiaxes: Sequence[float]) -> None:
        c = as_real_vector("center", center, 2)
        ab = as_real_vector("semiaxes", semiaxes, 2)
        chkarg(bool(np.all(ab > 0)), '"semiaxes" should have positive elements.')
        self._center = c
        self._semiaxes = ab
        super().__init__(lambda p: lsf.lsEllipse(p, c, ab), np.stack([c - ab, c + ab], axis=-1))

    @property
    def center(self) -> _Array:
        return self._center

    @property
    def semiaxes(self) -> _Array:
        return self._semiaxes


class CircularShell2D(CrossSection2D):
    """Annulus centred at *center* between radii *r1* and *r2*.

    The radii may be given in either order; they are stored sorted as
    ``r_inner <= r_outer``.
    """

    def __init__(self, center: Sequence[float], r1: float, r2: float) -> None:
        c = as_real_vector("center", center, 2)
        r1 = check_positive("r1", r1)
        r2 = check_positive("r2", r2)
        r, R = sorted((r1, r2))
        self._center = c
        self._r_inner = r
        self._r_outer = R
        super().__init__(lambda p: lsf.lsCircularShell(p, c, r, R), np.stack([c - R, c + R], axis=-1))

    @property
    def center(self) -> _Array:
        return self._center

    @property
    def r_inner(self) -> float:
        return self._r_inner

    @property
    def r_outer(self) -> float:
        return self._r_outer


class Rectangle2D(CrossSection2D):
    """Axis-aligned rectangle given by its ``(2, 2)`` bound."""

    def __init__(self, bound) -> None:
        b = _as_bound2d(bound)
        chkarg(bool(np.all(b[:, 0] < b[:, 1])), '"bound" should have min < max on each axis.')
        c = b.mean(axis=1)
        s = (b[:, 1] - b[:, 0]) / 2.0
        super().__init__(lambda p: lsf.lsRectangle(p, c, s), b)


class Polygon2D(CrossSection2D):
    """Simple polygon from an ``(N, 2)`` array of *vertices* (N >= 3)."""

    def __init__(self, vertices) -> None:
        try:
            v = np.asarray(vertices, dtype=float)
        except (TypeError, ValueError):
            v = None
        chkarg(
            v is not None and v.ndim == 2 and v.shape[1] == 2 and v.shape[0] >= 3
            and bool(np.all(np.isfinite(v))),
            '"vertices" should be Nx2 array (N >= 3) with real elements.',
        )
        chkarg(bool(np.all(np.any(v != np.roll(v, -1, axis=0), axis=1))),
               '"vertices" should not contain repeated consecutive points.')
        v = v.copy()
        v.setflags(write=False)
        self._vertices = v
        super().__init__(lambda p: lsf.lsPolygon(p, v), np.stack([v.min(axis=0), v.max(axis=0)], axis=-1))

    @property
    def vertices(self) -> _Array:
        return self._vertices


# ===========================================================================
# Boolean operation classes
# ===========================================================================

def _check_sections(sections) -> None:
    chkarg(len(sections) > 0, "at least one cross section is required.")
    for s in sections:
        if not isinstance(s, CrossSection2D):
            raise InvalidArgumentError(f"expected CrossSection2D, got {type(s).__name__}.")


class Union2D(CrossSection2D):
    """Union of two or more 2-D cross sections (maximum level set)."""

    def __init__(self, *sections: CrossSection2D) -> None:
        _check_sections(sections)
        self._sections = sections

        def _lsf(p: _Array) -> _Array:
            d = sections[0].level_set(p)
            for s in sections[1:]:
                d = lsf.opUnion(d, s.level_set(p))
            return d

        bounds = np.stack([s.bounding_box() for s in sections])
        super().__init__(_lsf, np.stack([bounds[:, :, 0].min(axis=0), bounds[:, :, 1].max(axis=0)], axis=-1))

    @property
    def sections(self) -> tuple:
        return self._sections


class Intersection2D(CrossSection2D):
    """Intersection of two or more 2-D cross sections (minimum level set)."""

    def __init__(self, *sections: CrossSection2D) -> None:
        _check_sections(sections)
        self._sections = sections

        def _lsf(p: _Array) -> _Array:
            d = sections[0].level_set(p)
            for s in sections[1:]:
                d = lsf.opIntersection(d, s.level_set(p))
            return d

        bounds = np.stack([s.bounding_box() for s in sections])
        lo = bounds[:, :, 0].max(axis=0)
        hi = np.maximum(bounds[:, :, 1].min(axis=0), lo)
        super().__init__(_lsf, np.stack([lo, hi], axis=-1))

    @property
    def sections(self) -> tuple:
        return self._sections


class Subtraction2D(CrossSection2D):
    """Subtract *cutter* from *base*."""

    def __init__(self, base: CrossSection2D, cutter: CrossSection2D) -> None:
        _check_sections((base, cutter))
        self._sections = (base, cutter)
        super().__init__(
            lambda p: lsf.opSubtraction(base.level_set(p), cutter.level_set(p)),
            base.bounding_box(),
        )

    @property
    def sections(self) -> tuple:
        return self._sections
