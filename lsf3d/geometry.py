"""3D shapes and boolean operations for level-set functions."""

from __future__ import annotations

import logging
from typing import Callable, Sequence, Union as _TUnion

import numpy as np
import numpy.typing as npt

from lsf2d.geometry import (
    Circle2D,
    CircularShell2D,
    CrossSection2D,
    Ellipse2D,
    Polygon2D,
)

from . import primitives as lsf
from .axis import Axis, cycle
from .config import DEFAULT_MAX_CELL_SIZE
from .primitives import (
    InvalidArgumentError,
    as_max_cell_size,
    as_points,
    as_real_vector,
    check_positive,
    chkarg,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Type aliases
# ---------------------------------------------------------------------------
_Array = npt.NDArray[np.floating]
_LSFFunc = Callable[[_Array], _Array]
_CellSize = _TUnion[float, Sequence[float]]


def _as_bound3d(bound) -> _Array:
    try:
        b = np.asarray(bound, dtype=float)
    except (TypeError, ValueError):
        b = None
    chkarg(
        b is not None and b.shape == (3, 2) and bool(np.all(np.isfinite(b)))
        and bool(np.all(b[:, 0] <= b[:, 1])),
        '"bounds" should be 3x2 array of [min, max] rows with finite real elements.',
    )
    b = b.copy()
    b.setflags(write=False)
    return b


# ===========================================================================
# Base class
# ===========================================================================

class Shape:
    """Base class for 3D shapes described by a level-set function.

    A ``Shape`` wraps a callable ``func(p) -> levels`` where *p* is a
    ``(..., 3)`` array of points and the return value is a ``(...)`` array,
    positive inside, zero on the boundary and negative outside.  It also
    carries an axis-aligned bounding box, which must be sound: the level set
    is non-positive everywhere outside it.

    This is the whole contract a mesher relies on:

    - :meth:`level_set` — vectorized evaluation over a batch of points
    - :meth:`bounding_box` — ``(3, 2)`` array of ``[min, max]`` per axis
    - :meth:`max_cell_size` — advisory ``(3,)`` upper bound on grid cell sizes

    Concrete shapes pass their level set to ``super().__init__``; ``Shape``
    may also be used directly to wrap a custom level-set function.

    Implements:
    - Boolean operations: :meth:`union`, :meth:`subtract`, :meth:`intersect`
      (also ``|``, ``-`` and ``&``)
    """

    def __init__(self, func: _LSFFunc, bounds, max_cell_size: _CellSize = DEFAULT_MAX_CELL_SIZE) -> None:
        self._func = func
        self._bounds = _as_bound3d(bounds)
        self._max_cell_size = as_max_cell_size(max_cell_size)
        logger.debug("%s: bounding box %s", self.__class__.__name__, self._bounds.tolist())

    def level_set(self, p) -> _Array:
        """Evaluate the level set at *p* (shape ``(..., 3)``)."""
        return self._func(as_points(p, 3))

    def __call__(self, p) -> _Array:
        return self.level_set(p)

    def bounding_box(self) -> _Array:
        """Return the ``(3, 2)`` bounding box, one ``[min, max]`` row per axis."""
        return self._bounds.copy()

    def max_cell_size(self) -> _Array:
        """Return the ``(3,)`` maximum grid cell size allowed inside the shape."""
        return self._max_cell_size.copy()

    # ------------------------------------------------------------------
    # Boolean operations
    # ------------------------------------------------------------------

    def union(self, other: Shape) -> Shape:
        """Return the union (max) of this shape and *other*."""
        return Union(self, other)

    def subtract(self, other: Shape) -> Shape:
        """Subtract *other* from this shape."""
        return Subtraction(self, other)

    def intersect(self, other: Shape) -> Shape:
        """Return the intersection (min) of this shape and *other*."""
        return Intersection(self, other)

    def __or__(self, other: Shape) -> Shape:
        return Union(self, other)

    def __and__(self, other: Shape) -> Shape:
        return Intersection(self, other)

    def __sub__(self, other: Shape) -> Shape:
        return Subtraction(self, other)



# ===========================================================================
# Primitive shapes
# ===========================================================================

class Box(Shape):
    """Axis-aligned box given by *bounds* ``[[x0, x1], [y0, y1], [z0, z1]]``."""

    def __init__(self, bounds, max_cell_size: _CellSize = DEFAULT_MAX_CELL_SIZE) -> None:
        b = _as_bound3d(bounds)
        chkarg(bool(np.all(b[:, 0] < b[:, 1])), '"bounds" should have min < max on each axis.')
        c = b.mean(axis=1)
        s = (b[:, 1] - b[:, 0]) / 2.0
        c.setflags(write=False)
        s.setflags(write=False)
        self._center = c
        self._semisides = s
        super().__init__(lambda p: lsf.lsBox(p, c, s), b, max_cell_size)

    @property
    def center(self) -> _Array:
        return self._center

    @property
    def semisides(self) -> _Array:
        return self._semisides


class Sphere(Shape):
    """Ball centred at *center* with given *radius*."""

    def __init__(self, center: Sequence[float], radius: float,
                 max_cell_size: _CellSize = DEFAULT_MAX_CELL_SIZE) -> None:
        c = as_real_vector("center", center, 3)
        r = check_positive("radius", radius)
        self._center = c
        self._radius = r
        super().__init__(lambda p: lsf.lsSphere(p, c, r), np.stack([c - r, c + r], axis=-1), max_cell_size)

    @property
    def center(self) -> _Array:
        return self._center

    @property
    def radius(self) -> float:
        return self._radius


# ===========================================================================
# Cylinders
# ===========================================================================

class GenericCylinder(Shape):
    """Cylinder built by extruding a 2-D cross section along a Cartesian axis.

    The level set is ``min(f2d(rho), height/2 - |t - axial_center|)`` where
    ``rho`` are the in-plane ``(h, v)`` coordinates and ``t`` the coordinate
    along *normal_axis* (see :func:`lsf3d.axis.cycle`): a point is inside iff
    it is inside the cross section and within the axial extent.

    Parameters
    ----------
    normal_axis:
        Axis of the cylinder, one of ``Axis.X``, ``Axis.Y``, ``Axis.Z``.
    cross_section:
        In-plane level set and its ``(2, 2)`` bound, in ``(h, v)`` coordinates.
    height:
        Size of the cylinder along *normal_axis*.
    axial_center:
        Coordinate of the cylinder center along *normal_axis*.
    max_cell_size:
        Maximum grid cell size allowed in the cylinder, either a single
        value or ``(dx, dy, dz)``.  Defaults to ``inf``.
    """

    def __init__(
        self,
        normal_axis: Axis,
        cross_section: CrossSection2D,
        height: float,
        axial_center: float,
        max_cell_size: _CellSize = DEFAULT_MAX_CELL_SIZE,
    ) -> None:
        axis = Axis.parse(normal_axis)
        chkarg(isinstance(cross_section, CrossSection2D),
               '"cross_section" should be instance of CrossSection2D.')
        height = check_positive("height", height)
        t_c = float(as_real_vector("axial_center", (axial_center,), 1)[0])

        half = height / 2.0
        h, v, n = cycle(axis)
        bound2d = cross_section.bounding_box()
        bounds = np.empty((3, 2))
        bounds[h] = bound2d[0]
        bounds[v] = bound2d[1]
        bounds[n] = (t_c - half, t_c + half)

        self._normal_axis = axis
        self._cross_section = cross_section
        self._height = height
        self._axial_center = t_c
        super().__init__(
            lambda p: lsf.opExtrusion(p, cross_section.level_set, axis, t_c, half),
            bounds,
            max_cell_size,
        )

    @property
    def normal_axis(self) -> Axis:
        return self._normal_axis

    @property
    def cross_section(self) -> CrossSection2D:
        return self._cross_section

    @property
    def height(self) -> float:
        return self._height

    @property
    def axial_center(self) -> float:
        """Coordinate of the center along :attr:`normal_axis`."""
        return self._axial_center


class CircularCylinder(GenericCylinder):
    """Cylinder with a circular cross section.

    Parameters
    ----------
    normal_axis:
        Axis of the cylinder.
    height:
        Size of the cylinder along its axis.
    center:
        Center of the cylinder, ``(x, y, z)``.
    radius:
        Radius of the cross section.
    max_cell_size:
        Maximum grid cell size allowed in the cylinder.
    """

    def __init__(
        self,
        normal_axis: Axis,
        height: float,
        center: Sequence[float],
        radius: float,
        max_cell_size: _CellSize = DEFAULT_MAX_CELL_SIZE,
    ) -> None:
        axis = Axis.parse(normal_axis)
        c = as_real_vector("center", center, 3)

        h, v, n = cycle(axis)
        section = Circle2D(c[[int(h), int(v)]], radius)
        self._center = c
        super().__init__(axis, section, height, c[int(n)], max_cell_size)

    @property
    def center(self) -> _Array:
        return self._center

    @property
    def radius(self) -> float:
        return self.cross_section.radius


class EllipticCylinder(GenericCylinder):
    """Cylinder with an axis-aligned elliptic cross section.

    *semiaxes* are given in the in-plane ``(h, v)`` order of
    :func:`lsf3d.axis.cycle` (e.g. ``(a_x, a_y)`` for ``Axis.Z``).
    """

    def __init__(
        self,
        normal_axis: Axis,
        height: float,
        center: Sequence[float],
        semiaxes: Sequence[float],
        max_cell_size: _CellSize = DEFAULT_MAX_CELL_SIZE,
    ) -> None:
        axis = Axis.parse(normal_axis)
        c = as_real_vector("center", center, 3)

        h, v, n = cycle(axis)
        section = Ellipse2D(c[[int(h), int(v)]], semiaxes)
        self._center = c
        super().__init__(axis, section, height, c[int(n)], max_cell_size)

    @property
    def center(self) -> _Array:
        return self._center

    @property
    def semiaxes(self) -> _Array:
        return self.cross_section.semiaxes


class CircularShellCylinder(GenericCylinder):
    """Hollow cylindrical pipe: a cylinder whose cross section is an annulus.

    Parameters
    ----------
    normal_axis:
        Axis of the cylinder, one of ``Axis.X``, ``Axis.Y``, ``Axis.Z``.
    height:
        Size of the cylinder along its axis.
    center:
        Center of the cylinder, ``(x, y, z)``.
    r1, r2:
        Radii of the inner and outer circles, in either order.  Equal radii
        give a zero-thickness shell, which has no interior.
    max_cell_size:
        Maximum grid cell size allowed in the cylinder, either ``dl`` or
        ``(dx, dy, dz)``.  Defaults to ``inf``.

    Examples
    --------
    >>> shell = CircularShellCylinder(Axis.Z, 100, (0, 0, 50), 50, 100)
    >>> shell.bounding_box()
    array([[-100.,  100.],
           [-100.,  100.],
           [   0.,  100.]])
    >>> bool(shell.level_set([[75, 0, 50]])[0] > 0)
    True
    """

    def __init__(
        self,
        normal_axis: Axis,
        height: float,
        center: Sequence[float],
        r1: float,
        r2: float,
        max_cell_size: _CellSize = DEFAULT_MAX_CELL_SIZE,
    ) -> None:
        axis = Axis.parse(normal_axis)
        height = check_positive("height", height)
        c = as_real_vector("center", center, 3)

        h, v, n = cycle(axis)
        section = CircularShell2D(c[[int(h), int(v)]], r1, r2)
        if section.r_inner == section.r_outer:
            logger.warning("CircularShellCylinder with equal radii %g has no interior.", section.r_inner)

        self._center = c
        super().__init__(axis, section, height, c[int(n)], max_cell_size)

    @property
    def center(self) -> _Array:
        return self._center

    @property
    def r_inner(self) -> float:
        return self.cross_section.r_inner

    @property
    def r_outer(self) -> float:
        return self.cross_section.r_outer


class PolygonalCylinder(GenericCylinder):
    """Cylinder whose cross section is a simple polygon.

    Parameters
    ----------
    normal_axis:
        Axis of the cylinder.
    height:
        Size of the cylinder along its axis.
    vertices:
        ``(N, 2)`` polygon vertices in the in-plane ``(h, v)`` coordinates.
    axial_center:
        Coordinate of the cylinder center along *normal_axis*.
    max_cell_size:
        Maximum grid cell size allowed in the cylinder.
    """

    def __init__(
        self,
        normal_axis: Axis,
        height: float,
        vertices,
        axial_center: float,
        max_cell_size: _CellSize = DEFAULT_MAX_CELL_SIZE,
    ) -> None:
        super().__init__(normal_axis, Polygon2D(vertices), height, axial_center, max_cell_size)

    @property
    def vertices(self) -> _Array:
        return self.cross_section.vertices


# ===========================================================================
# Boolean operation classes
# ===========================================================================

def _check_shapes(shapes) -> None:
    chkarg(len(shapes) > 0, "at least one shape is required.")
    for s in shapes:
        if not isinstance(s, Shape):
            raise InvalidArgumentError(f"expected Shape, got {type(s).__name__}.")


def _min_cell_size(shapes) -> _Array:
    return np.min(np.stack([s.max_cell_size() for s in shapes]), axis=0)


class Union(Shape):
    """Union of two or more shapes (maximum level set)."""

    def __init__(self, *shapes: Shape) -> None:
        _check_shapes(shapes)
        self._shapes = shapes

        def _lsf(p: _Array) -> _Array:
            d = shapes[0].level_set(p)
            for s in shapes[1:]:
                d = lsf.opUnion(d, s.level_set(p))
            return d

        bounds = np.stack([s.bounding_box() for s in shapes])
        hull = np.stack([bounds[:, :, 0].min(axis=0), bounds[:, :, 1].max(axis=0)], axis=-1)
        super().__init__(_lsf, hull, _min_cell_size(shapes))

    @property
    def shapes(self) -> tuple:
        return self._shapes


class Intersection(Shape):
    """Intersection of two or more shapes (minimum level set).

    When the bounding boxes do not overlap along an axis, the resulting box
    collapses to a zero-width interval on that axis.
    """

    def __init__(self, *shapes: Shape) -> None:
        _check_shapes(shapes)
        self._shapes = shapes

        def _lsf(p: _Array) -> _Array:
            d = shapes[0].level_set(p)
            for s in shapes[1:]:
                d = lsf.opIntersection(d, s.level_set(p))
            return d

        bounds = np.stack([s.bounding_box() for s in shapes])
        lo = bounds[:, :, 0].max(axis=0)
        hi = np.maximum(bounds[:, :, 1].min(axis=0), lo)
        super().__init__(_lsf, np.stack([lo, hi], axis=-1), _min_cell_size(shapes))

    @property
    def shapes(self) -> tuple:
        return self._shapes


class Subtraction(Shape):
    """Subtract *cutter* from *base*."""

    def __init__(self, base: Shape, cutter: Shape) -> None:
        _check_shapes((base, cutter))
        self._shapes = (base, cutter)
        super().__init__(
            lambda p: lsf.opSubtraction(base.level_set(p), cutter.level_set(p)),
            base.bounding_box(),
            _min_cell_size((base, cutter)),
        )

    @property
    def shapes(self) -> tuple:
        return self._shapes
