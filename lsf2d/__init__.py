"""
lsf2d — 2D Cross-Section Level-Set Library
==========================================

In-plane (cross-section) level-set functions consumed by the cylinder
shapes of :mod:`lsf3d`.  Every level set is positive inside, zero on the
boundary and negative outside.

Implemented features
--------------------
- Cross sections: Circle, Ellipse, CircularShell (annulus), Rectangle, Polygon
- Boolean operations: Union (max), Intersection (min), Subtraction
- Transforms: translate
- Grid sampling: :func:`sample_levelset_2d`

Quick start
-----------

::

    from lsf2d import CircularShell2D, sample_levelset_2d

    ring = CircularShell2D(center=(0.0, 0.0), r1=0.5, r2=1.0)
    phi  = ring.level_set([[0.75, 0.0], [0.0, 0.0]])   # [>0, <0]
    grid = sample_levelset_2d(ring, resolution=(64, 64))
"""

from .geometry import (
    # Base class
    CrossSection2D,

    # Primitive cross sections
    Circle2D,
    Ellipse2D,
    CircularShell2D,
    Rectangle2D,
    Polygon2D,

    # Boolean operations
    Union2D,
    Intersection2D,
    Subtraction2D,
)

from .grid import sample_levelset_2d

__version__ = "0.1.0"

__all__ = [
    # Base
    "CrossSection2D",

    # Primitive cross sections
    "Circle2D",
    "Ellipse2D",
    "CircularShell2D",
    "Rectangle2D",
    "Polygon2D",

    # Boolean operations
    "Union2D",
    "Intersection2D",
    "Subtraction2D",

    # Grid utilities
    "sample_levelset_2d",
]
