"""
lsf3d — 3D Level-Set Shape Library
==================================

Geometric primitives for structured-grid electromagnetic simulation.
Every shape is described implicitly by a level-set function (positive
inside, zero on the boundary, negative outside) and an axis-aligned
bounding box, so a grid generator can rasterize any shape through one
contract: :meth:`Shape.level_set`, :meth:`Shape.bounding_box` and
:meth:`Shape.max_cell_size`.

Implemented features
--------------------
- Axes: :class:`Axis`, :func:`cycle` (right-handed in-plane axes)
- Primitive shapes: Box, Sphere
- Cylinders: GenericCylinder (extrudes any :mod:`lsf2d` cross section),
  CircularCylinder, EllipticCylinder, CircularShellCylinder, PolygonalCylinder
- Boolean operations: Union (max), Intersection (min), Subtraction
- Grid sampling: :func:`sample_levelset_3d`
- Example assemblies: :func:`~lsf3d.examples.CoaxialLine`

Quick start
-----------

::

    from lsf3d import Axis, CircularShellCylinder, sample_levelset_3d

    pipe = CircularShellCylinder(Axis.Z, height=100, center=(0, 0, 50), r1=50, r2=100)
    pipe.bounding_box()                       # [[-100, 100], [-100, 100], [0, 100]]
    pipe.level_set([[75, 0, 50], [0, 0, 50]]) # [>0, <0]
    phi = sample_levelset_3d(pipe, resolution=(40, 40, 20))
"""

from _lsf_common import InvalidArgumentError

from .axis import Axis, cycle, embed, project
from .geometry import (
    Shape,
    Box,
    Sphere,
    GenericCylinder,
    CircularCylinder,
    EllipticCylinder,
    CircularShellCylinder,
    PolygonalCylinder,
    Union,
    Intersection,
    Subtraction,
)
from .grid import cell_centers, resolution_for, sample_levelset_3d, save_npy
from .logging_config import setup_logging

__version__ = "0.1.0"

__all__ = [
    # Errors
    "InvalidArgumentError",

    # Axes
    "Axis",
    "cycle",
    "project",
    "embed",

    # Base
    "Shape",

    # Primitives
    "Box",
    "Sphere",

    # Cylinders
    "GenericCylinder",
    "CircularCylinder",
    "EllipticCylinder",
    "CircularShellCylinder",
    "PolygonalCylinder",

    # Boolean operations
    "Union",
    "Intersection",
    "Subtraction",

    # Grid utilities
    "cell_centers",
    "resolution_for",
    "sample_levelset_3d",
    "save_npy",

    # Logging
    "setup_logging",
]
