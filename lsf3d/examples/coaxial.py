"""Coaxial transmission line assembly.

Usage::

    from lsf3d import Axis
    from lsf3d.examples import CoaxialLine

    parts = CoaxialLine(Axis.Z, length=100.0, center=(0, 0, 50),
                        r_conductor=10.0, r_dielectric=30.0, r_shield=35.0)
    parts["dielectric"].level_set(points)
"""

from __future__ import annotations

import logging
from typing import Dict, Sequence

from lsf3d.axis import Axis
from lsf3d.config import DEFAULT_MAX_CELL_SIZE
from lsf3d.geometry import CircularCylinder, CircularShellCylinder, Shape, Union
from lsf3d.primitives import check_positive, chkarg

logger = logging.getLogger(__name__)


def CoaxialLine(
    normal_axis: Axis,
    length: float,
    center: Sequence[float],
    r_conductor: float,
    r_dielectric: float,
    r_shield: float,
    max_cell_size: float = DEFAULT_MAX_CELL_SIZE,
) -> Dict[str, Shape]:
    """Build a straight coaxial line aligned with *normal_axis*.

    The line consists of:

    * ``"conductor"`` — a solid circular cylinder of radius *r_conductor*.
    * ``"dielectric"`` — a circular shell from *r_conductor* to *r_dielectric*.
    * ``"shield"`` — a circular shell from *r_dielectric* to *r_shield*.
    * ``"line"`` — the union of the three parts.

    Parameters
    ----------
    normal_axis:
        Axis of the line.
    length:
        Length of the line along its axis.
    center:
        Center of the line, ``(x, y, z)``.
    r_conductor, r_dielectric, r_shield:
        Increasing radii of the three layers.
    max_cell_size:
        Maximum grid cell size, applied to every part.

    Returns
    -------
    dict
        Named shapes, see above.
    """
    r_conductor = check_positive("r_conductor", r_conductor)
    r_dielectric = check_positive("r_dielectric", r_dielectric)
    r_shield = check_positive("r_shield", r_shield)
    chkarg(r_conductor < r_dielectric < r_shield,
           '"r_conductor", "r_dielectric", "r_shield" should be strictly increasing.')

    conductor = CircularCylinder(normal_axis, length, center, r_conductor, max_cell_size)
    dielectric = CircularShellCylinder(normal_axis, length, center, r_conductor, r_dielectric, max_cell_size)
    shield = CircularShellCylinder(normal_axis, length, center, r_dielectric, r_shield, max_cell_size)
    logger.debug("CoaxialLine along %s, radii %g/%g/%g", Axis.parse(normal_axis).name,
                 r_conductor, r_dielectric, r_shield)

    return {
        "conductor": conductor,
        "dielectric": dielectric,
        "shield": shield,
        "line": Union(conductor, dielectric, shield),
    }
