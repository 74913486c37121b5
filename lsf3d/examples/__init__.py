"""lsf3d.examples — example 3D shape assemblies.

Implemented assemblies
----------------------
:func:`CoaxialLine`
    Straight coaxial line: inner conductor, dielectric shell and shield.
"""

from .coaxial import CoaxialLine

__all__ = ["CoaxialLine"]
