"""Package-wide defaults for lsf3d.

Usage::

    from lsf3d.config import DEFAULT_MAX_CELL_SIZE
"""

import math

# Advisory grid-resolution hint handed to the mesher when a shape does not
# constrain its cells.
DEFAULT_MAX_CELL_SIZE = math.inf

# Number of cells per axis used by the grid helpers when none is given.
DEFAULT_RESOLUTION = 32
