"""Shared level-set helpers used by both lsf2d and lsf3d.

This module provides:

* **Type alias**: :data:`_F`
* **Math helpers**: :func:`length`, :func:`dot`, :func:`dot2`, :func:`clamp`
* **Shared boolean operators** (used by both 2D and 3D geometry):
  :func:`opUnion`, :func:`opIntersection`, :func:`opSubtraction`
* **Argument checking**: :class:`InvalidArgumentError`, :func:`chkarg`,
  :func:`check_positive`, :func:`as_real_vector`, :func:`as_points`,
  :func:`as_max_cell_size`

Sign convention for every level set in this project: positive inside,
zero on the boundary, negative outside.  Hence intersection is ``min`` and
union is ``max``.

Not meant to be imported directly by end users — import from
``lsf2d.primitives`` or ``lsf3d.primitives`` instead.
"""

from __future__ import annotations

import math
import numbers

import numpy as np
import numpy.typing as npt

# ---------------------------------------------------------------------------
# Type alias
# ---------------------------------------------------------------------------
_F = npt.NDArray[np.floating]

__all__ = [
    "_F",
    "length", "dot", "dot2", "clamp",
    "opUnion", "opIntersection", "opSubtraction",
    "InvalidArgumentError", "chkarg", "check_positive", "is_real",
    "as_real_vector", "as_points", "as_max_cell_size",
]


# ===========================================================================
# Math helpers
# ===========================================================================

def length(v: _F) -> _F:
    """Euclidean length along the last axis."""
    return np.linalg.norm(v, axis=-1)


def dot(a: _F, b: _F) -> _F:
    """Dot product along the last axis."""
    return np.sum(a * b, axis=-1)


def dot2(a: _F) -> _F:
    """Squared length: ``dot(a, a)``."""
    return dot(a, a)


def clamp(x: _F, lo: float | _F, hi: float | _F) -> _F:
    """Clamp *x* element-wise to ``[lo, hi]``."""
    return np.minimum(np.maximum(x, lo), hi)


# ===========================================================================
# Shared boolean operators (used by both lsf2d and lsf3d)
# ===========================================================================

def opUnion(d1: _F, d2: _F) -> _F:
    """Union of two level sets: ``max(d1, d2)``."""
    return np.maximum(d1, d2)


def opIntersection(d1: _F, d2: _F) -> _F:
    """Intersection of two level sets: ``min(d1, d2)``."""
    return np.minimum(d1, d2)


def opSubtraction(d1: _F, d2: _F) -> _F:
    """Subtract *d2* from *d1*: ``min(d1, -d2)``."""
    return np.minimum(d1, -d2)


# ===========================================================================
# Argument checking
# ===========================================================================

class InvalidArgumentError(ValueError):
    """Raised when a shape is built from (or evaluated at) malformed arguments."""


def chkarg(condition: bool, message: str, *args) -> None:
    """Raise :class:`InvalidArgumentError` with ``message % args`` unless *condition*."""
    if not condition:
        raise InvalidArgumentError(message % args if args else message)


def is_real(value) -> bool:
    """``True`` for a real (non-bool, non-complex) scalar, including ``inf``.

    Any :class:`numbers.Real` qualifies (``int``, ``float``, numpy scalars,
    :class:`fractions.Fraction`); NaN does not.
    """
    return (
        isinstance(value, numbers.Real)
        and not isinstance(value, (bool, np.bool_))
        and value == value
    )


def check_positive(name: str, value) -> float:
    """Return *value* as ``float`` after checking it is a finite positive real."""
    ok = is_real(value)
    if ok:
        try:
            value = float(value)
        except OverflowError:
            ok = False
    chkarg(ok and math.isfinite(value) and value > 0,
           '"%s" should be positive.', name)
    return value


def as_real_vector(name: str, value, n: int) -> _F:
    """Return *value* as a read-only length-*n* float array of finite reals."""
    try:
        arr = np.asarray(value)
    except (TypeError, ValueError):
        arr = None
    chkarg(
        arr is not None
        and arr.shape == (n,)
        and (np.issubdtype(arr.dtype, np.integer) or np.issubdtype(arr.dtype, np.floating))
        and bool(np.all(np.isfinite(arr))),
        '"%s" should be length-%d vector with real elements.', name, n,
    )
    arr = arr.astype(float)
    arr.setflags(write=False)
    return arr


def as_points(p, ndim: int) -> _F:
    """Return *p* as a float array whose last dimension is *ndim*.

    Any number of leading batch dimensions is accepted, including an empty
    batch of shape ``(0, ndim)``.
    """
    try:
        arr = np.asarray(p, dtype=float)
    except (TypeError, ValueError):
        arr = None
    chkarg(arr is not None and arr.ndim >= 1 and arr.shape[-1] == ndim,
           '"points" should be array with %d columns with real elements.', ndim)
    return arr


def as_max_cell_size(value, n: int = 3) -> _F:
    """Normalize *value* (scalar or length-*n*) into a read-only ``(n,)`` array.

    ``inf`` is allowed and means "no constraint".
    """
    if is_real(value):
        chkarg(value > 0, '"max_cell_size" should be positive.')
        try:
            value = float(value)
        except OverflowError:
            value = math.inf
        arr = np.full(n, value)
    else:
        try:
            arr = np.asarray(value, dtype=float)
        except (TypeError, ValueError):
            arr = None
        chkarg(
            arr is not None and arr.shape == (n,)
            and not np.any(np.isnan(arr)) and bool(np.all(arr > 0)),
            '"max_cell_size" should be positive real or length-%d vector with positive elements.', n,
        )
        arr = arr.copy()
    arr.setflags(write=False)
    return arr
