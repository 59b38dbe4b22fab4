r"""
Plane (Givens) rotation of two strided vectors.

.. math::
    \begin{bmatrix} x' \\ y' \end{bmatrix} \leftarrow
    \begin{bmatrix} c & s \\ -s & c \end{bmatrix}
    \begin{bmatrix} x \\ y \end{bmatrix}

If ``c**2 + s**2 == 1`` the matrix is orthogonal; this is not checked.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Tuple

import numpy as np

from strided_blas.core.walker import walk
from strided_blas.level1.common import check_buffer, validate_views
from strided_blas.strided_blas import Config

logger = logging.getLogger(__name__)


def rotation_step(c: float, s: float) -> Callable[[Any, Any], Tuple[Any, Any]]:
    """
    Elementwise rotation; both outputs use the pre-step `xi` and `yi`.
    """

    def _step(xi, yi):
        return c * xi + s * yi, c * yi - s * xi

    return _step


def rot(
    n: int,
    x: np.ndarray,
    incx: int,
    y: np.ndarray,
    incy: int,
    c: float,
    s: float,
) -> bool:
    """
    Rotate the points ``(x[i], y[i])`` in place.

    Returns immediately with success, without looking at the buffers, when
    `n <= 0`, when ``c == 1 and s == 0``, or when either stride is zero under
    the default "skip" zero stride policy (see `Config.set_zero_stride_policy`).

    Parameters
    ----------
    n : int
        Number of planar points.
    x, y : np.ndarray
        Buffers of length at least ``1 + (n - 1) * |inc|``, updated in place.
    incx, incy : int
        Strides between elements of `x` and `y`.
    c : float
        Cosine of the rotation angle.
    s : float
        Sine of the rotation angle.

    Returns
    -------
    bool
        False if either buffer is too short; neither buffer is then touched.
    """
    if n <= 0:
        return True

    if c == 1.0 and s == 0.0:
        return True

    if (incx == 0 or incy == 0) and Config().zero_stride_policy == "skip":
        logger.debug("Zero stride (incx=%d, incy=%d), rotation skipped", incx, incy)
        return True

    if not validate_views(n, ("x", x, incx), ("y", y, incy)):
        return False

    views = [(x, incx), (y, incy)]
    walk(n, views, views, rotation_step(c, s))
    return True


def drot(
    n: int,
    x: np.ndarray,
    incx: int,
    y: np.ndarray,
    incy: int,
    c: float,
    s: float,
) -> bool:
    """Applies a `float64` plane rotation to two `float64` vectors"""
    check_buffer("x", x, np.float64)
    check_buffer("y", y, np.float64)
    return rot(n, x, incx, y, incy, float(c), float(s))
