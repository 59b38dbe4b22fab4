"""
Strided vector copy, ``y <- x``.
"""

from __future__ import annotations

import numpy as np

from strided_blas.core.walker import walk
from strided_blas.level1.common import check_buffer, validate_views


def _assign(xi):
    return (xi,)


def copy(n: int, x: np.ndarray, incx: int, y: np.ndarray, incy: int) -> bool:
    """
    Copy the `n` logical elements of `x` into `y`.

    Parameters
    ----------
    n : int
        Number of elements to copy. If `n <= 0` nothing is touched and the
        call succeeds.
    x : np.ndarray
        Source buffer of length at least ``1 + (n - 1) * |incx|``.
    incx : int
        Stride between elements of `x`.
    y : np.ndarray
        Destination buffer of length at least ``1 + (n - 1) * |incy|``,
        overwritten in place.
    incy : int
        Stride between elements of `y`.

    Returns
    -------
    bool
        False if either buffer is too short; `y` is then left untouched.
    """
    if not validate_views(n, ("x", x, incx), ("y", y, incy)):
        return False
    walk(n, [(x, incx)], [(y, incy)], _assign)
    return True


def scopy(n: int, x: np.ndarray, incx: int, y: np.ndarray, incy: int) -> bool:
    """copies a `float32` vector into another `float32` vector"""
    check_buffer("x", x, np.float32)
    check_buffer("y", y, np.float32)
    return copy(n, x, incx, y, incy)


def dcopy(n: int, x: np.ndarray, incx: int, y: np.ndarray, incy: int) -> bool:
    """copies a `float64` vector into another `float64` vector"""
    check_buffer("x", x, np.float64)
    check_buffer("y", y, np.float64)
    return copy(n, x, incx, y, incy)
