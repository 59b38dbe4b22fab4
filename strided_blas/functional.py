"""
Functional counterparts of the level-1 routines over `jax.numpy` arrays.

JAX arrays are immutable, so instead of writing through the caller's buffer
each routine returns the success flag together with the updated arrays. On
failure the inputs are returned unchanged.
"""

from __future__ import annotations

import logging
from typing import Tuple

import jax
import jax.numpy as jnp

from strided_blas.core import jitted, kernels
from strided_blas.core.meta import make_meta
from strided_blas.level1.common import validate_views
from strided_blas.strided_blas import Config

logger = logging.getLogger(__name__)


def _as_vector(name: str, values) -> jnp.ndarray:
    arr = jnp.asarray(values)
    if arr.ndim != 1:
        raise ValueError(f"{name} must be one-dimensional, got shape {arr.shape}")
    return arr


def _is_identity(c, s) -> bool:
    # Traced coefficients have no value to compare until the kernel runs
    if isinstance(c, jax.core.Tracer) or isinstance(s, jax.core.Tracer):
        return False
    return float(c) == 1.0 and float(s) == 0.0


def copy(n: int, x, incx: int, y, incy: int) -> Tuple[bool, jnp.ndarray]:
    """
    Functional ``y <- x`` over strided views.

    Returns
    -------
    Tuple[bool, jnp.ndarray]
        (ok, y) where `y` carries the copied elements when `ok` is True.
    """
    x = _as_vector("x", x)
    y = _as_vector("y", y)
    if not validate_views(n, ("x", x, incx), ("y", y, incy)):
        return False, y
    if n <= 0:
        return True, y

    cfg = Config()
    fn = jitted.copy if cfg.use_jit else kernels.copy_strided
    out = fn(make_meta(n, incx), make_meta(n, incy), x, y, fast_path=cfg.fast_path)
    return True, out


def rot(
    n: int, x, incx: int, y, incy: int, c, s
) -> Tuple[bool, jnp.ndarray, jnp.ndarray]:
    """
    Functional plane rotation over strided views.

    Follows the same early exits as `strided_blas.level1.plane_rotation.rot`. The
    identity shortcut is taken for any concrete scalar (Python, numpy or
    jax); traced coefficients always go through the kernel.

    Returns
    -------
    Tuple[bool, jnp.ndarray, jnp.ndarray]
        (ok, x, y) with the rotated vectors when `ok` is True.
    """
    x = _as_vector("x", x)
    y = _as_vector("y", y)
    if n <= 0:
        return True, x, y
    if _is_identity(c, s):
        return True, x, y

    cfg = Config()
    if (incx == 0 or incy == 0) and cfg.zero_stride_policy == "skip":
        logger.debug("Zero stride (incx=%d, incy=%d), rotation skipped", incx, incy)
        return True, x, y

    if not validate_views(n, ("x", x, incx), ("y", y, incy)):
        return False, x, y

    fn = jitted.rot if cfg.use_jit else kernels.rot_strided
    x_out, y_out = fn(
        make_meta(n, incx), make_meta(n, incy), x, y, c, s, fast_path=cfg.fast_path
    )
    return True, x_out, y_out
