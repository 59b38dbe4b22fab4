"""
Jitted entry points for the strided kernels using static view metadata.

These helpers keep shapes static for JIT by requiring `StrideMeta`
instances; a new stride or count compiles a new instance.
"""

from __future__ import annotations

from functools import partial
from typing import Tuple

import jax
import jax.numpy as jnp

from strided_blas.core import kernels
from strided_blas.core.meta import StrideMeta


@partial(jax.jit, static_argnames=("meta_x", "meta_y", "fast_path"))
def copy(
    meta_x: StrideMeta,
    meta_y: StrideMeta,
    x: jnp.ndarray,
    y: jnp.ndarray,
    fast_path: bool = True,
) -> jnp.ndarray:
    return kernels.copy_strided(meta_x, meta_y, x, y, fast_path=fast_path)


@partial(jax.jit, static_argnames=("meta_x", "meta_y", "fast_path"))
def rot(
    meta_x: StrideMeta,
    meta_y: StrideMeta,
    x: jnp.ndarray,
    y: jnp.ndarray,
    c: jnp.ndarray,
    s: jnp.ndarray,
    fast_path: bool = True,
) -> Tuple[jnp.ndarray, jnp.ndarray]:
    return kernels.rot_strided(meta_x, meta_y, x, y, c, s, fast_path=fast_path)
