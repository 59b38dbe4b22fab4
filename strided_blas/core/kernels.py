"""
Stateless strided kernels intended for JAX JIT/vmap.

Design notes
------------
- Kernels operate purely on 1-D arrays plus `StrideMeta` and return new
  arrays; nothing is mutated in place.
- Callers are responsible for validating buffer lengths beforehand (see
  `strided_blas.core.stride`); shapes are static per compiled instance so
  validation stays outside the jitted path.
- The general path runs a `jax.lax.fori_loop` so that repeated indices
  (zero strides) keep the sequential semantics of the in-place walker.
  Unit strides use a single sliced update instead.
"""

from __future__ import annotations

from typing import Tuple

import jax
import jax.numpy as jnp

from strided_blas.core.meta import StrideMeta


def _index(meta: StrideMeta, i: jnp.ndarray) -> jnp.ndarray:
    return meta.start + i * meta.inc


def _unit(*metas: StrideMeta) -> bool:
    return all(m.inc == 1 for m in metas)


def copy_strided(
    meta_x: StrideMeta,
    meta_y: StrideMeta,
    x: jnp.ndarray,
    y: jnp.ndarray,
    fast_path: bool = True,
) -> jnp.ndarray:
    """
    Return `y` with its `n` logical elements replaced by those of `x`.

    Parameters
    ----------
    meta_x, meta_y : StrideMeta
        Views of `x` and `y`; `meta_x.n` is the element count.
    x : jnp.ndarray
        Source vector.
    y : jnp.ndarray
        Destination vector.
    fast_path : bool
        Use a sliced update when both strides are 1.

    Returns
    -------
    jnp.ndarray
        Updated copy of `y`.

    Examples
    --------
    >>> import jax.numpy as jnp
    >>> from strided_blas.core.meta import make_meta
    >>> copy_strided(make_meta(3, 1), make_meta(3, -1), jnp.arange(3.0), jnp.zeros(3))
    Array([2., 1., 0.], dtype=float64)
    """
    n = meta_x.n
    if n <= 0:
        return y
    if fast_path and _unit(meta_x, meta_y):
        return y.at[:n].set(x[:n])

    def body(i, y):
        return y.at[_index(meta_y, i)].set(x[_index(meta_x, i)])

    return jax.lax.fori_loop(0, n, body, y)


def rot_strided(
    meta_x: StrideMeta,
    meta_y: StrideMeta,
    x: jnp.ndarray,
    y: jnp.ndarray,
    c: jnp.ndarray,
    s: jnp.ndarray,
    fast_path: bool = True,
) -> Tuple[jnp.ndarray, jnp.ndarray]:
    """
    Return ``(c*x + s*y, c*y - s*x)`` over the `n` logical elements.

    Both outputs of a step are computed from the pre-step values. No early
    exits are taken here; identity rotations and zero strides are decided by
    the caller.
    """
    n = meta_x.n
    if n <= 0:
        return x, y
    if fast_path and _unit(meta_x, meta_y):
        xs, ys = x[:n], y[:n]
        return x.at[:n].set(c * xs + s * ys), y.at[:n].set(c * ys - s * xs)

    def body(i, carry):
        x, y = carry
        ix = _index(meta_x, i)
        iy = _index(meta_y, i)
        xi, yi = x[ix], y[iy]
        return x.at[ix].set(c * xi + s * yi), y.at[iy].set(c * yi - s * xi)

    return jax.lax.fori_loop(0, n, body, (x, y))
