import jax
import jax.numpy as jnp
import numpy as np
import pytest

from strided_blas.core import jitted, kernels
from strided_blas.core.meta import make_meta
from strided_blas.level1.plane_rotation import rot


@pytest.mark.parametrize("incx, incy", [(1, 1), (2, -1), (-2, 3), (-1, -1)])
def test_copy_kernel_jit_matches_eager(incx, incy):
    n = 4
    x = jnp.arange(1.0, 1.0 + 1 + (n - 1) * abs(incx))
    y = jnp.zeros(1 + (n - 1) * abs(incy))
    mx, my = make_meta(n, incx), make_meta(n, incy)
    out_eager = kernels.copy_strided(mx, my, x, y)
    out_jit = jitted.copy(mx, my, x, y)
    assert jnp.array_equal(out_eager, out_jit)
    assert [float(out_jit[i]) for i in my.indices()] == [float(x[i]) for i in mx.indices()]


@pytest.mark.parametrize("incx, incy", [(1, 1), (2, -1), (-3, 2)])
def test_rot_kernel_matches_in_place_walker(incx, incy):
    n = 5
    rng = np.random.default_rng(3)
    x0 = rng.standard_normal(1 + (n - 1) * abs(incx))
    y0 = rng.standard_normal(1 + (n - 1) * abs(incy))
    c, s = 0.6, 0.8

    x_np, y_np = x0.copy(), y0.copy()
    assert rot(n, x_np, incx, y_np, incy, c, s)

    x_jx, y_jx = jitted.rot(
        make_meta(n, incx), make_meta(n, incy), jnp.asarray(x0), jnp.asarray(y0), c, s
    )
    assert jnp.allclose(x_jx, x_np)
    assert jnp.allclose(y_jx, y_np)


def test_rot_kernel_fast_path_flag_gives_same_result():
    m = make_meta(6, 1)
    x = jnp.linspace(-1.0, 1.0, 6)
    y = jnp.linspace(2.0, 3.0, 6)
    fast = kernels.rot_strided(m, m, x, y, 0.0, 1.0, fast_path=True)
    slow = kernels.rot_strided(m, m, x, y, 0.0, 1.0, fast_path=False)
    assert jnp.allclose(fast[0], slow[0])
    assert jnp.allclose(fast[1], slow[1])


def test_zero_stride_kernel_is_sequential():
    # The second step reads x[0] as already rotated by the first.
    mx, my = make_meta(2, 0), make_meta(2, 1)
    x = jnp.array([1.0])
    y = jnp.array([0.0, 5.0])
    x_out, y_out = kernels.rot_strided(mx, my, x, y, 0.0, 1.0)
    assert jnp.allclose(x_out, jnp.array([5.0]))
    assert jnp.allclose(y_out, jnp.array([-1.0, 0.0]))


def test_rot_kernel_vmaps_over_batch():
    m = make_meta(3, -1)
    xs = jnp.arange(6.0).reshape(2, 3)
    ys = jnp.ones((2, 3))
    fn = jax.vmap(lambda a, b: kernels.rot_strided(m, m, a, b, 0.0, 1.0))
    x_out, y_out = fn(xs, ys)
    assert jnp.allclose(x_out, ys)
    assert jnp.allclose(y_out, -xs)


def test_rot_kernel_grad_through_coefficients():
    m = make_meta(3, 1)
    x = jnp.array([1.0, 2.0, 3.0])
    y = jnp.array([0.5, 0.5, 0.5])

    def energy(theta):
        xo, yo = kernels.rot_strided(m, m, x, y, jnp.cos(theta), jnp.sin(theta))
        return jnp.sum(xo**2 + yo**2)

    # Rotations preserve the norm, so the gradient vanishes.
    grad = jax.jit(jax.grad(energy))(0.3)
    assert jnp.isfinite(grad)
    assert jnp.allclose(grad, 0.0, atol=1e-10)
