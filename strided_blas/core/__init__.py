"""
Strided addressing, the elementwise walker and JIT/vmap-friendly kernels.

The walker mutates numpy buffers in place; the kernels compute the same walk
over immutable jax arrays.
"""

from strided_blas.core import jitted, kernels, meta, stride, walker

__all__ = ["kernels", "jitted", "meta", "stride", "walker"]
