"""Top-level strided_blas helpers."""

# float64 kernels in the functional variants need x64 enabled before any
# jax array is created.

import jax

jax.config.update("jax_enable_x64", True)

from strided_blas import core, functional, level1  # noqa: E402
from strided_blas.core.stride import StrideError, check_inc, first_index  # noqa: E402
from strided_blas.level1 import copy, dcopy, drot, rot, scopy  # noqa: E402
from strided_blas.strided_blas import Config, Session  # noqa: E402

__all__ = [
    "core",
    "functional",
    "level1",
    "Config",
    "Session",
    "StrideError",
    "check_inc",
    "first_index",
    "copy",
    "scopy",
    "dcopy",
    "rot",
    "drot",
]
