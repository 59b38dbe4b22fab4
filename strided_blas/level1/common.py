"""
Argument checks shared by the level-1 routines.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

import numpy as np

from strided_blas.core.stride import StrideError, validate_view
from strided_blas.strided_blas import Config

logger = logging.getLogger(__name__)


def check_buffer(name: str, buffer: np.ndarray, dtype: Optional[type] = None) -> None:
    """
    Reject buffers the in-place routines cannot write through.

    Raises
    ------
    TypeError
        If `buffer` is not a numpy array or has the wrong dtype.
    ValueError
        If `buffer` is not one-dimensional.
    """
    if not isinstance(buffer, np.ndarray):
        raise TypeError(f"{name} must be a numpy.ndarray, got {type(buffer).__name__}")
    if buffer.ndim != 1:
        raise ValueError(f"{name} must be one-dimensional, got shape {buffer.shape}")
    if dtype is not None and buffer.dtype != np.dtype(dtype):
        raise TypeError(f"{name} must have dtype {np.dtype(dtype)}, got {buffer.dtype}")


def validate_views(n: int, *views: Tuple[str, np.ndarray, int]) -> bool:
    """
    Validate every `(name, buffer, inc)` view before anything is written.

    Returns False on the first failing view, or raises the `StrideError`
    when `Config().raise_on_error` is set.
    """
    try:
        for name, buffer, inc in views:
            validate_view(name, n, buffer, inc)
    except StrideError:
        if Config().raise_on_error:
            raise
        return False
    return True
