"""
Stride validation for strided vector views.

A view over a buffer is described by a logical count `n` and a signed stride
`inc`. Logical element `i` lives at physical index `start + i * inc`, where
`start` is 0 for non-negative strides and `(n - 1) * |inc|` for negative ones,
so a negative stride walks the buffer backwards while still visiting the
logical elements front to back.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Optional, Sized

from strided_blas.core.meta import StrideMeta, make_meta

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class StrideError(ValueError):
    """
    Raised when a buffer is too short for its declared `(n, inc)` view.
    """

    view: str
    n: int
    inc: int
    length: int
    required: Optional[int] = None

    def __str__(self) -> str:
        s = f"{self.view}: buffer of length {self.length} is too short for n={self.n}, inc={self.inc}"
        if self.required is not None:
            s += f" (needs at least {self.required})"
        return s


def required_length(n: int, inc: int) -> int:
    """
    Minimum buffer length holding `n` elements `|inc|` apart.

    Parameters
    ----------
    n : int
        Logical element count. Non-positive counts need no storage.
    inc : int
        Signed stride in elements.

    Returns
    -------
    int
        ``0`` if ``n <= 0`` else ``1 + (n - 1) * |inc|``.
    """
    if n <= 0:
        return 0
    return 1 + (n - 1) * abs(inc)


def first_index(n: int, inc: int) -> int:
    """
    Physical index of logical element 0.

    Examples
    --------
    >>> first_index(4, 2)
    0
    >>> first_index(4, -2)
    6
    >>> first_index(1, -3)
    0
    """
    if inc >= 0 or n <= 0:
        return 0
    return (n - 1) * (-inc)


def check_inc(n: int, buffer: Sized, inc: int) -> bool:
    """
    True iff `buffer` can hold the `n` elements addressed by stride `inc`.
    """
    if n <= 0:
        return True
    return len(buffer) >= required_length(n, inc)


def validate_view(name: str, n: int, buffer: Sized, inc: int) -> StrideMeta:
    """
    Strict form of `check_inc`.

    Returns the view metadata on success and raises `StrideError` naming the
    offending view otherwise.
    """
    if not check_inc(n, buffer, inc):
        err = StrideError(
            view=name,
            n=int(n),
            inc=int(inc),
            length=len(buffer),
            required=required_length(n, inc),
        )
        logger.debug("Stride validation failed: %s", err, extra={"stride": asdict(err)})
        raise err
    return make_meta(n, inc)
