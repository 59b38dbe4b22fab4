"""
Elementwise strided walker over caller-owned numpy buffers.

Design notes
------------
- Views are `(buffer, inc)` pairs; the walker assumes they were already
  validated (see `strided_blas.core.stride`) and never checks lengths.
- Logical element `i` of every view is visited at step `i`, exactly once,
  in increasing logical order, whatever the sign of the strides.
- A step reads every read view before any write view is touched, so a
  transform always sees pre-step values.
- When every stride is 1 the walk collapses into one vectorised pass over
  contiguous slices. The step is the same callable, so each element goes
  through the same floating point operations as on the general path.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Sequence, Tuple

import numpy as np

from strided_blas.core.meta import make_meta
from strided_blas.strided_blas import Config

logger = logging.getLogger(__name__)

View = Tuple[np.ndarray, int]
Step = Callable[..., Tuple[Any, ...]]


def _all_unit(views: Sequence[View]) -> bool:
    return all(inc == 1 for _, inc in views)


def walk_contiguous(
    n: int, reads: Sequence[View], writes: Sequence[View], step: Step
) -> None:
    """
    Apply `step` to the first `n` elements of every view in one pass.
    """
    values = [buf[:n] for buf, _ in reads]
    if len(writes) > 1:
        # Writes land one view at a time; later writes must not see earlier ones
        values = [np.array(v, copy=True) for v in values]
    out = step(*values)
    for (buf, _), value in zip(writes, out):
        buf[:n] = value


def walk_strided(
    n: int, reads: Sequence[View], writes: Sequence[View], step: Step
) -> None:
    """
    Apply `step` element by element, one cursor per view.
    """
    read_metas = [(buf, make_meta(n, inc)) for buf, inc in reads]
    write_metas = [(buf, make_meta(n, inc)) for buf, inc in writes]
    read_cursors = [m.start for _, m in read_metas]
    write_cursors = [m.start for _, m in write_metas]

    for _ in range(n):
        values = [buf[i] for (buf, _), i in zip(read_metas, read_cursors)]
        out = step(*values)
        for (buf, _), i, value in zip(write_metas, write_cursors, out):
            buf[i] = value
        read_cursors = [i + m.inc for (_, m), i in zip(read_metas, read_cursors)]
        write_cursors = [i + m.inc for (_, m), i in zip(write_metas, write_cursors)]


def walk(
    n: int,
    reads: Sequence[View],
    writes: Sequence[View],
    step: Step,
    fast_path: Optional[bool] = None,
) -> None:
    """
    Run `n` steps of `step` over strided views.

    Parameters
    ----------
    n : int
        Number of logical elements. Non-positive counts do nothing.
    reads : Sequence[Tuple[np.ndarray, int]]
        Views whose current elements are passed to `step`, in order.
    writes : Sequence[Tuple[np.ndarray, int]]
        Views receiving the values returned by `step`, in order.
    step : Callable[..., Tuple]
        Elementwise transform. Must accept numpy scalars as well as
        arrays and return one value per write view.
    fast_path : bool, optional
        Allow the contiguous pass for unit strides. Defaults to
        `Config().fast_path`.

    Examples
    --------
    >>> import numpy as np
    >>> x = np.array([1.0, 2.0, 3.0])
    >>> y = np.zeros(3)
    >>> walk(3, [(x, 1)], [(y, -1)], lambda xi: (xi,))
    >>> y
    array([3., 2., 1.])
    """
    if n <= 0:
        return
    if fast_path is None:
        fast_path = Config().fast_path

    if fast_path and _all_unit(reads) and _all_unit(writes):
        logger.debug("Contiguous walk over %d elements", n)
        walk_contiguous(n, reads, writes, step)
    else:
        logger.debug(
            "Strided walk over %d elements, read incs %s, write incs %s",
            n,
            [inc for _, inc in reads],
            [inc for _, inc in writes],
        )
        walk_strided(n, reads, writes, step)
