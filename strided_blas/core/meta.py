"""
Metadata helpers for strided vector views.

`StrideMeta` collects the logical count, the signed stride and the physical
start index so they can be passed as static arguments to jitted entry points.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class StrideMeta:
    n: int
    inc: int
    start: int

    def indices(self) -> Iterator[int]:
        """
        Physical indices of the logical elements 0..n-1, in logical order.
        """
        idx = self.start
        for _ in range(max(self.n, 0)):
            yield idx
            idx += self.inc


def make_meta(n: int, inc: int) -> StrideMeta:
    # Imported lazily; stride depends on this module for the return type.
    from strided_blas.core.stride import first_index

    return StrideMeta(n=int(n), inc=int(inc), start=first_index(n, inc))
