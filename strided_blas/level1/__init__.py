"""
Level-1 routines writing through caller-owned numpy buffers.
"""

from strided_blas.level1.vector_copy import copy, dcopy, scopy
from strided_blas.level1.plane_rotation import drot, rot

__all__ = ["copy", "scopy", "dcopy", "rot", "drot"]
