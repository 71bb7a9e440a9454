"""
blas1 Core
==========

Level-1 kernels behind a common interface.

Structure:
    base.py        - BLAS1 abstract backend (argument checks + abstract loop bodies)
    reference.py   - ReferenceBLAS1: sequential loops, bit-reproducible reductions
    vectorized.py  - NumpyBLAS1: whole-array numpy expressions
    rotation.py    - rotg / rotg_decode, shared by all backends
    registry.py    - BackendRegistry for lookup by name
"""

from blas1.core.base import BLAS1, BackendInfo
from blas1.core.reference import ReferenceBLAS1
from blas1.core.vectorized import NumpyBLAS1
from blas1.core.rotation import RotationParams, rotg, rotg_decode
from blas1.core.registry import (
    BackendRegistry,
    UnknownBackendError,
    get_registry,
    reset_registry,
)

__all__ = [
    'BLAS1',
    'BackendInfo',
    'ReferenceBLAS1',
    'NumpyBLAS1',
    'RotationParams',
    'rotg',
    'rotg_decode',
    'BackendRegistry',
    'UnknownBackendError',
    'get_registry',
    'reset_registry',
]
