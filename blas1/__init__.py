"""
blas1: Level-1 BLAS kernels for dense real vectors.

Public API:
    import blas1
    blas1.axpy(alpha, x, y)      y <- alpha*x + y
    blas1.scal(alpha, x)         x <- alpha*x
    blas1.copy(x, y)             y <- x
    blas1.swap(x, y)             x <-> y
    blas1.dot(x, y)              sum(x*y)
    blas1.nrm2(x)                ||x||_2
    blas1.asum(x)                sum(|x|)
    blas1.iamax(x)               first argmax |x|
    blas1.rotg(a, b)             (r, z, c, s)
    blas1.rot(x, y, c, s)        apply plane rotation

Vectors are 1-D float64 numpy arrays. In-place arguments are mutated;
nothing else is. Two-vector operations raise LengthMismatchError before
touching either vector when the lengths differ.

Also:
    blas1.core          Backends (reference, numpy) and the BLAS1 interface
    blas1.config        Backend selection from blas1.yaml
    blas1.validation    Argument checks and error types
"""

import logging

from blas1.level1 import (
    axpy,
    scal,
    copy,
    swap,
    dot,
    nrm2,
    asum,
    iamax,
    rotg,
    rot,
    get_backend,
    set_backend,
    list_backends,
)
from blas1.core import BLAS1, RotationParams, rotg_decode, UnknownBackendError
from blas1.config import ConfigError
from blas1.validation import BLASError, LengthMismatchError, InvalidInputError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Kernels
    "axpy",
    "scal",
    "copy",
    "swap",
    "dot",
    "nrm2",
    "asum",
    "iamax",
    "rotg",
    "rot",
    "rotg_decode",
    "RotationParams",
    # Backends
    "BLAS1",
    "get_backend",
    "set_backend",
    "list_backends",
    # Errors
    "BLASError",
    "LengthMismatchError",
    "InvalidInputError",
    "UnknownBackendError",
    "ConfigError",
]
