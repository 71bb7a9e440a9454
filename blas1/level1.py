"""
Level-1 BLAS free functions.

Each function forwards to the active backend. The active backend is
resolved from load_config() on first use and can be switched with
set_backend(). Backends are stateless, so switching never changes what a
call means, only how it is computed.

    import numpy as np
    import blas1

    x = np.array([1.0, 2.0, 3.0])
    y = np.zeros(3)
    blas1.axpy(2.0, x, y)         # y == [2, 4, 6]
    blas1.nrm2(x)                 # 3.7416...
    r, z, c, s = blas1.rotg(3.0, 4.0)
    blas1.rot(x, y, c, s)
"""

import logging
from typing import List, Optional, Union

import numpy as np

from blas1.config import load_config
from blas1.core.base import BLAS1, VectorLike
from blas1.core.registry import get_registry
from blas1.core.rotation import RotationParams

logger = logging.getLogger(__name__)

_backend: Optional[BLAS1] = None


def get_backend() -> BLAS1:
    """Get the active backend, resolving it from configuration on first use."""
    global _backend
    if _backend is None:
        name = load_config()['backend']
        _backend = get_registry().get(name)
        logger.debug("using backend '%s'", name)
    return _backend


def set_backend(backend: Union[str, BLAS1, None] = None) -> BLAS1:
    """
    Select the backend used by the free functions.

    Args:
        backend: Registered backend name, a BLAS1 instance, or None to
                 re-resolve from configuration on next use

    Returns:
        The backend now in effect
    """
    global _backend
    if backend is None:
        _backend = None
        return get_backend()
    if isinstance(backend, str):
        _backend = get_registry().get(backend)
    elif isinstance(backend, BLAS1):
        _backend = backend
    else:
        raise TypeError(f"backend must be a name or BLAS1 instance, got {type(backend).__name__}")
    logger.debug("backend set to '%s'", _backend.info.name)
    return _backend


def list_backends() -> List[str]:
    """List registered backend names."""
    return get_registry().list_backends()


def axpy(alpha: float, x: VectorLike, y: np.ndarray) -> None:
    """
    Compute y = alpha * x + y in place.

    Args:
        alpha: Scalar multiplier
        x: Input vector (not modified)
        y: Output vector (modified in place)

    Raises:
        LengthMismatchError: if x and y have different lengths
    """
    get_backend().axpy(alpha, x, y)


def scal(alpha: float, x: np.ndarray) -> None:
    """Compute x = alpha * x in place."""
    get_backend().scal(alpha, x)


def copy(x: VectorLike, y: np.ndarray) -> None:
    """
    Copy x into y.

    Raises:
        LengthMismatchError: if x and y have different lengths
    """
    get_backend().copy(x, y)


def swap(x: np.ndarray, y: np.ndarray) -> None:
    """
    Exchange the contents of x and y element-wise.

    Values move unchanged, including NaN, infinities and -0.0.

    Raises:
        LengthMismatchError: if x and y have different lengths
    """
    get_backend().swap(x, y)


def dot(x: VectorLike, y: VectorLike) -> float:
    """
    Dot product of two vectors.

    Returns:
        sum(x[i] * y[i]); 0.0 for empty vectors

    Raises:
        LengthMismatchError: if x and y have different lengths
    """
    return get_backend().dot(x, y)


def nrm2(x: VectorLike) -> float:
    """
    Euclidean norm, accumulated with scaling so that elements near
    1e+300 or 1e-300 neither overflow nor underflow.
    """
    return get_backend().nrm2(x)


def asum(x: VectorLike) -> float:
    """Sum of absolute values; 0.0 for an empty vector."""
    return get_backend().asum(x)


def iamax(x: VectorLike) -> int:
    """
    Index (0-based) of the first element with the largest absolute value.

    Raises:
        InvalidInputError: if x is empty
    """
    return get_backend().iamax(x)


def rotg(a: float, b: float) -> RotationParams:
    """
    Construct a Givens rotation mapping (a, b) to (r, 0).

    Returns:
        RotationParams(r, z, c, s); (c, s) can be recovered from z with
        rotg_decode
    """
    return get_backend().rotg(a, b)


def rot(x: np.ndarray, y: np.ndarray, c: float, s: float) -> None:
    """
    Apply a plane rotation in place:
    (x[i], y[i]) = (c*x[i] + s*y[i], c*y[i] - s*x[i]).

    Raises:
        LengthMismatchError: if x and y have different lengths
    """
    get_backend().rot(x, y, c, s)
