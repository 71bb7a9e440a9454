"""
Base backend class for the Level-1 kernels.

The public methods own argument checking, so every backend rejects bad
calls identically and before any write. Subclasses only supply the loop
bodies (_axpy, _scal, ...), which may assume their arguments are valid.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Sequence, Union

import numpy as np

from blas1.core.rotation import RotationParams, rotg as _rotg
from blas1.validation import (
    as_input_vector,
    as_output_vector,
    check_same_length,
    check_not_empty,
)

VectorLike = Union[np.ndarray, Sequence[float]]


@dataclass(frozen=True)
class BackendInfo:
    """Backend metadata."""
    name: str
    description: str
    sequential_reductions: bool = True  # False: low-order bits may differ from left-to-right summation


class BLAS1(ABC):
    """
    Level-1 BLAS over dense real vectors.

    Backends hold no state between calls. Vectors passed as in-place
    arguments (y in axpy/copy, both in swap/rot, x in scal) must be
    writeable 1-D float64 ndarrays; read-only arguments may be any 1-D
    array-like.
    """

    @property
    @abstractmethod
    def info(self) -> BackendInfo:
        """Return backend metadata."""
        pass

    # ── combination / copy / exchange ────────────────────────────────────

    def axpy(self, alpha: float, x: VectorLike, y: np.ndarray) -> None:
        """y <- alpha * x + y."""
        x = as_input_vector(x, 'axpy', 'x')
        y = as_output_vector(y, 'axpy', 'y')
        check_same_length('axpy', x, y)
        self._axpy(float(alpha), x, y)

    def scal(self, alpha: float, x: np.ndarray) -> None:
        """x <- alpha * x."""
        x = as_output_vector(x, 'scal', 'x')
        self._scal(float(alpha), x)

    def copy(self, x: VectorLike, y: np.ndarray) -> None:
        """y <- x."""
        x = as_input_vector(x, 'copy', 'x')
        y = as_output_vector(y, 'copy', 'y')
        check_same_length('copy', x, y)
        self._copy(x, y)

    def swap(self, x: np.ndarray, y: np.ndarray) -> None:
        """x <-> y, element-wise."""
        x = as_output_vector(x, 'swap', 'x')
        y = as_output_vector(y, 'swap', 'y')
        check_same_length('swap', x, y)
        self._swap(x, y)

    # ── reductions ────────────────────────────────────────────────────────

    def dot(self, x: VectorLike, y: VectorLike) -> float:
        """Return sum(x[i] * y[i])."""
        x = as_input_vector(x, 'dot', 'x')
        y = as_input_vector(y, 'dot', 'y')
        check_same_length('dot', x, y)
        return float(self._dot(x, y))

    def nrm2(self, x: VectorLike) -> float:
        """Return the Euclidean norm of x."""
        x = as_input_vector(x, 'nrm2', 'x')
        return float(self._nrm2(x))

    def asum(self, x: VectorLike) -> float:
        """Return sum(|x[i]|)."""
        x = as_input_vector(x, 'asum', 'x')
        return float(self._asum(x))

    def iamax(self, x: VectorLike) -> int:
        """
        Return the 0-based index of the first element with the largest |x[i]|.

        Raises:
            InvalidInputError: if x is empty
        """
        x = as_input_vector(x, 'iamax', 'x')
        check_not_empty('iamax', 'x', x)
        return int(self._iamax(x))

    # ── plane rotation ────────────────────────────────────────────────────

    def rotg(self, a: float, b: float) -> RotationParams:
        """Construct a Givens rotation; see blas1.core.rotation.rotg."""
        return _rotg(a, b)

    def rot(self, x: np.ndarray, y: np.ndarray, c: float, s: float) -> None:
        """(x[i], y[i]) <- (c*x[i] + s*y[i], c*y[i] - s*x[i])."""
        x = as_output_vector(x, 'rot', 'x')
        y = as_output_vector(y, 'rot', 'y')
        check_same_length('rot', x, y)
        self._rot(x, y, float(c), float(s))

    # ── loop bodies ───────────────────────────────────────────────────────

    @abstractmethod
    def _axpy(self, alpha: float, x: np.ndarray, y: np.ndarray) -> None:
        pass

    @abstractmethod
    def _scal(self, alpha: float, x: np.ndarray) -> None:
        pass

    @abstractmethod
    def _copy(self, x: np.ndarray, y: np.ndarray) -> None:
        pass

    @abstractmethod
    def _swap(self, x: np.ndarray, y: np.ndarray) -> None:
        pass

    @abstractmethod
    def _dot(self, x: np.ndarray, y: np.ndarray) -> Any:
        pass

    @abstractmethod
    def _nrm2(self, x: np.ndarray) -> Any:
        pass

    @abstractmethod
    def _asum(self, x: np.ndarray) -> Any:
        pass

    @abstractmethod
    def _iamax(self, x: np.ndarray) -> Any:
        pass

    @abstractmethod
    def _rot(self, x: np.ndarray, y: np.ndarray, c: float, s: float) -> None:
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.info.name!r})"
