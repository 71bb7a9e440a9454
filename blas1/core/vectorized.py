"""
Numpy backend.

Whole-array expressions instead of Python loops. Element-wise kernels
(axpy, scal, copy, swap, rot) produce the same bits as the reference
backend. Reductions (dot, nrm2, asum) go through numpy's pairwise
summation or the linked BLAS, so their results may differ from strict
left-to-right summation in the low-order bits.
"""

import numpy as np

from blas1.core.base import BLAS1, BackendInfo


class NumpyBLAS1(BLAS1):
    """Vectorized Level-1 kernels."""

    _INFO = BackendInfo(
        name='numpy',
        description='Vectorized numpy expressions (reductions not strictly sequential)',
        sequential_reductions=False,
    )

    @property
    def info(self) -> BackendInfo:
        return self._INFO

    def _axpy(self, alpha: float, x: np.ndarray, y: np.ndarray) -> None:
        if alpha == 0.0:
            return
        with np.errstate(over='ignore', invalid='ignore'):
            y += alpha * x

    def _scal(self, alpha: float, x: np.ndarray) -> None:
        with np.errstate(over='ignore', invalid='ignore'):
            x *= alpha

    def _copy(self, x: np.ndarray, y: np.ndarray) -> None:
        y[:] = x

    def _swap(self, x: np.ndarray, y: np.ndarray) -> None:
        tmp = x.copy()
        x[:] = y
        y[:] = tmp

    def _dot(self, x: np.ndarray, y: np.ndarray) -> float:
        if len(x) == 0:
            return 0.0
        with np.errstate(over='ignore', invalid='ignore'):
            return np.dot(x, y)

    def _nrm2(self, x: np.ndarray) -> float:
        if len(x) == 0:
            return 0.0
        a = np.abs(x)
        if np.isnan(a).any():
            return np.nan
        scale = a.max()
        if scale == 0.0 or np.isinf(scale):
            return scale
        return scale * np.sqrt(np.sum((a / scale) ** 2))

    def _asum(self, x: np.ndarray) -> float:
        if len(x) == 0:
            return 0.0
        with np.errstate(over='ignore'):
            return np.sum(np.abs(x))

    def _iamax(self, x: np.ndarray) -> int:
        a = np.abs(x)
        # NaN never compares greater; a leading NaN keeps index 0
        if np.isnan(a[0]):
            return 0
        a = np.where(np.isnan(a), -np.inf, a)
        return np.argmax(a)

    def _rot(self, x: np.ndarray, y: np.ndarray, c: float, s: float) -> None:
        with np.errstate(over='ignore', invalid='ignore'):
            new_x = c * x + s * y
            new_y = c * y - s * x
        # x before y, so an aliased buffer ends up holding new_y as in the loop
        x[:] = new_x
        y[:] = new_y
