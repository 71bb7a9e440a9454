"""
Reference backend.

Plain sequential loops, one element at a time, left to right. Reductions
accumulate in exactly index order, so results are reproducible bit for
bit across platforms. Slow on long vectors; use the numpy backend when
low-order bits in dot/nrm2/asum do not matter.
"""

import math

import numpy as np

from blas1.core.base import BLAS1, BackendInfo


class ReferenceBLAS1(BLAS1):
    """Sequential Level-1 kernels."""

    _INFO = BackendInfo(
        name='reference',
        description='Sequential left-to-right loops',
        sequential_reductions=True,
    )

    @property
    def info(self) -> BackendInfo:
        return self._INFO

    def _axpy(self, alpha: float, x: np.ndarray, y: np.ndarray) -> None:
        # alpha == 0 returns early so Inf/NaN in x cannot leak into y
        if alpha == 0.0:
            return
        for i, xi in enumerate(x.tolist()):
            y[i] = y[i] + alpha * xi

    def _scal(self, alpha: float, x: np.ndarray) -> None:
        for i, xi in enumerate(x.tolist()):
            x[i] = alpha * xi

    def _copy(self, x: np.ndarray, y: np.ndarray) -> None:
        for i in range(len(x)):
            y[i] = x[i]

    def _swap(self, x: np.ndarray, y: np.ndarray) -> None:
        for i in range(len(x)):
            tmp = x[i]
            x[i] = y[i]
            y[i] = tmp

    def _dot(self, x: np.ndarray, y: np.ndarray) -> float:
        total = 0.0
        for xi, yi in zip(x.tolist(), y.tolist()):
            total += xi * yi
        return total

    def _nrm2(self, x: np.ndarray) -> float:
        # scale/ssq accumulation: norm = scale * sqrt(ssq), every term <= 1
        scale = 0.0
        ssq = 1.0
        saw_inf = False
        for xi in x.tolist():
            if xi == 0.0:
                continue
            a = abs(xi)
            if math.isnan(a):
                return math.nan
            if math.isinf(a):
                saw_inf = True
                continue
            if scale < a:
                ssq = 1.0 + ssq * (scale / a) ** 2
                scale = a
            else:
                ssq += (a / scale) ** 2
        if saw_inf:
            return math.inf
        return scale * math.sqrt(ssq)

    def _asum(self, x: np.ndarray) -> float:
        total = 0.0
        for xi in x.tolist():
            total += abs(xi)
        return total

    def _iamax(self, x: np.ndarray) -> int:
        values = x.tolist()
        best = 0
        best_abs = abs(values[0])
        for i in range(1, len(values)):
            a = abs(values[i])
            if a > best_abs:
                best = i
                best_abs = a
        return best

    def _rot(self, x: np.ndarray, y: np.ndarray, c: float, s: float) -> None:
        for i in range(len(x)):
            xi = float(x[i])
            yi = float(y[i])
            x[i] = c * xi + s * yi
            y[i] = c * yi - s * xi
