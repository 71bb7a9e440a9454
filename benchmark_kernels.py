"""
Benchmark every Level-1 kernel on every registered backend.

Usage:
    python benchmark_kernels.py
    python benchmark_kernels.py --sizes 100 10000 --repeats 20
"""

import argparse
import time
from typing import Callable, List, Tuple

import numpy as np

from blas1.core import get_registry


# ── Timing harness ──────────────────────────────────────────────────────────

N_REPEATS = 10


def time_fn(fn: Callable, *args, repeats: int = N_REPEATS) -> float:
    """Time a function `repeats` times, return average ms."""
    times = []
    for _ in range(repeats):
        t0 = time.perf_counter()
        fn(*args)
        t1 = time.perf_counter()
        times.append((t1 - t0) * 1000)
    return float(np.mean(times))


# ── Kernel calls ────────────────────────────────────────────────────────────

def kernel_calls(backend, x: np.ndarray, y: np.ndarray) -> List[Tuple[str, Callable, tuple]]:
    """(name, fn, args) for each kernel. In-place kernels work on scratch copies."""
    xs, ys = x.copy(), y.copy()
    _, _, c, s = backend.rotg(0.6, 0.8)
    return [
        ("axpy", backend.axpy, (1e-3, x, ys)),
        ("scal", backend.scal, (1.0, xs)),
        ("copy", backend.copy, (x, ys)),
        ("swap", backend.swap, (xs, ys)),
        ("dot", backend.dot, (x, y)),
        ("nrm2", backend.nrm2, (x,)),
        ("asum", backend.asum, (x,)),
        ("iamax", backend.iamax, (x,)),
        ("rot", backend.rot, (xs, ys, c, s)),
    ]


def run_benchmarks(sizes: List[int], repeats: int) -> None:
    rng = np.random.default_rng(0)
    registry = get_registry()
    backends = registry.list_backends()

    print(f"{'Kernel':<10} {'n':>10} " + " ".join(f"{b + ' (ms)':>16}" for b in backends))
    print("─" * (22 + 17 * len(backends)))

    for n in sizes:
        x = rng.standard_normal(n)
        y = rng.standard_normal(n)
        rows = {}
        for name in backends:
            for kernel, fn, args in kernel_calls(registry.get(name), x, y):
                rows.setdefault(kernel, []).append(time_fn(fn, *args, repeats=repeats))

        for kernel, timings in rows.items():
            cells = " ".join(f"{ms:>16.4f}" for ms in timings)
            print(f"{kernel:<10} {n:>10,} {cells}")
        print()


def main():
    parser = argparse.ArgumentParser(description="Benchmark blas1 kernels")
    parser.add_argument("--sizes", type=int, nargs="+", default=[1_000, 100_000])
    parser.add_argument("--repeats", type=int, default=N_REPEATS)
    args = parser.parse_args()

    run_benchmarks(args.sizes, args.repeats)


if __name__ == "__main__":
    main()
