"""
Benchmarks: in-place numpy walker vs jitted JAX kernels.

Scenarios:
1) drot over unit strides (contiguous pass vs sliced jax update)
2) drot over mixed strides (element-by-element walk vs fori_loop)
3) dcopy over a negative stride

Each scenario is timed for the numpy walker and for the jitted functional
variant, averaged over RUNS calls, and plotted with the speedups.
"""

from __future__ import annotations

import os
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Tuple

os.environ.setdefault("JAX_PLATFORMS", "cpu")

import jax
import jax.numpy as jnp
import matplotlib.pyplot as plt
import numpy as np

# Ensure we import the in-repo version
import sys

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from strided_blas import functional
from strided_blas.level1 import dcopy, drot
from strided_blas.strided_blas import Session

RUNS = 20
N = 4096
SAVE_DIR = Path("benchmarks")


def _time_runs(fn: Callable[[], object], runs: int = RUNS) -> float:
    """Run fn `runs` times and return average duration in seconds."""
    # Warm-up
    fn()
    start = time.perf_counter()
    for _ in range(runs):
        out = fn()
        if isinstance(out, tuple):
            jax.block_until_ready([o for o in out if isinstance(o, jnp.ndarray)])
    duration = time.perf_counter() - start
    return duration / runs


def _vectors(n: int, incx: int, incy: int) -> Tuple[np.ndarray, np.ndarray]:
    rng = np.random.default_rng(0)
    x = rng.standard_normal(1 + (n - 1) * abs(incx))
    y = rng.standard_normal(1 + (n - 1) * abs(incy))
    return x, y


def rot_benchmark(incx: int, incy: int) -> Tuple[float, float]:
    x, y = _vectors(N, incx, incy)
    xj, yj = jnp.asarray(x), jnp.asarray(y)
    c, s = 0.6, 0.8

    numpy_avg = _time_runs(lambda: drot(N, x, incx, y, incy, c, s))
    with Session(use_jit=True):
        jit_avg = _time_runs(lambda: functional.rot(N, xj, incx, yj, incy, c, s))
    return numpy_avg, jit_avg


def copy_benchmark(incx: int, incy: int) -> Tuple[float, float]:
    x, y = _vectors(N, incx, incy)
    xj, yj = jnp.asarray(x), jnp.asarray(y)

    numpy_avg = _time_runs(lambda: dcopy(N, x, incx, y, incy))
    with Session(use_jit=True):
        jit_avg = _time_runs(lambda: functional.copy(N, xj, incx, yj, incy))
    return numpy_avg, jit_avg


@dataclass
class BenchmarkResult:
    label: str
    numpy_avg: float
    jit_avg: float

    @property
    def speedup(self) -> float:
        return self.numpy_avg / self.jit_avg if self.jit_avg > 0 else 0.0


def plot_results(results: Tuple[BenchmarkResult, ...]) -> None:
    labels = [r.label for r in results]
    walker = [r.numpy_avg for r in results]
    jitted = [r.jit_avg for r in results]
    speedups = [r.speedup for r in results]

    x = np.arange(len(labels))
    width = 0.35

    fig, axes = plt.subplots(1, 2, figsize=(12, 5))

    ax0 = axes[0]
    ax0.bar(x - width / 2, walker, width, label="numpy walker")
    ax0.bar(x + width / 2, jitted, width, label="jitted")
    ax0.set_ylabel("Avg runtime (s)")
    ax0.set_yscale("log")
    ax0.set_xticks(x)
    ax0.set_xticklabels(labels, rotation=10)
    ax0.legend()
    ax0.set_title(f"n={N}, average of {RUNS} runs")

    ax1 = axes[1]
    ax1.bar(labels, speedups, color="#4caf50")
    ax1.set_ylabel("Speedup (walker / jitted)")
    ax1.set_title("Speedup")
    for idx, val in enumerate(speedups):
        ax1.text(idx, val + 0.02, f"{val:.2f}x", ha="center", va="bottom")

    fig.tight_layout()
    SAVE_DIR.mkdir(parents=True, exist_ok=True)
    out_path = SAVE_DIR / "walker_vs_jitted.png"
    plt.savefig(out_path, dpi=180)
    print(f"Saved plot to {out_path}")


def main() -> None:
    results = (
        BenchmarkResult("drot unit stride", *rot_benchmark(1, 1)),
        BenchmarkResult("drot inc 2/-3", *rot_benchmark(2, -3)),
        BenchmarkResult("dcopy inc -1", *copy_benchmark(-1, 1)),
    )

    for r in results:
        print(
            f"{r.label:>18}: walker {r.numpy_avg:.6f}s, "
            f"jitted {r.jit_avg:.6f}s, speedup {r.speedup:.2f}x"
        )

    plot_results(results)


if __name__ == "__main__":
    main()
