"""Benchmark chirp z-transform engines and FFT back ends."""

import cmath
import time
from typing import Dict

import numpy as np

from chirpz import CztPlanner, NaiveCzt, PlannerConfig, available_providers


def benchmark_process(
    n: int,
    m: int,
    backend: str = "numpy",
    n_calls: int = 200,
    dtype=np.complex128,
) -> Dict[str, float]:
    """Benchmark repeated process_with_scratch calls on one Bluestein engine.

    Args:
        n: Input length.
        m: Output length.
        backend: Convolution provider name.
        n_calls: Number of timed calls.
        dtype: Engine precision.

    Returns:
        Dictionary with timing results.
    """
    planner = CztPlanner(dtype=dtype, config=PlannerConfig(backend=backend))

    start = time.perf_counter()
    engine = planner.plan_czt_forward(n, m, 1.0, cmath.exp(-2j * cmath.pi / max(n, m)))
    plan_time = time.perf_counter() - start

    rng = np.random.default_rng(0)
    signal = (rng.standard_normal(n) + 1j * rng.standard_normal(n)).astype(dtype)
    buffer = np.zeros(engine.buffer_len, dtype=dtype)
    scratch = np.zeros(engine.get_scratch_len(), dtype=dtype)

    # Warmup
    for _ in range(5):
        buffer[:n] = signal
        engine.process_with_scratch(buffer, scratch)

    start = time.perf_counter()
    for _ in range(n_calls):
        buffer[:n] = signal
        engine.process_with_scratch(buffer, scratch)
    total_time = time.perf_counter() - start

    return {
        "n": n,
        "m": m,
        "conv_len": engine.conv_len,
        "plan_time_sec": plan_time,
        "time_per_call_sec": total_time / n_calls,
    }


def benchmark_naive(n: int, m: int, n_calls: int = 5) -> Dict[str, float]:
    """Benchmark the direct O(N*M) reference engine."""
    engine = NaiveCzt(n, m, 1.0, cmath.exp(-2j * cmath.pi / max(n, m)))
    buffer = np.ones(engine.buffer_len, dtype=np.complex128)
    scratch = np.zeros(engine.get_scratch_len(), dtype=np.complex128)

    start = time.perf_counter()
    for _ in range(n_calls):
        buffer[:] = 1.0
        engine.process_with_scratch(buffer, scratch)
    total_time = time.perf_counter() - start

    return {"n": n, "m": m, "time_per_call_sec": total_time / n_calls}


if __name__ == "__main__":
    print("Benchmarking Bluestein CZT per backend (N=1000, M=1500)...")
    for backend in available_providers():
        results = benchmark_process(1000, 1500, backend=backend)
        print(
            f"  {backend:>6}: L={results['conv_len']}, "
            f"plan {results['plan_time_sec']*1e3:.2f} ms, "
            f"{results['time_per_call_sec']*1e6:.1f} μs/call"
        )

    print("\nBluestein vs direct evaluation (numpy backend):")
    for size in (64, 256, 1024):
        fast = benchmark_process(size, size)
        slow = benchmark_naive(size, size)
        print(
            f"  N=M={size}: bluestein {fast['time_per_call_sec']*1e6:.1f} μs, "
            f"naive {slow['time_per_call_sec']*1e6:.1f} μs"
        )
