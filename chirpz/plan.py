"""Planner for chirp z-transform engines.

The planner turns (N, M, A, W) into a ready-to-run engine. FFT plans are
cached by padded length L, so every engine whose L matches shares one plan.
Work is forwarded to an execution strategy chosen at construction; adding a
strategy means registering a class in ``_STRATEGIES`` without touching the
public methods.

A planner is a mutable builder meant for single-threaded setup. The engines
it returns are immutable and may be used from several threads at once.
"""

from __future__ import annotations

import math
from typing import Optional

import numpy as np

from .bluestein import BluesteinCzt, conv_length
from .config import PlannerConfig, default_config
from .dsp.utils import (
    as_complex_scalar,
    check_transform_size,
    resolve_complex_dtype,
)
from .fft import ConvolutionProvider, FftPlan, get_provider
from .logging import get_logger

logger = get_logger(__name__)


def zoom_contour(n: int, start: float, end: float) -> tuple[complex, complex]:
    """
    Contour parameters for zooming an N-sample signal onto ``[start, end]``.

    Frequencies are in cycles per sample, so ``[0, 1)`` is one turn of the
    unit circle. Output k lands at ``start + k * (end - start) / (N - 1)``:
    N outputs span the band exactly, fewer stop short of ``end`` and more
    run past it.

    Args:
        n: Number of input samples N.
        start: Band start (cycles/sample).
        end: Band end (cycles/sample).

    Returns:
        ``(A, W)`` with ``A = exp(2j*pi*start)`` and
        ``W = exp(-2j*pi*(end - start)/(N - 1))``, or ``W = 1`` when ``N == 1``.
    """
    n = check_transform_size(n, "N")
    if not (math.isfinite(start) and math.isfinite(end)):
        raise ValueError(f"Band edges must be finite, got start={start}, end={end}")
    a = complex(math.cos(2.0 * math.pi * start), math.sin(2.0 * math.pi * start))
    if n == 1:
        return a, 1.0 + 0.0j
    step = -2.0 * math.pi * (end - start) / (n - 1)
    w = complex(math.cos(step), math.sin(step))
    return a, w


class CztPlannerScalar:
    """Generic NumPy execution strategy.

    Owns the convolution provider and the length-keyed plan cache.
    """

    name = "scalar"

    def __init__(self, provider: ConvolutionProvider, dtype: np.dtype) -> None:
        self.provider = provider
        self.dtype = dtype
        self._fft_plans: dict[int, FftPlan] = {}

    def _fft_plan(self, length: int) -> FftPlan:
        plan = self._fft_plans.get(length)
        if plan is not None:
            logger.debug("FFT plan cache hit: L=%d", length)
            return plan
        logger.debug("FFT plan cache miss: L=%d", length)
        plan = self.provider.plan(length, self.dtype)
        self._fft_plans[length] = plan
        return plan

    def plan_czt_forward(self, n: int, m: int, a: complex, w: complex) -> BluesteinCzt:
        n = check_transform_size(n, "N")
        m = check_transform_size(m, "M")
        a = as_complex_scalar(a, "A")
        w = as_complex_scalar(w, "W")
        plan = self._fft_plan(conv_length(n, m))
        return BluesteinCzt(n, m, a, w, self.provider, plan=plan, dtype=self.dtype)

    def cached_lengths(self) -> list[int]:
        return sorted(self._fft_plans)

    def clear_cache(self) -> None:
        self._fft_plans.clear()


_STRATEGIES = {
    CztPlannerScalar.name: CztPlannerScalar,
}


class CztPlanner:
    """
    Build chirp z-transform engines for a fixed precision.

    Args:
        dtype: Complex precision of the engines (complex64/complex128,
            float32/float64 or "single"/"double"). Defaults to complex128.
        config: Backend and strategy selection. Defaults to
            :func:`chirpz.config.default_config`.

    Raises:
        TypeError: If ``dtype`` is not a supported precision.
        ValueError: If the configured backend or strategy is unknown.

    Example:
        >>> import numpy as np
        >>> planner = CztPlanner()
        >>> engine = planner.plan_czt_forward(5, 5, 1.0, np.exp(-2j * np.pi / 5))
        >>> buffer = np.array([1, 0, 0, 0, 0], dtype=np.complex128)
        >>> engine.process(buffer)
    """

    def __init__(self, dtype=np.complex128, config: Optional[PlannerConfig] = None) -> None:
        self.dtype = resolve_complex_dtype(dtype)
        self.config = config if config is not None else default_config()

        strategy_name = self.config.strategy.lower()
        if strategy_name not in _STRATEGIES:
            supported = sorted(_STRATEGIES)
            raise ValueError(
                f"Unsupported planner strategy: {self.config.strategy!r}. "
                f"Supported strategies: {supported}"
            )
        provider = get_provider(self.config.backend, workers=self.config.workers)
        self._chosen = _STRATEGIES[strategy_name](provider, self.dtype)

    @property
    def strategy(self) -> str:
        """Name of the active execution strategy."""
        return self._chosen.name

    @property
    def provider(self) -> ConvolutionProvider:
        return self._chosen.provider

    def plan_czt_forward(self, n: int, m: int, a: complex, w: complex) -> BluesteinCzt:
        """
        Plan an N-input, M-output CZT on the contour ``A * W**-k``.

        Raises:
            InvalidTransformSize: If N or M is not a positive integer.
            DegenerateContour: If A or W is zero or not finite.
        """
        return self._chosen.plan_czt_forward(n, m, a, w)

    def plan_zoom_fft(self, n: int, start: float, end: float) -> BluesteinCzt:
        """Plan a zoom transform of N samples onto N points in ``[start, end]``."""
        n = check_transform_size(n, "N")
        return self.plan_zoom_fft_with_m(n, n, start, end)

    def plan_zoom_fft_with_m(self, n: int, m: int, start: float, end: float) -> BluesteinCzt:
        """
        Plan a zoom transform of N samples onto M points from ``start``.

        ``start`` and ``end`` are normalized frequencies in cycles per sample.
        The point spacing is ``(end - start) / (N - 1)`` whatever M is, so M
        only sets how many points are taken. With ``start=0``,
        ``end=(N-1)/N`` and M = N the result is the DFT.
        """
        a, w = zoom_contour(n, start, end)
        return self.plan_czt_forward(n, m, a, w)

    def cached_lengths(self) -> list[int]:
        """Padded lengths L that currently have a cached FFT plan."""
        return self._chosen.cached_lengths()

    def clear_cache(self) -> None:
        """Drop every cached FFT plan. Existing engines keep theirs."""
        self._chosen.clear_cache()

    def __repr__(self) -> str:
        return (
            f"CztPlanner(dtype={self.dtype}, strategy={self.strategy!r}, "
            f"backend={self.provider.name!r})"
        )
