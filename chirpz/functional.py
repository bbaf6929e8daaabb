"""One-shot helpers that plan, run and return a new array."""

from __future__ import annotations

import cmath
from typing import Optional

import numpy as np

from .dsp.utils import check_transform_size
from .plan import CztPlanner


def _planner_for(x: np.ndarray, planner: Optional[CztPlanner]) -> CztPlanner:
    if planner is not None:
        return planner
    if x.dtype in (np.dtype(np.complex64), np.dtype(np.float32)):
        return CztPlanner(dtype=np.complex64)
    return CztPlanner(dtype=np.complex128)


def _as_signal(x) -> np.ndarray:
    x = np.asarray(x)
    if x.ndim != 1:
        raise ValueError(f"Expected 1D array, got {x.ndim}D array")
    return x


def czt(
    x,
    m: Optional[int] = None,
    w: Optional[complex] = None,
    a: complex = 1.0 + 0.0j,
    planner: Optional[CztPlanner] = None,
) -> np.ndarray:
    """
    Chirp z-transform of a 1D signal.

    Evaluates ``X[k] = sum_n x[n] * (a * w**-k)**-n`` for k in [0, m). The
    defaults ``m = len(x)``, ``w = exp(-2j*pi/m)`` and ``a = 1`` give the DFT.

    Args:
        x: Input samples (1D array-like). Not modified.
        m: Number of output points (default: ``len(x)``).
        w: Ratio between contour points (default: ``exp(-2j*pi/m)``).
        a: Contour start point (default: 1).
        planner: Planner to use. Reusing one across calls shares FFT plans.
            By default a new planner is made whose precision follows ``x``.

    Returns:
        Complex array of length ``m``.
    """
    x = _as_signal(x)
    planner = _planner_for(x, planner)
    n = check_transform_size(len(x), "N")
    m = check_transform_size(n if m is None else m, "M")
    if w is None:
        w = cmath.exp(-2j * cmath.pi / m)
    engine = planner.plan_czt_forward(n, m, a, w)
    return engine.transform(x)


def zoom_fft(
    x,
    start: float,
    end: float,
    m: Optional[int] = None,
    planner: Optional[CztPlanner] = None,
) -> np.ndarray:
    """
    Spectrum of ``x`` at ``m`` normalized frequencies (cycles per sample)
    starting at ``start``.

    Points are ``(end - start) / (len(x) - 1)`` apart, so the default
    ``m = len(x)`` covers ``[start, end]`` inclusive.

    Args:
        x: Input samples (1D array-like). Not modified.
        start: Band start.
        end: Band end.
        m: Number of output points (default: ``len(x)``).
        planner: Planner to use (default: new planner matching ``x``).

    Returns:
        Complex array of length ``m``.
    """
    x = _as_signal(x)
    planner = _planner_for(x, planner)
    if m is None:
        m = len(x)
    engine = planner.plan_zoom_fft_with_m(len(x), m, start, end)
    return engine.transform(x)
