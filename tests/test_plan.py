"""Tests for the CZT planner: plan caching, strategies and zoom mapping."""

import cmath
import io
import logging

import numpy as np
import pytest

from chirpz import (
    BluesteinCzt,
    CztPlanner,
    InvalidTransformSize,
    PlannerConfig,
    zoom_contour,
)
from chirpz.diagnostics import assert_components_close
from chirpz.logging import configure_logging


def dtft(x: np.ndarray, freqs: np.ndarray) -> np.ndarray:
    n = np.arange(len(x))
    return np.array([np.sum(x * np.exp(-2j * np.pi * f * n)) for f in freqs])


def run(engine, x):
    buffer = np.zeros(engine.buffer_len, dtype=engine.dtype)
    buffer[: len(x)] = x
    engine.process(buffer)
    return buffer[: engine.len_output]


def test_plan_returns_bluestein_engine():
    engine = CztPlanner().plan_czt_forward(10, 12, 1.0, 1j)
    assert isinstance(engine, BluesteinCzt)
    assert engine.len_input == 10
    assert engine.len_output == 12
    assert engine.conv_len == 32


def test_equal_conv_len_shares_plan():
    planner = CztPlanner()
    e1 = planner.plan_czt_forward(5, 5, 1.0, 1j)  # L = 16
    e2 = planner.plan_czt_forward(8, 9, 0.5, -1j)  # L = 16
    e3 = planner.plan_czt_forward(9, 9, 1.0, 1j)  # L = 32
    assert e1.plan is e2.plan
    assert e1.plan is not e3.plan
    assert planner.cached_lengths() == [16, 32]


def test_clear_cache():
    planner = CztPlanner()
    engine = planner.plan_czt_forward(5, 5, 1.0, 1j)
    planner.clear_cache()
    assert planner.cached_lengths() == []
    # Existing engines keep working
    buffer = np.ones(5, dtype=np.complex128)
    engine.process(buffer)
    assert np.all(np.isfinite(buffer))


def test_cache_logging():
    stream = io.StringIO()
    configure_logging(level=logging.DEBUG, stream=stream)
    try:
        planner = CztPlanner()
        planner.plan_czt_forward(5, 5, 1.0, 1j)
        planner.plan_czt_forward(6, 6, 1.0, 1j)
    finally:
        configure_logging(level=logging.WARNING)
    output = stream.getvalue()
    assert "cache miss: L=16" in output
    assert "cache hit: L=16" in output


def test_planner_precision():
    assert CztPlanner().dtype == np.complex128
    assert CztPlanner(dtype="single").dtype == np.complex64
    assert CztPlanner(dtype=np.float64).dtype == np.complex128
    engine = CztPlanner(dtype=np.complex64).plan_czt_forward(4, 4, 1.0, 1j)
    assert engine.dtype == np.complex64
    with pytest.raises(TypeError):
        CztPlanner(dtype=np.int32)


def test_planner_strategy_and_backend_selection():
    planner = CztPlanner(config=PlannerConfig(backend="radix2"))
    assert planner.strategy == "scalar"
    assert planner.provider.name == "radix2"

    with pytest.raises(ValueError, match="backend"):
        CztPlanner(config=PlannerConfig(backend="fftw"))
    with pytest.raises(ValueError, match="strategy"):
        CztPlanner(config=PlannerConfig(strategy="simd"))


def test_backend_from_environment(monkeypatch):
    monkeypatch.setenv("CHIRPZ_FFT_BACKEND", "scipy")
    assert CztPlanner().provider.name == "scipy"
    monkeypatch.setenv("CHIRPZ_FFT_BACKEND", "")
    assert CztPlanner().provider.name == "numpy"


@pytest.mark.parametrize("n", [1, 5, 16, 33, 64])
def test_zoom_full_band_reduces_to_fft(n, random_signal):
    x = random_signal(n)
    engine = CztPlanner().plan_zoom_fft(n, 0.0, (n - 1) / n)
    assert_components_close(np.fft.fft(x), run(engine, x), atol=1e-5)


def test_zoom_with_m_samples_band(random_signal):
    n, m = 64, 33
    start, end = 0.1, 0.2
    x = random_signal(n)
    engine = CztPlanner().plan_zoom_fft_with_m(n, m, start, end)
    expected = dtft(x, start + np.arange(m) * (end - start) / (n - 1))
    assert_components_close(expected, run(engine, x), atol=1e-5)


@pytest.mark.parametrize("n,m", [(8, 5), (8, 8), (8, 13), (2, 1)])
def test_zoom_step_follows_input_length(n, m):
    engine = CztPlanner().plan_zoom_fft_with_m(n, m, 0.0, 0.5)
    assert cmath.isclose(engine.a, 1.0, abs_tol=1e-12)
    assert cmath.isclose(engine.w, cmath.exp(-2j * np.pi * 0.5 / (n - 1)), abs_tol=1e-12)


def test_zoom_single_input_sample():
    engine = CztPlanner().plan_zoom_fft_with_m(1, 4, 0.25, 0.5)
    assert engine.w == 1.0
    assert cmath.isclose(engine.a, 1j, abs_tol=1e-12)
    # z_k == A for every k, and a one-sample signal transforms to x[0]
    np.testing.assert_allclose(run(engine, np.array([3.0 - 1.0j])), [3.0 - 1.0j] * 4, atol=1e-12)


def test_zoom_locates_off_bin_tone():
    """A zoomed band pins down a tone that falls between DFT bins."""
    n = 256
    f0 = 0.2 + 0.3 / n
    start, end = 0.19, 0.21
    x = np.exp(2j * np.pi * f0 * np.arange(n)).astype(np.complex128)
    engine = CztPlanner().plan_zoom_fft(n, start, end)
    spectrum = np.abs(run(engine, x))
    step = (end - start) / (n - 1)
    freqs = start + np.arange(n) * step
    assert abs(freqs[int(np.argmax(spectrum))] - f0) <= 0.5 * step + 1e-12


def test_zoom_contour_parameters():
    a, w = zoom_contour(5, 0.25, 0.75)
    assert cmath.isclose(a, 1j, abs_tol=1e-12)
    assert cmath.isclose(w, cmath.exp(-2j * np.pi * 0.5 / 4), abs_tol=1e-12)
    a, w = zoom_contour(1, 0.1, 0.3)
    assert w == 1.0
    with pytest.raises(InvalidTransformSize):
        zoom_contour(0, 0.0, 0.5)
    with pytest.raises(ValueError):
        zoom_contour(4, 0.0, float("nan"))


def test_zoom_invalid_sizes():
    planner = CztPlanner()
    with pytest.raises(InvalidTransformSize):
        planner.plan_zoom_fft(0, 0.0, 0.5)
    with pytest.raises(InvalidTransformSize):
        planner.plan_zoom_fft_with_m(8, 0, 0.0, 0.5)


def test_planner_repr():
    text = repr(CztPlanner(config=PlannerConfig(backend="torch")))
    assert "torch" in text
    assert "scalar" in text
