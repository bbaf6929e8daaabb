"""Tests for the one-shot czt / zoom_fft helpers."""

import cmath

import numpy as np
import pytest
import scipy.signal

from chirpz import CztPlanner, DegenerateContour, InvalidTransformSize, czt, zoom_fft


def test_czt_defaults_to_dft(random_signal):
    x = random_signal(50)
    np.testing.assert_allclose(czt(x), np.fft.fft(x), atol=1e-9)


def test_czt_matches_scipy(random_signal):
    x = random_signal(37)
    m = 61
    w = cmath.rect(0.999, -0.05)
    a = cmath.rect(1.01, 0.3)
    expected = scipy.signal.czt(x, m=m, w=w, a=a)
    np.testing.assert_allclose(czt(x, m=m, w=w, a=a), expected, rtol=1e-8, atol=1e-8)


def test_czt_real_input():
    x = np.array([1.0, 2.0, 3.0])
    out = czt(x)
    assert out.dtype == np.complex128
    np.testing.assert_allclose(out, np.fft.fft(x), atol=1e-12)


def test_czt_precision_follows_input(random_signal):
    assert czt(random_signal(8, dtype=np.complex64)).dtype == np.complex64
    assert czt(np.ones(8, dtype=np.float32)).dtype == np.complex64
    assert czt(np.ones(8, dtype=np.float64)).dtype == np.complex128


def test_czt_reuses_planner(random_signal):
    planner = CztPlanner()
    czt(random_signal(5), planner=planner)
    czt(random_signal(6), planner=planner)
    assert planner.cached_lengths() == [16]


def test_czt_does_not_modify_input(random_signal):
    x = random_signal(9)
    before = x.copy()
    czt(x, m=3)
    assert np.array_equal(x, before)


def test_czt_errors():
    with pytest.raises(InvalidTransformSize):
        czt(np.array([], dtype=np.complex128))
    with pytest.raises(InvalidTransformSize):
        czt(np.ones(4), m=0)
    with pytest.raises(DegenerateContour):
        czt(np.ones(4), w=0)
    with pytest.raises(ValueError, match="1D"):
        czt(np.ones((2, 2)))


def test_zoom_fft_band(random_signal):
    x = random_signal(100)
    freqs = 0.05 + np.arange(40) * (0.15 - 0.05) / 99
    n = np.arange(100)
    expected = np.array([np.sum(x * np.exp(-2j * np.pi * f * n)) for f in freqs])
    np.testing.assert_allclose(zoom_fft(x, 0.05, 0.15, m=40), expected, rtol=1e-9, atol=1e-8)


def test_zoom_fft_default_m_spans_band(random_signal):
    x = random_signal(30)
    freqs = np.linspace(0.2, 0.3, 30)
    n = np.arange(30)
    expected = np.array([np.sum(x * np.exp(-2j * np.pi * f * n)) for f in freqs])
    np.testing.assert_allclose(zoom_fft(x, 0.2, 0.3), expected, rtol=1e-9, atol=1e-8)


def test_zoom_fft_default_m_is_len(random_signal):
    x = random_signal(16)
    out = zoom_fft(x, 0.0, 15 / 16)
    assert out.shape == (16,)
    np.testing.assert_allclose(out, np.fft.fft(x), atol=1e-9)
