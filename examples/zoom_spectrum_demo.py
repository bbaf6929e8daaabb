"""Example: zooming into a narrow band of a spectrum with chirpz

Compares a plain DFT with a zoom transform around two closely spaced tones,
then evaluates a damped contour inside the unit circle.
"""

import cmath

import numpy as np

from chirpz import CztPlanner, czt


def example_zoom_band():
    """Example: resolve a tone between DFT bins."""
    print("=" * 60)
    print("Example 1: Zoom transform of an off-bin tone")
    print("=" * 60)

    n = 512
    fs = 1000.0
    t = np.arange(n) / fs
    f_tone = 123.4
    x = np.exp(2j * np.pi * f_tone * t) + 0.5 * np.exp(2j * np.pi * (f_tone + 6.0) * t)

    spectrum = np.abs(np.fft.fft(x))
    bin_hz = fs / n
    print(f"DFT bin spacing:      {bin_hz:.3f} Hz")
    print(f"DFT peak:             {np.argmax(spectrum) * bin_hz:.3f} Hz")

    # Zoom on 110-140 Hz: N outputs span the band end to end
    planner = CztPlanner()
    start, end = 110.0 / fs, 140.0 / fs
    engine = planner.plan_zoom_fft(n, start, end)

    buffer = np.zeros(engine.buffer_len, dtype=np.complex128)
    buffer[:n] = x
    engine.process(buffer)
    zoomed = np.abs(buffer[:n])
    freqs = np.linspace(110.0, 140.0, n)
    print(f"Zoom grid spacing:    {freqs[1] - freqs[0]:.4f} Hz")
    print(f"Zoom peak:            {freqs[np.argmax(zoomed)]:.3f} Hz (true {f_tone} Hz)")
    print(f"Padded FFT length L:  {engine.conv_len}")


def example_damped_contour():
    """Example: evaluate the z-transform on a circle of radius 0.98."""
    print("\n" + "=" * 60)
    print("Example 2: Damped contour")
    print("=" * 60)

    n = 64
    pole = 0.95 * cmath.exp(2j * np.pi * 0.1)
    x = pole ** np.arange(n)  # truncated impulse response of one pole

    radius = 0.98
    m = 256
    a = radius
    w = cmath.exp(-2j * np.pi / m)
    values = czt(x, m=m, w=w, a=a)
    k_peak = int(np.argmax(np.abs(values)))
    print(f"|X(z)| peaks at angle {k_peak / m:.4f} turns (pole at 0.1000)")
    print(f"Peak magnitude:       {np.abs(values[k_peak]):.2f}")


if __name__ == "__main__":
    example_zoom_band()
    example_damped_contour()
