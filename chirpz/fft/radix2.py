"""Radix-2 Stockham FFT in pure NumPy.

Each stage reads one half of the working array and writes the butterflies to
the other, so the transform ping-pongs between the caller's buffer and the
scratch region and ends in natural order without a bit-reversal pass.

For a stage of size ``n`` with stride ``s`` (``n * s == L``), viewing the
source as ``(2, n/2, s)`` and the destination as ``(n/2, 2, s)``::

    dst[p, 0, q] = src[0, p, q] + src[1, p, q]
    dst[p, 1, q] = (src[0, p, q] - src[1, p, q]) * exp(-2j*pi*p/n)

The twiddle factors of every stage are a strided slice of one table of
``exp(-2j*pi*k/L)``, k in [0, L/2), built once per plan.
"""

from __future__ import annotations

import numpy as np

from .base import ConvolutionProvider, FftPlan


class Radix2FftProvider(ConvolutionProvider):
    """Power-of-two forward FFT with a precomputed twiddle table."""

    @property
    def name(self) -> str:
        return "radix2"

    def _build_plan(self, length: int, dtype: np.dtype) -> FftPlan:
        if length & (length - 1) != 0:
            raise ValueError(f"radix2 provider needs a power-of-two length, got {length}")
        k = np.arange(length // 2, dtype=np.float64)
        twiddles = np.exp(-2j * np.pi * k / length).astype(dtype)
        twiddles.flags.writeable = False
        return FftPlan(length=length, dtype=dtype, backend=self.name, twiddles=twiddles)

    def scratch_length(self, plan: FftPlan) -> int:
        return plan.length

    def _execute(self, plan: FftPlan, buffer: np.ndarray, scratch: np.ndarray) -> None:
        length = plan.length
        # Stages reshape in place, which needs contiguous memory.
        src = buffer if buffer.flags.c_contiguous else buffer.copy()
        dst = scratch[:length] if scratch.flags.c_contiguous else np.empty_like(src)
        n = length
        s = 1
        while n > 1:
            half = n // 2
            w = plan.twiddles[::s][:, np.newaxis]
            a = src.reshape(2, half, s)
            out = dst.reshape(half, 2, s)
            np.add(a[0], a[1], out=out[:, 0, :])
            np.subtract(a[0], a[1], out=out[:, 1, :])
            out[:, 1, :] *= w
            src, dst = dst, src
            n = half
            s *= 2
        if src is not buffer:
            buffer[:] = src
