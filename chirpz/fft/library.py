"""Convolution providers backed by FFT libraries.

NumPy, SciPy and PyTorch all manage their own internal plan caches, so the
plans built here only record length and precision. None of them needs caller
scratch.
"""

from __future__ import annotations

from typing import Optional

import numpy as np
import scipy.fft
import torch

from .base import ConvolutionProvider, FftPlan


class NumpyFftProvider(ConvolutionProvider):
    """Forward FFT through ``numpy.fft.fft`` (pocketfft)."""

    @property
    def name(self) -> str:
        return "numpy"

    def _build_plan(self, length: int, dtype: np.dtype) -> FftPlan:
        return FftPlan(length=length, dtype=dtype, backend=self.name)

    def _execute(self, plan: FftPlan, buffer: np.ndarray, scratch: np.ndarray) -> None:
        buffer[:] = np.fft.fft(buffer)


class ScipyFftProvider(ConvolutionProvider):
    """Forward FFT through ``scipy.fft.fft``.

    Preserves single precision and can split one transform across worker
    threads.
    """

    def __init__(self, workers: Optional[int] = None) -> None:
        super().__init__()
        self.workers = workers

    @property
    def name(self) -> str:
        return "scipy"

    def _build_plan(self, length: int, dtype: np.dtype) -> FftPlan:
        return FftPlan(length=length, dtype=dtype, backend=self.name)

    def _execute(self, plan: FftPlan, buffer: np.ndarray, scratch: np.ndarray) -> None:
        buffer[:] = scipy.fft.fft(buffer, overwrite_x=True, workers=self.workers)

    def __repr__(self) -> str:
        return f"ScipyFftProvider(workers={self.workers}, plans={len(self._plans)})"


class TorchFftProvider(ConvolutionProvider):
    """Forward FFT through ``torch.fft.fft`` on a zero-copy CPU tensor view.

    Tensors cannot have negative strides, so reversed views go through a
    contiguous copy instead.
    """

    @property
    def name(self) -> str:
        return "torch"

    def _build_plan(self, length: int, dtype: np.dtype) -> FftPlan:
        return FftPlan(length=length, dtype=dtype, backend=self.name)

    def _execute(self, plan: FftPlan, buffer: np.ndarray, scratch: np.ndarray) -> None:
        if any(stride < 0 for stride in buffer.strides):
            data = torch.from_numpy(np.ascontiguousarray(buffer))
            buffer[:] = torch.fft.fft(data).numpy()
            return
        view = torch.from_numpy(buffer)
        view.copy_(torch.fft.fft(view))
