"""Bluestein's algorithm for the chirp z-transform.

Using ``n*k = (n**2 + k**2 - (k - n)**2) / 2`` the CZT

    X[k] = sum_n x[n] * A**-n * W**(n*k)

becomes a premultiplication by ``Y[n] = A**-n * W**(n**2/2)``, a linear
convolution with the chirp ``W**(-j**2/2)`` and a postmultiplication by
``X[k] = W**(k**2/2)``. The convolution is evaluated cyclically at a
power-of-two length ``L >= N + M - 1`` so that no wrapped term lands in the
first M output slots.

The inverse FFT is expressed with the forward plan only:
``ifft(z) = conj(fft(conj(z))) / L``. Providers therefore only need an
unnormalized forward transform, and the engine applies the ``1/L`` factor in
the final step.

References:
    - L. Bluestein, "A linear filtering approach to the computation of the
      discrete Fourier transform", IEEE Trans. Audio Electroacoust. (1970)
    - L. Rabiner, R. Schafer, C. Rader, "The chirp z-transform algorithm",
      IEEE Trans. Audio Electroacoust. (1969)
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from .diagnostics import assert_finite, is_debug_enabled
from .dsp.utils import (
    as_complex_scalar,
    check_transform_size,
    next_pow2,
    resolve_complex_dtype,
)
from .errors import LengthMismatch
from .fft.base import ConvolutionProvider, FftPlan
from .logging import get_logger
from .transform import CztTransform

logger = get_logger(__name__)


def conv_length(n: int, m: int) -> int:
    """Padded cyclic convolution length for an N-in, M-out transform."""
    return next_pow2(n + m - 1)


def _chirp(log_w: complex, exponents: np.ndarray) -> np.ndarray:
    # W**p via the principal logarithm, in double precision.
    return np.exp(exponents * log_w)


def _readonly(arr: np.ndarray) -> np.ndarray:
    arr.flags.writeable = False
    return arr


class BluesteinCzt(CztTransform):
    """Chirp z-transform engine built on one forward-FFT plan of length L.

    All coefficient sequences are computed at construction and stored as
    read-only arrays, so an engine can be shared between threads as long as
    each call supplies its own buffer and scratch.

    Args:
        n: Input length N.
        m: Output length M.
        a: Contour start point A.
        w: Contour step ratio W; output k is evaluated at ``A * W**-k``.
        provider: Convolution provider that runs the FFTs.
        plan: Optional prebuilt plan of length L from ``provider``. When
            omitted the provider is asked for one.
        dtype: Complex precision of buffers (complex64 or complex128).

    Raises:
        InvalidTransformSize: If N or M is not a positive integer.
        DegenerateContour: If A or W is zero or not finite.
        LengthMismatch: If ``plan`` does not have length L.
        TypeError: If ``plan`` was built for another precision.
        ValueError: If ``plan`` belongs to a different provider.
    """

    def __init__(
        self,
        n: int,
        m: int,
        a: complex,
        w: complex,
        provider: ConvolutionProvider,
        plan: Optional[FftPlan] = None,
        dtype=np.complex128,
    ) -> None:
        self._n = check_transform_size(n, "N")
        self._m = check_transform_size(m, "M")
        self._a = as_complex_scalar(a, "A")
        self._w = as_complex_scalar(w, "W")
        self._dtype = resolve_complex_dtype(dtype)
        self._conv_len = conv_length(self._n, self._m)

        if plan is None:
            plan = provider.plan(self._conv_len, self._dtype)
        elif plan.length != self._conv_len:
            raise LengthMismatch(
                f"Plan length must be {self._conv_len} for N={self._n}, M={self._m}, "
                f"got {plan.length}"
            )
        elif plan.dtype != self._dtype:
            raise TypeError(f"Plan dtype must be {self._dtype}, got {plan.dtype}")
        elif plan.backend != provider.name:
            raise ValueError(
                f"Plan built by {plan.backend!r} cannot run on provider {provider.name!r}"
            )
        self._provider = provider
        self._plan = plan
        self._fft_scratch_len = provider.scratch_length(plan)

        log_a = np.log(np.complex128(self._a))
        log_w = np.log(np.complex128(self._w))
        n_idx = np.arange(self._n, dtype=np.float64)
        k_idx = np.arange(self._m, dtype=np.float64)

        self._y = _readonly(
            np.exp(-n_idx * log_a + 0.5 * n_idx * n_idx * log_w).astype(self._dtype)
        )
        self._v = _readonly(self._filter_spectrum(log_w))
        self._x = _readonly(_chirp(log_w, 0.5 * k_idx * k_idx).astype(self._dtype))

        logger.debug(
            "Planned Bluestein CZT: N=%d M=%d L=%d dtype=%s backend=%s",
            self._n,
            self._m,
            self._conv_len,
            self._dtype,
            provider.name,
        )

    def _filter_spectrum(self, log_w: complex) -> np.ndarray:
        """FFT of the wrapped chirp kernel.

        Lags 0..M-1 sit at the front, lags -(N-1)..-1 at the tail
        ``[L-N+1, L)``, and the slots in between stay zero. Since
        ``L >= N + M - 1`` the two regions never overlap.
        """
        n, m, size = self._n, self._m, self._conv_len
        kernel = np.zeros(size, dtype=np.complex128)
        lags = np.arange(m, dtype=np.float64)
        kernel[:m] = _chirp(log_w, -0.5 * lags * lags)
        tail_start = size - n + 1
        if tail_start < size:
            neg = size - np.arange(tail_start, size, dtype=np.float64)
            kernel[tail_start:] = _chirp(log_w, -0.5 * neg * neg)

        spectrum = kernel.astype(self._dtype)
        scratch = np.zeros(self._fft_scratch_len, dtype=self._dtype)
        self._provider.apply_in_place(self._plan, spectrum, scratch)
        return spectrum

    @property
    def len_input(self) -> int:
        return self._n

    @property
    def len_output(self) -> int:
        return self._m

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    @property
    def conv_len(self) -> int:
        """Padded convolution length L."""
        return self._conv_len

    @property
    def a(self) -> complex:
        return self._a

    @property
    def w(self) -> complex:
        return self._w

    @property
    def plan(self) -> FftPlan:
        return self._plan

    @property
    def provider(self) -> ConvolutionProvider:
        return self._provider

    def get_scratch_len(self) -> int:
        return self._fft_scratch_len + self._conv_len

    def process_with_scratch(self, buffer: np.ndarray, scratch: np.ndarray) -> None:
        """Replace ``buffer[:N]`` with the M transform samples in ``buffer[:M]``.

        Args:
            buffer: 1D array of the engine dtype, ``len >= max(N, M)``.
            scratch: 1D array of the engine dtype,
                ``len >= get_scratch_len()``. Contents on entry are ignored.

        Raises:
            TypeError: If either array is not a 1D ndarray of the engine dtype.
            LengthMismatch: If either array is too short.
        """
        self._check_buffers(buffer, scratch)
        n, m, size = self._n, self._m, self._conv_len
        fft_scratch = scratch[: self._fft_scratch_len]
        work = scratch[self._fft_scratch_len : self._fft_scratch_len + size]

        # y[n] = x[n] * A**-n * W**(n**2/2), zero padded to L
        np.multiply(buffer[:n], self._y, out=work[:n])
        work[n:] = 0

        self._provider.apply_in_place(self._plan, work, fft_scratch)
        np.multiply(work, self._v, out=work)
        np.conjugate(work, out=work)
        self._provider.apply_in_place(self._plan, work, fft_scratch)

        out = buffer[:m]
        np.conjugate(work[:m], out=out)
        out *= self._x
        out /= size

        if is_debug_enabled():
            assert_finite(out, "Output buffer")
