"""Direct O(N*M) chirp z-transform, used as a correctness reference."""

from __future__ import annotations

import numpy as np

from .diagnostics import assert_finite, is_debug_enabled
from .dsp.utils import as_complex_scalar, check_transform_size, resolve_complex_dtype
from .transform import CztTransform


class NaiveCzt(CztTransform):
    """Evaluate ``X[k] = sum_n x[n] * z_k**-n`` with ``z_k = A * W**-k`` directly.

    Each output costs O(N) operations, accumulated in complex128 regardless
    of the engine precision. Scratch holds the M outputs until all of them
    are known, since the input lives in the same buffer.
    """

    def __init__(self, n: int, m: int, a: complex, w: complex, dtype=np.complex128) -> None:
        self._n = check_transform_size(n, "N")
        self._m = check_transform_size(m, "M")
        self._a = as_complex_scalar(a, "A")
        self._w = as_complex_scalar(w, "W")
        self._dtype = resolve_complex_dtype(dtype)

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
    def a(self) -> complex:
        return self._a

    @property
    def w(self) -> complex:
        return self._w

    def get_scratch_len(self) -> int:
        return self._m

    def process_with_scratch(self, buffer: np.ndarray, scratch: np.ndarray) -> None:
        self._check_buffers(buffer, scratch)
        x = buffer[: self._n].astype(np.complex128)
        powers = np.arange(self._n, dtype=np.float64)
        log_a = np.log(np.complex128(self._a))
        log_w = np.log(np.complex128(self._w))
        for k in range(self._m):
            # z_k**-n = A**-n * W**(n*k)
            basis = np.exp(powers * (k * log_w - log_a))
            scratch[k] = np.dot(x, basis)
        buffer[: self._m] = scratch[: self._m]

        if is_debug_enabled():
            assert_finite(buffer[: self._m], "Output buffer")
