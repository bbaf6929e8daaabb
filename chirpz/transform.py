"""Common interface for chirp z-transform engines."""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from .diagnostics import assert_finite, is_debug_enabled
from .dsp.utils import check_complex_buffer
from .errors import LengthMismatch


class CztTransform(ABC):
    """Minimal contract shared by every CZT engine.

    An engine evaluates the z-transform of ``len_input`` samples at
    ``len_output`` contour points. Work happens in a caller-owned buffer of at
    least ``max(len_input, len_output)`` elements; on return its first
    ``len_output`` entries hold the result and the rest are unspecified.
    """

    @property
    @abstractmethod
    def len_input(self) -> int:
        """Number of input samples N."""

    @property
    @abstractmethod
    def len_output(self) -> int:
        """Number of output samples M."""

    @property
    @abstractmethod
    def dtype(self) -> np.dtype:
        """Complex dtype of buffers this engine accepts."""

    @abstractmethod
    def get_scratch_len(self) -> int:
        """Scratch elements required by :meth:`process_with_scratch`."""

    @abstractmethod
    def process_with_scratch(self, buffer: np.ndarray, scratch: np.ndarray) -> None:
        """Transform ``buffer`` in place using caller-supplied ``scratch``."""

    @property
    def buffer_len(self) -> int:
        """Minimum length of the in-place buffer."""
        return max(self.len_input, self.len_output)

    def process(self, buffer: np.ndarray) -> None:
        """Transform ``buffer`` in place, allocating scratch internally."""
        scratch = np.zeros(self.get_scratch_len(), dtype=self.dtype)
        self.process_with_scratch(buffer, scratch)

    def transform(self, x) -> np.ndarray:
        """Return the transform of ``x`` as a new array of ``len_output`` samples.

        Args:
            x: Array-like of exactly ``len_input`` samples. It is not modified.

        Raises:
            ValueError: If ``x`` is not 1D.
            LengthMismatch: If ``len(x) != len_input``.
        """
        x = np.asarray(x)
        if x.ndim != 1:
            raise ValueError(f"Expected 1D array, got {x.ndim}D array")
        if len(x) != self.len_input:
            raise LengthMismatch(
                f"Input length must be {self.len_input}, got {len(x)}"
            )
        buffer = np.zeros(self.buffer_len, dtype=self.dtype)
        buffer[: self.len_input] = x
        self.process(buffer)
        return buffer[: self.len_output].copy()

    def _check_buffers(self, buffer: np.ndarray, scratch: np.ndarray) -> None:
        # Runs before any write to caller memory.
        check_complex_buffer(buffer, self.dtype, self.buffer_len, "buffer")
        check_complex_buffer(scratch, self.dtype, self.get_scratch_len(), "scratch")
        # Extent check first; the exact solve only runs for interleaved views.
        if np.may_share_memory(buffer, scratch) and np.shares_memory(buffer, scratch):
            raise ValueError("buffer and scratch must not overlap")
        if is_debug_enabled():
            assert_finite(buffer[: self.len_input], "Input buffer")

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(len_input={self.len_input}, "
            f"len_output={self.len_output}, dtype={self.dtype})"
        )
