"""Utility functions for signal processing.

Provides helper routines for input validation, precision handling and
power-of-two sizing.
"""

from __future__ import annotations

import cmath
import numbers

import numpy as np

from ..errors import DegenerateContour, InvalidTransformSize, LengthMismatch

_COMPLEX_DTYPES = {
    np.dtype(np.complex64): np.dtype(np.complex64),
    np.dtype(np.complex128): np.dtype(np.complex128),
    np.dtype(np.float32): np.dtype(np.complex64),
    np.dtype(np.float64): np.dtype(np.complex128),
}

_DTYPE_ALIASES = {
    "single": np.dtype(np.complex64),
    "double": np.dtype(np.complex128),
}


def next_pow2(n: int) -> int:
    """Return the next power-of-two >= n.

    Args:
        n: Positive integer.

    Returns:
        Smallest power-of-two >= n. Returns 1 if n <= 0.
    """
    if n <= 0:
        return 1
    if n & (n - 1) == 0:  # Already a power of 2
        return n
    return 1 << (n - 1).bit_length()


def resolve_complex_dtype(dtype) -> np.dtype:
    """Map a precision specifier to a supported complex dtype.

    Args:
        dtype: complex64/complex128, float32/float64 (mapped to the complex
            type with the same component precision), or "single"/"double".

    Returns:
        ``np.dtype(np.complex64)`` or ``np.dtype(np.complex128)``.

    Raises:
        TypeError: If the precision is not supported.
    """
    if isinstance(dtype, str) and dtype.lower() in _DTYPE_ALIASES:
        return _DTYPE_ALIASES[dtype.lower()]
    try:
        resolved = np.dtype(dtype)
    except TypeError as exc:
        raise TypeError(f"Unsupported precision: {dtype!r}") from exc
    if resolved not in _COMPLEX_DTYPES:
        raise TypeError(
            f"Unsupported precision: {resolved}. "
            "Use complex64/complex128, float32/float64, 'single' or 'double'."
        )
    return _COMPLEX_DTYPES[resolved]


def check_transform_size(n, name: str) -> int:
    """Validate a transform length and return it as a Python int.

    Raises:
        InvalidTransformSize: If ``n`` is not a positive integer.
    """
    if isinstance(n, (bool, np.bool_)) or not isinstance(n, numbers.Integral):
        raise InvalidTransformSize(f"{name} must be a positive integer, got {n!r}")
    if n <= 0:
        raise InvalidTransformSize(f"{name} must be a positive integer, got {n}")
    return int(n)


def as_complex_scalar(value, name: str) -> complex:
    """Validate a contour parameter and return it as a Python complex.

    Raises:
        DegenerateContour: If ``value`` is zero, NaN or infinite.
        TypeError: If ``value`` is not a number.
    """
    if not isinstance(value, numbers.Number):
        raise TypeError(f"{name} must be a complex number, got {type(value)}")
    z = complex(value)
    if z == 0:
        raise DegenerateContour(f"{name} must be nonzero")
    if not cmath.isfinite(z):
        raise DegenerateContour(f"{name} must be finite, got {z}")
    return z


def check_complex_buffer(buf, dtype: np.dtype, min_len: int, name: str) -> None:
    """Validate a caller-owned work array without touching its contents.

    Args:
        buf: Candidate array.
        dtype: Required complex dtype.
        min_len: Minimum number of elements.
        name: Name used in error messages ("buffer", "scratch").

    Raises:
        TypeError: If ``buf`` is not a 1D ndarray of ``dtype``.
        LengthMismatch: If ``buf`` is shorter than ``min_len``.
    """
    if not isinstance(buf, np.ndarray):
        raise TypeError(f"{name} must be a numpy.ndarray, got {type(buf)}")
    if buf.ndim != 1:
        raise TypeError(f"{name} must be 1D, got {buf.ndim}D array")
    if buf.dtype != dtype:
        raise TypeError(f"{name} dtype must be {dtype}, got {buf.dtype}")
    if len(buf) < min_len:
        raise LengthMismatch(
            f"{name} length must be >= {min_len}, got {len(buf)}"
        )
