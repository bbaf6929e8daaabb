"""Signal processing helpers shared by the transform engines."""

from .utils import (
    as_complex_scalar,
    check_complex_buffer,
    check_transform_size,
    next_pow2,
    resolve_complex_dtype,
)

__all__ = [
    "next_pow2",
    "resolve_complex_dtype",
    "check_transform_size",
    "as_complex_scalar",
    "check_complex_buffer",
]
