"""Numeric checks for complex spectra."""

from __future__ import annotations

import numpy as np


def assert_finite(values: np.ndarray, what: str = "Array") -> None:
    """
    Raise if any entry of a complex or real array is NaN or infinite.

    Parameters
    ----------
    values:
        Array to check.
    what:
        Name used in the error message.

    Raises
    ------
    ValueError
        If ``values`` contains a non-finite entry.
    """
    finite = np.isfinite(values)
    if not np.all(finite):
        first = int(np.flatnonzero(~finite)[0])
        raise ValueError(f"{what} contains non-finite values (first at index {first}).")


def max_component_error(expected: np.ndarray, actual: np.ndarray) -> float:
    """
    Largest absolute difference over real and imaginary parts.

    Parameters
    ----------
    expected, actual:
        Complex arrays of equal length.

    Returns
    -------
    float
        ``max(|Re(e - a)|, |Im(e - a)|)`` over all entries, 0.0 for empty input.

    Raises
    ------
    ValueError
        If the shapes differ.
    """
    expected = np.asarray(expected)
    actual = np.asarray(actual)
    if expected.shape != actual.shape:
        raise ValueError(
            f"Shape mismatch: expected {expected.shape}, actual {actual.shape}"
        )
    if expected.size == 0:
        return 0.0
    diff = expected.astype(np.complex128) - actual.astype(np.complex128)
    return float(max(np.max(np.abs(diff.real)), np.max(np.abs(diff.imag))))


def assert_components_close(
    expected: np.ndarray,
    actual: np.ndarray,
    atol: float = 1e-5,
) -> None:
    """
    Assert that two spectra agree component-wise within ``atol``.

    Both the real and the imaginary part of every entry must be within the
    tolerance.

    Raises
    ------
    AssertionError
        Naming the first offending index and both values.
    """
    expected = np.asarray(expected)
    actual = np.asarray(actual)
    if expected.shape != actual.shape:
        raise AssertionError(
            f"Shape mismatch: expected {expected.shape}, actual {actual.shape}"
        )
    diff = expected.astype(np.complex128) - actual.astype(np.complex128)
    bad = (np.abs(diff.real) >= atol) | (np.abs(diff.imag) >= atol)
    if np.any(bad):
        i = int(np.flatnonzero(bad)[0])
        raise AssertionError(
            f"Element {i} is not equal within {atol}: {expected[i]} != {actual[i]} "
            f"(max component error {max_component_error(expected, actual):.3e})"
        )
