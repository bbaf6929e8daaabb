"""Pytest configuration and shared fixtures for chirpz tests.

This module provides:
- Deterministic RNG fixtures for numpy and torch
- A factory for random complex test signals
"""

import os
from typing import Callable

import numpy as np
import pytest
import torch

from chirpz.diagnostics import set_debug_enabled


def _seed() -> int:
    return int(os.environ.get("TEST_RNG_SEED", "0"))


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This ensures tests are reproducible while allowing override for debugging.

    Returns:
        A seeded numpy.random.Generator instance.
    """
    return np.random.default_rng(_seed())


@pytest.fixture(scope="function")
def torch_rng() -> torch.Generator:
    """Provide a deterministic CPU torch RNG for tests."""
    generator = torch.Generator(device="cpu")
    generator.manual_seed(_seed())
    return generator


@pytest.fixture(scope="function", autouse=True)
def set_random_seeds() -> None:
    """Auto-use fixture to set global random seeds for reproducibility."""
    np.random.seed(_seed())
    torch.manual_seed(_seed())


@pytest.fixture(scope="function", autouse=True)
def debug_mode_off():
    """Run every test with debug mode off unless the test enables it."""
    set_debug_enabled(False)
    yield
    set_debug_enabled(False)


@pytest.fixture(scope="function")
def random_signal(rng: np.random.Generator) -> Callable[..., np.ndarray]:
    """Factory for complex signals with parts drawn uniformly from [0, 10).

    Call as ``random_signal(length, dtype=np.complex128)``.
    """

    def make(length: int, dtype=np.complex128) -> np.ndarray:
        re = rng.uniform(0.0, 10.0, size=length)
        im = rng.uniform(0.0, 10.0, size=length)
        return (re + 1j * im).astype(dtype)

    return make
