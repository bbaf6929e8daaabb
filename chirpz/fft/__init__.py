"""Convolution providers: the forward-FFT back ends used by the engines."""

from __future__ import annotations

from typing import Optional

from .base import ConvolutionProvider, FftPlan
from .library import NumpyFftProvider, ScipyFftProvider, TorchFftProvider
from .radix2 import Radix2FftProvider

_PROVIDERS = {
    "numpy": NumpyFftProvider,
    "scipy": ScipyFftProvider,
    "torch": TorchFftProvider,
    "radix2": Radix2FftProvider,
}


def available_providers() -> list[str]:
    """Return the registered provider names."""
    return sorted(_PROVIDERS)


def get_provider(name: str, workers: Optional[int] = None) -> ConvolutionProvider:
    """
    Create a fresh convolution provider by name.

    Args:
        name: One of :func:`available_providers`.
        workers: Thread count for providers that accept one (scipy).

    Returns:
        A new provider instance with an empty plan cache.

    Raises:
        ValueError: If the name is not registered.
    """
    key = name.lower()
    if key not in _PROVIDERS:
        raise ValueError(
            f"Unsupported FFT backend: {name!r}. Supported backends: {available_providers()}"
        )
    if key == "scipy":
        return ScipyFftProvider(workers=workers)
    return _PROVIDERS[key]()


__all__ = [
    "FftPlan",
    "ConvolutionProvider",
    "NumpyFftProvider",
    "ScipyFftProvider",
    "TorchFftProvider",
    "Radix2FftProvider",
    "available_providers",
    "get_provider",
]
