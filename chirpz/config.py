"""Planner configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

_BACKEND_ENV_VAR = "CHIRPZ_FFT_BACKEND"
_DEFAULT_BACKEND = "numpy"


@dataclass(frozen=True)
class PlannerConfig:
    """
    Configuration for a :class:`chirpz.plan.CztPlanner`.

    Args:
        backend: Convolution provider name. Supported values: "numpy",
            "scipy", "torch", "radix2".
        strategy: Execution strategy name. Supported values: "scalar".
        workers: Worker count handed to back ends that parallelise a single
            FFT (only "scipy" uses it). None keeps the library default.
    """

    backend: str = _DEFAULT_BACKEND
    strategy: str = "scalar"
    workers: int | None = None


def default_config() -> PlannerConfig:
    """
    Return the default planner configuration.

    The backend can be overridden with the CHIRPZ_FFT_BACKEND environment
    variable, read at call time.
    """
    backend = os.getenv(_BACKEND_ENV_VAR, _DEFAULT_BACKEND).strip().lower()
    return PlannerConfig(backend=backend or _DEFAULT_BACKEND)
