"""Base classes for convolution providers.

A convolution provider exposes an unnormalized forward FFT through a narrow
plan/apply interface so the transform engines never depend on a particular
FFT library. Plans are immutable and may be shared by any number of engines.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

import numpy as np

from ..dsp.utils import check_complex_buffer, resolve_complex_dtype
from ..errors import LengthMismatch
from ..logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, eq=False)
class FftPlan:
    """
    Immutable execution plan for a forward FFT of fixed length.

    Attributes:
        length: Transform length.
        dtype: Complex dtype the plan operates on.
        backend: Name of the provider that built the plan.
        twiddles: Read-only precomputed table, for back ends that keep one.
    """

    length: int
    dtype: np.dtype
    backend: str
    twiddles: Optional[np.ndarray] = None

    def __repr__(self) -> str:
        return f"FftPlan(length={self.length}, dtype={self.dtype}, backend={self.backend!r})"


class ConvolutionProvider(ABC):
    """Abstract forward-FFT provider.

    Subclasses implement :meth:`_build_plan` and :meth:`_execute`. Plan caching,
    argument validation and logging live here. The plan cache is a plain dict
    and is not safe for concurrent mutation; built plans are read-only.
    """

    def __init__(self) -> None:
        self._plans: dict[tuple[int, np.dtype], FftPlan] = {}

    @property
    @abstractmethod
    def name(self) -> str:
        """Return provider identifier (e.g., 'numpy', 'radix2')."""

    @abstractmethod
    def _build_plan(self, length: int, dtype: np.dtype) -> FftPlan:
        """Construct a new plan. Called at most once per (length, dtype)."""

    @abstractmethod
    def _execute(self, plan: FftPlan, buffer: np.ndarray, scratch: np.ndarray) -> None:
        """Transform ``buffer`` in place using only ``scratch`` as workspace."""

    def plan(self, length: int, dtype=np.complex128) -> FftPlan:
        """Build or fetch the cached plan for ``length`` and ``dtype``.

        Raises:
            ValueError: If ``length`` < 1 or the back end cannot handle it.
        """
        if length < 1:
            raise ValueError(f"FFT length must be positive, got {length}")
        dtype = resolve_complex_dtype(dtype)
        key = (int(length), dtype)
        cached = self._plans.get(key)
        if cached is not None:
            return cached
        logger.debug("Building %s FFT plan: length=%d dtype=%s", self.name, length, dtype)
        plan = self._build_plan(int(length), dtype)
        self._plans[key] = plan
        return plan

    def apply_in_place(self, plan: FftPlan, buffer: np.ndarray, scratch: np.ndarray) -> None:
        """Apply the unnormalized forward FFT to ``buffer``.

        Args:
            plan: Plan built by this provider.
            buffer: 1D array of exactly ``plan.length`` elements, overwritten
                with its transform.
            scratch: Workspace of at least ``scratch_length(plan)`` elements.

        Raises:
            ValueError: If ``plan`` was built by another back end.
            LengthMismatch: If ``buffer`` or ``scratch`` has the wrong length.
        """
        if plan.backend != self.name:
            raise ValueError(
                f"Plan built by {plan.backend!r} cannot run on provider {self.name!r}"
            )
        check_complex_buffer(buffer, plan.dtype, plan.length, "buffer")
        if len(buffer) != plan.length:
            raise LengthMismatch(
                f"buffer length must equal plan length {plan.length}, got {len(buffer)}"
            )
        check_complex_buffer(scratch, plan.dtype, self.scratch_length(plan), "scratch")
        self._execute(plan, buffer, scratch)

    def scratch_length(self, plan: FftPlan) -> int:
        """Minimum scratch size required by :meth:`apply_in_place`."""
        return 0

    def length(self, plan: FftPlan) -> int:
        """Transform length the plan was built for."""
        return plan.length

    def cached_plans(self) -> list[FftPlan]:
        """Return the plans built so far, in build order."""
        return list(self._plans.values())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(plans={len(self._plans)})"
