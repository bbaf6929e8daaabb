"""chirpz - chirp z-transforms via Bluestein's algorithm on NumPy arrays."""

__version__ = "0.1.0"

# Engines
from .bluestein import BluesteinCzt, conv_length

# Configuration
from .config import PlannerConfig, default_config

# Diagnostics
from .diagnostics import (
    assert_components_close,
    assert_finite,
    debug_context,
    is_debug_enabled,
    max_component_error,
    set_debug_enabled,
)

# Errors
from .errors import CztError, DegenerateContour, InvalidTransformSize, LengthMismatch

# Convolution providers
from .fft import (
    ConvolutionProvider,
    FftPlan,
    NumpyFftProvider,
    Radix2FftProvider,
    ScipyFftProvider,
    TorchFftProvider,
    available_providers,
    get_provider,
)
from .functional import czt, zoom_fft
from .naive import NaiveCzt

# Planning
from .plan import CztPlanner, CztPlannerScalar, zoom_contour
from .transform import CztTransform

__all__ = [
    # Version
    "__version__",
    # Interface and engines
    "CztTransform",
    "BluesteinCzt",
    "NaiveCzt",
    "conv_length",
    # Planning
    "CztPlanner",
    "CztPlannerScalar",
    "zoom_contour",
    "PlannerConfig",
    "default_config",
    # Functional
    "czt",
    "zoom_fft",
    # Convolution providers
    "FftPlan",
    "ConvolutionProvider",
    "NumpyFftProvider",
    "ScipyFftProvider",
    "TorchFftProvider",
    "Radix2FftProvider",
    "available_providers",
    "get_provider",
    # Errors
    "CztError",
    "InvalidTransformSize",
    "DegenerateContour",
    "LengthMismatch",
    # Diagnostics
    "assert_finite",
    "max_component_error",
    "assert_components_close",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
