"""Bilinear interpolation on rectangular, non-uniform 2-D grids."""

from .accel import LookupAccelerator, find_interval
from .backends import InterpolationBackend, build_backend
from .config import InterpolatorConfig
from .errors import (
    AllocationError,
    EvalResult,
    Interpolator2DError,
    InterpolatorStateError,
    OutOfRangeError,
    ValidationError,
)
from .grid import GridInterpolator
from .kernels import bilinear, bilinear_grid
from .samples import gaussian_ridge, sample_grid, wave_mix
from .sweep import SweepResult, sweep_cells

__version__ = "0.1.0"

__all__ = [
    "AllocationError",
    "EvalResult",
    "GridInterpolator",
    "InterpolationBackend",
    "Interpolator2DError",
    "InterpolatorConfig",
    "InterpolatorStateError",
    "LookupAccelerator",
    "OutOfRangeError",
    "SweepResult",
    "ValidationError",
    "bilinear",
    "bilinear_grid",
    "build_backend",
    "find_interval",
    "gaussian_ridge",
    "sample_grid",
    "sweep_cells",
    "wave_mix",
]
