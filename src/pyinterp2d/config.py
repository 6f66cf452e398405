"""Runtime configuration for grid interpolators."""

from __future__ import annotations

from dataclasses import dataclass

BACKENDS = ("numpy", "numba", "auto")


@dataclass(frozen=True)
class InterpolatorConfig:
    """Container for user-controlled interpolator options."""

    backend: str = "numpy"
    use_accelerator: bool = True

    def __post_init__(self) -> None:
        if self.backend not in BACKENDS:
            raise ValueError("backend must be one of: numpy, numba, auto")
        if not isinstance(self.use_accelerator, bool):
            raise ValueError("use_accelerator must be a bool")
