"""Error taxonomy and tagged evaluation result."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


class Interpolator2DError(Exception):
    """Base class for every error raised by ``pyinterp2d``."""


class AllocationError(Interpolator2DError, MemoryError):
    """Grid storage could not be obtained at construction."""


class ValidationError(Interpolator2DError, ValueError):
    """A coordinate axis is not strictly increasing."""

    def __init__(self, axis: str, index: int, previous: float, value: float) -> None:
        self.axis = axis
        self.index = index
        self.previous = previous
        self.value = value
        super().__init__(
            f"{axis} must be strictly increasing: {axis}[{index}]={value!r} "
            f"is not greater than {axis}[{index - 1}]={previous!r}"
        )


class OutOfRangeError(Interpolator2DError, ValueError):
    """A query point lies outside the grid's bounding box."""

    def __init__(self, point: Tuple[float, float], bounds: Tuple[float, float, float, float]) -> None:
        self.point = point
        self.bounds = bounds
        xmin, xmax, ymin, ymax = bounds
        super().__init__(
            f"point ({point[0]!r}, {point[1]!r}) outside grid "
            f"[{xmin!r}, {xmax!r}] x [{ymin!r}, {ymax!r}]"
        )


class InterpolatorStateError(Interpolator2DError, RuntimeError):
    """Operation issued before a successful initialize or after destroy."""


@dataclass(frozen=True)
class EvalResult:
    """Outcome of a non-raising evaluation: either ``value`` or ``error``."""

    value: float | None = None
    error: Interpolator2DError | None = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            raise ValueError("exactly one of value or error must be set")

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> float:
        if self.error is not None:
            raise self.error
        assert self.value is not None
        return self.value
