"""Bilinear interpolation over a rectangular, non-uniform grid.

The interpolator follows an explicit lifecycle::

    interp = GridInterpolator.create(nx, ny)   # storage allocated
    interp.initialize(xs, ys, values)          # validated and copied
    interp.calculate(qx, qy)                   # any number of times
    interp.destroy()                           # storage released

Each axis owns a :class:`~pyinterp2d.accel.LookupAccelerator`, so queries
that sweep through neighbouring cells avoid a full binary search. Because the
accelerators mutate on every evaluation, one instance must not be evaluated
from several threads at once.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from .accel import LookupAccelerator, find_interval
from .backends.factory import build_backend
from .config import InterpolatorConfig
from .errors import (
    AllocationError,
    EvalResult,
    Interpolator2DError,
    InterpolatorStateError,
    OutOfRangeError,
    ValidationError,
)
from .kernels import bilinear

logger = logging.getLogger(__name__)


def _check_dimension(name: str, n) -> int:
    if isinstance(n, (bool, np.bool_)) or not isinstance(n, (int, np.integer)):
        raise ValueError(f"{name} must be an integer")
    if n < 2:
        raise ValueError(f"{name} must be >= 2")
    return int(n)


def _check_increasing(axis: str, values: np.ndarray) -> None:
    # element 0 is taken as given; each later node must exceed its predecessor
    bad = np.flatnonzero(~(values[1:] > values[:-1]))
    if bad.size:
        i = int(bad[0]) + 1
        raise ValidationError(axis, i, float(values[i - 1]), float(values[i]))


@dataclass
class _GridStorage:
    """Owned buffers of one grid, allocated together."""

    x: np.ndarray
    y: np.ndarray
    z: np.ndarray

    @classmethod
    def allocate(cls, nx: int, ny: int) -> "_GridStorage":
        try:
            x = np.zeros(nx, dtype=float)
            y = np.zeros(ny, dtype=float)
            z = np.zeros((nx, ny), dtype=float)
        except (MemoryError, ValueError) as exc:
            raise AllocationError(f"cannot allocate a {nx}x{ny} grid") from exc
        return cls(x=x, y=y, z=z)


class GridInterpolator:
    """Piecewise-bilinear interpolant of samples ``z[i, j] = f(x[i], y[j])``.

    ``GridInterpolator(nx, ny)`` and :meth:`create` are equivalent: both raise
    ``ValueError`` for dimensions below 2 and
    :class:`~pyinterp2d.errors.AllocationError` when memory runs out. The new
    instance must be initialized before evaluation.
    """

    def __init__(self, nx: int, ny: int, config: InterpolatorConfig | None = None) -> None:
        self._nx = _check_dimension("nx", nx)
        self._ny = _check_dimension("ny", ny)
        self.config = config if config is not None else InterpolatorConfig()
        self._storage: _GridStorage | None = _GridStorage.allocate(self._nx, self._ny)
        self._xacc = LookupAccelerator()
        self._yacc = LookupAccelerator()
        self._backend = None
        self._initialized = False
        self._destroyed = False
        logger.debug("allocated %dx%d grid", self._nx, self._ny)

    @classmethod
    def create(cls, nx: int, ny: int, config: InterpolatorConfig | None = None) -> "GridInterpolator":
        """Allocate storage for an ``nx`` by ``ny`` grid."""
        return cls(nx, ny, config)

    def __enter__(self) -> "GridInterpolator":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.destroy()

    def __repr__(self) -> str:
        if self._destroyed:
            state = "destroyed"
        elif self._initialized:
            state = "initialized"
        else:
            state = "allocated"
        return f"GridInterpolator(nx={self._nx}, ny={self._ny}, state={state})"

    # -- state -----------------------------------------------------------

    @property
    def nx(self) -> int:
        return self._nx

    @property
    def ny(self) -> int:
        return self._ny

    @property
    def shape(self) -> Tuple[int, int]:
        return self._nx, self._ny

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    def _live_storage(self) -> _GridStorage:
        if self._storage is None:
            raise InterpolatorStateError("interpolator has been destroyed")
        return self._storage

    def _ready_storage(self) -> _GridStorage:
        storage = self._live_storage()
        if not self._initialized:
            raise InterpolatorStateError("interpolator is not initialized")
        return storage

    @staticmethod
    def _readonly(arr: np.ndarray) -> np.ndarray:
        view = arr.view()
        view.flags.writeable = False
        return view

    @property
    def x(self) -> np.ndarray:
        return self._readonly(self._ready_storage().x)

    @property
    def y(self) -> np.ndarray:
        return self._readonly(self._ready_storage().y)

    @property
    def z(self) -> np.ndarray:
        return self._readonly(self._ready_storage().z)

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        s = self._ready_storage()
        return float(s.x[0]), float(s.x[-1]), float(s.y[0]), float(s.y[-1])

    @property
    def accelerator_stats(self) -> dict[str, dict[str, int]]:
        return {
            "x": {"hits": self._xacc.hits, "misses": self._xacc.misses},
            "y": {"hits": self._yacc.hits, "misses": self._yacc.misses},
        }

    # -- lifecycle -------------------------------------------------------

    def initialize(self, xs, ys, values) -> None:
        """Load node coordinates and samples.

        ``values`` has shape ``(ny, nx)`` with ``values[j][i] = f(xs[i], ys[j])``.
        Both axes must be strictly increasing from their second element on;
        otherwise :class:`~pyinterp2d.errors.ValidationError` is raised and the
        instance is left uninitialized until a later call succeeds.
        """
        storage = self._live_storage()
        xs = np.asarray(xs, dtype=float)
        ys = np.asarray(ys, dtype=float)
        values = np.asarray(values, dtype=float)
        if xs.shape != (self.nx,):
            raise ValueError(f"xs must have shape ({self.nx},), got {xs.shape}")
        if ys.shape != (self.ny,):
            raise ValueError(f"ys must have shape ({self.ny},), got {ys.shape}")
        if values.shape != (self.ny, self.nx):
            raise ValueError(f"values must have shape ({self.ny}, {self.nx}), got {values.shape}")

        self._initialized = False
        try:
            _check_increasing("x", xs)
            _check_increasing("y", ys)
        except ValidationError as exc:
            logger.debug("rejected grid: %s", exc)
            raise

        storage.x[:] = xs
        storage.y[:] = ys
        storage.z[:, :] = values.T
        self._xacc.reset()
        self._yacc.reset()
        self._initialized = True
        logger.debug(
            "initialized %dx%d grid over [%g, %g] x [%g, %g]",
            self.nx,
            self.ny,
            xs[0],
            xs[-1],
            ys[0],
            ys[-1],
        )

    def destroy(self) -> None:
        """Release the grid buffers; the instance cannot be used afterwards."""
        if self._destroyed:
            return
        self._storage = None
        self._backend = None
        self._xacc.reset()
        self._yacc.reset()
        self._initialized = False
        self._destroyed = True
        logger.debug("destroyed %dx%d grid", self.nx, self.ny)

    # -- evaluation ------------------------------------------------------

    def _locate(self, acc: LookupAccelerator, coords: np.ndarray, q: float) -> int:
        if self.config.use_accelerator:
            return acc.locate(coords, q)
        return find_interval(coords, q)

    def calculate(self, qx: float, qy: float) -> float:
        """Bilinear estimate of ``f(qx, qy)``.

        Points on the bounding box are accepted; anything outside raises
        :class:`~pyinterp2d.errors.OutOfRangeError`. Infinite nodes are
        accepted by :meth:`initialize`; querying such a node returns ``nan``
        (``inf / inf`` in the cell fraction) with a numpy ``RuntimeWarning``.
        """
        s = self._ready_storage()
        x, y, z = s.x, s.y, s.z
        qx = float(qx)
        qy = float(qy)
        if not (x[0] <= qx <= x[-1] and y[0] <= qy <= y[-1]):
            raise OutOfRangeError((qx, qy), self.bounds)

        i = self._locate(self._xacc, x, qx)
        j = self._locate(self._yacc, y, qy)
        tx = (qx - x[i]) / (x[i + 1] - x[i])
        ty = (qy - y[j]) / (y[j + 1] - y[j])
        return float(bilinear(z[i, j], z[i + 1, j], z[i, j + 1], z[i + 1, j + 1], tx, ty))

    def try_calculate(self, qx: float, qy: float) -> EvalResult:
        """Like :meth:`calculate` but reports failures in the returned result."""
        try:
            return EvalResult(value=self.calculate(qx, qy))
        except Interpolator2DError as exc:
            return EvalResult(error=exc)

    def calculate_many(self, qx, qy) -> np.ndarray:
        """Evaluate arrays of query points with the configured backend."""
        s = self._ready_storage()
        qx, qy = np.broadcast_arrays(np.asarray(qx, dtype=float), np.asarray(qy, dtype=float))
        inside = (qx >= s.x[0]) & (qx <= s.x[-1]) & (qy >= s.y[0]) & (qy <= s.y[-1])
        if not np.all(inside):
            k = np.flatnonzero(~inside.ravel())[0]
            raise OutOfRangeError((float(qx.ravel()[k]), float(qy.ravel()[k])), self.bounds)
        if self._backend is None:
            self._backend = build_backend(self.config.backend)
        return self._backend.evaluate(s.x, s.y, s.z, qx, qy)
