"""Numba-accelerated batch evaluation backend."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

try:
    from numba import njit
except Exception as exc:  # pragma: no cover - optional dependency
    njit = None
    _NUMBA_IMPORT_ERROR = exc
else:
    _NUMBA_IMPORT_ERROR = None


if njit is not None:

    @njit(cache=True)
    def _locate_numba(coords: np.ndarray, q: float, cached: int) -> int:
        n = coords.shape[0]
        if coords[cached] <= q < coords[cached + 1]:
            return cached
        lo = 0
        hi = n - 1
        if q < coords[cached]:
            hi = cached
        else:
            lo = cached
        while hi - lo > 1:
            mid = (lo + hi) // 2
            if coords[mid] > q:
                hi = mid
            else:
                lo = mid
        return lo

    @njit(cache=True)
    def _evaluate_numba(x: np.ndarray, y: np.ndarray, z: np.ndarray, qx: np.ndarray, qy: np.ndarray) -> np.ndarray:
        n = qx.shape[0]
        out = np.empty(n, dtype=np.float64)
        i = 0
        j = 0
        for k in range(n):
            a = qx[k]
            b = qy[k]
            i = _locate_numba(x, a, i)
            j = _locate_numba(y, b, j)
            tx = (a - x[i]) / (x[i + 1] - x[i])
            ty = (b - y[j]) / (y[j + 1] - y[j])
            out[k] = (
                z[i, j] * (1.0 - tx) * (1.0 - ty)
                + z[i + 1, j] * tx * (1.0 - ty)
                + z[i, j + 1] * (1.0 - tx) * ty
                + z[i + 1, j + 1] * tx * ty
            )
        return out

    # Prime JIT cache once to avoid a latency spike on the first batch.
    _evaluate_numba(
        np.array([0.0, 1.0]),
        np.array([0.0, 1.0]),
        np.zeros((2, 2)),
        np.array([0.5]),
        np.array([0.5]),
    )


@dataclass
class NumbaBackend:
    """Sequential jitted loop carrying the last cell of each axis between points."""

    name: str = "numba"

    def evaluate(self, x: np.ndarray, y: np.ndarray, z: np.ndarray, qx: np.ndarray, qy: np.ndarray) -> np.ndarray:
        qx = np.asarray(qx, dtype=np.float64)
        qy = np.asarray(qy, dtype=np.float64)
        out = _evaluate_numba(
            np.ascontiguousarray(x, dtype=np.float64),
            np.ascontiguousarray(y, dtype=np.float64),
            np.ascontiguousarray(z, dtype=np.float64),
            np.ascontiguousarray(qx.ravel()),
            np.ascontiguousarray(qy.ravel()),
        )
        return out.reshape(qx.shape)


def build_numba_backend() -> NumbaBackend:
    if njit is None:
        raise RuntimeError(
            f"Numba backend unavailable: {_NUMBA_IMPORT_ERROR}"
        ) from _NUMBA_IMPORT_ERROR
    return NumbaBackend()
