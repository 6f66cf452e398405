"""Bilinear weighting kernels."""

from __future__ import annotations

import numpy as np


def bilinear(z00: float, z10: float, z01: float, z11: float, tx: float, ty: float) -> float:
    """Weighted average of the four corners of a cell.

    ``zIJ`` is the sample at the lower (0) or upper (1) node along x (I) and
    y (J); ``tx`` and ``ty`` are the fractional positions inside the cell.
    """
    return (
        z00 * (1.0 - tx) * (1.0 - ty)
        + z10 * tx * (1.0 - ty)
        + z01 * (1.0 - tx) * ty
        + z11 * tx * ty
    )


def cell_indices(coords: np.ndarray, q: np.ndarray) -> np.ndarray:
    """Lower node index of the cell holding each value of ``q``.

    Values equal to the last node fold into the last cell.
    """
    i = np.searchsorted(coords, q, side="right") - 1
    return np.clip(i, 0, len(coords) - 2)


def bilinear_grid(x: np.ndarray, y: np.ndarray, z: np.ndarray, qx, qy) -> np.ndarray:
    """Evaluate the bilinear interpolant of ``z[i, j] = f(x[i], y[j])`` at many points.

    No bounds checking is done here; callers reject points outside the grid.
    """
    qx = np.asarray(qx, dtype=float)
    qy = np.asarray(qy, dtype=float)
    i = cell_indices(x, qx)
    j = cell_indices(y, qy)

    x1, x2 = x[i], x[i + 1]
    y1, y2 = y[j], y[j + 1]
    tx = (qx - x1) / (x2 - x1)
    ty = (qy - y1) / (y2 - y1)

    return (
        z[i, j] * (1.0 - tx) * (1.0 - ty)
        + z[i + 1, j] * tx * (1.0 - ty)
        + z[i, j + 1] * (1.0 - tx) * ty
        + z[i + 1, j + 1] * tx * ty
    )
