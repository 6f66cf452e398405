"""Cell-by-cell accuracy sweeps over a longitude/latitude domain.

A single 2x2 interpolator is re-initialized for every cell of a regular
lon/lat lattice and evaluated at the cell midpoint; the estimate is compared
with the analytic value of the sampled field.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .grid import GridInterpolator
from .samples import (
    DEG2RAD,
    LATITUDE_FINAL_DEG,
    LATITUDE_INITIAL_DEG,
    LONGITUDE_FINAL_DEG,
    LONGITUDE_INITIAL_DEG,
    STEP_DEG,
    sample_grid,
)

AXES = ("lon", "lat", "both")


@dataclass
class SweepResult:
    n_points: int
    max_abs_error: float
    mean_abs_error: float


def _cell_count(initial_deg: float, final_deg: float, step_deg: float) -> int:
    return int(round((final_deg - initial_deg) / step_deg)) - 2


def sweep_cells(
    func,
    *,
    axis: str = "both",
    step_deg: float = STEP_DEG,
    interpolator: GridInterpolator | None = None,
) -> SweepResult:
    """Sweep cells along longitude, latitude or both and collect midpoint errors.

    ``axis="lon"`` walks the first latitude row, ``axis="lat"`` the first
    longitude column. An existing 2x2 ``interpolator`` may be supplied; it is
    re-initialized for every cell and left initialized with the last one.
    """
    if axis not in AXES:
        raise ValueError("axis must be one of: lon, lat, both")
    if step_deg <= 0.0:
        raise ValueError("step_deg must be > 0")

    n_lon = _cell_count(LONGITUDE_INITIAL_DEG, LONGITUDE_FINAL_DEG, step_deg) if axis != "lat" else 1
    n_lat = _cell_count(LATITUDE_INITIAL_DEG, LATITUDE_FINAL_DEG, step_deg) if axis != "lon" else 1
    if n_lon < 1 or n_lat < 1:
        raise ValueError("step_deg is too large for the lon/lat domain")

    interp = interpolator if interpolator is not None else GridInterpolator.create(2, 2)
    if interp.shape != (2, 2):
        raise ValueError("sweep interpolator must be 2x2")

    step = step_deg * DEG2RAD
    errors = np.empty(n_lon * n_lat, dtype=float)
    k = 0
    for a in range(n_lon):
        lon1 = LONGITUDE_INITIAL_DEG * DEG2RAD + a * step
        lon2 = lon1 + step
        for b in range(n_lat):
            lat1 = LATITUDE_INITIAL_DEG * DEG2RAD + b * step
            lat2 = lat1 + step
            xs = (lon1, lon2)
            ys = (lat1, lat2)
            interp.initialize(xs, ys, sample_grid(func, xs, ys))
            lon = (lon1 + lon2) / 2
            lat = (lat1 + lat2) / 2
            errors[k] = abs(interp.calculate(lon, lat) - float(func(lon, lat)))
            k += 1

    return SweepResult(
        n_points=int(errors.size),
        max_abs_error=float(np.max(errors)),
        mean_abs_error=float(np.mean(errors)),
    )
