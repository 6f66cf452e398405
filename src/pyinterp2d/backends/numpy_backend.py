"""Default NumPy backend for batch evaluation."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from ..kernels import bilinear_grid


@dataclass
class NumpyBackend:
    """Vectorized evaluation; every point is located independently."""

    name: str = "numpy"

    def evaluate(self, x: np.ndarray, y: np.ndarray, z: np.ndarray, qx: np.ndarray, qy: np.ndarray) -> np.ndarray:
        return bilinear_grid(x, y, z, qx, qy)


def build_numpy_backend() -> NumpyBackend:
    return NumpyBackend()
