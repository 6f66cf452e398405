"""Backend protocol for batch bilinear evaluation."""

from __future__ import annotations

from typing import Protocol

import numpy as np


class InterpolationBackend(Protocol):
    name: str

    def evaluate(self, x: np.ndarray, y: np.ndarray, z: np.ndarray, qx: np.ndarray, qy: np.ndarray) -> np.ndarray:
        ...
