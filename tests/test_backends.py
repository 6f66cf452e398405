from __future__ import annotations

import importlib.util
import math
import unittest

import numpy as np

from pyinterp2d import GridInterpolator, InterpolatorConfig, OutOfRangeError
from pyinterp2d.backends import build_backend
from pyinterp2d.samples import sample_grid, wave_mix


def _has_numba() -> bool:
    return importlib.util.find_spec("numba") is not None


def _grid(backend: str) -> GridInterpolator:
    xs = np.array([-math.pi, -2.0, -0.3, 0.0, 0.1, 1.7, math.pi])
    ys = np.linspace(-math.pi / 2, math.pi / 2, 9)
    interp = GridInterpolator.create(len(xs), len(ys), InterpolatorConfig(backend=backend))
    interp.initialize(xs, ys, sample_grid(wave_mix, xs, ys))
    return interp


def _queries(interp: GridInterpolator, n: int = 300, seed: int = 5):
    xmin, xmax, ymin, ymax = interp.bounds
    rng = np.random.default_rng(seed)
    qx = np.concatenate([rng.uniform(xmin, xmax, n), np.linspace(xmin, xmax, n), interp.x])
    qy = np.concatenate([rng.uniform(ymin, ymax, n), np.full(n, 0.2), np.full(len(interp.x), ymax)])
    return qx, qy


class TestNumpyBackend(unittest.TestCase):
    def test_matches_scalar_calculate(self) -> None:
        interp = _grid("numpy")
        qx, qy = _queries(interp)
        batch = interp.calculate_many(qx, qy)
        scalar = np.array([interp.calculate(a, b) for a, b in zip(qx, qy)])
        np.testing.assert_allclose(batch, scalar, rtol=1.0e-12, atol=1.0e-14)

    def test_broadcasts_and_keeps_shape(self) -> None:
        interp = _grid("numpy")
        qx = np.linspace(-1.0, 1.0, 6).reshape(2, 3)
        out = interp.calculate_many(qx, 0.0)
        self.assertEqual(out.shape, (2, 3))
        self.assertAlmostEqual(float(out[1, 2]), interp.calculate(1.0, 0.0), places=12)

    def test_rejects_points_outside(self) -> None:
        interp = _grid("numpy")
        with self.assertRaises(OutOfRangeError) as ctx:
            interp.calculate_many([0.0, 4.0, 0.5], [0.0, 0.0, 0.0])
        self.assertEqual(ctx.exception.point, (4.0, 0.0))


class TestFactory(unittest.TestCase):
    def test_unknown_backend(self) -> None:
        with self.assertRaises(ValueError):
            build_backend("cuda")

    def test_auto_always_builds(self) -> None:
        backend = build_backend("auto")
        self.assertIn(backend.name, {"numpy", "numba"})
        if not _has_numba():
            self.assertEqual(backend.name, "numpy")

    @unittest.skipIf(_has_numba(), "numba is installed")
    def test_numba_missing(self) -> None:
        with self.assertRaises(RuntimeError):
            build_backend("numba")


@unittest.skipUnless(_has_numba(), "numba is not installed")
class TestNumbaBackend(unittest.TestCase):
    def test_matches_numpy_backend(self) -> None:
        np_interp = _grid("numpy")
        nb_interp = _grid("numba")
        qx, qy = _queries(np_interp)
        np.testing.assert_allclose(
            nb_interp.calculate_many(qx, qy),
            np_interp.calculate_many(qx, qy),
            rtol=1.0e-12,
            atol=1.0e-14,
        )

    def test_sorted_sweep_matches_scalar(self) -> None:
        interp = _grid("numba")
        qx = np.linspace(-math.pi, math.pi, 501)
        qy = np.linspace(math.pi / 2, -math.pi / 2, 501)
        batch = interp.calculate_many(qx, qy)
        scalar = np.array([interp.calculate(a, b) for a, b in zip(qx, qy)])
        np.testing.assert_allclose(batch, scalar, rtol=1.0e-12, atol=1.0e-14)


if __name__ == "__main__":
    unittest.main()
