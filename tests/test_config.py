from __future__ import annotations

import dataclasses
import unittest

from pyinterp2d import GridInterpolator, InterpolatorConfig


class TestInterpolatorConfig(unittest.TestCase):
    def test_defaults(self) -> None:
        cfg = InterpolatorConfig()
        self.assertEqual(cfg.backend, "numpy")
        self.assertTrue(cfg.use_accelerator)

    def test_invalid_values(self) -> None:
        with self.assertRaises(ValueError):
            InterpolatorConfig(backend="jax")
        with self.assertRaises(ValueError):
            InterpolatorConfig(use_accelerator="yes")

    def test_frozen(self) -> None:
        cfg = InterpolatorConfig()
        with self.assertRaises(dataclasses.FrozenInstanceError):
            cfg.backend = "numba"

    def test_default_config_on_grid(self) -> None:
        interp = GridInterpolator.create(2, 2)
        self.assertEqual(interp.config, InterpolatorConfig())


if __name__ == "__main__":
    unittest.main()
