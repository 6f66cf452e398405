"""Analytic fields used to check interpolation accuracy."""

from __future__ import annotations

import math

import numpy as np

DEG2RAD = 2.0 * math.pi / 360.0

LONGITUDE_INITIAL_DEG = -180.0
LONGITUDE_FINAL_DEG = 180.0
LATITUDE_INITIAL_DEG = -90.0
LATITUDE_FINAL_DEG = 90.0
STEP_DEG = 2.5


def gaussian_ridge(lon, lat):
    """``lon * exp(-lon**2 - lat**2)``."""
    lon = np.asarray(lon, dtype=float)
    lat = np.asarray(lat, dtype=float)
    return lon * np.exp(-(lon * lon) - (lat * lat))


def wave_mix(lon, lat):
    """``2 * (sin(3 lon) cos(3 lat) + sin(lon) cos(lat))``."""
    lon = np.asarray(lon, dtype=float)
    lat = np.asarray(lat, dtype=float)
    return 2.0 * (np.sin(3.0 * lon) * np.cos(3.0 * lat) + np.sin(lon) * np.cos(lat))


def sample_grid(func, xs, ys) -> np.ndarray:
    """Table ``values[j, i] = func(xs[i], ys[j])`` in the layout ``initialize`` expects."""
    xs = np.asarray(xs, dtype=float)
    ys = np.asarray(ys, dtype=float)
    lon, lat = np.meshgrid(xs, ys)
    return np.asarray(func(lon, lat), dtype=float)
