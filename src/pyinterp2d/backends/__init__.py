"""Batch evaluation backends."""

from .base import InterpolationBackend
from .factory import build_backend

__all__ = ["InterpolationBackend", "build_backend"]
