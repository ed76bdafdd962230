"""Inductor and transformer core sizing."""

from .inductor import compute_magnetics

__all__ = ["compute_magnetics"]
