"""Thermal-resistance chain and heatsink budget."""

from .heatsink import compute_thermal

__all__ = ["compute_thermal"]
