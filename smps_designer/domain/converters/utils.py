"""Utility helpers for the closed-form calculators."""

from __future__ import annotations

from math import pi

import numpy as np

MU_0 = 4.0 * pi * 1e-7  # H/m


def as_float64(*values: float) -> tuple[np.float64, ...]:
    return tuple(np.float64(value) for value in values)


def percentage_to_fraction(value: float | int) -> float:
    """Convert a percentage (e.g. 5 for 5%) to a fraction (0.05)."""

    return value / 100.0


def triangular_rms(current_avg: float, ripple: float) -> float:
    """RMS of a triangular waveform around current_avg with peak-to-peak ripple."""

    return np.sqrt(current_avg**2 + (ripple**2) / 12.0)


def clamp(value: float, lower: float, upper: float) -> np.float64:
    """Clamp to [lower, upper]; nan stays nan."""

    return np.float64(np.clip(value, lower, upper))


def floor_at(value: float, minimum: float) -> np.float64:
    return np.float64(np.maximum(value, minimum))


def round_half_up(value: float, decimals: int) -> float:
    """Round with halves going towards +inf; inf and nan pass through."""

    scale = 10.0**decimals
    return float(np.floor(value * scale + 0.5) / scale)
