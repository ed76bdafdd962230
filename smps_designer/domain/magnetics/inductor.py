"""Magnetics sizing: turns, air gap, AL value and round-wire winding."""

from __future__ import annotations

import logging

import numpy as np

from ...shared.dto import MagneticInputs, MagneticResults
from ..converters.utils import MU_0, as_float64, floor_at, round_half_up

logger = logging.getLogger(__name__)


def compute_magnetics(inputs: MagneticInputs) -> MagneticResults:
    """Size the winding so that the peak flux density stays at or below ``bmax``.

    The number of turns follows Faraday's law, ``N = L * Ipk / (Bmax * Ae)``,
    rounded up. The air gap balances the magnetic-circuit reluctance against
    the target inductance, ``lg = mu0 * N**2 * Ae / L - lc / mur``, and is
    floored at zero when the ungapped core already has enough reluctance.
    The conductor is a round wire carrying the peak current at the target
    current density; a fill factor above 0.5 means the winding may not fit,
    which is reported by the advisory rules rather than here.

    Non-finite intermediate values propagate into the result: when the turns
    count is not finite it is returned as the float it evaluated to.
    """

    inductance, peak_current, bmax, ae, window_area, current_density, permeability, core_length_mm = as_float64(
        inputs.inductance,
        inputs.peak_current,
        inputs.bmax,
        inputs.ae,
        inputs.window_area,
        inputs.current_density,
        inputs.core_permeability,
        inputs.core_length_mm,
    )
    l_henry = inductance * 1e-6
    ae_m2 = ae * 1e-6
    lc_m = core_length_mm * 1e-3

    with np.errstate(all="ignore"):
        turns = np.ceil(l_henry * peak_current / (bmax * ae_m2))

        air_gap_m = MU_0 * turns**2 * ae_m2 / l_henry - lc_m / permeability
        air_gap_mm = floor_at(air_gap_m * 1000.0, 0.0)

        al_value = l_henry / turns**2 * 1e9

        wire_area = peak_current / current_density
        wire_diameter = np.sqrt(4.0 * wire_area / np.pi)
        fill_factor = turns * wire_area / window_area

        logger.debug(f"Magnetics: N={turns} gap={float(air_gap_mm):.3f}mm fill={float(fill_factor):.3f}")

        return MagneticResults(
            turns=int(turns) if np.isfinite(turns) else float(turns),
            air_gap_mm=round_half_up(air_gap_mm, 2),
            wire_area_mm2=round_half_up(wire_area, 3),
            wire_diameter_mm=round_half_up(wire_diameter, 2),
            fill_factor=round_half_up(fill_factor, 3),
            al_value=round_half_up(al_value, 1),
        )
