"""Junction-to-ambient thermal chain solved for the heatsink resistance."""

from __future__ import annotations

import logging

import numpy as np

from ...shared.dto import ThermalInputs, ThermalResults
from ..converters.utils import as_float64, floor_at

logger = logging.getLogger(__name__)


def compute_thermal(inputs: ThermalInputs) -> ThermalResults:
    """Solve junction -> case -> sink -> ambient for the largest allowed theta_SA.

    A negative ``max_theta_sa`` means no passive heatsink keeps the junction
    under its limit at this loss. It is returned as is; the temperatures are
    back-computed with the budget floored at zero.
    """

    total_loss, ambient, max_junction, theta_jc, theta_cs = as_float64(
        inputs.total_loss,
        inputs.ambient_temp,
        inputs.max_junction_temp,
        inputs.theta_jc,
        inputs.theta_cs,
    )

    with np.errstate(all="ignore"):
        total_theta_max = (max_junction - ambient) / total_loss
        max_theta_sa = total_theta_max - theta_jc - theta_cs
        theta_sa = floor_at(max_theta_sa, 0.0)

        junction_temp = ambient + total_loss * (theta_jc + theta_cs + theta_sa)
        temp_rise_heatsink = total_loss * theta_sa
        heatsink_temp = ambient + temp_rise_heatsink
        case_temp = heatsink_temp + total_loss * theta_cs

        if max_theta_sa < 0:
            logger.debug(f"Thermal budget exhausted: theta_SA={float(max_theta_sa):.2f} C/W at {float(total_loss):.2f} W")

        return ThermalResults(
            max_theta_sa=float(max_theta_sa),
            junction_temp=float(junction_temp),
            temp_rise_heatsink=float(temp_rise_heatsink),
            heatsink_temp=float(heatsink_temp),
            case_temp=float(case_temp),
        )
