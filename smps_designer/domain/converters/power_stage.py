"""Power-stage calculator: duty cycle, current and voltage stresses, L and C sizing."""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from ...shared.dto import PowerInputs, PowerResults
from .base import Operands, Topology, resolve_topology
from .designers import register_default_designers
from .factory import TopologyRegistry
from .utils import as_float64, floor_at, percentage_to_fraction, triangular_rms

logger = logging.getLogger(__name__)

MIN_PASSIVE_VALUE = 0.01  # µH / µF
MIN_RIPPLE_VOLTAGE = 1e-3  # V

default_registry = TopologyRegistry()
register_default_designers(default_registry)


def _turns_ratio(value: Optional[float]) -> float:
    if not value or np.isnan(value):
        return 1.0
    return value


def compute_power_stage(
    topology: Topology | str,
    inputs: PowerInputs,
    *,
    registry: Optional[TopologyRegistry] = None,
) -> PowerResults:
    """Evaluate the power stage of ``topology`` at the given operating point.

    Never raises for numeric input: zero or negative values propagate as
    inf/nan in the returned record. Only an unknown topology name raises
    :class:`TopologyNotSupportedError`.
    """

    registry = registry or default_registry
    topology = resolve_topology(topology)
    info = registry.info(topology)
    formula = registry.resolve(topology)

    vin, vout, iout, efficiency, n = as_float64(
        inputs.vin,
        inputs.vout,
        inputs.iout,
        inputs.efficiency,
        _turns_ratio(inputs.turns_ratio),
    )
    fsw_hz = np.float64(inputs.fsw) * 1000.0
    ripple_fraction = percentage_to_fraction(np.float64(inputs.ripple_current_percent))
    ripple_v_fraction = percentage_to_fraction(np.float64(inputs.ripple_voltage_percent))

    with np.errstate(all="ignore"):
        point = formula(Operands(vin=vin, vout=vout, iout=iout, efficiency=efficiency, n=n), info.duty_limits)
        duty = point.duty_cycle

        ripple_current = point.inductor_current * ripple_fraction
        peak_current = point.inductor_current + ripple_current / 2.0
        rms_current = triangular_rms(point.inductor_current, ripple_current)

        inductance = point.applied_voltage * duty / (fsw_hz * ripple_current) * 1e6

        output_ripple_voltage = vout * ripple_v_fraction
        delta_v = np.maximum(output_ripple_voltage, MIN_RIPPLE_VOLTAGE)
        if point.continuous_output_current:
            output_capacitance = ripple_current / (8.0 * fsw_hz * delta_v) * 1e6
        else:
            # Charge balance: the output capacitor alone feeds the load during the on-time.
            output_capacitance = iout * duty / (fsw_hz * delta_v) * 1e6
        input_capacitance = output_capacitance * 0.5

        output_power = vout * iout
        input_power = output_power / efficiency
        losses = input_power - output_power

        if inductance < MIN_PASSIVE_VALUE or output_capacitance < MIN_PASSIVE_VALUE:
            logger.debug(f"{topology.value}: passive sizing floored at {MIN_PASSIVE_VALUE}")
        logger.debug(f"{topology.value}: duty={float(duty):.4f} L={float(inductance):.3f}uH losses={float(losses):.3f}W")

        return PowerResults(
            duty_cycle=float(duty),
            inductance=float(floor_at(inductance, MIN_PASSIVE_VALUE)),
            ripple_current=float(ripple_current),
            peak_current=float(peak_current),
            rms_current=float(rms_current),
            input_current=float(point.input_current),
            output_capacitance=float(floor_at(output_capacitance, MIN_PASSIVE_VALUE)),
            input_capacitance=float(floor_at(input_capacitance, MIN_PASSIVE_VALUE)),
            output_ripple_voltage=float(output_ripple_voltage * 1000.0),
            switch_voltage_stress=float(point.switch_stress),
            diode_voltage_stress=float(point.diode_stress),
            output_power=float(output_power),
            input_power=float(input_power),
            losses=float(losses),
            turns_ratio=float(n) if info.isolated else None,
        )
