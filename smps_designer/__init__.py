"""Closed-form design engine for switch-mode DC-DC converters.

The three calculators are pure functions::

    from smps_designer import PowerInputs, Topology, compute_power_stage

    power = compute_power_stage(Topology.BUCK, PowerInputs(12, 5, 2, 200, 30, 1, 0.9))
"""

from .domain.converters import Topology, TopologyNotSupportedError, compute_power_stage
from .domain.magnetics import compute_magnetics
from .domain.thermal import compute_thermal
from .shared.dto import (
    MagneticInputs,
    MagneticResults,
    PowerInputs,
    PowerResults,
    ThermalInputs,
    ThermalResults,
)

__all__ = [
    "MagneticInputs",
    "MagneticResults",
    "PowerInputs",
    "PowerResults",
    "ThermalInputs",
    "ThermalResults",
    "Topology",
    "TopologyNotSupportedError",
    "compute_magnetics",
    "compute_power_stage",
    "compute_thermal",
]
