"""Base contracts for converter topology formulas."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, Tuple

import numpy as np

DutyLimits = Tuple[float, float]

DUTY_LIMITS: DutyLimits = (0.01, 0.99)
# Single-ended forward and push-pull need the remaining period for core reset.
RESET_DUTY_LIMITS: DutyLimits = (0.01, 0.49)


class Topology(str, Enum):
    """Canonical identifiers for supported DC-DC topologies."""

    BUCK = "buck"
    BOOST = "boost"
    BUCK_BOOST = "buck-boost"
    FLYBACK = "flyback"
    FORWARD = "forward"
    PUSH_PULL = "push-pull"


class TopologyNotSupportedError(LookupError):
    """Raised when no formula set is registered for the topology."""


def resolve_topology(value: Topology | str) -> Topology:
    """Coerce a topology name such as ``"buck-boost"`` to :class:`Topology`."""

    if isinstance(value, Topology):
        return value
    try:
        return Topology(value)
    except ValueError as exc:
        raise TopologyNotSupportedError(value) from exc


@dataclass(frozen=True, slots=True)
class Operands:
    """Power-stage inputs promoted to float64 so degenerate values yield inf/nan."""

    vin: np.float64
    vout: np.float64
    iout: np.float64
    efficiency: np.float64
    n: np.float64  # Np/Ns, 1 for non-isolated topologies


@dataclass(frozen=True, slots=True)
class OperatingPoint:
    """Per-topology result of the volt-second and charge balance equations."""

    duty_cycle: np.float64
    inductor_current: np.float64
    input_current: np.float64
    switch_stress: np.float64
    diode_stress: np.float64
    # Voltage across the inductor (or magnetizing inductance) during the on-time.
    applied_voltage: np.float64
    # Output filter is an LC fed by the inductor ripple (buck-derived topologies).
    continuous_output_current: bool


class TopologyFormula(Protocol):
    """Callable signature of a per-topology formula set."""

    def __call__(self, operands: Operands, duty_limits: DutyLimits) -> OperatingPoint:  # pragma: no cover - structural
        ...
