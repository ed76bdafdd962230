"""Concrete formula sets per topology.

Each function applies the volt-second balance and conduction pattern of one
topology to the operating point and returns the duty cycle, currents and
voltage stresses. The shared post-processing (ripple, RMS, inductance and
capacitance sizing, power balance) lives in :mod:`.power_stage`.
"""

from __future__ import annotations

from .base import (
    RESET_DUTY_LIMITS,
    DutyLimits,
    Operands,
    OperatingPoint,
    Topology,
)
from .factory import TopologyRegistry
from .utils import clamp


def buck(op: Operands, duty_limits: DutyLimits) -> OperatingPoint:
    duty = clamp(op.vout / (op.vin * op.efficiency), *duty_limits)
    return OperatingPoint(
        duty_cycle=duty,
        inductor_current=op.iout,
        input_current=op.iout * duty / op.efficiency,
        switch_stress=op.vin,
        diode_stress=op.vin,
        applied_voltage=op.vin - op.vout,
        continuous_output_current=True,
    )


def boost(op: Operands, duty_limits: DutyLimits) -> OperatingPoint:
    duty = clamp(1.0 - op.vin * op.efficiency / op.vout, *duty_limits)
    inductor_current = op.iout / (1.0 - duty)
    return OperatingPoint(
        duty_cycle=duty,
        inductor_current=inductor_current,
        input_current=inductor_current,
        switch_stress=op.vout,
        diode_stress=op.vout,
        applied_voltage=op.vin,
        continuous_output_current=False,
    )


def buck_boost(op: Operands, duty_limits: DutyLimits) -> OperatingPoint:
    duty = clamp(op.vout / (op.vin * op.efficiency + op.vout), *duty_limits)
    inductor_current = op.iout / (1.0 - duty)
    return OperatingPoint(
        duty_cycle=duty,
        inductor_current=inductor_current,
        input_current=inductor_current * duty / op.efficiency,
        switch_stress=op.vin + op.vout,
        diode_stress=op.vin + op.vout,
        applied_voltage=op.vin,
        continuous_output_current=False,
    )


def flyback(op: Operands, duty_limits: DutyLimits) -> OperatingPoint:
    reflected = op.vout * op.n
    duty = clamp(reflected / (op.vin * op.efficiency + reflected), *duty_limits)
    # Magnetizing current seen from the primary.
    magnetizing_current = op.iout * op.n / (1.0 - duty)
    return OperatingPoint(
        duty_cycle=duty,
        inductor_current=magnetizing_current,
        input_current=magnetizing_current * duty / op.efficiency,
        switch_stress=op.vin + reflected,
        diode_stress=op.vout + op.vin / op.n,
        applied_voltage=op.vin,
        continuous_output_current=False,
    )


def forward(op: Operands, duty_limits: DutyLimits) -> OperatingPoint:
    duty = clamp(op.vout * op.n / (op.vin * op.efficiency), *duty_limits)
    return OperatingPoint(
        duty_cycle=duty,
        inductor_current=op.iout,
        input_current=op.iout / (op.n * op.efficiency),
        # Reset winding clamps the switch at twice the input voltage.
        switch_stress=2.0 * op.vin,
        diode_stress=op.vout + op.vin / op.n,
        applied_voltage=op.vin / op.n - op.vout,
        continuous_output_current=True,
    )


def push_pull(op: Operands, duty_limits: DutyLimits) -> OperatingPoint:
    # Duty cycle of each of the two switches.
    duty = clamp(op.vout * op.n / (2.0 * op.vin * op.efficiency), *duty_limits)
    return OperatingPoint(
        duty_cycle=duty,
        inductor_current=op.iout,
        input_current=op.iout / (op.n * op.efficiency),
        switch_stress=2.0 * op.vin,
        diode_stress=2.0 * op.vout,
        applied_voltage=op.vin / op.n - op.vout,
        continuous_output_current=True,
    )


def register_default_designers(registry: TopologyRegistry) -> None:
    """Register all default formula sets in the provided registry."""

    registry.register(Topology.BUCK, buck, name="Buck", description="Step-Down")
    registry.register(Topology.BOOST, boost, name="Boost", description="Step-Up")
    registry.register(Topology.BUCK_BOOST, buck_boost, name="Buck-Boost", description="Inverting")
    registry.register(
        Topology.FLYBACK,
        flyback,
        name="Flyback",
        description="Isolated Buck-Boost",
        isolated=True,
    )
    registry.register(
        Topology.FORWARD,
        forward,
        name="Forward",
        description="Isolated Buck",
        isolated=True,
        duty_limits=RESET_DUTY_LIMITS,
    )
    registry.register(
        Topology.PUSH_PULL,
        push_pull,
        name="Push-Pull",
        description="Center-Tap",
        isolated=True,
        duty_limits=RESET_DUTY_LIMITS,
    )
